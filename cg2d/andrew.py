from __future__ import annotations
import logging
from typing import Generator, List, Optional

from .geom import Pt
from .hull import ConvexHullAlgorithm
from .predicates import is_left
from .progress import Step, StepKind

logger = logging.getLogger(__name__)


class AndrewMonotoneChain(ConvexHullAlgorithm):
    """
    Монотонний ланцюг Ендрю, O(n log n).

    Точки сортуються за (x, y), далі будуються нижній (зліва направо) і верхній
    (справа наліво) ланцюги. Перед додаванням точки знімаємо хвіст, поки останні три
    не повертають строго ліворуч: COLLINEAR теж знімається, тому точки всередині
    ребра до оболонки не потрапляють.
    Крок емітиться після кожного pop і кожного push.
    """

    name = "andrew"

    def _run(self, pts: List[Pt], record: bool = True) -> Generator[Optional[Step], None, List[Pt]]:
        # точний лексикографічний порядок; точних дублікатів після нормалізації нема
        pts = sorted(pts, key=lambda p: (p.x, p.y))

        lower: List[Pt] = []
        for p in pts:
            yield from self._extend(lower, p, None, record)

        upper: List[Pt] = []
        for p in reversed(pts):
            yield from self._extend(upper, p, lower, record)

        # останній елемент кожного ланцюга є першим елементом іншого
        hull = lower[:-1] + upper[:-1]
        logger.debug("andrew: lower=%d upper=%d", len(lower), len(upper))
        return hull

    def _extend(
        self, chain: List[Pt], p: Pt, lower: Optional[List[Pt]], record: bool
    ) -> Generator[Optional[Step], None, None]:
        """
        Додати p у ланцюг. lower is None: будуємо нижній ланцюг (chain і є lower),
        інакше chain верхній, а lower уже готовий.
        Знімки (копії ланцюгів) робимо лише при record, інакше pop/push лишаються O(1).
        """
        while len(chain) >= 2 and not is_left(chain[-2], chain[-1], p, self.eps):
            popped = chain.pop()
            yield self._snapshot(StepKind.POP, chain, lower, popped) if record else None
        chain.append(p)
        yield self._snapshot(StepKind.PUSH, chain, lower, p) if record else None

    @staticmethod
    def _snapshot(kind: StepKind, chain: List[Pt], lower: Optional[List[Pt]], p: Pt) -> Step:
        if lower is None:
            return Step(kind, lower=tuple(chain), point=p)
        return Step(kind, lower=tuple(lower), upper=tuple(chain), point=p)
