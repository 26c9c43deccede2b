from __future__ import annotations
import logging
import threading
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .geom import Pt, EPS, PointLike, as_points, check_finite, unique_points
from .predicates import Orientation, orient
from .progress import Step, StepKind

logger = logging.getLogger(__name__)


class ConvexHullAlgorithm:
    """
    Спільний контракт для 2D-оболонок.

    steps(points):               лінивий, одноразовий потік Step; останній крок FINISHED із оболонкою.
    compute_convex_hull(points): пакетний режим: прогнати потік і повернути фінальну оболонку.

    Оболонка: CCW, старт у найлівішій (далі найнижча) точка, без дубля старту в кінці,
    лише крайні вершини (колінеарні проміжні точки викидаються).
    Підкласи реалізують _run(pts, record): генератор нетермінальних кроків, що повертає оболонку.
    При record=False замість знімків віддається None (лише точка перевірки скасування).
    """

    name = "abstract"

    def __init__(self, eps: float = EPS):
        self.eps = eps

    # ---------------- Публічний API ----------------
    def steps(
        self, points: Iterable[PointLike], cancel: Optional[threading.Event] = None
    ) -> Iterator[Step]:
        pts = as_points(points)
        # відкидаємо некоректний вхід одразу, ще до першого next()
        check_finite(pts)
        return self._stream(pts, cancel, record=True)

    def compute_convex_hull(
        self, points: Iterable[PointLike], cancel: Optional[threading.Event] = None
    ) -> List[Pt]:
        pts = as_points(points)
        check_finite(pts)
        # без знімків: пакетному режиму проміжні ланцюги не потрібні
        last: Optional[Step] = None
        for last in self._stream(pts, cancel, record=False):
            pass
        assert last is not None and last.terminal
        return list(last.hull)

    # ---------------- Внутрішні методи ----------------
    def _stream(
        self, pts: List[Pt], cancel: Optional[threading.Event], record: bool
    ) -> Iterator[Step]:
        pts = unique_points(pts)
        if len(pts) <= 1:
            yield Step(StepKind.FINISHED, hull=tuple(pts))
            return

        logger.debug("%s: %d distinct points", self.name, len(pts))
        run = self._run(pts, record)
        while True:
            # скасування перевіряємо раз на крок, ніколи посеред предиката
            if cancel is not None and cancel.is_set():
                run.close()
                logger.info("%s cancelled", self.name)
                yield Step(StepKind.FINISHED, cancelled=True)
                return
            try:
                step = next(run)
            except StopIteration as stop:
                hull = tuple(stop.value)
                break
            if step is not None:
                yield step

        logger.debug("%s: hull has %d vertices", self.name, len(hull))
        yield Step(StepKind.FINISHED, hull=hull)

    def _run(self, pts: List[Pt], record: bool = True):  # pragma: no cover
        raise NotImplementedError


# ---------------- Діагностика ----------------
def validate_hull(hull: Sequence[Pt], points: Iterable[PointLike], eps: float = EPS) -> Dict:
    """
    Перевірка оболонки:
      - жодна трійка сусідніх вершин (циклічно) не повертає праворуч;
      - жодна вершина не колінеарна з сусідами (лише крайні точки);
      - жодна вхідна точка не лежить строго ззовні.
    Повертає словник із діагностикою (порожні списки = все ок).
    """
    h = list(hull)
    n = len(h)
    reflex: List[int] = []
    collinear: List[int] = []
    if n >= 3:
        for i in range(n):
            o = orient(h[i - 1], h[i], h[(i + 1) % n], eps)
            if o is Orientation.RIGHT:
                reflex.append(i)
            elif o is Orientation.COLLINEAR:
                collinear.append(i)

    outside: List[Pt] = []
    if n >= 2:
        for p in as_points(points):
            if n == 2:
                # вироджена оболонка-відрізок: все має лежати на прямій
                if orient(h[0], h[1], p, eps) is not Orientation.COLLINEAR:
                    outside.append(p)
                continue
            if any(orient(h[i], h[(i + 1) % n], p, eps) is Orientation.RIGHT for i in range(n)):
                outside.append(p)

    return {
        "vertices": n,
        "reflex_turns": reflex,
        "collinear_vertices": collinear,
        "outside_points": outside,
    }
