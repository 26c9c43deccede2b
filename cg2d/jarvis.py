from __future__ import annotations
import logging
from typing import Generator, List, Optional, Set

from .andrew import AndrewMonotoneChain
from .geom import Pt, dist2
from .hull import ConvexHullAlgorithm
from .predicates import Orientation, orient
from .progress import Step, StepKind

logger = logging.getLogger(__name__)


class JarvisGiftWrapping(ConvexHullAlgorithm):
    """
    Gift wrapping (Jarvis march), O(n·h).

    Старт: найлівіша точка (за рівності x найнижча). З поточної вершини p шукаємо q,
    для якого всі інші точки лежать ліворуч від p->q: кандидата замінюємо, якщо r строго
    праворуч, або колінеарна й далі від p (так лишається лише кінець колінеарного відрізка).
    Обхід виходить CCW. Крок емітиться після кожної доданої вершини.

    Плаский набір (усі точки COLLINEAR щодо прямої від першої до останньої за (x, y))
    дає відрізок [перша, остання], як і монотонний ланцюг, навіть якщо точки лише
    в межах допуску від прямої.
    """

    name = "jarvis"

    def _run(self, pts: List[Pt], record: bool = True) -> Generator[Optional[Step], None, List[Pt]]:
        n = len(pts)
        start = min(range(n), key=lambda i: (pts[i].x, pts[i].y))

        end = self._flat_end(pts, start)
        if end is not None:
            hull = [pts[start]]
            yield self._snapshot(hull, record)
            hull.append(pts[end])
            yield self._snapshot(hull, record)
            return hull

        hull = []
        visited: Set[int] = set()
        p = start
        while True:
            hull.append(pts[p])
            visited.add(p)
            yield self._snapshot(hull, record)

            q = self._next_vertex(pts, p)
            if q == start:
                break
            if q in visited:
                # кластер точок у межах eps зациклив обхід; частковий обхід не є оболонкою
                logger.warning("jarvis: wrap revisited vertex %r, using monotone chain result", pts[q])
                return AndrewMonotoneChain(self.eps).compute_convex_hull(pts)
            p = q

        return hull

    def _flat_end(self, pts: List[Pt], start: int) -> Optional[int]:
        """Індекс останньої за (x, y) точки, якщо набір плаский, інакше None."""
        end = max(range(len(pts)), key=lambda i: (pts[i].x, pts[i].y))
        a, b = pts[start], pts[end]
        for r in pts:
            if orient(a, b, r, self.eps) is not Orientation.COLLINEAR:
                return None
        return end

    def _next_vertex(self, pts: List[Pt], p: int) -> int:
        n = len(pts)
        a = pts[p]
        q = (p + 1) % n
        for r in range(n):
            if r == p or r == q:
                continue
            o = orient(a, pts[q], pts[r], self.eps)
            if o is Orientation.RIGHT or (
                o is Orientation.COLLINEAR and dist2(a, pts[r]) > dist2(a, pts[q])
            ):
                q = r
        return q

    @staticmethod
    def _snapshot(hull: List[Pt], record: bool) -> Optional[Step]:
        if not record:
            return None
        return Step(StepKind.WRAP, hull=tuple(hull), point=hull[-1])
