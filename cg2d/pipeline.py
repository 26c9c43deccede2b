from __future__ import annotations
import threading
from typing import Dict, Iterable, Iterator, List, Optional, Type

from .andrew import AndrewMonotoneChain
from .geom import Pt, PointLike, as_points, check_finite, unique_points
from .hull import ConvexHullAlgorithm
from .jarvis import JarvisGiftWrapping
from .progress import Step

ALGORITHMS: Dict[str, Type[ConvexHullAlgorithm]] = {
    AndrewMonotoneChain.name: AndrewMonotoneChain,
    JarvisGiftWrapping.name: JarvisGiftWrapping,
}


def get_algorithm(name: str, **kwargs) -> ConvexHullAlgorithm:
    try:
        cls = ALGORITHMS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {name!r} (expected one of {sorted(ALGORITHMS)})") from None
    return cls(**kwargs)


def convex_hull(points: Iterable[PointLike], algorithm: str = "andrew") -> List[Pt]:
    """Пакетний режим: CCW-оболонка від найлівішої точки."""
    return get_algorithm(algorithm).compute_convex_hull(points)


def hull_steps(
    points: Iterable[PointLike],
    algorithm: str = "andrew",
    cancel: Optional[threading.Event] = None,
) -> Iterator[Step]:
    """Потоковий режим: ті самі обчислення, але з усіма проміжними кроками."""
    return get_algorithm(algorithm).steps(points, cancel)


def reference_hull(points: Iterable[PointLike]) -> List[Pt]:
    """
    Еталонна оболонка через SciPy (Qhull) для перехресної перевірки наших алгоритмів.
    Вершини повертаються CCW, починаючи з найлівішої (далі найнижчої) точки.
    Вироджені випадки (<3 точки, усі колінеарні) Qhull не приймає, їх рахує монотонний ланцюг.
    """
    pts = as_points(points)
    check_finite(pts)
    pts = unique_points(pts)
    if len(pts) < 3:
        return AndrewMonotoneChain().compute_convex_hull(pts)

    try:
        import numpy as np
        from scipy.spatial import ConvexHull, QhullError
    except ImportError as e:
        raise RuntimeError(
            "reference_hull потребує SciPy. Встанови scipy або порівнюй лише andrew/jarvis."
        ) from e

    arr = np.array([(p.x, p.y) for p in pts], dtype=float)
    try:
        qh = ConvexHull(arr)
    except QhullError:
        # плоский (колінеарний) набір
        return AndrewMonotoneChain().compute_convex_hull(pts)

    # для 2D Qhull віддає vertices вже у CCW-порядку
    verts = [pts[int(i)] for i in qh.vertices]
    k = min(range(len(verts)), key=lambda i: (verts[i].x, verts[i].y))
    return verts[k:] + verts[:k]
