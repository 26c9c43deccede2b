from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .geom import Pt
from .hull import ConvexHullAlgorithm
from .pipeline import get_algorithm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    name: str
    n: int
    hull_size: int
    millis: float


def time_millis(algorithm: ConvexHullAlgorithm, points: Sequence[Pt]) -> float:
    """Один прогін пакетного режиму, мілісекунди."""
    t0 = time.perf_counter()
    algorithm.compute_convex_hull(points)
    return (time.perf_counter() - t0) * 1000.0


def avg_millis(
    algorithm: ConvexHullAlgorithm, points: Sequence[Pt], warmup: int = 2, runs: int = 5
) -> float:
    if runs <= 0:
        raise ValueError("runs must be positive")
    for _ in range(warmup):
        algorithm.compute_convex_hull(points)
    total = 0.0
    for _ in range(runs):
        total += time_millis(algorithm, points)
    return total / runs


def run_benchmark(
    names: Iterable[str], points: Sequence[Pt], warmup: int = 2, runs: int = 5
) -> List[BenchmarkResult]:
    results: List[BenchmarkResult] = []
    for name in names:
        algo = get_algorithm(name)
        hull = algo.compute_convex_hull(points)
        ms = avg_millis(algo, points, warmup=warmup, runs=runs)
        logger.debug("%s: n=%d hull=%d %.3f ms", name, len(points), len(hull), ms)
        results.append(BenchmarkResult(name, len(points), len(hull), ms))
    return results
