from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np

from .geom import Pt, PointLike, as_points


def parse_points(text: str) -> List[Pt]:
    """
    Формат із лічильником:
      рядок 1:       n
      рядки 2..n+1:  x,y
    Порожній текст -> []. Якщо рядків менше за n, беремо ті, що є.
    """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        return []
    try:
        n = int(lines[0].strip())
    except ValueError:
        raise ValueError(f"Line 1: expected a point count, got {lines[0]!r}") from None

    points: List[Pt] = []
    for lineno, line in enumerate(lines[1:n + 1], start=2):
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"Line {lineno}: expected 'x,y', got {line!r}")
        try:
            x = float(parts[0].strip())
            y = float(parts[1].strip())
        except ValueError:
            raise ValueError(f"Line {lineno}: could not read numbers from {line!r}") from None
        points.append(Pt(x, y))
    return points


def load_points(path: Union[str, Path]) -> List[Pt]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_points(f.read())


def write_points(path: Union[str, Path], points: Iterable[PointLike]) -> None:
    pts = as_points(points)
    lines = [str(len(pts))]
    lines.extend(f"{p.x},{p.y}" for p in pts)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")


def uniform_random(
    n: int,
    min_x: float = 1.0,
    max_x: float = 10.0,
    min_y: float = 1.0,
    max_y: float = 10.0,
    seed: int = 1234,
) -> List[Pt]:
    """n рівномірно випадкових точок у прямокутнику [min_x, max_x) x [min_y, max_y)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    rng = np.random.default_rng(seed)
    xs = rng.uniform(min_x, max_x, size=n)
    ys = rng.uniform(min_y, max_y, size=n)
    return [Pt(float(x), float(y)) for x, y in zip(xs, ys)]
