# cg2d/predicates.py
from __future__ import annotations
from enum import Enum
from .geom import Pt, sub, cross, EPS


class Orientation(Enum):
    LEFT = 1
    RIGHT = -1
    COLLINEAR = 0


def signed_area2(a: Pt, b: Pt, c: Pt) -> float:
    """Векторний добуток (b-a) x (c-a), тобто подвоєна знакова площа abc."""
    return cross(sub(b, a), sub(c, a))

def orient(a: Pt, b: Pt, c: Pt, eps: float = EPS) -> Orientation:
    """
    Де лежить c відносно орієнтованої прямої a->b:
      LEFT       якщо площа > eps (поворот проти годинникової),
      RIGHT      якщо площа < -eps,
      COLLINEAR  якщо |площа| <= eps.
    """
    area2 = signed_area2(a, b, c)
    if area2 > eps:
        return Orientation.LEFT
    if area2 < -eps:
        return Orientation.RIGHT
    return Orientation.COLLINEAR

def is_left(a: Pt, b: Pt, c: Pt, eps: float = EPS) -> bool:
    return orient(a, b, c, eps) is Orientation.LEFT
