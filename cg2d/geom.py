from __future__ import annotations
from dataclasses import dataclass
from math import isfinite
from typing import Iterable, List, Sequence, Tuple, Union

EPS = 1e-12      # абсолютний допуск для orient (подвоєна площа трикутника)
DECIMALS = 12    # квантування координат при дедуплікації


class InvalidPointError(ValueError):
    """Точка з нескінченною / NaN координатою або не пара (x, y)."""


@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y


PointLike = Union[Pt, Tuple[float, float], Sequence[float]]


def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def cross(a: Pt, b: Pt) -> float:
    return a.x*b.y - a.y*b.x

def dist2(a: Pt, b: Pt) -> float:
    """Квадрат евклідової відстані (без sqrt)."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx*dx + dy*dy


def as_points(points: Iterable[PointLike]) -> List[Pt]:
    """Перетворити вхід (Pt або пари (x, y)) на новий список Pt."""
    out: List[Pt] = []
    for i, p in enumerate(points):
        if isinstance(p, Pt):
            out.append(p)
            continue
        try:
            x, y = p
            out.append(Pt(float(x), float(y)))
        except (TypeError, ValueError) as e:
            raise InvalidPointError(f"point #{i}: expected an (x, y) pair, got {p!r}") from e
    return out


def check_finite(points: Sequence[Pt]) -> None:
    """Відкинути NaN / inf ще до нормалізації, в оболонку вони потрапити не можуть."""
    for i, p in enumerate(points):
        if not (isfinite(p.x) and isfinite(p.y)):
            raise InvalidPointError(f"point #{i} has a non-finite coordinate: ({p.x}, {p.y})")


def unique_points(points: Sequence[Pt], decimals: int = DECIMALS) -> List[Pt]:
    """
    Дедуплікація з квантуванням: дві точки однакові, якщо обидві координати
    збігаються після округлення до `decimals` знаків.
    Порядок першої появи зберігається. Ніколи не кидає винятків.
    """
    if len(points) <= 1:
        return list(points)
    seen: dict[Tuple[float, float], Pt] = {}
    for p in points:
        # +0.0 прибирає -0.0, щоб ключі для 0 і -0 збігались і у repr
        key = (round(p.x, decimals) + 0.0, round(p.y, decimals) + 0.0)
        if key not in seen:
            seen[key] = p
    return list(seen.values())
