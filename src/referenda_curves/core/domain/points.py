"""
Points — Точки дискретизированной кривой

Immutable value objects, которые sampler отдаёт экспорту (CSV, графики).
"""

from dataclasses import dataclass

from referenda_curves.core.math.fixed_point import DomainError, FixedFraction


@dataclass(frozen=True)
class Point:
    """Точка (x, y): индекс шага домена и порог в этот момент."""

    x: int
    y: FixedFraction

    def __post_init__(self) -> None:
        if self.x < 0:
            raise DomainError(f"x must be non-negative, got {self.x}")


@dataclass(frozen=True)
class ExtremumPair:
    """Точки минимального и максимального порога на дискретизированном домене."""

    min: Point
    max: Point


Points = tuple[Point, ...]
