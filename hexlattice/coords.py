from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class InvalidCellError(ValueError):
    """Raised when cube coordinates do not sum to zero."""


def nearest_int(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


@dataclass(frozen=True, slots=True, order=True)
class Cell:
    """One hex tile in cube coordinates."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __post_init__(self) -> None:
        if not all(isinstance(v, int) for v in (self.x, self.y, self.z)):
            raise TypeError("Cell coordinates must be integers")
        if self.x + self.y + self.z != 0:
            raise InvalidCellError("Invalid cell")

    @staticmethod
    def round(fx: float, fy: float, fz: float) -> Cell:
        """Snap fractional cube coordinates to the nearest valid cell.

        The axis with the largest rounding error is rebuilt from the other
        two. Ties go to ``z`` over ``y``; ``x`` is only rebuilt when its
        error is strictly the largest.
        """
        xi, yi, zi = nearest_int(fx), nearest_int(fy), nearest_int(fz)
        dx, dy, dz = abs(fx - xi), abs(fy - yi), abs(fz - zi)
        if dx > dy and dx > dz:
            xi = -yi - zi
        elif dy > dz:
            yi = -xi - zi
        else:
            zi = -xi - yi
        return Cell(xi, yi, zi)

    def __add__(self, other: object) -> Cell:
        if not isinstance(other, Cell):
            return NotImplemented
        return Cell(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Cell:
        if not isinstance(other, Cell):
            return NotImplemented
        return Cell(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Cell:
        # Components are rounded independently; a product that no longer
        # sums to zero raises InvalidCellError.
        return Cell(
            nearest_int(self.x * scalar),
            nearest_int(self.y * scalar),
            nearest_int(self.z * scalar),
        )

    __rmul__ = __mul__

    def scale(self, factor: float) -> Cell:
        """Scale by ``factor`` and snap the result with :meth:`round`."""
        return Cell.round(self.x * factor, self.y * factor, self.z * factor)

    def distance(self, other: Cell) -> int:
        return (abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)) // 2

    def __str__(self) -> str:
        return f"cell({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


class OffsetLayout(Enum):
    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # q-like
    row: int  # r-like
    layout: OffsetLayout = OffsetLayout.ODD_R
