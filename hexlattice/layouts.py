"""Generators for predefined lattice shapes."""

from __future__ import annotations

from enum import Enum

from .conversions import offset_to_cell
from .coords import Cell, Offset, OffsetLayout
from .lattice import Lattice


class Direction(str, Enum):
    """Axis permutation used when emplacing parallelogram and triangle cells."""

    STANDARD = "standard"
    FLIPPED = "flipped"
    VERTICAL = "vertical"


def hexagonal(radius: int) -> Lattice:
    """Every cell within ``radius`` steps of the origin."""
    result = Lattice()
    for x in range(-radius, radius + 1):
        y1 = max(-radius, -x - radius)
        y2 = min(radius, -x + radius)
        for y in range(y1, y2 + 1):
            result.add(Cell(x, y, -x - y))
    return result


def rectangular(width: int, height: int) -> Lattice:
    """``width`` cells per row for ``height`` odd-row offset rows."""
    result = Lattice()
    for row in range(height):
        for col in range(width):
            result.add(offset_to_cell(Offset(col, row, OffsetLayout.ODD_R)))
    return result


def parallelogram(width: int, height: int, direction: Direction = Direction.STANDARD) -> Lattice:
    w = width // 2
    h = height // 2
    result = Lattice()
    for x in range(-w, w + 1):
        for y in range(-h, h + 1):
            if direction == Direction.STANDARD:
                result.add(Cell(x, y, -x - y))
            elif direction == Direction.FLIPPED:
                result.add(Cell(-x - y, x, y))
            elif direction == Direction.VERTICAL:
                result.add(Cell(x, -x - y, y))
    return result


def triangular(base: int, direction: Direction = Direction.STANDARD) -> Lattice:
    result = Lattice()
    for x in range(base + 1):
        for y in range(base - x + 1):
            if direction == Direction.STANDARD:
                result.add(Cell(x, -x - y, y))
            elif direction == Direction.FLIPPED:
                result.add(Cell(x, y, -x - y))
    return result
