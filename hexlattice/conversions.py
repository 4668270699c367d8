from __future__ import annotations

import math
from enum import Enum

from .coords import Cell, Offset, OffsetLayout, Point

SQRT3 = math.sqrt(3.0)


class Orientation(str, Enum):
    """Visual orientation of the hexagons."""

    FLAT = "flat"
    POINTY = "pointy"
    SHARP = "pointy"


def _unit_vertices(start: float) -> tuple[Point, ...]:
    step = math.pi / 3.0
    return tuple(
        Point(math.cos(start + step * i), math.sin(start + step * i)) for i in range(6)
    )


# Corner directions of a unit hexagon, 60 degrees apart.
FLAT_VERTICES: tuple[Point, ...] = _unit_vertices(0.0)
POINTY_VERTICES: tuple[Point, ...] = _unit_vertices(math.pi / 6.0)


def vertices(orientation: Orientation) -> tuple[Point, ...]:
    if orientation == Orientation.FLAT:
        return FLAT_VERTICES
    if orientation == Orientation.POINTY:
        return POINTY_VERTICES
    raise ValueError("Unknown orientation")


def _check_radius(radius: float) -> None:
    if radius <= 0:
        raise ValueError("radius must be positive")


def cell_to_point(cell: Cell, orientation: Orientation, radius: float) -> Point:
    """Return the pixel-space center of ``cell`` for hexes of ``radius``."""
    _check_radius(radius)
    if orientation == Orientation.FLAT:
        x = radius * (3.0 / 2.0) * cell.x
        y = radius * SQRT3 * (cell.y + cell.x * 0.5)
    elif orientation == Orientation.POINTY:
        x = radius * SQRT3 * (cell.x + cell.y * 0.5)
        y = radius * (3.0 / 2.0) * cell.y
    else:
        raise ValueError("Unknown orientation")
    return Point(x, y)


def point_to_cell(point: Point, orientation: Orientation, radius: float) -> Cell:
    """Return the cell containing ``point``.

    The inverse transform yields fractional cube coordinates which are
    snapped with :meth:`Cell.round`.
    """
    _check_radius(radius)
    if orientation == Orientation.FLAT:
        x = point.x * 2.0 / 3.0 / radius
        y = (-point.x / 3.0 + SQRT3 / 3.0 * point.y) / radius
    elif orientation == Orientation.POINTY:
        x = (point.x * SQRT3 / 3.0 - point.y / 3.0) / radius
        y = point.y * 2.0 / 3.0 / radius
    else:
        raise ValueError("Unknown orientation")
    return Cell.round(x, y, -x - y)


def cell_corners(cell: Cell, orientation: Orientation, radius: float) -> tuple[Point, ...]:
    """Return the six outline corners of ``cell`` in pixel space."""
    center = cell_to_point(cell, orientation, radius)
    return tuple(
        Point(center.x + radius * v.x, center.y + radius * v.y)
        for v in vertices(orientation)
    )


def cell_to_offset(cell: Cell, layout: OffsetLayout = OffsetLayout.ODD_R) -> Offset:
    q, r = cell.x, cell.y
    if layout == OffsetLayout.EVEN_R:
        col = q + (r + (r & 1)) // 2
        row = r
    elif layout == OffsetLayout.ODD_R:
        col = q + (r - (r & 1)) // 2
        row = r
    elif layout == OffsetLayout.EVEN_Q:
        col = q
        row = r + (q + (q & 1)) // 2
    elif layout == OffsetLayout.ODD_Q:
        col = q
        row = r + (q - (q & 1)) // 2
    else:
        raise ValueError("Unknown layout")
    return Offset(col, row, layout)


def offset_to_cell(offset: Offset) -> Cell:
    col, row, layout = offset.col, offset.row, offset.layout
    if layout == OffsetLayout.EVEN_R:
        q = col - (row + (row & 1)) // 2
        r = row
    elif layout == OffsetLayout.ODD_R:
        q = col - (row - (row & 1)) // 2
        r = row
    elif layout == OffsetLayout.EVEN_Q:
        q = col
        r = row - (col + (col & 1)) // 2
    elif layout == OffsetLayout.ODD_Q:
        q = col
        r = row - (col - (col & 1)) // 2
    else:
        raise ValueError("Unknown layout")
    return Cell(q, r, -q - r)
