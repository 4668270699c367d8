"""Validated configuration models for grid geometry and region shapes."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .conversions import Orientation, cell_corners, cell_to_point, point_to_cell
from .coords import Cell, Point
from .lattice import Lattice
from .layouts import Direction, hexagonal, parallelogram, rectangular, triangular


class ShapeKind(str, Enum):
    """Enumerates the predefined region shapes."""

    HEXAGONAL = "hexagonal"
    RECTANGULAR = "rectangular"
    PARALLELOGRAM = "parallelogram"
    TRIANGULAR = "triangular"


class GridGeometry(BaseModel):
    """Pixel-space placement of the grid.

    ``radius`` is the center-to-corner distance of a hex and the origin is
    the pixel position of the origin cell's center.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: Orientation = Field(default=Orientation.FLAT)
    radius: float = Field(default=1.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)

    @field_validator("radius", "origin_x", "origin_y")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    def cell_to_point(self, cell: Cell) -> Point:
        point = cell_to_point(cell, self.orientation, self.radius)
        return Point(point.x + self.origin_x, point.y + self.origin_y)

    def point_to_cell(self, point: Point) -> Cell:
        local = Point(point.x - self.origin_x, point.y - self.origin_y)
        return point_to_cell(local, self.orientation, self.radius)

    def corners(self, cell: Cell) -> tuple[Point, ...]:
        return tuple(
            Point(corner.x + self.origin_x, corner.y + self.origin_y)
            for corner in cell_corners(cell, self.orientation, self.radius)
        )


class ShapeSettings(BaseModel):
    """Parameters for generating a region with one of the shape generators.

    Only the fields relevant to ``kind`` are read: ``radius`` for hexagonal
    regions, ``width``/``height`` for rectangles and parallelograms, and
    ``base`` for triangles.
    """

    model_config = ConfigDict(extra="forbid")

    kind: ShapeKind = Field(default=ShapeKind.HEXAGONAL)
    radius: int = Field(default=3, ge=0)
    width: int = Field(default=5, ge=0)
    height: int = Field(default=5, ge=0)
    base: int = Field(default=4, ge=0)
    direction: Direction = Field(default=Direction.STANDARD)

    def build(self) -> Lattice:
        """Generate a fresh :class:`Lattice` for these settings."""

        if self.kind == ShapeKind.HEXAGONAL:
            return hexagonal(self.radius)
        if self.kind == ShapeKind.RECTANGULAR:
            return rectangular(self.width, self.height)
        if self.kind == ShapeKind.PARALLELOGRAM:
            return parallelogram(self.width, self.height, self.direction)
        return triangular(self.base, self.direction)


class GridConfig(BaseModel):
    """Top-level configuration payload describing a grid."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Hex Grid")
    description: str | None = Field(default=None)
    geometry: GridGeometry = Field(default_factory=GridGeometry)
    shape: ShapeSettings = Field(default_factory=ShapeSettings)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _ensure_metadata_mapping(cls, value: object) -> dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise TypeError("metadata must be a mapping")
        return {str(key): item for key, item in value.items()}

    def build_lattice(self) -> Lattice:
        return self.shape.build()


__all__ = [
    "GridConfig",
    "GridGeometry",
    "ShapeKind",
    "ShapeSettings",
]
