"""Hexagonal grid coordinates, lattices and shape layouts."""

from .coords import Cell, InvalidCellError, Offset, OffsetLayout, Point
from .conversions import (
    FLAT_VERTICES,
    POINTY_VERTICES,
    Orientation,
    cell_corners,
    cell_to_offset,
    cell_to_point,
    offset_to_cell,
    point_to_cell,
    vertices,
)
from .neighbors import NEIGHBOR_OFFSETS, neighbor, neighbors
from .lattice import Lattice
from .layouts import Direction, hexagonal, parallelogram, rectangular, triangular
from .graph import build_lattice_graph, connected_regions, is_contiguous
from .config import GridConfig, GridGeometry, ShapeKind, ShapeSettings
from .config_store import default_config_path, load_grid_config, save_grid_config

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "InvalidCellError",
    "Offset",
    "OffsetLayout",
    "Point",
    "FLAT_VERTICES",
    "POINTY_VERTICES",
    "Orientation",
    "cell_corners",
    "cell_to_offset",
    "cell_to_point",
    "offset_to_cell",
    "point_to_cell",
    "vertices",
    "NEIGHBOR_OFFSETS",
    "neighbor",
    "neighbors",
    "Lattice",
    "Direction",
    "hexagonal",
    "parallelogram",
    "rectangular",
    "triangular",
    "build_lattice_graph",
    "connected_regions",
    "is_contiguous",
    "GridConfig",
    "GridGeometry",
    "ShapeKind",
    "ShapeSettings",
    "default_config_path",
    "load_grid_config",
    "save_grid_config",
]
