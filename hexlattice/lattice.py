"""Set of hex cells describing a grid region."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet

from .coords import Cell
from .neighbors import neighbor, neighbors


class Lattice(MutableSet[Cell]):
    """A mutable set of unique :class:`Cell` values.

    Besides the usual set protocol, ``+=`` inserts every cell of another
    lattice and ``-=`` removes every member that the other lattice holds.
    Instances are meant to have a single owner; they are not thread-safe.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Cell] = ()) -> None:
        self._cells: set[Cell] = set()
        for cell in cells:
            self.add(cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Lattice(cells={len(self._cells)})"

    def add(self, cell: Cell) -> None:
        if not isinstance(cell, Cell):
            raise TypeError(f"Lattice members must be Cell, got {type(cell).__name__}")
        self._cells.add(cell)

    def discard(self, cell: Cell) -> None:
        self._cells.discard(cell)

    def copy(self) -> Lattice:
        return Lattice(self._cells)

    def __iadd__(self, other: Iterable[Cell]) -> Lattice:
        for cell in other:
            self.add(cell)
        return self

    def __add__(self, other: Iterable[Cell]) -> Lattice:
        result = self.copy()
        result += other
        return result

    def get_neighbors(self, cell: Cell) -> set[Cell]:
        """Return the six cells adjacent to ``cell``, members or not."""
        return set(neighbors(cell))

    def get_neighbor(self, cell: Cell, side: int) -> Cell:
        return neighbor(cell, side)

    def neighbors_within(self, cell: Cell) -> Lattice:
        """Return the adjacent cells of ``cell`` that belong to this lattice."""
        return Lattice(n for n in neighbors(cell) if n in self._cells)
