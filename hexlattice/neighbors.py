from __future__ import annotations

from typing import Iterator

from .coords import Cell

# Index in this table is the side number of the hex.
NEIGHBOR_OFFSETS: tuple[Cell, ...] = (
    Cell(+1, -1, 0),
    Cell(+1, 0, -1),
    Cell(0, +1, -1),
    Cell(-1, +1, 0),
    Cell(-1, 0, +1),
    Cell(0, -1, +1),
)


def neighbors(cell: Cell) -> Iterator[Cell]:
    for offset in NEIGHBOR_OFFSETS:
        yield cell + offset


def neighbor(cell: Cell, side: int) -> Cell:
    if not 0 <= side < len(NEIGHBOR_OFFSETS):
        raise IndexError(f"Attempt to get neighbor {side} out of range")
    return cell + NEIGHBOR_OFFSETS[side]


def side_towards(cell: Cell, other: Cell) -> int | None:
    """Return the side of ``cell`` that touches ``other``, if they are adjacent."""
    delta = other - cell
    for side, offset in enumerate(NEIGHBOR_OFFSETS):
        if offset == delta:
            return side
    return None
