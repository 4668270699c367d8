import pytest

from hexlattice import NEIGHBOR_OFFSETS, Cell, Lattice, hexagonal


def test_union_ignores_duplicates():
    lattice = Lattice([Cell(), Cell(1, -1, 0)])
    lattice += Lattice([Cell(1, -1, 0), Cell(0, 1, -1)])
    assert len(lattice) == 3
    assert Cell(0, 1, -1) in lattice


def test_difference_ignores_absent_cells():
    lattice = hexagonal(1)
    lattice -= Lattice([Cell(), Cell(5, -5, 0)])
    assert len(lattice) == 6
    assert Cell() not in lattice


def test_difference_with_itself_empties():
    lattice = hexagonal(2)
    lattice -= lattice
    assert len(lattice) == 0


def test_non_mutating_operators_return_lattices():
    a = hexagonal(1)
    b = Lattice([Cell(), Cell(2, -2, 0)])
    union = a + b
    difference = a - b
    assert isinstance(union, Lattice)
    assert isinstance(difference, Lattice)
    assert len(union) == 8
    assert len(difference) == 6
    assert len(a) == 7
    assert isinstance(a & b, Lattice)
    assert set(a & b) == {Cell()}


def test_lattice_rejects_non_cells():
    with pytest.raises(TypeError):
        Lattice([(0, 0, 0)])  # type: ignore[list-item]


def test_lattice_equality_is_set_equality():
    assert Lattice([Cell(), Cell(1, 0, -1)]) == Lattice([Cell(1, 0, -1), Cell()])


def test_copy_is_independent():
    original = hexagonal(1)
    clone = original.copy()
    clone.discard(Cell())
    assert Cell() in original
    assert len(clone) == 6


def test_get_neighbors_six_distinct_adjacent():
    lattice = Lattice()
    center = Cell(2, -5, 3)
    found = lattice.get_neighbors(center)
    assert len(found) == 6
    assert all(center.distance(n) == 1 for n in found)


def test_get_neighbor_matches_neighbor_table():
    lattice = Lattice()
    origin = Cell()
    neighbors = lattice.get_neighbors(origin)
    for side, offset in enumerate(NEIGHBOR_OFFSETS):
        n = lattice.get_neighbor(origin, side)
        assert n == offset
        assert n in neighbors
    assert {lattice.get_neighbor(origin, side) for side in range(6)} == neighbors


@pytest.mark.parametrize("side", [6, 7, -1])
def test_get_neighbor_out_of_range(side: int):
    with pytest.raises(IndexError):
        Lattice().get_neighbor(Cell(), side)


def test_neighbors_within_filters_to_members():
    lattice = hexagonal(1)
    edge = Cell(1, -1, 0)
    inside = lattice.neighbors_within(edge)
    assert set(inside) == {Cell(), Cell(1, 0, -1), Cell(0, -1, 1)}
