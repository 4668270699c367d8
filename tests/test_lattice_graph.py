from hexlattice import Cell, Lattice, build_lattice_graph, connected_regions, hexagonal, is_contiguous
from hexlattice.neighbors import neighbor


def test_hexagonal_graph_edges() -> None:
    graph = build_lattice_graph(hexagonal(1))
    assert graph.number_of_nodes() == 7
    # six spokes plus six ring edges
    assert graph.number_of_edges() == 12
    assert graph.degree[Cell()] == 6


def test_edge_side_points_from_lower_endpoint() -> None:
    graph = build_lattice_graph(hexagonal(2))
    for a, b, side in graph.edges(data="side"):
        low, high = sorted((a, b))
        assert neighbor(low, side) == high


def test_connected_regions_largest_first() -> None:
    far = Lattice([Cell(10, -10, 0), Cell(11, -11, 0)])
    lattice = hexagonal(1) + far + Lattice([Cell(-20, 0, 20)])
    regions = connected_regions(lattice)
    assert [len(region) for region in regions] == [7, 2, 1]
    assert regions[1] == far
    assert not is_contiguous(lattice)


def test_is_contiguous() -> None:
    assert is_contiguous(Lattice())
    assert is_contiguous(hexagonal(3))
    ring = hexagonal(2) - Lattice([Cell()])
    assert is_contiguous(ring)
