"""Graph views over lattices for connectivity queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from .coords import Cell
from .lattice import Lattice
from .neighbors import neighbors, side_towards

if TYPE_CHECKING:  # pragma: no cover - typing only
    LatticeGraph: TypeAlias = nx.Graph[Cell]
else:  # pragma: no cover - runtime alias without subscripting
    LatticeGraph: TypeAlias = nx.Graph


def build_lattice_graph(lattice: Lattice) -> LatticeGraph:
    """Return an undirected graph joining adjacent member cells.

    Each edge stores ``side``: the side of the lower-ordered endpoint that
    faces the other endpoint.
    """

    graph: LatticeGraph = nx.Graph()
    graph.add_nodes_from(lattice)
    for cell in lattice:
        for adjacent in neighbors(cell):
            if adjacent not in lattice or adjacent < cell:
                continue
            graph.add_edge(cell, adjacent, side=side_towards(cell, adjacent))
    return graph


def connected_regions(lattice: Lattice) -> list[Lattice]:
    """Return the connected regions of ``lattice``, largest first."""

    graph = build_lattice_graph(lattice)
    regions = [Lattice(component) for component in nx.connected_components(graph)]
    regions.sort(key=lambda region: (-len(region), min(region)))
    return regions


def is_contiguous(lattice: Lattice) -> bool:
    if len(lattice) == 0:
        return True
    return nx.is_connected(build_lattice_graph(lattice))
