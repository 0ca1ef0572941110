"""Adjacency lists built from bond topologies."""

from typing import List

from atom_assign.core.topology import Topology


def build_adjacency_list(topology: Topology) -> List[List[int]]:
    """Convert the bonds of a topology into per-atom neighbor lists.

    Every bond contributes to both endpoints. Neighbor lists are sorted
    ascending; repeated bonds produce repeated neighbors.

    Args:
        topology: Topology providing atom count and bonds.

    Returns:
        List indexed by atom, each entry a sorted list of bonded atom indices.
    """
    adjacency: List[List[int]] = [[] for _ in range(topology.num_atoms)]

    for a, b in topology.bonds:
        adjacency[a].append(b)
        adjacency[b].append(a)

    for neighbors in adjacency:
        neighbors.sort()

    return adjacency
