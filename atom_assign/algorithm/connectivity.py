# atom_assign/algorithm/connectivity.py
"""Extension of a seed matching along bond connectivity."""

import heapq
import math
from typing import List, MutableSequence, Tuple

import numpy as np

from atom_assign.core.adjacency import build_adjacency_list
from atom_assign.core.assignment import Assignment
from atom_assign.core.topology import Topology


def propagate_assignment(
    distance_matrix: np.ndarray,
    topology_a: Topology,
    topology_b: Topology,
    assignment: Assignment,
    threshold: float,
) -> int:
    """Grow an assignment outward from its matched atoms through bonds.

    Matched A-atoms are expanded in order of bond hops from the seed
    pairs. For each unmatched neighbor of an expanded atom, the candidates
    are the unmatched neighbors of its B partner; the closest one strictly
    below the threshold is taken (lowest index on ties) and the new pair is
    expanded in turn.

    Args:
        distance_matrix: Distances, indexed ``[a, b]``.
        topology_a: Topology of structure A.
        topology_b: Topology of structure B.
        assignment: Seed assignment, extended in place.
        threshold: Exclusive upper bound on accepted distances.

    Returns:
        Number of pairs added.
    """
    distances = np.asarray(distance_matrix, dtype=float)
    adjacency_a = build_adjacency_list(topology_a)
    adjacency_b = build_adjacency_list(topology_b)

    visited = [False] * len(adjacency_a)

    # (hops from seed, A index)
    queue: List[Tuple[int, int]] = [(0, i) for i in assignment.assigned_a()]
    heapq.heapify(queue)

    added = 0
    while queue:
        hops, atom_a = heapq.heappop(queue)
        if visited[atom_a]:
            continue
        visited[atom_a] = True

        atom_b = assignment.partner_of_a(atom_a)
        assert atom_b is not None, f"Expanded A-atom {atom_a} has no partner"
        assert assignment.partner_of_b(atom_b) == atom_a

        for neighbor_a in adjacency_a[atom_a]:
            if assignment.is_assigned_a(neighbor_a):
                continue

            best_b = -1
            best_distance = math.inf
            for candidate_b in adjacency_b[atom_b]:
                if assignment.is_assigned_b(candidate_b):
                    continue
                d = distances[neighbor_a, candidate_b]
                if d < best_distance and d < threshold:
                    best_b = candidate_b
                    best_distance = d

            if best_b != -1:
                assignment.assign(neighbor_a, best_b)
                heapq.heappush(queue, (hops + 1, neighbor_a))
                added += 1

    return added


def assign_atoms_connectivity(
    distance_matrix: np.ndarray,
    topology_a: Topology,
    topology_b: Topology,
    assign_b_of_a: MutableSequence[int],
    assign_a_of_b: MutableSequence[int],
    threshold: float,
) -> None:
    """Connectivity-guided matching on raw assignment arrays.

    Args:
        distance_matrix: Distances, indexed ``[a, b]``.
        topology_a: Topology of structure A.
        topology_b: Topology of structure B.
        assign_b_of_a: B partner per A-atom (-1 if none); updated in place.
        assign_a_of_b: A partner per B-atom (-1 if none); updated in place.
        threshold: Exclusive upper bound on accepted distances.
    """
    propagate_assignment(
        distance_matrix,
        topology_a,
        topology_b,
        Assignment(assign_b_of_a, assign_a_of_b),
        threshold,
    )
