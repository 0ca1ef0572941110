"""Distance-based seed matching between two structures."""

import math
from typing import MutableSequence, Sequence

import numpy as np
from scipy.optimize import linear_sum_assignment

from atom_assign.core.assignment import Assignment
from atom_assign.core.atom_type import eligibility_mask


def greedy_assign(
    allowed_elements: str,
    labels_a: Sequence[str],
    labels_b: Sequence[str],
    distance_matrix: np.ndarray,
    assignment: Assignment,
    threshold: float,
) -> int:
    """Assign each eligible A-atom to its nearest free B-atom, in index order.

    A-atoms are visited in increasing index order. For each eligible,
    unassigned A-atom the closest eligible, unassigned B-atom is taken if it
    lies strictly below the threshold. On equal distances the lower B index
    wins. Committed pairs are never revisited.

    Args:
        allowed_elements: Type characters allowed to take part.
        labels_a: Atom labels of structure A.
        labels_b: Atom labels of structure B.
        distance_matrix: Distances, indexed ``[a, b]``.
        assignment: Assignment to extend in place.
        threshold: Exclusive upper bound on accepted distances.

    Returns:
        Number of pairs added.
    """
    distances = np.asarray(distance_matrix, dtype=float)
    enabled_a = eligibility_mask(allowed_elements, labels_a)
    enabled_b = eligibility_mask(allowed_elements, labels_b)

    added = 0
    for i in range(len(labels_a)):
        if not enabled_a[i] or assignment.is_assigned_a(i):
            continue

        best_b = -1
        best_distance = math.inf
        for j in range(len(labels_b)):
            if not enabled_b[j] or assignment.is_assigned_b(j):
                continue
            d = distances[i, j]
            if d < best_distance:
                best_b = j
                best_distance = d

        if best_b >= 0 and best_distance < threshold:
            assignment.assign(i, best_b)
            added += 1

    return added


def optimal_assign(
    allowed_elements: str,
    labels_a: Sequence[str],
    labels_b: Sequence[str],
    distance_matrix: np.ndarray,
    assignment: Assignment,
    threshold: float,
) -> int:
    """Minimum-total-distance alternative to :func:`greedy_assign`.

    Solves a linear sum assignment over the eligible, unassigned atoms.
    Pairs at or above the threshold are penalized so that the number of
    accepted pairs is maximized first, then discarded. Existing pairs are
    left untouched.

    Returns:
        Number of pairs added.
    """
    distances = np.asarray(distance_matrix, dtype=float)
    enabled_a = eligibility_mask(allowed_elements, labels_a)
    enabled_b = eligibility_mask(allowed_elements, labels_b)

    rows = [
        i
        for i in range(len(labels_a))
        if enabled_a[i] and not assignment.is_assigned_a(i)
    ]
    cols = [
        j
        for j in range(len(labels_b))
        if enabled_b[j] and not assignment.is_assigned_b(j)
    ]
    if not rows or not cols:
        return 0

    cost = distances[np.ix_(rows, cols)]
    feasible = cost < threshold
    if not feasible.any():
        return 0

    penalty = (cost[feasible].max() + 1.0) * (min(len(rows), len(cols)) + 1)
    row_ind, col_ind = linear_sum_assignment(np.where(feasible, cost, penalty))

    added = 0
    for r, c in sorted(zip(row_ind, col_ind)):
        if feasible[r, c]:
            assignment.assign(rows[r], cols[c])
            added += 1

    return added


def assign_atoms(
    allowed_elements: str,
    labels_a: Sequence[str],
    labels_b: Sequence[str],
    distance_matrix: np.ndarray,
    assign_b_of_a: MutableSequence[int],
    assign_a_of_b: MutableSequence[int],
    threshold: float,
) -> None:
    """Greedy nearest-neighbor matching on raw assignment arrays.

    Args:
        allowed_elements: Type characters allowed to take part, e.g. ``"CH"``.
        labels_a: Atom labels of structure A.
        labels_b: Atom labels of structure B.
        distance_matrix: Distances, indexed ``[a, b]``.
        assign_b_of_a: B partner per A-atom (-1 if none); updated in place.
        assign_a_of_b: A partner per B-atom (-1 if none); updated in place.
        threshold: Exclusive upper bound on accepted distances.
    """
    greedy_assign(
        allowed_elements,
        labels_a,
        labels_b,
        distance_matrix,
        Assignment(assign_b_of_a, assign_a_of_b),
        threshold,
    )


def assign_atoms_optimal(
    allowed_elements: str,
    labels_a: Sequence[str],
    labels_b: Sequence[str],
    distance_matrix: np.ndarray,
    assign_b_of_a: MutableSequence[int],
    assign_a_of_b: MutableSequence[int],
    threshold: float,
) -> None:
    """Same contract as :func:`assign_atoms`, using :func:`optimal_assign`."""
    optimal_assign(
        allowed_elements,
        labels_a,
        labels_b,
        distance_matrix,
        Assignment(assign_b_of_a, assign_a_of_b),
        threshold,
    )
