# atom_assign/algorithm/__init__.py
"""Matching algorithms for atom assignment."""

# Standard library imports
from typing import List

# Local imports
from atom_assign.algorithm.connectivity import (
    assign_atoms_connectivity,
    propagate_assignment,
)
from atom_assign.algorithm.greedy_matcher import (
    assign_atoms,
    assign_atoms_optimal,
    greedy_assign,
    optimal_assign,
)

__all__: List[str] = [
    "assign_atoms",
    "assign_atoms_optimal",
    "assign_atoms_connectivity",
    "greedy_assign",
    "optimal_assign",
    "propagate_assignment",
]
