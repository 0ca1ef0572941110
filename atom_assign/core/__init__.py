"""Core data structures for atom assignment."""

from atom_assign.core.assignment import UNASSIGNED, Assignment
from atom_assign.core.topology import Topology

__all__ = ["Assignment", "Topology", "UNASSIGNED"]
