"""Partial bijection between the atoms of two structures."""

from typing import Dict, List, MutableSequence, Optional

import numpy as np

UNASSIGNED = -1


class Assignment:
    """Bidirectional atom assignment backed by two caller-owned arrays.

    ``b_of_a[i]`` holds the B partner of A-atom ``i`` and ``a_of_b[j]`` the
    A partner of B-atom ``j``; ``-1`` marks an unassigned atom. The arrays
    are mutated in place and only ever together, so the mapping stays
    mutually consistent.
    """

    def __init__(
        self,
        b_of_a: MutableSequence[int],
        a_of_b: MutableSequence[int],
    ):
        """Wrap an existing pair of assignment arrays.

        Args:
            b_of_a: Partner index in B for each A-atom, or -1.
            a_of_b: Partner index in A for each B-atom, or -1.
        """
        self.b_of_a = b_of_a
        self.a_of_b = a_of_b

    @classmethod
    def empty(cls, num_atoms_a: int, num_atoms_b: int) -> "Assignment":
        """Create an all-unassigned assignment over fresh NumPy arrays."""
        return cls(
            np.full(num_atoms_a, UNASSIGNED, dtype=int),
            np.full(num_atoms_b, UNASSIGNED, dtype=int),
        )

    @property
    def num_atoms_a(self) -> int:
        return len(self.b_of_a)

    @property
    def num_atoms_b(self) -> int:
        return len(self.a_of_b)

    def is_assigned_a(self, index_a: int) -> bool:
        return self.b_of_a[index_a] != UNASSIGNED

    def is_assigned_b(self, index_b: int) -> bool:
        return self.a_of_b[index_b] != UNASSIGNED

    def partner_of_a(self, index_a: int) -> Optional[int]:
        """Get the B partner of an A-atom.

        Args:
            index_a: Index of the atom in structure A.

        Returns:
            Index in structure B, or None if unassigned.
        """
        partner = int(self.b_of_a[index_a])
        return None if partner == UNASSIGNED else partner

    def partner_of_b(self, index_b: int) -> Optional[int]:
        """Get the A partner of a B-atom, or None if unassigned."""
        partner = int(self.a_of_b[index_b])
        return None if partner == UNASSIGNED else partner

    def assign(self, index_a: int, index_b: int) -> None:
        """Pair two unassigned atoms, updating both directions.

        Args:
            index_a: Index of the atom in structure A.
            index_b: Index of the atom in structure B.
        """
        assert self.b_of_a[index_a] == UNASSIGNED, f"A-atom {index_a} already assigned"
        assert self.a_of_b[index_b] == UNASSIGNED, f"B-atom {index_b} already assigned"
        self.b_of_a[index_a] = index_b
        self.a_of_b[index_b] = index_a

    def assigned_a(self) -> List[int]:
        """A indices that currently have a partner, ascending."""
        return [i for i in range(self.num_atoms_a) if self.is_assigned_a(i)]

    def to_dict(self) -> Dict[int, int]:
        """Get the mapping from A indices to B indices.

        Returns:
            Dictionary containing only assigned atoms.
        """
        return {i: int(self.b_of_a[i]) for i in self.assigned_a()}

    @property
    def size(self) -> int:
        return len(self.assigned_a())

    def is_consistent(self) -> bool:
        """Check that both arrays describe the same partial bijection.

        Returns:
            True if every assigned entry is mirrored by its partner.
        """
        for i in range(self.num_atoms_a):
            j = self.b_of_a[i]
            if j != UNASSIGNED and not (
                0 <= j < self.num_atoms_b and self.a_of_b[j] == i
            ):
                return False

        for j in range(self.num_atoms_b):
            i = self.a_of_b[j]
            if i != UNASSIGNED and not (
                0 <= i < self.num_atoms_a and self.b_of_a[i] == j
            ):
                return False

        return True

    def validate(self) -> None:
        """Raise ValueError if the arrays are not mutually consistent."""
        if not self.is_consistent():
            raise ValueError("Assignment arrays are not mutually consistent")
