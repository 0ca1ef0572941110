"""Atom type extraction and element filtering."""

from typing import Optional, Sequence

import numpy as np


def atom_type(label: str) -> Optional[str]:
    """Get the type character of an atom label.

    Args:
        label: Free-form atom label, e.g. ``"C1"`` or ``"1HB"``.

    Returns:
        The first alphabetic character of the label, or None if it has none.
    """
    for char in label:
        if char.isalpha():
            return char
    return None


def is_eligible(allowed_elements: str, label: str) -> bool:
    """Check whether an atom takes part in matching.

    Args:
        allowed_elements: String of allowed type characters, e.g. ``"CHON"``.
        label: Atom label.

    Returns:
        True if the label's type character is present in allowed_elements.
    """
    char = atom_type(label)
    return char is not None and char in allowed_elements


def eligibility_mask(allowed_elements: str, labels: Sequence[str]) -> np.ndarray:
    """Boolean mask of eligible atoms, one entry per label."""
    return np.array(
        [is_eligible(allowed_elements, label) for label in labels], dtype=bool
    )
