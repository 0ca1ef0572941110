"""Construction and checking of A-to-B distance matrices."""

import numpy as np
from rdkit import Chem
from scipy.spatial.distance import cdist


def compute_distance_matrix(coords_a: np.ndarray, coords_b: np.ndarray) -> np.ndarray:
    """Compute Euclidean distances between two coordinate sets.

    Args:
        coords_a: Array of shape (n_a, 3).
        coords_b: Array of shape (n_b, 3).

    Returns:
        Array of shape (n_a, n_b) with ``[i, j]`` the distance between
        A-atom ``i`` and B-atom ``j``.
    """
    coords_a = np.asarray(coords_a, dtype=float)
    coords_b = np.asarray(coords_b, dtype=float)

    if coords_a.ndim != 2 or coords_b.ndim != 2:
        raise ValueError("Coordinates must be two-dimensional arrays")
    if coords_a.shape[1] != coords_b.shape[1]:
        raise ValueError(
            f"Coordinate dimensions differ: {coords_a.shape[1]} vs {coords_b.shape[1]}"
        )

    return cdist(coords_a, coords_b)


def coordinates_from_rdkit_mol(mol: Chem.Mol, conf_id: int = -1) -> np.ndarray:
    """Get atom positions from an RDKit conformer.

    Args:
        mol: RDKit molecule with at least one conformer.
        conf_id: Conformer ID, -1 for the default conformer.

    Returns:
        Array of shape (n_atoms, 3).
    """
    if mol is None:
        raise ValueError("Input molecule cannot be None")
    if mol.GetNumConformers() == 0:
        raise ValueError("Molecule has no conformers")

    return np.array(mol.GetConformer(conf_id).GetPositions(), dtype=float)


def check_distance_matrix(
    distance_matrix: np.ndarray, num_atoms_a: int, num_atoms_b: int
) -> np.ndarray:
    """Validate a distance matrix against the atom counts of both structures.

    Args:
        distance_matrix: Candidate matrix.
        num_atoms_a: Number of atoms in structure A.
        num_atoms_b: Number of atoms in structure B.

    Returns:
        The matrix as a float NumPy array.

    Raises:
        ValueError: If the shape does not match or any entry is negative.
    """
    matrix = np.asarray(distance_matrix, dtype=float)

    if matrix.shape != (num_atoms_a, num_atoms_b):
        raise ValueError(
            f"Distance matrix shape {matrix.shape} does not match "
            f"({num_atoms_a}, {num_atoms_b})"
        )
    if np.any(matrix < 0):
        raise ValueError("Distance matrix contains negative entries")

    return matrix
