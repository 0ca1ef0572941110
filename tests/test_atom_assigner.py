"""Unit tests for the AtomAssigner interface."""

import logging
import unittest

import numpy as np
from pydantic import ValidationError
from rdkit import Chem
from rdkit.Chem import AllChem

from atom_assign import AssignParameters, AtomAssigner, Assignment, Topology
from atom_assign.core.distance_matrix import (
    check_distance_matrix,
    compute_distance_matrix,
    coordinates_from_rdkit_mol,
)


class TestDistanceMatrix(unittest.TestCase):
    """Test suite for distance matrix helpers."""

    def test_compute(self):
        """Test Euclidean distances between coordinate sets."""
        coords_a = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
        coords_b = np.array([[0.0, 3.0, 4.0]])
        distances = compute_distance_matrix(coords_a, coords_b)

        self.assertEqual(distances.shape, (2, 1))
        self.assertAlmostEqual(distances[0, 0], 5.0)
        self.assertAlmostEqual(distances[1, 0], np.sqrt(26.0))

    def test_compute_dimension_mismatch(self):
        """Test that coordinates of different dimensionality are rejected."""
        with self.assertRaises(ValueError):
            compute_distance_matrix(np.zeros((2, 3)), np.zeros((2, 2)))

    def test_check(self):
        """Test shape and sign validation."""
        matrix = check_distance_matrix([[0.1, 0.2]], 1, 2)
        self.assertIsInstance(matrix, np.ndarray)

        with self.assertRaises(ValueError):
            check_distance_matrix(np.zeros((2, 2)), 2, 3)
        with self.assertRaises(ValueError):
            check_distance_matrix(np.array([[-0.1]]), 1, 1)

    def test_coordinates_from_rdkit(self):
        """Test reading conformer positions."""
        mol = Chem.AddHs(Chem.MolFromSmiles("CO"))
        AllChem.EmbedMolecule(mol, randomSeed=42)
        coords = coordinates_from_rdkit_mol(mol)
        self.assertEqual(coords.shape, (mol.GetNumAtoms(), 3))

        with self.assertRaises(ValueError):
            coordinates_from_rdkit_mol(Chem.MolFromSmiles("CO"))


class TestAtomAssigner(unittest.TestCase):
    """Test suite for AtomAssigner class."""

    def setUp(self):
        """Set up test fixtures."""
        self.topology_a = Topology(names=["C1", "H1", "H2"], bonds=[(0, 1)])
        self.topology_b = Topology(names=["Cx", "Hx", "Hy"], bonds=[(0, 1)])
        self.distances = np.full((3, 3), 5.0)
        self.distances[0, 0] = 0.1
        self.distances[1, 1] = 0.2

    def test_default_parameters(self):
        """Test default configuration."""
        assigner = AtomAssigner()
        self.assertEqual(assigner.parameters.mode, "greedy")
        self.assertTrue(assigner.parameters.use_connectivity)

    def test_invalid_parameters(self):
        """Test parameter validation."""
        with self.assertRaises(ValidationError):
            AssignParameters(threshold=0.0)
        with self.assertRaises(ValidationError):
            AssignParameters(mode="hungarian")

    def test_seed_and_propagate(self):
        """Test the full greedy plus connectivity pipeline."""
        assigner = AtomAssigner(
            AssignParameters(allowed_elements="C", threshold=1.0)
        )
        result = assigner.assign(
            self.topology_a, self.topology_b, distance_matrix=self.distances
        )

        self.assertEqual(result.mapping, {0: 0, 1: 1})
        self.assertEqual(result.assign_b_of_a, [0, 1, -1])
        self.assertEqual(result.assign_a_of_b, [0, 1, -1])
        self.assertEqual(result.num_seeded, 1)
        self.assertEqual(result.num_propagated, 1)
        self.assertEqual(result.size, 2)
        self.assertEqual(result.reorder_indices(), [0, 1])

    def test_without_connectivity(self):
        """Test disabling propagation."""
        assigner = AtomAssigner(
            AssignParameters(
                allowed_elements="C", threshold=1.0, use_connectivity=False
            )
        )
        result = assigner.assign(
            self.topology_a, self.topology_b, distance_matrix=self.distances
        )

        self.assertEqual(result.mapping, {0: 0})
        self.assertEqual(result.num_propagated, 0)

    def test_optimal_mode(self):
        """Test the optimal seeding mode."""
        topology = Topology(names=["C1", "C2"])
        distances = np.array([[1.0, 2.0], [1.5, 10.0]])
        assigner = AtomAssigner(
            AssignParameters(allowed_elements="C", threshold=5.0, mode="optimal")
        )
        result = assigner.assign(topology, topology, distance_matrix=distances)

        self.assertEqual(result.mapping, {0: 1, 1: 0})

    def test_from_coordinates(self):
        """Test building distances from coordinates of a reordered copy."""
        coords_a = np.array([[0.0, 0.0, 0.0], [1.5, 0.0, 0.0], [3.0, 0.5, 0.0]])
        order = [2, 0, 1]
        coords_b = coords_a[order] + 0.01
        names = ["C1", "C2", "O3"]
        topology_a = Topology(names=names, bonds=[(0, 1), (1, 2)])
        topology_b = Topology(names=[names[i] for i in order], bonds=[(1, 2), (2, 0)])

        result = AtomAssigner().assign(
            topology_a, topology_b, coords_a=coords_a, coords_b=coords_b
        )

        self.assertEqual(result.mapping, {0: 1, 1: 2, 2: 0})

    def test_smiles_input(self):
        """Test SMILES inputs with a matching distance matrix."""
        distances = np.full((4, 4), 3.0)
        np.fill_diagonal(distances, 0.1)
        result = AtomAssigner().assign("CC(=O)O", "CC(=O)O", distance_matrix=distances)

        self.assertEqual(result.mapping, {i: i for i in range(4)})

    def test_seed_assignment(self):
        """Test extending a caller-provided seed."""
        seed = Assignment([-1, -1, -1], [-1, -1, -1])
        seed.assign(0, 0)
        assigner = AtomAssigner(AssignParameters(allowed_elements="N", threshold=1.0))
        result = assigner.assign(
            self.topology_a, self.topology_b, distance_matrix=self.distances, seed=seed
        )

        self.assertEqual(result.num_seeded, 0)
        self.assertEqual(result.mapping, {0: 0, 1: 1})
        self.assertEqual(seed.b_of_a, [0, 1, -1])

    def test_seed_size_mismatch(self):
        """Test that a seed of the wrong size is rejected."""
        with self.assertRaises(ValueError):
            AtomAssigner().assign(
                self.topology_a,
                self.topology_b,
                distance_matrix=self.distances,
                seed=Assignment.empty(2, 3),
            )

    def test_missing_distances(self):
        """Test that distances or coordinates are required."""
        with self.assertRaises(ValueError):
            AtomAssigner().assign(self.topology_a, self.topology_b)

    def test_wrong_matrix_shape(self):
        """Test that the matrix must match both structures."""
        with self.assertRaises(ValueError):
            AtomAssigner().assign(
                self.topology_a, self.topology_b, distance_matrix=np.zeros((2, 3))
            )

    def test_warns_when_nothing_assigned(self):
        """Test the warning logged for an empty result."""
        assigner = AtomAssigner(AssignParameters(allowed_elements="N"))
        with self.assertLogs("atom_assign", level=logging.WARNING):
            result = assigner.assign(
                self.topology_a, self.topology_b, distance_matrix=self.distances
            )
        self.assertEqual(result.size, 0)


if __name__ == "__main__":
    unittest.main()
