"""atom-assign: distance and connectivity based atom correspondence."""

import logging
import time
from typing import Optional, Union

import networkx as nx
import numpy as np
from rdkit import Chem

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
from atom_assign.core.assignment import Assignment
from atom_assign.core.distance_matrix import (
    check_distance_matrix,
    compute_distance_matrix,
)
from atom_assign.core.results import AssignParameters, AssignResult
from atom_assign.core.topology import Topology
from atom_assign.utils.input_handler import convert_to_topology

logger = logging.getLogger(__name__)

StructureInput = Union[str, Chem.Mol, nx.Graph, Topology]


class AtomAssigner:
    """Main interface for assigning the atoms of one structure to another."""

    def __init__(self, parameters: Optional[AssignParameters] = None):
        """Initialize the atom assigner.

        Args:
            parameters: Optional assignment parameters.
        """
        self.parameters = parameters or AssignParameters()

    def assign(
        self,
        structure_a: StructureInput,
        structure_b: StructureInput,
        distance_matrix: Optional[np.ndarray] = None,
        coords_a: Optional[np.ndarray] = None,
        coords_b: Optional[np.ndarray] = None,
        seed: Optional[Assignment] = None,
    ) -> AssignResult:
        """Assign atoms of structure A to atoms of structure B.

        Either a precomputed distance matrix or both coordinate arrays must
        be supplied.

        Args:
            structure_a: First structure in any supported format:
                - SMILES string
                - RDKit Mol object
                - NetworkX Graph
                - Topology
            structure_b: Second structure in any supported format.
            distance_matrix: Distances indexed ``[a, b]``.
            coords_a: Coordinates of A, shape (n_a, 3).
            coords_b: Coordinates of B, shape (n_b, 3).
            seed: Optional pre-seeded assignment; extended in place.

        Returns:
            AssignResult: Result containing the mapping and statistics.

        Raises:
            ValueError: If inputs are missing, unsupported or inconsistent.
        """
        topology_a = convert_to_topology(structure_a)
        topology_b = convert_to_topology(structure_b)

        if distance_matrix is None:
            if coords_a is None or coords_b is None:
                raise ValueError(
                    "Either distance_matrix or both coords_a and coords_b are required"
                )
            distance_matrix = compute_distance_matrix(coords_a, coords_b)
        distances = check_distance_matrix(
            distance_matrix, topology_a.num_atoms, topology_b.num_atoms
        )

        if seed is None:
            assignment = Assignment.empty(topology_a.num_atoms, topology_b.num_atoms)
        else:
            if (
                seed.num_atoms_a != topology_a.num_atoms
                or seed.num_atoms_b != topology_b.num_atoms
            ):
                raise ValueError("Seed assignment size does not match the structures")
            seed.validate()
            assignment = seed

        start_time = time.time()

        seed_fn = optimal_assign if self.parameters.mode == "optimal" else greedy_assign
        num_seeded = seed_fn(
            self.parameters.allowed_elements,
            topology_a.names,
            topology_b.names,
            distances,
            assignment,
            self.parameters.threshold,
        )
        logger.debug(
            f"{self.parameters.mode} matching assigned {num_seeded} of "
            f"{topology_a.num_atoms} atoms"
        )

        num_propagated = 0
        if self.parameters.use_connectivity:
            num_propagated = propagate_assignment(
                distances,
                topology_a,
                topology_b,
                assignment,
                self.parameters.threshold,
            )
            logger.debug(f"Connectivity propagation assigned {num_propagated} atoms")

        elapsed = time.time() - start_time

        mapping = assignment.to_dict()
        if not mapping:
            logger.warning(
                f"No atoms assigned (threshold={self.parameters.threshold}, "
                f"allowed_elements={self.parameters.allowed_elements!r})"
            )

        return AssignResult(
            mapping=mapping,
            assign_b_of_a=[int(j) for j in assignment.b_of_a],
            assign_a_of_b=[int(i) for i in assignment.a_of_b],
            num_seeded=num_seeded,
            num_propagated=num_propagated,
            size=len(mapping),
            assign_time=elapsed,
        )


__all__ = [
    "AtomAssigner",
    "AssignParameters",
    "AssignResult",
    "Assignment",
    "Topology",
    "assign_atoms",
    "assign_atoms_optimal",
    "assign_atoms_connectivity",
    "greedy_assign",
    "optimal_assign",
    "propagate_assignment",
    "compute_distance_matrix",
    "convert_to_topology",
]
