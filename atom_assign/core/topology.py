"""Topology representation: atom labels plus bond connectivity."""

from __future__ import annotations

from typing import List, Tuple

import networkx as nx
from pydantic import BaseModel, Field, model_validator
from rdkit import Chem

from atom_assign.core.atom_type import atom_type


class Topology(BaseModel):
    """Atom labels and undirected bonds of a single structure."""

    names: List[str]
    bonds: List[Tuple[int, int]] = Field(default_factory=list)

    class Config:
        """Pydantic model configuration."""

        frozen = True

    @model_validator(mode="after")
    def check_bond_indices(self) -> Topology:
        num_atoms = len(self.names)
        for a, b in self.bonds:
            if not (0 <= a < num_atoms and 0 <= b < num_atoms):
                raise ValueError(
                    f"Bond ({a}, {b}) references an atom outside 0..{num_atoms - 1}"
                )
        return self

    @classmethod
    def from_rdkit_mol(cls, mol: Chem.Mol) -> Topology:
        """Create a Topology from an RDKit molecule.

        Atoms are labeled with their element symbol followed by their
        1-based index, e.g. ``C1``, ``O2``.

        Args:
            mol: RDKit molecule object.

        Returns:
            Topology: A new topology instance.
        """
        if mol is None:
            raise ValueError("Input molecule cannot be None")

        names = [f"{atom.GetSymbol()}{atom.GetIdx() + 1}" for atom in mol.GetAtoms()]
        bonds = [
            (bond.GetBeginAtomIdx(), bond.GetEndAtomIdx()) for bond in mol.GetBonds()
        ]

        return cls(names=names, bonds=bonds)

    @classmethod
    def from_networkx(cls, graph: nx.Graph) -> Topology:
        """Create a Topology from a NetworkX graph.

        Atoms are indexed in node iteration order. Each node needs a
        ``name`` or ``symbol`` attribute.

        Args:
            graph: NetworkX graph whose nodes are atoms and edges are bonds.

        Returns:
            Topology: A new topology instance.

        Raises:
            ValueError: If a node carries neither attribute.
        """
        index_of = {}
        names = []

        for index, node_id in enumerate(graph.nodes()):
            attrs = graph.nodes[node_id]
            name = attrs.get("name", attrs.get("symbol"))
            if name is None:
                raise ValueError(
                    f"Node {node_id} missing required 'name' or 'symbol' attribute"
                )
            index_of[node_id] = index
            names.append(str(name))

        bonds = [(index_of[u], index_of[v]) for u, v in graph.edges()]

        return cls(names=names, bonds=bonds)

    def to_networkx(self) -> nx.Graph:
        """Convert to a NetworkX graph keyed by atom index.

        Returns:
            Graph with ``name`` and ``element`` node attributes.
        """
        graph = nx.Graph()
        for index, name in enumerate(self.names):
            graph.add_node(index, name=name, element=atom_type(name))
        graph.add_edges_from(self.bonds)
        return graph

    @property
    def num_atoms(self) -> int:
        """Get the number of atoms in the topology.

        Returns:
            Number of atoms.
        """
        return len(self.names)

    @property
    def num_bonds(self) -> int:
        """Number of bonds as stored, duplicates included."""
        return len(self.bonds)
