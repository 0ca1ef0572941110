"""Input handler for converting various formats to Topology."""

from typing import Union

import networkx as nx
from rdkit import Chem

from atom_assign.core.topology import Topology


def convert_to_topology(
    input_data: Union[str, Chem.Mol, nx.Graph, Topology],
) -> Topology:
    """Convert various input formats to Topology.

    Args:
        input_data: Input in one of the following formats:
            - SMILES string
            - RDKit Mol object
            - NetworkX Graph
            - Topology

    Returns:
        Topology: Converted topology

    Raises:
        ValueError: If input format is not supported or conversion fails
    """
    if isinstance(input_data, Topology):
        return input_data

    if isinstance(input_data, str):
        # Assume SMILES string
        mol = Chem.MolFromSmiles(input_data)
        if mol is None:
            raise ValueError(f"Failed to parse SMILES string: {input_data}")
        return Topology.from_rdkit_mol(mol)

    if isinstance(input_data, Chem.Mol):
        return Topology.from_rdkit_mol(input_data)

    if isinstance(input_data, nx.Graph):
        return Topology.from_networkx(input_data)

    raise ValueError(f"Unsupported input type: {type(input_data)}")
