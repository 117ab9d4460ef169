"""Optional graph adapters (require extra dependencies)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from rdkit import Chem

logger = logging.getLogger(__name__)


def graph_from_rdkit(mol: "Chem.Mol") -> nx.Graph:
    """Convert an RDKit molecule to a networkx molecular graph.

    Parameters
    ----------
    mol : Chem.Mol
        Any RDKit molecule. Implicit hydrogens stay implicit.

    Returns
    -------
    nx.Graph
        Node ``i`` is RDKit atom ``i`` with ``symbol``, ``atomic_number``,
        ``formal_charge`` and ``is_aromatic``; edges carry ``bond_order``
        (aromatic = 1.5). ``position`` is set when the molecule has a
        conformer.

    Notes
    -----
    Requires ``rdkit``.
    """
    from rdkit import Chem  # lazy import: RDKit is optional
    from rdkit.Chem import rdMolDescriptors

    G = nx.Graph()
    conf = mol.GetConformer() if mol.GetNumConformers() else None

    for atom in mol.GetAtoms():
        i = atom.GetIdx()
        attrs = {
            "symbol": atom.GetSymbol(),
            "atomic_number": atom.GetAtomicNum(),
            "formal_charge": atom.GetFormalCharge(),
            "is_aromatic": atom.GetIsAromatic(),
        }
        if conf is not None:
            p = conf.GetAtomPosition(i)
            attrs["position"] = (p.x, p.y, p.z)
        G.add_node(i, **attrs)

    for bond in mol.GetBonds():
        if bond.GetBondType() == Chem.BondType.AROMATIC:
            bo = 1.5
        else:
            bo = bond.GetBondTypeAsDouble()
        G.add_edge(bond.GetBeginAtomIdx(), bond.GetEndAtomIdx(), bond_order=bo)

    G.graph["formula"] = rdMolDescriptors.CalcMolFormula(mol)
    logger.debug("Converted RDKit molecule: %d atoms, %d bonds", G.number_of_nodes(), G.number_of_edges())
    return G


def graph_from_smiles(smiles: str) -> nx.Graph:
    """Parse SMILES with RDKit and convert to a networkx graph.

    Raises
    ------
    ValueError
        RDKit could not parse ``smiles``.
    """
    from rdkit import Chem  # lazy import: RDKit is optional

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"Invalid SMILES: {smiles}")
    return graph_from_rdkit(mol)
