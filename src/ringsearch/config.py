"""Configuration for ring perception and fragment extraction."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RingSearchConfig:
    """Options for building a RingSearch and extracting fragments.

    Perception itself has no knobs; these only control input tolerance
    and how much of the source graph is carried into fragments.
    """

    copy_node_data: bool = True
    """Copy node attributes (symbol, position, ...) into fragments."""

    copy_edge_data: bool = True
    """Copy edge attributes (bond_order, ...) into fragments."""

    copy_graph_data: bool = False
    """Copy ``G.graph`` into fragments. Off: formula, charge etc. describe the whole molecule."""

    allow_self_loops: bool = False
    """Drop self-loops with a warning instead of raising InvalidGraph."""

    @classmethod
    def default(cls) -> "RingSearchConfig":
        """Default options. For explicit intent."""
        return cls()

    @classmethod
    def topology_only(cls) -> "RingSearchConfig":
        """Fragments carry node labels and bonds but no attributes."""
        return cls(copy_node_data=False, copy_edge_data=False, copy_graph_data=False)


DEFAULT_PARAMS = {
    "format": "auto",
    "json": False,
    "debug": False,
    "allow_self_loops": False,
    "nodetype": "int",
}
