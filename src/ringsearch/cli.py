import argparse
import json
import sys

import networkx as nx

from . import RingSearch, RingSearchConfig, ring_report, ring_search_to_dict, __version__
from .config import DEFAULT_PARAMS
from .exceptions import InvalidGraph


def _detect_format(path: str, fmt: str) -> str:
    if fmt != "auto":
        return fmt
    return "graphml" if path.lower().endswith((".graphml", ".xml")) else "edgelist"


def read_graph(path: str, fmt: str = "auto", nodetype: str = DEFAULT_PARAMS["nodetype"]) -> nx.Graph:
    """Read a molecular graph: whitespace edge list or GraphML."""
    fmt = _detect_format(path, fmt)
    if fmt == "graphml":
        return nx.read_graphml(path)
    return nx.read_edgelist(path, nodetype=int if nodetype == "int" else str)


def main(argv=None):
    p = argparse.ArgumentParser(description="Find cyclic atoms and ring systems in a molecular graph.")
    p.add_argument("graph", nargs="?", help="Input graph file (edge list or GraphML)")

    p.add_argument("--version", action="store_true",
                    help="Print version information and exit")
    p.add_argument("-s", "--smiles", type=str,
                    help="Read the molecule from a SMILES string instead of a file (requires rdkit)")
    p.add_argument("-f", "--format", choices=["auto", "edgelist", "graphml"], default=DEFAULT_PARAMS["format"],
                    help=f"Input format (default: {DEFAULT_PARAMS['format']}, by file suffix)")
    p.add_argument("--nodetype", choices=["int", "str"], default=DEFAULT_PARAMS["nodetype"],
                    help=f"Node label type for edge lists (default: {DEFAULT_PARAMS['nodetype']})")
    p.add_argument("--allow-self-loops", action="store_true", default=DEFAULT_PARAMS["allow_self_loops"],
                    help="Drop self-loops with a warning instead of failing")

    p.add_argument("-j", "--json", action="store_true", default=DEFAULT_PARAMS["json"],
                    help="Print a JSON summary instead of the text report")
    p.add_argument("-d", "--debug", action="store_true", default=DEFAULT_PARAMS["debug"],
                    help="Enable debug output (pipeline stage summaries on stderr)")

    args = p.parse_args(argv)

    if args.version:
        print(f"ringsearch v{__version__}")
        return 0

    if not args.graph and not args.smiles:
        p.error("the following arguments are required: graph (or --smiles)")

    try:
        if args.smiles:
            from .featurisers import graph_from_smiles

            G = graph_from_smiles(args.smiles)
        else:
            G = read_graph(args.graph, fmt=args.format, nodetype=args.nodetype)
        rs = RingSearch(G, config=RingSearchConfig(allow_self_loops=args.allow_self_loops), debug=args.debug)
    except (OSError, ValueError, nx.NetworkXError) as e:
        # InvalidGraph is a ValueError
        kind = "invalid graph" if isinstance(e, InvalidGraph) else "error"
        print(f"ringsearch: {kind}: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(ring_search_to_dict(rs), indent=2))
    else:
        print(ring_report(rs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
