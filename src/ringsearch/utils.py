from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from .ring_search import RingSearch


def configure_debug_logging(level: int = logging.DEBUG) -> None:
    """Send ``ringsearch`` log records to stderr.

    Attaches one handler to the package logger (not the root logger);
    calling it again does not add a second handler.
    """
    pkg_logger = logging.getLogger("ringsearch")
    pkg_logger.setLevel(level)
    if not any(getattr(h, "_ringsearch_debug", False) for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        handler._ringsearch_debug = True  # type: ignore[attr-defined]
        pkg_logger.addHandler(handler)


def _fmt_vertices(vertices, width: int = 60) -> str:
    text = " ".join(str(v) for v in vertices)
    if len(text) > width:
        text = text[: width - 3].rsplit(" ", 1)[0] + " ..."
    return text


# -----------------------------
# Text (tabular) representation
# -----------------------------
def ring_report(rs: "RingSearch") -> str:
    """Tabular summary of cyclic atoms and ring systems."""
    systems = rs.ring_systems()
    lines = []
    lines.append(
        f"# Ring search: {rs.vertex_count} atoms, {rs.adjacency.edge_count} bonds, "
        f"{len(rs.cyclic())} cyclic atoms, {len(rs.cyclic_edges())} ring bonds"
    )
    lines.append(
        f"# {len(systems)} ring system(s): {len(rs.isolated())} isolated, {len(rs.fused())} fused"
    )
    if not systems:
        lines.append("# (no rings)")
        return "\n".join(lines)

    lines.append("# [label] kind      atoms bonds rank | members")
    labels = rs.adjacency.labels
    for s in systems:
        members = [labels[v] for v in s.vertices]
        lines.append(
            f"[{s.label:>5}] {s.kind.value:<9} {s.vertex_count:>5} {s.edge_count:>5} {s.cycle_rank:>4} | "
            + _fmt_vertices(members)
        )

    acyclic = [labels[v] for v in range(rs.vertex_count) if not rs.is_cyclic(v)]
    lines.append("")
    lines.append(f"# Acyclic atoms ({len(acyclic)}): " + (_fmt_vertices(acyclic) if acyclic else "-"))
    return "\n".join(lines)


def ring_search_to_dict(rs: "RingSearch") -> Dict[str, Any]:
    """JSON-serialisable summary (vertex indices, not node labels)."""
    systems: List[Dict[str, Any]] = [
        {
            "label": s.label,
            "kind": s.kind.value,
            "vertices": list(s.vertices),
            "vertex_count": s.vertex_count,
            "edge_count": s.edge_count,
            "cycle_rank": s.cycle_rank,
        }
        for s in rs.ring_systems()
    ]
    return {
        "vertex_count": rs.vertex_count,
        "edge_count": rs.adjacency.edge_count,
        "cyclic": rs.cyclic(),
        "cyclic_edges": [list(e) for e in rs.cyclic_edges()],
        "labels": list(rs.labels),
        "ring_systems": systems,
        "isolated": [list(v) for v in rs.isolated()],
        "fused": [list(v) for v in rs.fused()],
    }
