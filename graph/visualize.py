from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

import networkx as nx

from .schema import VertexId, VertexState
from .store import GraphStore

logger = logging.getLogger(__name__)

# State → color map
STATE_COLORS: Dict[VertexState, str] = {
    VertexState.DEFAULT: "#ADD8E6",
    VertexState.VISITING_DFS: "#FFFF00",
    VertexState.VISITING_BFS: "#008000",
}

EDGE_COLOR = "#000000"
OUTLINE_COLOR = "#000000"


def state_color(state: VertexState) -> str:
    return STATE_COLORS.get(state, STATE_COLORS[VertexState.DEFAULT])


def _layout(store: GraphStore) -> Dict[VertexId, Tuple[float, float]]:
    # Use the positions the user placed vertices at; fall back to a spring
    # layout only when some vertex has none.
    pos: Dict[VertexId, Tuple[float, float]] = {}
    for v in store.vertices:
        p = store.position(v)
        if p is None:
            return nx.spring_layout(store.graph, seed=42)
        pos[v] = (float(p[0]), float(p[1]))
    return pos


def save_snapshot(
    store: GraphStore,
    save_path: str,
    states: Optional[Mapping[VertexId, VertexState]] = None,
) -> None:
    """Draw the current graph with vertex states and a legend into an image file."""
    import matplotlib.pyplot as plt
    from matplotlib.patches import Patch

    states = states or {}
    pos = _layout(store)

    fig = plt.figure(figsize=(10, 6))
    try:
        colors: List[str] = [
            state_color(states.get(v, VertexState.DEFAULT)) for v in store.vertices
        ]
        if store.vertex_count:
            nx.draw_networkx_nodes(
                store.graph,
                pos,
                nodelist=store.vertices,
                node_color=colors,
                node_size=600,
                edgecolors=OUTLINE_COLOR,
                linewidths=2,
            )
            nx.draw_networkx_labels(
                store.graph,
                pos,
                font_size=9,
                font_weight="bold",
                font_color="#111111",
            )
        if store.edge_count:
            nx.draw_networkx_edges(
                store.graph,
                pos,
                width=2.0,
                edge_color=EDGE_COLOR,
            )

        # Legend
        handles = [
            Patch(facecolor=col, edgecolor=OUTLINE_COLOR, label=state.value)
            for state, col in STATE_COLORS.items()
        ]
        plt.legend(
            handles=handles,
            title="State",
            loc="lower left",
            bbox_to_anchor=(1.02, 0),
            borderaxespad=0.0,
        )

        plt.axis("off")
        plt.tight_layout()
        plt.savefig(save_path, dpi=150, bbox_inches="tight", facecolor="white", edgecolor="none")
    finally:
        plt.close(fig)
    logger.info(f"Snapshot saved: {save_path}")
