from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import networkx as nx

from .schema import Position, VertexId

logger = logging.getLogger(__name__)


class GraphStore:
    """Undirected graph being edited, backed by a networkx Graph.

    ``connect`` is the only writer of adjacency and networkx always stores
    both directions of an undirected edge, so adjacency stays symmetric.
    Node and neighbor iteration follow insertion order, which keeps traversal
    order deterministic for a given editing history.

    The id counter survives ``clear()``: ids are unique for the lifetime of
    the store, not just since the last clear.
    """

    def __init__(self, prefix: str = "V") -> None:
        self.graph: nx.Graph = nx.Graph()
        self.prefix = prefix
        self._counter = 0

    # ------------------------------
    # Mutation
    # ------------------------------
    def add_vertex(self, position: Optional[Position] = None) -> VertexId:
        vertex_id = f"{self.prefix}{self._counter}"
        self._counter += 1
        self.graph.add_node(vertex_id, pos=position)
        logger.debug(f"Added vertex {vertex_id} at {position}")
        return vertex_id

    def connect(self, a: VertexId, b: VertexId) -> bool:
        """Insert the undirected edge a-b; returns False when nothing changed."""
        if a == b:
            return False
        if a not in self.graph or b not in self.graph:
            return False
        if self.graph.has_edge(a, b):
            return False
        self.graph.add_edge(a, b)
        logger.debug(f"Connected {a} - {b}")
        return True

    def clear(self) -> None:
        self.graph.clear()
        logger.debug(f"Graph cleared (next id: {self.prefix}{self._counter})")

    # ------------------------------
    # Queries
    # ------------------------------
    @property
    def vertices(self) -> List[VertexId]:
        return list(self.graph.nodes())

    @property
    def vertex_count(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def first_vertex(self) -> Optional[VertexId]:
        return next(iter(self.graph.nodes()), None)

    def has_vertex(self, v: VertexId) -> bool:
        return v in self.graph

    def has_edge(self, a: VertexId, b: VertexId) -> bool:
        return self.graph.has_edge(a, b)

    def neighbors(self, v: VertexId) -> List[VertexId]:
        if v not in self.graph:
            return []
        return list(self.graph.adj[v])

    def edges(self) -> List[Tuple[VertexId, VertexId]]:
        return list(self.graph.edges())

    def position(self, v: VertexId) -> Optional[Position]:
        if v not in self.graph:
            return None
        return self.graph.nodes[v].get("pos")

    def __contains__(self, v: object) -> bool:
        return v in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()
