from __future__ import annotations

import logging
from typing import Optional, Tuple

from graph.schema import VertexId
from graph.store import GraphStore

logger = logging.getLogger(__name__)


class SelectionController:
    """Turns two independent vertex clicks into one edge-creation attempt.

    The first click of a pair only records the pending source. The second
    click always consumes it, whether or not ``connect`` added an edge
    (clicking the same vertex twice is passed through and no-ops in the store).
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store
        self._pending: Optional[VertexId] = None

    @property
    def pending(self) -> Optional[VertexId]:
        return self._pending

    def on_vertex_clicked(self, vertex: VertexId) -> Optional[Tuple[VertexId, VertexId]]:
        if self._pending is None:
            self._pending = vertex
            logger.debug(f"Pending edge source: {vertex}")
            return None

        source, self._pending = self._pending, None
        if self.store.connect(source, vertex):
            return (source, vertex)
        logger.debug(f"No edge created for {source} - {vertex}")
        return None

    def reset(self) -> None:
        self._pending = None
