from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, Iterator, List, Optional, Set

from .schema import DONE, SKIPPED, StepResult, TraversalKind, VertexId, Visited
from .store import GraphStore

logger = logging.getLogger(__name__)

# Depth-first takes from the same end it adds to; breadth-first from the other.
_TAKE: Dict[TraversalKind, Callable[[Deque[VertexId]], VertexId]] = {
    TraversalKind.DEPTH_FIRST: deque.pop,
    TraversalKind.BREADTH_FIRST: deque.popleft,
}


@dataclass
class TraversalState:
    frontier: Deque[VertexId] = field(default_factory=deque)
    visited: Set[VertexId] = field(default_factory=set)
    order: List[VertexId] = field(default_factory=list)
    steps: int = 0


class TraversalEngine:
    """Stepwise traversal producing at most one visitation per ``step()``.

    A vertex can sit in the frontier more than once when it was added from
    several neighbors before being reached; taking an already visited vertex
    costs a step and yields ``Skipped``.
    """

    def __init__(self, store: GraphStore, kind: TraversalKind, start: VertexId) -> None:
        self.store = store
        self.kind = kind
        self.start = start
        self.state = TraversalState(frontier=deque([start]))
        self._take = _TAKE[kind]

    @property
    def is_done(self) -> bool:
        return not self.state.frontier

    def step(self) -> StepResult:
        state = self.state
        if not state.frontier:
            return DONE

        state.steps += 1
        vertex = self._take(state.frontier)
        if vertex in state.visited:
            return SKIPPED

        state.visited.add(vertex)
        state.order.append(vertex)
        for nb in self.store.neighbors(vertex):
            if nb not in state.visited:
                state.frontier.append(nb)
        logger.debug(f"{self.kind.value} visited {vertex}, frontier={list(state.frontier)}")
        return Visited(vertex)

    def run(self) -> Iterator[StepResult]:
        """Yield step results up to and including the terminal ``Done``."""
        while True:
            result = self.step()
            yield result
            if result is DONE:
                return


def create_engine(store: GraphStore, kind: TraversalKind) -> Optional[TraversalEngine]:
    """Engine starting from the store's first vertex, or None for an empty graph."""
    start = store.first_vertex()
    if start is None:
        return None
    return TraversalEngine(store, kind, start)
