from __future__ import annotations

from enum import Enum
from typing import Dict

from graph.schema import TraversalKind


class Outcome(str, Enum):
    """User-facing results of workbench commands"""
    EMPTY_GRAPH = "empty_graph"
    TRAVERSAL_STARTED = "traversal_started"
    DFS_COMPLETE = "dfs_complete"
    BFS_COMPLETE = "bfs_complete"
    CYCLE_PRESENT = "cycle_present"
    CYCLE_ABSENT = "cycle_absent"

    @classmethod
    def completed(cls, kind: TraversalKind) -> 'Outcome':
        if kind == TraversalKind.DEPTH_FIRST:
            return cls.DFS_COMPLETE
        return cls.BFS_COMPLETE


MESSAGES: Dict[Outcome, str] = {
    Outcome.EMPTY_GRAPH: "The graph is empty.",
    Outcome.TRAVERSAL_STARTED: "Traversal running...",
    Outcome.DFS_COMPLETE: "DFS traversal finished.",
    Outcome.BFS_COMPLETE: "BFS traversal finished.",
    Outcome.CYCLE_PRESENT: "The graph contains cycles.",
    Outcome.CYCLE_ABSENT: "The graph has no cycles.",
}


def message_for(outcome: Outcome) -> str:
    return MESSAGES.get(outcome, outcome.value)
