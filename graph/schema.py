from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

VertexId = str
Position = Tuple[float, float]


class TraversalKind(str, Enum):
    """Frontier discipline of a traversal engine"""
    DEPTH_FIRST = "dfs"
    BREADTH_FIRST = "bfs"


class VertexState(str, Enum):
    """Visual state of a vertex as far as the core is concerned"""
    DEFAULT = "default"
    VISITING_DFS = "visiting_dfs"
    VISITING_BFS = "visiting_bfs"

    @classmethod
    def visiting(cls, kind: TraversalKind) -> 'VertexState':
        if kind == TraversalKind.DEPTH_FIRST:
            return cls.VISITING_DFS
        return cls.VISITING_BFS


@dataclass(frozen=True)
class Visited:
    vertex: VertexId


@dataclass(frozen=True)
class Skipped:
    pass


@dataclass(frozen=True)
class Done:
    pass


StepResult = Union[Visited, Skipped, Done]

SKIPPED = Skipped()
DONE = Done()


@dataclass
class CycleDetectionResult:
    has_cycle: bool
    cycle: List[VertexId] = field(default_factory=list)
    closing_edge: Optional[Tuple[VertexId, VertexId]] = None
    components: int = 0
