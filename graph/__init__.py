"""
Graph package: undirected graph model, cycle detection and stepwise traversals
"""

from .store import GraphStore
from .schema import (
    VertexId, Position, TraversalKind, VertexState,
    Visited, Skipped, Done, StepResult, SKIPPED, DONE,
    CycleDetectionResult,
)
from .cycles import detect_cycle, has_cycle
from .traversal import TraversalEngine, TraversalState, create_engine
from .visualize import STATE_COLORS, state_color, save_snapshot

__all__ = [
    'GraphStore',
    'VertexId', 'Position', 'TraversalKind', 'VertexState',
    'Visited', 'Skipped', 'Done', 'StepResult', 'SKIPPED', 'DONE',
    'CycleDetectionResult',
    'detect_cycle', 'has_cycle',
    'TraversalEngine', 'TraversalState', 'create_engine',
    'STATE_COLORS', 'state_color', 'save_snapshot',
]
