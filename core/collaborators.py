from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from graph.schema import Position, VertexId, VertexState

from .outcomes import Outcome


class Renderer(ABC):
    """Drawing surface, addressed by vertex and edge identity only"""

    @abstractmethod
    def vertex_added(self, vertex: VertexId, position: Optional[Position]) -> None:
        pass

    @abstractmethod
    def edge_added(self, a: VertexId, b: VertexId) -> None:
        pass

    @abstractmethod
    def canvas_cleared(self) -> None:
        pass

    @abstractmethod
    def vertex_recolored(self, vertex: VertexId, state: VertexState) -> None:
        pass


class Scheduler(ABC):
    """Periodic callback source driving traversal steps"""

    @abstractmethod
    def start(self, interval_ms: int, on_tick: Callable[[], object]) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        pass


class Notifier(ABC):
    @abstractmethod
    def show(self, outcome: Outcome) -> None:
        """Surface a user-facing outcome (text lookup is up to the implementation)"""
        pass
