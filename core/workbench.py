from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from graph.cycles import detect_cycle
from graph.schema import (
    DONE, Done, Position, StepResult, TraversalKind, VertexId, VertexState, Visited,
)
from graph.store import GraphStore
from graph.traversal import TraversalEngine, create_engine

from .collaborators import Notifier, Renderer, Scheduler
from .config import AppConfig
from .outcomes import Outcome
from .selection import SelectionController

logger = logging.getLogger(__name__)


@dataclass
class ActiveTraversal:
    engine: TraversalEngine

    @property
    def kind(self) -> TraversalKind:
        return self.engine.kind


class GraphWorkbench:
    """Single execution context owning the graph, the pending selection and
    at most one running traversal.

    UI adapters call the event methods; the workbench mutates the store,
    drives the engine from scheduler ticks and pushes drawing commands and
    outcomes to its collaborators.
    """

    def __init__(
        self,
        renderer: Renderer,
        scheduler: Scheduler,
        notifier: Notifier,
        store: Optional[GraphStore] = None,
        config: Optional[AppConfig] = None,
    ) -> None:
        self.renderer = renderer
        self.scheduler = scheduler
        self.notifier = notifier
        self.store = store if store is not None else GraphStore()
        self.config = config or AppConfig()
        self.selection = SelectionController(self.store)
        self.adding_vertex = False
        self._active: Optional[ActiveTraversal] = None

    # ------------------------------
    # Editing
    # ------------------------------
    def arm_add_vertex(self) -> None:
        self.adding_vertex = True

    def canvas_clicked(self, position: Position) -> Optional[VertexId]:
        """Place a vertex if add-vertex mode is armed; one vertex per arm."""
        if not self.adding_vertex:
            return None
        vertex = self.store.add_vertex(position)
        self.adding_vertex = False
        self.renderer.vertex_added(vertex, position)
        return vertex

    def vertex_clicked(self, vertex: VertexId) -> Optional[Tuple[VertexId, VertexId]]:
        edge = self.selection.on_vertex_clicked(vertex)
        if edge is not None:
            self.renderer.edge_added(*edge)
        return edge

    def clear(self) -> None:
        # Ids held by a running engine die with the graph.
        self._halt()
        self.selection.reset()
        self.store.clear()
        self.renderer.canvas_cleared()
        logger.info("Canvas cleared")

    # ------------------------------
    # Algorithms
    # ------------------------------
    def check_cycles(self) -> Outcome:
        result = detect_cycle(self.store)
        outcome = Outcome.CYCLE_PRESENT if result.has_cycle else Outcome.CYCLE_ABSENT
        if result.has_cycle:
            logger.info(f"Cycle found: {' - '.join(result.cycle)}")
        else:
            logger.info(f"No cycles across {result.components} component(s)")
        self.notifier.show(outcome)
        return outcome

    @property
    def is_running(self) -> bool:
        return self._active is not None

    @property
    def active_kind(self) -> Optional[TraversalKind]:
        return self._active.kind if self._active is not None else None

    def active_visited(self) -> List[VertexId]:
        """Vertices visited so far by the running traversal, in order."""
        if self._active is None:
            return []
        return list(self._active.engine.state.order)

    def launch_traversal(self, kind: TraversalKind) -> Outcome:
        self._halt()

        engine = create_engine(self.store, kind)
        if engine is None:
            logger.info(f"{kind.value} requested on an empty graph")
            self.notifier.show(Outcome.EMPTY_GRAPH)
            return Outcome.EMPTY_GRAPH

        self._restore_colors()
        self._active = ActiveTraversal(engine=engine)
        logger.info(f"{kind.value} started from {engine.start}")
        self.scheduler.start(self.config.tick_interval_ms, self.tick)
        return Outcome.TRAVERSAL_STARTED

    def tick(self) -> StepResult:
        active = self._active
        if active is None:
            self.scheduler.stop()
            return DONE

        result = active.engine.step()
        if isinstance(result, Visited):
            self.renderer.vertex_recolored(result.vertex, VertexState.visiting(active.kind))
        elif isinstance(result, Done):
            self._finish(active)
        return result

    # ------------------------------
    # Internal helpers
    # ------------------------------
    def _finish(self, active: ActiveTraversal) -> None:
        self.scheduler.stop()
        self._active = None
        state = active.engine.state
        logger.info(
            f"{active.kind.value} finished: {' -> '.join(state.order)} ({state.steps} steps)"
        )
        self.notifier.show(Outcome.completed(active.kind))
        self._restore_colors()

    def _halt(self) -> None:
        if self._active is None:
            return
        logger.info(f"Stopping running {self._active.kind.value}")
        self.scheduler.stop()
        self._active = None

    def _restore_colors(self) -> None:
        for v in self.store.vertices:
            self.renderer.vertex_recolored(v, VertexState.DEFAULT)
