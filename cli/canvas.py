from __future__ import annotations

import logging
from typing import Any, Callable, Dict, FrozenSet, Optional

from matplotlib.axes import Axes
from matplotlib.lines import Line2D
from matplotlib.patches import Circle
from matplotlib.text import Text

from core.collaborators import Notifier, Renderer, Scheduler
from core.outcomes import Outcome, message_for
from graph.schema import Position, VertexId, VertexState
from graph.visualize import EDGE_COLOR, OUTLINE_COLOR, state_color

logger = logging.getLogger(__name__)


class CanvasRenderer(Renderer):
    """Draws vertices and edges on a matplotlib Axes.

    Keeps an explicit vertex id → artist map, used both for recoloring and
    for hit-testing clicks back to a vertex id.
    """

    def __init__(self, ax: Axes, radius: float = 1.5) -> None:
        self.ax = ax
        self.radius = radius
        self._circles: Dict[VertexId, Circle] = {}
        self._labels: Dict[VertexId, Text] = {}
        self._edges: Dict[FrozenSet[VertexId], Line2D] = {}

    def vertex_added(self, vertex: VertexId, position: Optional[Position]) -> None:
        if position is None:
            logger.warning(f"Vertex {vertex} has no position; not drawn")
            return
        x, y = position
        circle = Circle(
            (x, y),
            self.radius,
            facecolor=state_color(VertexState.DEFAULT),
            edgecolor=OUTLINE_COLOR,
            linewidth=2,
            zorder=3,
        )
        self.ax.add_patch(circle)
        self._circles[vertex] = circle
        self._labels[vertex] = self.ax.text(
            x, y, vertex, ha="center", va="center", fontsize=8, fontweight="bold", zorder=4,
        )
        self._redraw()

    def edge_added(self, a: VertexId, b: VertexId) -> None:
        key = frozenset((a, b))
        if key in self._edges or a not in self._circles or b not in self._circles:
            return
        (x1, y1), (x2, y2) = self._circles[a].center, self._circles[b].center
        (line,) = self.ax.plot([x1, x2], [y1, y2], color=EDGE_COLOR, linewidth=2, zorder=2)
        self._edges[key] = line
        self._redraw()

    def canvas_cleared(self) -> None:
        for artist in [*self._circles.values(), *self._labels.values(), *self._edges.values()]:
            artist.remove()
        self._circles.clear()
        self._labels.clear()
        self._edges.clear()
        self._redraw()

    def vertex_recolored(self, vertex: VertexId, state: VertexState) -> None:
        circle = self._circles.get(vertex)
        if circle is None:
            return
        circle.set_facecolor(state_color(state))
        self._redraw()

    def vertex_at(self, event: Any) -> Optional[VertexId]:
        """Vertex whose circle contains the mouse event, if any."""
        for vertex, circle in self._circles.items():
            hit, _ = circle.contains(event)
            if hit:
                return vertex
        return None

    def face_color(self, vertex: VertexId):
        circle = self._circles.get(vertex)
        return circle.get_facecolor() if circle is not None else None

    def _redraw(self) -> None:
        self.ax.figure.canvas.draw_idle()


class TimerScheduler(Scheduler):
    """Scheduler backed by a matplotlib canvas timer"""

    def __init__(self, canvas: Any) -> None:
        self.canvas = canvas
        self._timer = None

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self, interval_ms: int, on_tick: Callable[[], object]) -> None:
        self.stop()
        timer = self.canvas.new_timer(interval=interval_ms)
        timer.add_callback(on_tick)
        timer.start()
        self._timer = timer
        logger.debug(f"Timer started ({interval_ms} ms)")

    def stop(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer = None
        logger.debug("Timer stopped")


class StatusNotifier(Notifier):
    """Shows outcome messages in a status text artist"""

    def __init__(self, status_text: Text) -> None:
        self.status_text = status_text
        self.last: Optional[Outcome] = None

    def show(self, outcome: Outcome) -> None:
        self.last = outcome
        message = message_for(outcome)
        logger.info(message)
        self.status_text.set_text(message)
        self.status_text.figure.canvas.draw_idle()
