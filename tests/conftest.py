"""
Pytest configuration: headless matplotlib and recording fakes for the
workbench collaborators.
"""
import matplotlib

matplotlib.use("Agg")

import pytest

from core.collaborators import Notifier, Renderer, Scheduler
from core.config import AppConfig
from core.workbench import GraphWorkbench
from graph.store import GraphStore


class RecordingRenderer(Renderer):
    def __init__(self):
        self.calls = []
        self.colors = {}

    def vertex_added(self, vertex, position):
        self.calls.append(("vertex_added", vertex, position))
        self.colors[vertex] = "default"

    def edge_added(self, a, b):
        self.calls.append(("edge_added", a, b))

    def canvas_cleared(self):
        self.calls.append(("canvas_cleared",))
        self.colors.clear()

    def vertex_recolored(self, vertex, state):
        self.calls.append(("vertex_recolored", vertex, state))
        self.colors[vertex] = state.value

    def recolors(self):
        return [c for c in self.calls if c[0] == "vertex_recolored"]


class ManualScheduler(Scheduler):
    """Scheduler that only ticks when the test says so."""

    def __init__(self):
        self.on_tick = None
        self.interval_ms = None
        self.starts = 0
        self.stops = 0

    @property
    def running(self):
        return self.on_tick is not None

    def start(self, interval_ms, on_tick):
        self.interval_ms = interval_ms
        self.on_tick = on_tick
        self.starts += 1

    def stop(self):
        self.on_tick = None
        self.stops += 1

    def fire(self):
        assert self.on_tick is not None, "scheduler is not running"
        return self.on_tick()

    def run_until_stopped(self, limit=1000):
        results = []
        while self.running and len(results) < limit:
            results.append(self.fire())
        return results


class RecordingNotifier(Notifier):
    def __init__(self):
        self.outcomes = []

    def show(self, outcome):
        self.outcomes.append(outcome)


@pytest.fixture
def store():
    return GraphStore()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def workbench(renderer, scheduler, notifier, store):
    return GraphWorkbench(
        renderer=renderer,
        scheduler=scheduler,
        notifier=notifier,
        store=store,
        config=AppConfig(tick_interval_ms=500),
    )


def build(store, n, edges):
    """Add n vertices and connect the given index pairs; returns the ids."""
    ids = [store.add_vertex((float(i), float(i))) for i in range(n)]
    for a, b in edges:
        store.connect(ids[a], ids[b])
    return ids
