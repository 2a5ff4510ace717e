"""Tests for GraphWorkbench: editing events, launches, ticking and re-entrancy."""
from conftest import build

from core.outcomes import Outcome
from graph.schema import DONE, Done, TraversalKind, VertexState, Visited


class TestEditing:
    def test_canvas_click_needs_armed_mode(self, workbench, renderer, store):
        assert workbench.canvas_clicked((5.0, 5.0)) is None
        assert store.vertex_count == 0
        assert renderer.calls == []

    def test_one_vertex_per_arm(self, workbench, renderer, store):
        workbench.arm_add_vertex()
        assert workbench.canvas_clicked((5.0, 6.0)) == "V0"
        assert workbench.canvas_clicked((7.0, 8.0)) is None
        assert store.vertices == ["V0"]
        assert renderer.calls == [("vertex_added", "V0", (5.0, 6.0))]

    def test_two_vertex_clicks_draw_an_edge(self, workbench, renderer):
        for p in ((1.0, 1.0), (2.0, 2.0)):
            workbench.arm_add_vertex()
            workbench.canvas_clicked(p)
        assert workbench.vertex_clicked("V0") is None
        assert workbench.vertex_clicked("V1") == ("V0", "V1")
        assert renderer.calls[-1] == ("edge_added", "V0", "V1")

    def test_duplicate_edge_not_drawn_twice(self, workbench, renderer, store):
        build(store, 2, [(0, 1)])
        workbench.vertex_clicked("V1")
        workbench.vertex_clicked("V0")
        assert not [c for c in renderer.calls if c[0] == "edge_added"]

    def test_clear_drops_graph_and_selection(self, workbench, renderer, store):
        build(store, 2, [(0, 1)])
        workbench.vertex_clicked("V0")
        workbench.clear()
        assert store.vertex_count == 0
        assert workbench.selection.pending is None
        assert renderer.calls[-1] == ("canvas_cleared",)


class TestCycleCheck:
    def test_cycle_present(self, workbench, notifier, store):
        build(store, 3, [(0, 1), (1, 2), (2, 0)])
        assert workbench.check_cycles() == Outcome.CYCLE_PRESENT
        assert notifier.outcomes == [Outcome.CYCLE_PRESENT]

    def test_cycle_absent(self, workbench, notifier, store):
        build(store, 3, [(0, 1), (1, 2)])
        assert workbench.check_cycles() == Outcome.CYCLE_ABSENT
        assert notifier.outcomes == [Outcome.CYCLE_ABSENT]


class TestTraversalRun:
    def test_empty_graph(self, workbench, scheduler, notifier):
        assert workbench.launch_traversal(TraversalKind.DEPTH_FIRST) == Outcome.EMPTY_GRAPH
        assert notifier.outcomes == [Outcome.EMPTY_GRAPH]
        assert scheduler.starts == 0
        assert not workbench.is_running

    def test_launch_starts_scheduler(self, workbench, scheduler, store):
        build(store, 2, [(0, 1)])
        assert workbench.launch_traversal(TraversalKind.BREADTH_FIRST) == Outcome.TRAVERSAL_STARTED
        assert scheduler.running
        assert scheduler.interval_ms == 500
        assert workbench.active_kind == TraversalKind.BREADTH_FIRST

    def test_dfs_run_to_completion(self, workbench, scheduler, renderer, notifier, store):
        build(store, 3, [(0, 1), (1, 2)])
        workbench.launch_traversal(TraversalKind.DEPTH_FIRST)
        renderer.calls.clear()

        results = scheduler.run_until_stopped()

        assert results[:3] == [Visited("V0"), Visited("V1"), Visited("V2")]
        assert isinstance(results[-1], Done)
        assert not scheduler.running
        assert not workbench.is_running
        assert notifier.outcomes == [Outcome.DFS_COMPLETE]
        visiting = [c[1] for c in renderer.recolors() if c[2] == VertexState.VISITING_DFS]
        assert visiting == ["V0", "V1", "V2"]
        # Baseline restored once the run is over
        assert renderer.colors == {v: "default" for v in store.vertices}

    def test_bfs_colors_and_outcome(self, workbench, scheduler, renderer, notifier, store):
        build(store, 2, [(0, 1)])
        workbench.launch_traversal(TraversalKind.BREADTH_FIRST)
        scheduler.fire()
        assert renderer.colors["V0"] == VertexState.VISITING_BFS.value
        scheduler.run_until_stopped()
        assert notifier.outcomes == [Outcome.BFS_COMPLETE]

    def test_visited_snapshot_while_running(self, workbench, scheduler, store):
        build(store, 3, [(0, 1), (1, 2)])
        workbench.launch_traversal(TraversalKind.BREADTH_FIRST)
        scheduler.fire()
        scheduler.fire()
        assert workbench.active_visited() == ["V0", "V1"]

    def test_stray_tick_after_finish(self, workbench, scheduler, store):
        build(store, 1, [])
        workbench.launch_traversal(TraversalKind.DEPTH_FIRST)
        scheduler.run_until_stopped()
        assert workbench.tick() == DONE
        assert workbench.active_visited() == []


class TestRelaunch:
    def test_relaunch_leaves_one_run(self, workbench, scheduler, renderer, store):
        """A new launch stops the previous run before starting its own."""
        build(store, 4, [(0, 1), (1, 2), (2, 3)])
        workbench.launch_traversal(TraversalKind.DEPTH_FIRST)
        scheduler.fire()
        scheduler.fire()

        workbench.launch_traversal(TraversalKind.BREADTH_FIRST)
        assert scheduler.starts == 2
        assert scheduler.stops == 1
        assert workbench.active_kind == TraversalKind.BREADTH_FIRST
        # DFS colors were wiped before BFS began
        assert set(renderer.colors.values()) == {"default"}

        scheduler.fire()
        assert set(renderer.colors.values()) == {"default", VertexState.VISITING_BFS.value}

    def test_no_vertex_gets_both_colors(self, workbench, scheduler, renderer, store):
        build(store, 4, [(0, 1), (0, 2), (0, 3)])
        workbench.launch_traversal(TraversalKind.DEPTH_FIRST)
        scheduler.fire()
        workbench.launch_traversal(TraversalKind.BREADTH_FIRST)
        while scheduler.running:
            scheduler.fire()
            assert VertexState.VISITING_DFS.value not in renderer.colors.values()

    def test_clear_halts_running_traversal(self, workbench, scheduler, notifier, store):
        build(store, 3, [(0, 1), (1, 2)])
        workbench.launch_traversal(TraversalKind.DEPTH_FIRST)
        scheduler.fire()
        workbench.clear()
        assert not scheduler.running
        assert not workbench.is_running
        assert notifier.outcomes == []

    def test_launch_on_cleared_graph(self, workbench, scheduler, notifier, store):
        build(store, 2, [(0, 1)])
        workbench.launch_traversal(TraversalKind.DEPTH_FIRST)
        workbench.clear()
        assert workbench.launch_traversal(TraversalKind.BREADTH_FIRST) == Outcome.EMPTY_GRAPH
        assert not scheduler.running
