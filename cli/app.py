#!/usr/bin/env python3
"""
Interactive undirected graph editor with animated DFS / BFS and cycle checks
"""

import argparse
import logging
import os
import sys
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.widgets import Button
from pydantic import ValidationError

# project root on the path so `python cli/app.py` works from a checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from core.config import AppConfig, load_config
from core.outcomes import Outcome
from core.workbench import GraphWorkbench
from graph.schema import TraversalKind, VertexState
from graph.visualize import save_snapshot
from cli.canvas import CanvasRenderer, StatusNotifier, TimerScheduler

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )

    # matplotlib/PIL debug output drowns the traversal trace
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)


class GraphAnalyzerApp:
    """Matplotlib window: a drawing canvas plus a column of command buttons"""

    def __init__(self, config: Optional[AppConfig] = None, snapshot_path: str = "graph_snapshot.png"):
        self.config = config or AppConfig()
        self.snapshot_path = snapshot_path

        self.fig = plt.figure(figsize=(12, 7))
        self.ax = self.fig.add_axes([0.03, 0.05, 0.78, 0.88])
        self.ax.set_xlim(0, self.config.canvas_width)
        self.ax.set_ylim(0, self.config.canvas_height)
        self.ax.set_aspect("equal")
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.ax.set_title("Graph Analyzer")

        self.status_text = self.ax.text(
            0.02, 0.98, "", transform=self.ax.transAxes, va="top", ha="left", fontsize=9,
            bbox=dict(boxstyle="round,pad=0.3", fc="#f0f0f0", ec="#999999", alpha=0.8),
        )

        self.renderer = CanvasRenderer(self.ax, radius=self.config.vertex_radius)
        self.scheduler = TimerScheduler(self.fig.canvas)
        self.notifier = StatusNotifier(self.status_text)
        self.workbench = GraphWorkbench(
            renderer=self.renderer,
            scheduler=self.scheduler,
            notifier=self.notifier,
            config=self.config,
        )

        self._build_widgets()
        self.cid_click = self.fig.canvas.mpl_connect("button_press_event", self.on_click)

    # ---------------- UI ---------------- #
    def _build_widgets(self) -> None:
        left = 0.84
        bw = 0.13
        bh = 0.06
        pad = 0.015
        y = 0.85

        specs = [
            ("Add Vertex", self.on_add_vertex, "#e8ffe8"),
            ("Clear", self.on_clear, "#f3f3f3"),
            ("Check Cycles", self.on_check_cycles, "#ffe8f7"),
            ("DFS", self.on_dfs, "#ffffd0"),
            ("BFS", self.on_bfs, "#d8f5d8"),
            ("Snapshot", self.on_snapshot, "#f0f0ff"),
        ]
        self.buttons = []
        for label, handler, color in specs:
            ax_btn = self.fig.add_axes([left, y, bw, bh])
            btn = Button(ax_btn, label, color=color, hovercolor="#dddddd")
            btn.on_clicked(handler)
            self.buttons.append(btn)
            y -= bh + pad

    # ---------------- Events ---------------- #
    def on_click(self, event) -> None:
        if event.inaxes != self.ax or event.button != 1:
            return
        if event.xdata is None or event.ydata is None:
            return
        vertex = self.renderer.vertex_at(event)
        if vertex is not None:
            self.workbench.vertex_clicked(vertex)
            pending = self.workbench.selection.pending
            if pending is not None:
                self._set_status(f"Selected {pending}. Click another vertex to connect.")
            return
        added = self.workbench.canvas_clicked((float(event.xdata), float(event.ydata)))
        if added is not None:
            self._set_status(f"Added {added}")

    def on_add_vertex(self, _) -> None:
        self.workbench.arm_add_vertex()
        self._set_status("Click on the canvas to place a vertex.")

    def on_clear(self, _) -> None:
        self.workbench.clear()
        self._set_status("")

    def on_check_cycles(self, _) -> None:
        self.workbench.check_cycles()

    def on_dfs(self, _) -> None:
        self._launch(TraversalKind.DEPTH_FIRST)

    def on_bfs(self, _) -> None:
        self._launch(TraversalKind.BREADTH_FIRST)

    def on_snapshot(self, _) -> None:
        try:
            save_snapshot(self.workbench.store, self.snapshot_path, self._current_states())
            self._set_status(f"Snapshot saved: {self.snapshot_path}")
        except (OSError, ValueError) as e:
            logger.error(f"Snapshot failed: {e}")
            self._set_status(f"Snapshot failed: {e}")

    def _launch(self, kind: TraversalKind) -> None:
        if self.workbench.launch_traversal(kind) == Outcome.TRAVERSAL_STARTED:
            self._set_status(f"{kind.value.upper()} running...")

    def _current_states(self):
        kind = self.workbench.active_kind
        if kind is None:
            return {}
        state = VertexState.visiting(kind)
        return {v: state for v in self.workbench.active_visited()}

    def _set_status(self, msg: str) -> None:
        self.status_text.set_text(msg)
        self.fig.canvas.draw_idle()

    # ---------------- Run ---------------- #
    def run(self) -> None:
        plt.show()


def main(argv=None):
    """Main CLI function"""
    parser = argparse.ArgumentParser(
        description="Interactive graph analyzer (DFS / BFS / cycle check)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic usage
  graph-analyzer

  # Faster animation, debug logging
  graph-analyzer --interval 200 --verbose
        """
    )

    parser.add_argument(
        '--interval',
        type=int,
        help='Traversal step interval in milliseconds (default: 500 or GRAPH_TICK_MS)'
    )

    parser.add_argument(
        '--env-file',
        help='Path to a .env file with GRAPH_* settings'
    )

    parser.add_argument(
        '--snapshot',
        default='graph_snapshot.png',
        help='Where the Snapshot button writes the image'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.env_file, tick_interval_ms=args.interval)
    except ValidationError as e:
        setup_logging(args.verbose)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(args.verbose, config.log_file)
    logger.info(f"Starting graph analyzer (tick {config.tick_interval_ms} ms)")

    app = GraphAnalyzerApp(config=config, snapshot_path=args.snapshot)
    app.run()


if __name__ == "__main__":
    main()
