from __future__ import annotations

import os
from typing import List

from graph.cycles import detect_cycle
from graph.schema import TraversalKind, Visited
from graph.store import GraphStore
from graph.traversal import create_engine
from graph.visualize import save_snapshot


def build_sample_graph() -> GraphStore:
    """Triangle V0-V1-V2 with a tail V2-V3-V4 and an isolated V5."""
    store = GraphStore()
    coords = [(10, 10), (30, 10), (20, 30), (40, 35), (60, 35), (80, 10)]
    v = [store.add_vertex(p) for p in coords]
    for a, b in [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)]:
        store.connect(v[a], v[b])
    return store


def traversal_order(store: GraphStore, kind: TraversalKind) -> List[str]:
    engine = create_engine(store, kind)
    if engine is None:
        return []
    return [r.vertex for r in engine.run() if isinstance(r, Visited)]


def main() -> None:
    print("=" * 60)
    print("Graph analyzer demo")
    print("=" * 60)

    base_dir = os.path.dirname(os.path.abspath(__file__))
    output_png = os.path.join(base_dir, 'graph_snapshot.png')

    store = build_sample_graph()
    print(f"\nVertices: {store.vertex_count}")
    print(f"Edges: {store.edge_count}")

    # Cycle check
    result = detect_cycle(store)
    if result.has_cycle:
        print(f"\n❌ Cycle found: {' - '.join(result.cycle)}")
    else:
        print(f"\n✅ No cycles ({result.components} components)")

    # Traversals
    for kind in (TraversalKind.DEPTH_FIRST, TraversalKind.BREADTH_FIRST):
        order = traversal_order(store, kind)
        print(f"{kind.value.upper()} order: " + " -> ".join(order))

    # Snapshot
    try:
        save_snapshot(store, output_png)
        print(f"\n✅ Snapshot saved: {output_png}")
    except Exception as e:
        print(f"\n⚠️ Snapshot skipped: {e}")


if __name__ == "__main__":
    main()
