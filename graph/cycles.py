from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Set, Tuple

from .schema import CycleDetectionResult, VertexId
from .store import GraphStore

logger = logging.getLogger(__name__)

# (vertex, arrival parent, remaining neighbors)
_Frame = Tuple[VertexId, Optional[VertexId], Iterator[VertexId]]


def detect_cycle(store: GraphStore) -> CycleDetectionResult:
    """Depth-first search over every component with an explicit work stack.

    A visited neighbor other than the arrival parent closes a cycle; the
    parent is excluded because each undirected edge is seen from both ends.
    """
    visited: Set[VertexId] = set()
    components = 0

    for root in store.vertices:
        if root in visited:
            continue
        components += 1
        visited.add(root)
        stack: List[_Frame] = [(root, None, iter(store.neighbors(root)))]

        while stack:
            node, parent, pending = stack[-1]
            for nb in pending:
                if nb not in visited:
                    visited.add(nb)
                    stack.append((nb, node, iter(store.neighbors(nb))))
                    break
                if nb != parent:
                    path = [frame[0] for frame in stack]
                    cycle = path[path.index(nb):]
                    logger.debug(f"Back edge {node} - {nb} closes cycle {cycle}")
                    return CycleDetectionResult(
                        has_cycle=True,
                        cycle=cycle,
                        closing_edge=(node, nb),
                        components=components,
                    )
            else:
                stack.pop()

    return CycleDetectionResult(has_cycle=False, components=components)


def has_cycle(store: GraphStore) -> bool:
    return detect_cycle(store).has_cycle
