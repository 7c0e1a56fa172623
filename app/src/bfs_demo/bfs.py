import logging
import sys
from collections import deque
from typing import Dict, Iterator, List, Optional, TextIO, Tuple

import pandas as pd

from .graph import Graph

logger = logging.getLogger(__name__)


def _explore(graph: Graph, start: int) -> Iterator[Tuple[int, int, Optional[int]]]:
    """Yield (vertex, level, parent) in visitation order."""
    visited = [False] * graph.vertex_count
    level = {start: 0}
    parent: Dict[int, Optional[int]] = {start: None}
    queue = deque([start])
    visited[start] = True

    while queue:
        node = queue.popleft()

        logger.debug("Visiting node: %d", node)
        yield node, level[node], parent[node]

        for neighbor in graph.adjacency[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                level[neighbor] = level[node] + 1
                parent[neighbor] = node
                queue.append(neighbor)

        # copying the queue is O(queue), only pay for it when tracing
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Queue state: %s", list(queue))


def _walk(graph: Graph, start: int, out: Optional[TextIO]) -> Iterator[int]:
    for node, _, _ in _explore(graph, start):
        if out is not None:
            out.write(f"{node} ")
        yield node
    if out is not None:
        out.write("\n")


def bfs(graph: Graph, start: int, out: Optional[TextIO] = None, echo: bool = True) -> Iterator[int]:
    """Breadth-first visitation order of the component containing ``start``.

    The start vertex is checked right away; the walk itself is lazy. Each
    vertex is written to ``out`` (stdout by default) followed by a space as it
    is produced, and a newline is written once the queue runs dry. Pass
    ``echo=False`` to skip printing. The returned iterator can be consumed
    only once.
    """
    start = graph.check_vertex(start)
    if not echo:
        out = None
    elif out is None:
        out = sys.stdout
    return _walk(graph, start, out)


def bfs_order(graph: Graph, start: int) -> List[int]:
    return list(bfs(graph, start, echo=False))


def bfs_levels(graph: Graph, start: int) -> Tuple[Dict[int, int], Dict[int, Optional[int]]]:
    """Hop count from ``start`` and discovering vertex for every reachable vertex."""
    start = graph.check_vertex(start)
    level: Dict[int, int] = {}
    parent: Dict[int, Optional[int]] = {}
    for node, depth, prev in _explore(graph, start):
        level[node] = depth
        parent[node] = prev
    return level, parent


def traversal_table(graph: Graph, start: int) -> pd.DataFrame:
    start = graph.check_vertex(start)
    rows = []
    for step, (node, depth, prev) in enumerate(_explore(graph, start)):
        rows.append({"step": step, "vertex": node, "level": depth, "parent": prev})
    df = pd.DataFrame(rows, columns=["step", "vertex", "level", "parent"])
    # start has no parent
    df["parent"] = df["parent"].astype("Int64")
    return df
