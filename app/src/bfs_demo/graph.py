import logging
from typing import Iterable, List, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class GraphError(Exception):
    pass


class InvalidArgument(GraphError, ValueError):
    pass


class OutOfRange(GraphError, IndexError):
    pass


def _as_int(value, what: str = "vertex id") -> int:
    # bool is an int subclass but never a vertex id or count
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}")
    return int(value)


class Graph:
    """Undirected, unweighted graph stored as a list of adjacency lists.

    Vertices are the integers 0..vertex_count-1. Each neighbor list keeps
    insertion order; duplicate edges and self-loops are stored as given.
    """

    def __init__(self, vertex_count: int):
        vertex_count = _as_int(vertex_count, "vertex count")
        if vertex_count < 0:
            raise InvalidArgument(f"vertex count must be >= 0, got {vertex_count}")
        self.vertex_count = vertex_count
        self.adjacency: List[List[int]] = [[] for _ in range(vertex_count)]
        self._edges = 0
        logger.debug("Graph created with %d vertices", vertex_count)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Tuple[int, int]]) -> "Graph":
        g = cls(vertex_count)
        for u, v in edges:
            g.add_edge(u, v)
        return g

    def check_vertex(self, u) -> int:
        u = _as_int(u)
        if not 0 <= u < self.vertex_count:
            raise OutOfRange(f"vertex {u} not in [0, {self.vertex_count})")
        return u

    def add_edge(self, u: int, v: int) -> None:
        # both ends validated before either list is touched
        u = self.check_vertex(u)
        v = self.check_vertex(v)
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)
        self._edges += 1
        logger.debug("Edge added: %d - %d", u, v)

    def neighbors(self, u: int) -> List[int]:
        """Copy of u's neighbor list; edit the graph through add_edge only."""
        return list(self.adjacency[self.check_vertex(u)])

    def edge_count(self) -> int:
        return self._edges

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count}, edges={self._edges})"


def adjacency_matrix(graph: Graph) -> pd.DataFrame:
    """Edge multiplicities as a square DataFrame indexed by vertex id.

    A self-loop shows up as 2 on the diagonal, so the matrix always sums to
    twice the edge count.
    """
    n = graph.vertex_count
    mat = np.zeros((n, n), dtype=int)
    for u in range(n):
        for v in graph.adjacency[u]:
            mat[u, v] += 1
    nodes = list(range(n))
    return pd.DataFrame(mat, index=nodes, columns=nodes)
