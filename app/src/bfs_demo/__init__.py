"""Breadth-first traversal over an undirected adjacency-list graph."""

# the bfs() function stays in bfs_demo.bfs so the submodule is not shadowed
from .bfs import bfs_levels, bfs_order, traversal_table
from .graph import Graph, GraphError, InvalidArgument, OutOfRange, adjacency_matrix
