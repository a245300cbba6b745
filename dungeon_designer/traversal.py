"""Traversals and spanning trees over a :class:`MatrixGraph`."""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from typing import Any

from .graph import Edge, MatrixGraph, Vertex


class DisjointSets:
    """Union-find over the integers ``0..n`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.parent = list(range(n + 1))
        self.rank = [0] * (n + 1)

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        root = u
        while root != self.parent[root]:
            root = self.parent[root]
        while u != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def merge(self, x: int, y: int) -> None:
        """Join the sets holding ``x`` and ``y``."""
        x = self.find(x)
        y = self.find(y)
        if self.rank[x] > self.rank[y]:
            self.parent[y] = x
        else:
            self.parent[x] = y
        if self.rank[x] == self.rank[y]:
            self.rank[y] += 1


def _find_vertex(graph: MatrixGraph, value: Any) -> Vertex:
    """Return the last vertex holding ``value``."""
    matches = [vertex for vertex in graph.vertices if vertex.value == value]
    if not matches:
        raise ValueError(f"no vertex holds {value!r}")
    return matches[-1]


def _by_weight(edges: list[Edge]) -> list[Edge]:
    return sorted(edges, key=lambda edge: edge.weight)


def dfs(graph: MatrixGraph, start: Any) -> list[Edge]:
    """Depth-first discovery edges from the vertex holding ``start``.

    Lighter edges are followed first. Each vertex's ``start_time`` and
    ``end_time`` are updated along the way.
    """
    for vertex in graph.vertices:
        vertex.start_time = -1
        vertex.end_time = -1

    root = _find_vertex(graph, start)
    visited: set[int] = set()
    discovery: list[Edge] = []

    def visit(vertex: Vertex, counter: int) -> None:
        visited.add(vertex.id)
        vertex.start_time = counter
        for edge in _by_weight(vertex.edges):
            following = edge.end_vertex
            if following.id not in visited:
                discovery.append(edge)
                counter += 1
                visit(following, counter)
                counter += 1
                following.end_time = counter

    visit(root, 0)
    return discovery


def bfs(graph: MatrixGraph, start: Any) -> list[Edge]:
    """Breadth-first discovery edges from the vertex holding ``start``.

    Lighter edges are examined first. Each reached vertex gets its ``depth``
    and ``parent`` set.
    """
    root = _find_vertex(graph, start)
    root.depth = 0
    visited = {root.id}
    queue = deque([root])
    discovery: list[Edge] = []

    while queue:
        current = queue.popleft()
        for edge in _by_weight(current.edges):
            following = edge.end_vertex
            if following.id not in visited:
                visited.add(following.id)
                queue.append(following)
                following.parent = current
                following.depth = current.depth + 1
                discovery.append(edge)
    return discovery


def a_star(graph: MatrixGraph, start: Any, target: Any) -> list[Vertex]:
    """Cheapest path from ``start`` to ``target``.

    The result runs from the target back to the start; each step is a copy of
    the graph's vertex carrying its accumulated ``cost`` and ``parent``.
    Raises :class:`ValueError` when the target cannot be reached.
    """
    current = replace(_find_vertex(graph, start), cost=0, parent=None)
    if start == target:
        return [current]

    open_list: list[Vertex] = []
    closed_values: list[Any] = []
    while True:
        closed_values.append(current.value)
        for edge in _by_weight(current.edges):
            open_list.append(
                replace(
                    edge.end_vertex,
                    cost=current.cost + edge.weight,
                    parent=current,
                )
            )
        open_list = [v for v in open_list if v.value not in closed_values]
        if not open_list:
            raise ValueError(f"{target!r} cannot be reached from {start!r}")
        current = min(open_list, key=lambda vertex: vertex.cost)
        if current.value == target:
            break

    path = [current]
    while path[-1].value != start:
        path.append(path[-1].parent)
    return path


def kruskal_mst(graph: MatrixGraph) -> list[Edge]:
    """Edges of a minimum spanning forest, lightest first."""
    sets = DisjointSets(len(graph))
    tree: list[Edge] = []
    for weight, u, v in sorted(graph.edge_list()):
        set_u = sets.find(u)
        set_v = sets.find(v)
        if set_u != set_v:
            first = graph.vertices[u]
            second = graph.vertices[v]
            tree.append(Edge(first.value, second.value, weight, first, second))
            sets.merge(set_u, set_v)
    return tree