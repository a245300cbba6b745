"""An undirected graph backed by a growable adjacency matrix."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Iterable, Optional


def centered(text: str, width: int) -> str:
    """Centre ``text`` in a field of ``width`` characters.

    When the text is wider than the field it is returned unchanged. Odd
    padding puts the extra space on the left.
    """
    if width > len(text):
        left = (width + len(text)) // 2
        return text.rjust(left) + " " * (width - left)
    return text


@dataclass(eq=False)
class Vertex:
    """A vertex of the graph together with its traversal bookkeeping."""

    value: Any
    id: int
    edges: list["Edge"] = field(default_factory=list, repr=False)
    parent: Optional["Vertex"] = field(default=None, repr=False)
    start_time: int = -1
    end_time: int = -1
    depth: int = 0
    cost: float = 0


@dataclass
class Edge:
    """One direction of a connection between two vertices."""

    start: Any
    end: Any
    weight: float
    start_vertex: Optional[Vertex] = field(default=None, repr=False, compare=False)
    end_vertex: Optional[Vertex] = field(default=None, repr=False, compare=False)


class MatrixGraph:
    """Undirected weighted graph with an adjacency matrix that grows on demand."""

    def __init__(self, capacity: int = 0, elements: Iterable[Any] = ()) -> None:
        capacity = max(capacity, 0)
        self._max_size = capacity
        self._adj = self._zero_matrix(capacity)
        self.vertices: list[Vertex] = [
            Vertex(value, index)
            for index, value in enumerate(islice(elements, capacity))
        ]
        self._edges: list[tuple[float, int, int]] = []

    @staticmethod
    def _zero_matrix(size: int) -> list[list[int]]:
        return [[0] * size for _ in range(size)]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"vertex index {index} out of range")

    def __len__(self) -> int:
        return len(self.vertices)

    def max_size(self) -> int:
        """Number of vertices the matrix can hold before it has to grow."""
        return self._max_size

    def clear(self) -> None:
        """Remove every vertex and edge and shrink the capacity to zero."""
        self._max_size = 0
        self._adj = []
        self.vertices = []
        self._edges = []

    def add_edge(self, start: int, end: int, weight: float = 1) -> None:
        """Connect the vertices at ``start`` and ``end`` in both directions."""
        self._check_index(start)
        self._check_index(end)
        self._adj[start][end] = 1
        self._adj[end][start] = 1

        first = self.vertices[start]
        second = self.vertices[end]
        first.edges.append(Edge(first.value, second.value, weight, first, second))
        second.edges.append(Edge(second.value, first.value, weight, second, first))

        self._edges.append((weight, start, end))
        self._edges.append((weight, end, start))

    def add_vertex(self, value: Any) -> None:
        """Append a vertex, growing the matrix by half again when it is full."""
        new_index = len(self.vertices)
        if self._max_size > new_index:
            for index in range(new_index + 1):
                self._adj[index][new_index] = 0
                self._adj[new_index][index] = 0
        else:
            if self._max_size in (0, 1):
                self._max_size = 2
            else:
                self._max_size = int(self._max_size * 1.5)
            grown = self._zero_matrix(self._max_size)
            for row in range(new_index):
                grown[row][:new_index] = self._adj[row][:new_index]
            self._adj = grown
        self.vertices.append(Vertex(value, new_index))

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self.vertices[index].value

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self.vertices[index].value = value

    def edge_list(self) -> list[tuple[float, int, int]]:
        """Every directed edge as ``(weight, start index, end index)``, in insertion order."""
        return list(self._edges)

    def display(self) -> str:
        """Render the adjacency matrix of the vertices in use."""
        lines = ["Here is the adjacency matrix:"]
        header = " id " + "".join(
            centered(str(vertex.id), 3) + " " for vertex in self.vertices
        )
        lines.append(header)
        size = len(self.vertices)
        for row, vertex in enumerate(self.vertices):
            cells = "".join(f" {self._adj[row][col]}  " for col in range(size))
            lines.append(f"{vertex.id:>3} " + cells)
        return "\n".join(lines) + "\n"