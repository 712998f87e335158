"""Minimum spanning trees by Borůvka's algorithm."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    u: int
    v: int
    weight: int

    def __str__(self) -> str:
        return f"Edge {self.u}-{self.v} with weight {self.weight} included in MST"


@dataclass(frozen=True)
class MSTResult:
    """Edges of a minimum spanning tree in the order they were chosen."""

    edges: tuple[Edge, ...]
    weight: int


class _DisjointSets:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> None:
        xroot, yroot = self.find(x), self.find(y)
        if self._rank[xroot] < self._rank[yroot]:
            self._parent[xroot] = yroot
        elif self._rank[xroot] > self._rank[yroot]:
            self._parent[yroot] = xroot
        else:
            self._parent[yroot] = xroot
            self._rank[xroot] += 1


@dataclass
class Graph:
    """An undirected weighted graph on vertices ``0 .. vertices-1``."""

    vertices: int
    edges: list[Edge] = field(default_factory=list)

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.edges = []

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add the undirected edge ``u``-``v`` of weight ``w``."""
        for vertex in (u, v):
            if not 0 <= vertex < self.vertices:
                raise ValueError(f"vertex {vertex} is out of range")
        self.edges.append(Edge(u, v, w))

    def boruvka_mst(self) -> MSTResult:
        """Build a minimum spanning tree; raise ValueError if disconnected."""
        sets = _DisjointSets(self.vertices)
        chosen: list[Edge] = []
        trees = self.vertices

        while trees > 1:
            cheapest: dict[int, Edge] = {}
            for edge in self.edges:
                set1, set2 = sets.find(edge.u), sets.find(edge.v)
                if set1 == set2:
                    continue
                for component in (set1, set2):
                    best = cheapest.get(component)
                    if best is None or best.weight > edge.weight:
                        cheapest[component] = edge

            if not cheapest:
                raise ValueError("graph is not connected")

            for node in range(self.vertices):
                edge = cheapest.get(node)
                if edge is None:
                    continue
                set1, set2 = sets.find(edge.u), sets.find(edge.v)
                if set1 != set2:
                    sets.union(set1, set2)
                    chosen.append(edge)
                    trees -= 1

        return MSTResult(tuple(chosen), sum(edge.weight for edge in chosen))