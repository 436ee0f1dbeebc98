"""Graph traversal (breadth- and depth-first) and Dijkstra's shortest paths."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


class Graph:
    """An undirected graph over the vertices ``0 .. num_vertices - 1``.

    Each new edge is put at the front of both adjacency lists, so neighbours
    are visited latest-added first.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.num_vertices = num_vertices
        self._adjacency: list[deque[int]] = [deque() for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].appendleft(dest)
        self._adjacency[dest].appendleft(src)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in visiting order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reached from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reached from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adjacency[start])]
        while stack:
            neighbour = next(stack[-1], None)
            if neighbour is None:
                stack.pop()
            elif neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(self._adjacency[neighbour]))
        return order


def dijkstra(
    num_nodes: int, edges: Iterable[tuple[int, int, int]], start: int
) -> dict[int, float]:
    """Return the shortest distance from ``start`` to every node ``1 .. num_nodes``.

    Edges are undirected ``(u, v, weight)`` triples. Unreachable nodes get
    ``math.inf``.
    """

    def check(node: int) -> None:
        if not 1 <= node <= num_nodes:
            raise ValueError(f"node {node} is out of range")

    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_nodes + 1)]
    for u, v, weight in edges:
        check(u)
        check(v)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    check(start)

    dist: list[float] = [math.inf] * (num_nodes + 1)
    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in adjacency[u]:
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return {node: dist[node] for node in range(1, num_nodes + 1)}


def format_distances(start: int, distances: dict[int, float]) -> str:
    """Render one ``Distance from s to n: d`` line per node."""
    lines = []
    for node, distance in sorted(distances.items()):
        shown = "Infinity" if distance == math.inf else str(distance)
        lines.append(f"Distance from {start} to {node}: {shown}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a weighted graph from standard input and print shortest distances."""
    parser = argparse.ArgumentParser(
        description=(
            "Read 'nodes edges', then 'u v weight' per edge, then the start node "
            "from standard input."
        )
    )
    parser.parse_args(argv)

    try:
        tokens = [int(token) for token in sys.stdin.read().split()]
        num_nodes, num_edges = tokens[0], tokens[1]
        edge_tokens = tokens[2 : 2 + 3 * num_edges]
        if len(edge_tokens) != 3 * num_edges:
            raise IndexError
        start = tokens[2 + 3 * num_edges]
    except (ValueError, IndexError):
        parser.error("incomplete or malformed graph description")

    edges = [tuple(edge_tokens[i : i + 3]) for i in range(0, len(edge_tokens), 3)]
    try:
        distances = dijkstra(num_nodes, edges, start)
    except ValueError as error:
        parser.error(str(error))
    print(format_distances(start, distances))
    return 0