"""Shortest paths and minimum spanning trees on adjacency matrices."""

from __future__ import annotations

from typing import Sequence

INFINITY = 9999
"""Distance given by :func:`dijkstra` to a node it cannot reach."""

NO_EDGE = 32767
"""Cost marking a missing edge for :func:`prim_mst`."""

INF = 99999
"""Weight marking a missing edge for :func:`floyd_warshall`."""

Matrix = Sequence[Sequence[int]]


def dijkstra(graph: Matrix, start: int) -> tuple[list[int], list[int]]:
    """Return ``(distances, predecessors)`` of every node from ``start``.

    A zero weight in ``graph`` means there is no edge. Nodes that cannot be
    reached keep the distance :data:`INFINITY` and have ``start`` as their
    predecessor.
    """
    n = len(graph)
    if not 0 <= start < n:
        raise IndexError(f"start node {start} outside the graph")
    cost = [[weight if weight != 0 else INFINITY for weight in row] for row in graph]
    distance = list(cost[start])
    predecessors = [start] * n
    visited = [False] * n
    distance[start] = 0
    visited[start] = True

    for _ in range(n - 2):
        candidates = [
            node for node, seen in enumerate(visited) if not seen and distance[node] < INFINITY
        ]
        if not candidates:
            break
        nearest = min(candidates, key=distance.__getitem__)
        visited[nearest] = True
        reach = distance[nearest]
        for node, weight in enumerate(cost[nearest]):
            if not visited[node] and reach + weight < distance[node]:
                distance[node] = reach + weight
                predecessors[node] = nearest
    return distance, predecessors


def path_to(predecessors: Sequence[int], start: int, node: int) -> list[int]:
    """Return the path from ``node`` back to ``start``, both included."""
    path = [node]
    current = node
    while current != start:
        current = predecessors[current]
        path.append(current)
        if len(path) > len(predecessors) + 1:
            raise ValueError(f"no path from {node} back to {start}")
    return path


def prim_mst(cost: Matrix) -> list[tuple[int, int]]:
    """Return the edges of a minimum spanning tree in the order Prim's method adds them.

    ``cost`` is a symmetric matrix with :data:`NO_EDGE` where two vertices are
    not joined. The tree starts from the cheapest edge of the whole graph.
    Raises ValueError when the graph is not connected.
    """
    n = len(cost)
    if n < 2:
        return []
    weight, u, v = min(
        ((cost[i][j], i, j) for i in range(n) for j in range(i, n)),
        key=lambda entry: entry[0],
    )
    if weight >= NO_EDGE:
        raise ValueError("graph has no edges")

    near: list[int | None] = [
        None if j in (u, v) else (u if cost[j][u] < cost[j][v] else v) for j in range(n)
    ]
    edges = [(u, v)]
    for _ in range(n - 2):
        candidates = [
            j for j, target in enumerate(near) if target is not None and cost[j][target] < NO_EDGE
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        k = min(candidates, key=lambda j: cost[j][near[j]])
        edges.append((k, near[k]))
        near[k] = None
        for j, target in enumerate(near):
            if target is not None and cost[j][k] < cost[j][target]:
                near[j] = k
    return edges


def floyd_warshall(graph: Matrix) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of vertices.

    Missing edges are given as :data:`INF`; pairs with no path keep that value.
    """
    dist = [list(row) for row in graph]
    vertices = range(len(dist))
    for k in vertices:
        for i in vertices:
            for j in vertices:
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist