"""Graph puzzles: disjoint sets, tree distances, reporting chains and delays."""

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Iterable, Iterator, Sequence


class UnionFind:
    """Disjoint sets over ``0..size-1`` with union by rank and path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.parent = list(range(size))
        self.rank = [0] * size
        self.max_rank = 0
        self.components = size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1
            self.max_rank = max(self.max_rank, self.rank[root_x])
        self.components -= 1
        return True


class DirectedGraph:
    """A directed graph with integer vertices kept in insertion order."""

    def __init__(self) -> None:
        self._adjacent: dict[int, list[int]] = {}

    def add_vertex(self, key: int) -> None:
        """Add a vertex; raise ValueError if it already exists."""
        if key in self._adjacent:
            raise ValueError(f"vertex {key} already exists in graph")
        self._adjacent[key] = []

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge; raise ValueError for unknown vertices or a repeated edge."""
        if source not in self._adjacent or target not in self._adjacent:
            raise ValueError(f"invalid edge ({source} --> {target}) in graph")
        edges = self._adjacent[source]
        if target in edges:
            raise ValueError(f"edge ({source} --> {target}) already exists in graph")
        edges.append(target)

    def neighbours(self, key: int) -> list[int]:
        """Return the targets of edges leaving ``key`` in the order added."""
        return list(self._adjacent[key])

    def __contains__(self, key: object) -> bool:
        return key in self._adjacent

    def __iter__(self) -> Iterator[int]:
        return iter(self._adjacent)

    def __len__(self) -> int:
        return len(self._adjacent)


def cost_from_root(edges: Iterable[Sequence[int]], n: int) -> list[int]:
    """For each node of a tree, the sum of its distances to every other node.

    Nodes not connected to node 0 are reported as 0.
    """
    if n <= 0:
        return []
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)

    parent = [-1] * n
    depth = [0] * n
    order = [0]
    seen = {0}
    for node in order:
        for nb in adjacency[node]:
            if nb not in seen:
                seen.add(nb)
                parent[nb] = node
                depth[nb] = depth[node] + 1
                order.append(nb)

    size = [1] * n
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]

    answer = [0] * n
    answer[0] = sum(depth[node] for node in order)
    for node in order[1:]:
        answer[node] = answer[parent[node]] + n - 2 * size[node]
    return answer


def earliest_time(logs: Iterable[Sequence[int]], n: int) -> int | None:
    """Timestamp at which all ``n`` people first become acquainted.

    ``logs`` holds ``(timestamp, x, y)`` entries in time order; returns None
    if everyone is never connected.
    """
    sets = UnionFind(n)
    for timestamp, x, y in logs:
        sets.union(x, y)
        if sets.components == 1:
            return timestamp
    return None


def inform_time(head: int, manager: Sequence[int], durations: Sequence[int]) -> int:
    """Minutes needed for news from ``head`` to reach every employee.

    ``manager[i]`` is the manager of employee i (-1 for none) and
    ``durations[i]`` the time i needs to tell their direct reports.
    """
    reports: dict[int, list[int]] = defaultdict(list)
    for employee, boss in enumerate(manager):
        if boss != -1:
            reports[boss].append(employee)

    order = [head]
    for employee in order:
        order.extend(reports.get(employee, ()))

    total: dict[int, int] = {}
    for employee in reversed(order):
        children = reports.get(employee)
        if children:
            total[employee] = durations[employee] + max(total[c] for c in children)
        else:
            total[employee] = 0
    return total[head]


def min_time(n: int, friendships: Iterable[Sequence[int]]) -> int:
    """Highest union-by-rank rank reached joining people ``1..n``, less one.

    Never returns less than zero.
    """
    sets = UnionFind(n + 1)
    for x, y in friendships:
        sets.union(x, y)
    return max(1, sets.max_rank) - 1


def network_delay(times: Iterable[Sequence[int]], n: int, k: int) -> int | None:
    """Time for a signal from node ``k`` to reach all nodes ``1..n``.

    ``times`` holds ``(source, target, delay)`` edges; returns None when some
    node cannot be reached.
    """
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for source, target, delay in times:
        adjacency[source].append((target, delay))

    distance: dict[int, int] = {k: 0}
    heap = [(0, k)]
    while heap:
        elapsed, node = heapq.heappop(heap)
        if distance.get(node, elapsed) < elapsed:
            continue
        for target, delay in adjacency.get(node, ()):
            arrival = elapsed + delay
            if target not in distance or arrival < distance[target]:
                distance[target] = arrival
                heapq.heappush(heap, (arrival, target))

    if any(node not in distance for node in range(1, n + 1)):
        return None
    return max([0, *distance.values()])