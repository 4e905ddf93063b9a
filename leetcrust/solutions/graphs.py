"""Solutions to graph and grid traversal problems."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Sequence

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_UNREACHED = 2**31 - 1


def shortest_alternating_paths(
    n: int, red_edges: Sequence[Sequence[int]], blue_edges: Sequence[Sequence[int]]
) -> list[int]:
    """Length of the shortest path from node 0 to each node alternating edge colours.

    Nodes that cannot be reached get -1.
    """
    red: defaultdict[int, list[int]] = defaultdict(list)
    blue: defaultdict[int, list[int]] = defaultdict(list)
    for source, target in red_edges:
        red[source].append(target)
    for source, target in blue_edges:
        blue[source].append(target)

    # colour 1 means reached through a red edge, colour 2 through a blue one
    shortest = [[-1, -1] for _ in range(n)]
    shortest[0] = [0, 0]
    reached = [(0, 1), (0, 2)]

    while reached:
        node, color = reached.pop()
        edges = blue if color == 1 else red
        distance = shortest[node][color % 2] + 1
        for target in edges.get(node, ()):
            known = shortest[target][color - 1]
            if known == -1 or known > distance:
                shortest[target][color - 1] = distance
                reached.append((target, color % 2 + 1))

    result = []
    for by_red, by_blue in shortest:
        if by_red == -1:
            result.append(by_blue)
        elif by_blue == -1:
            result.append(by_red)
        else:
            result.append(min(by_red, by_blue))
    return result


def critical_connections(n: int, connections: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the bridges of the network reachable from node 0."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in connections:
        adjacency[a].append(b)
        adjacency[b].append(a)

    visited = [False] * n
    discovery = [0] * n
    low = [0] * n
    bridges: list[list[int]] = []
    counter = 0

    def visit(node: int) -> None:
        nonlocal counter
        visited[node] = True
        discovery[node] = low[node] = counter
        counter += 1

    visit(0)
    stack = [(0, -1, iter(adjacency[0]))]
    while stack:
        node, parent, children = stack[-1]
        for child in children:
            if child == parent:
                continue
            if visited[child]:
                low[node] = min(low[node], low[child])
            else:
                visit(child)
                stack.append((child, node, iter(adjacency[child])))
                break
        else:
            stack.pop()
            if stack:
                above = stack[-1][0]
                low[above] = min(low[above], low[node])
                if low[node] > discovery[above]:
                    bridges.append([above, node])
    return bridges


def num_of_minutes(
    n: int, head_id: int, manager: Sequence[int], inform_time: Sequence[int]
) -> int:
    """Minutes needed for news from the head to reach every employee."""
    subordinates: list[list[int]] = [[] for _ in range(n)]
    for employee, boss in enumerate(manager):
        if boss != -1:
            subordinates[boss].append(employee)

    longest = 0
    informers = [(head_id, 0)]
    while informers:
        informer, elapsed = informers.pop()
        total = elapsed + inform_time[informer]
        longest = max(longest, total)
        informers.extend((sub, total) for sub in subordinates[informer])
    return longest


def min_reorder(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Number of roads to reverse so that every city can reach city 0."""
    graph: list[list[tuple[int, bool]]] = [[] for _ in range(n)]
    for source, target in connections:
        graph[source].append((target, True))
        graph[target].append((source, False))

    flips = 0
    visited = [False] * n
    visited[0] = True
    stack = [0]
    while stack:
        city = stack.pop()
        for neighbour, to_flip in graph[city]:
            if not visited[neighbour]:
                if to_flip:
                    flips += 1
                visited[neighbour] = True
                stack.append(neighbour)
    return flips


def min_cost(grid: Sequence[Sequence[int]]) -> int:
    """Minimum number of sign changes to get a valid path from corner to corner."""
    rows, cols = len(grid), len(grid[0])
    costs = [[_UNREACHED] * cols for _ in range(rows)]
    costs[0][0] = 0
    queue = deque([(0, 0, 0)])

    while queue:
        cost, i, j = queue.popleft()
        for sign, (di, dj) in enumerate(_DIRECTIONS, start=1):
            i2, j2 = i + di, j + dj
            if not (0 <= i2 < rows and 0 <= j2 < cols):
                continue
            new_cost = cost if grid[i][j] == sign else cost + 1
            if new_cost >= costs[i2][j2]:
                continue
            costs[i2][j2] = new_cost
            if new_cost > cost:
                queue.append((new_cost, i2, j2))
            else:
                queue.appendleft((new_cost, i2, j2))
    return costs[rows - 1][cols - 1]


def highest_peak(is_water: Sequence[Sequence[int]]) -> list[list[int]]:
    """Assign heights so that water is 0 and neighbours differ by at most one."""
    heights = [[0 if cell else -1 for cell in row] for row in is_water]
    rows, cols = len(heights), len(heights[0])
    queue = deque(
        (i, j) for i, row in enumerate(heights) for j, cell in enumerate(row) if cell == 0
    )

    while queue:
        i, j = queue.popleft()
        for di, dj in _DIRECTIONS:
            i2, j2 = i + di, j + dj
            if 0 <= i2 < rows and 0 <= j2 < cols and heights[i2][j2] == -1:
                heights[i2][j2] = heights[i][j] + 1
                queue.append((i2, j2))
    return heights


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Steps from the entrance to the nearest border cell, or -1 if none is reachable."""
    rows, cols = len(maze), len(maze[0])
    visited = [[False] * cols for _ in range(rows)]
    queue = deque([(entrance[0], entrance[1], 0)])

    while queue:
        from_i, from_j, distance = queue.popleft()
        if visited[from_i][from_j]:
            continue
        visited[from_i][from_j] = True
        for di, dj in _DIRECTIONS:
            i, j = from_i + di, from_j + dj
            if not (0 <= i < rows and 0 <= j < cols):
                continue
            if maze[i][j] == "+" or visited[i][j]:
                continue
            if i in (0, rows - 1) or j in (0, cols - 1):
                return distance + 1
            queue.append((i, j, distance + 1))
    return -1