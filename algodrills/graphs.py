"""Graph and grid traversal drills: adjacency lists, BFS/DFS, flood fill, islands."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, MutableSequence, Sequence


class Graph:
    """Directed graph over the nodes ``0..size-1``, stored as adjacency lists."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"graph size must not be negative, got {size}")
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(
                f"node {node} is outside a graph of size {len(self._adjacency)}"
            )

    def add_edge(self, source: int, destination: int) -> None:
        """Add a directed edge from ``source`` to ``destination``."""
        self._check(source)
        self._check(destination)
        self._adjacency[source].append(destination)

    def neighbours(self, node: int) -> list[int]:
        """The nodes that ``node`` has edges to, in the order they were added."""
        self._check(node)
        return list(self._adjacency[node])


def bfs_of_graph(adjacency: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Nodes in breadth-first order from ``start``."""
    if not 0 <= start < len(adjacency):
        raise IndexError(f"start node {start} is outside a graph of size {len(adjacency)}")
    visited = [False] * len(adjacency)
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs_of_graph(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Nodes in depth-first order from node 0; empty for an empty graph."""
    if not adjacency:
        return []
    visited = {0}
    order = [0]
    stack: list[Iterator[int]] = [iter(adjacency[0])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def flood_fill(
    image: MutableSequence[MutableSequence[int]], sr: int, sc: int, new_color: int
) -> MutableSequence[MutableSequence[int]]:
    """Repaint the 4-connected region of ``image[sr][sc]``'s colour in place and return it."""
    rows = len(image)
    cols = len(image[0])
    original = image[sr][sc]
    seen = {(sr, sc)}
    queue = deque([(sr, sc)])
    while queue:
        row, col = queue.popleft()
        image[row][col] = new_color
        for nrow, ncol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if (
                0 <= nrow < rows
                and 0 <= ncol < cols
                and (nrow, ncol) not in seen
                and image[nrow][ncol] == original
            ):
                seen.add((nrow, ncol))
                queue.append((nrow, ncol))
    return image


def _around(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """The cell itself and its eight neighbours that lie inside the grid."""
    for drow in (-1, 0, 1):
        for dcol in (-1, 0, 1):
            nrow, ncol = row + drow, col + dcol
            if 0 <= nrow < rows and 0 <= ncol < cols:
                yield nrow, ncol


def _land(grid: Sequence[Sequence[str]]) -> Iterator[tuple[int, int]]:
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell == "1":
                yield row, col


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count islands of '1' cells joined in eight directions, using BFS."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    count = 0
    for cell in _land(grid):
        if cell in visited:
            continue
        count += 1
        visited.add(cell)
        queue = deque([cell])
        while queue:
            row, col = queue.popleft()
            for nrow, ncol in _around(row, col, rows, cols):
                if grid[nrow][ncol] == "1" and (nrow, ncol) not in visited:
                    visited.add((nrow, ncol))
                    queue.append((nrow, ncol))
    return count


def num_islands_dfs(grid: Sequence[Sequence[str]]) -> int:
    """Count islands of '1' cells joined in eight directions, using DFS."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    count = 0
    for cell in _land(grid):
        if cell in visited:
            continue
        count += 1
        stack = [cell]
        while stack:
            row, col = stack.pop()
            if (row, col) in visited:
                continue
            visited.add((row, col))
            stack.extend(
                (nrow, ncol)
                for nrow, ncol in _around(row, col, rows, cols)
                if grid[nrow][ncol] == "1" and (nrow, ncol) not in visited
            )
    return count


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until every fresh orange (1) is rotten (2), or -1 if some never rot.

    The grid passed in is not modified.
    """
    cells = [list(line) for line in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    queue: deque[tuple[int, int]] = deque()
    fresh = 0
    for row, line in enumerate(cells):
        for col, value in enumerate(line):
            if value == 2:
                queue.append((row, col))
            elif value == 1:
                fresh += 1
    if fresh == 0:
        return 0

    minutes = 0
    while queue:
        rotted = False
        for _ in range(len(queue)):
            row, col = queue.popleft()
            for nrow, ncol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
                if 0 <= nrow < rows and 0 <= ncol < cols and cells[nrow][ncol] == 1:
                    cells[nrow][ncol] = 2
                    queue.append((nrow, ncol))
                    fresh -= 1
                    rotted = True
        if rotted:
            minutes += 1
    return minutes if fresh == 0 else -1