"""Shortest walks over a grid of passable cells."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Cell = tuple[int, int]

_STEPS = ((-1, 0), (0, -1), (0, 1), (1, 0))


class RoadGrid:
    """Breadth-first search over cells whose value is not zero."""

    def __init__(self, passable: Sequence[Sequence[int]]) -> None:
        self.cells = [list(row) for row in passable]
        self.height = len(self.cells)
        self.width = len(self.cells[0]) if self.cells else 0

    def is_valid(self, row: int, col: int) -> bool:
        """Whether ``(row, col)`` lies on the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def find_path(self, start: Cell, end: Cell) -> list[Cell]:
        """Shortest path from ``start`` to ``end`` inclusive, or ``[]`` if unreachable.

        The start cell itself need not be passable; every later cell must be.
        """
        start, end = tuple(start), tuple(end)
        if not self.is_valid(*start):
            raise IndexError(f"start {start} lies outside the grid")
        previous: dict[Cell, Cell] = {}
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                return self._walk_back(start, end, previous)
            row, col = current
            for d_row, d_col in _STEPS:
                nxt = (row + d_row, col + d_col)
                if nxt in seen or not self.is_valid(*nxt) or self.cells[nxt[0]][nxt[1]] == 0:
                    continue
                seen.add(nxt)
                previous[nxt] = current
                queue.append(nxt)
        return []

    @staticmethod
    def _walk_back(start: Cell, end: Cell, previous: dict[Cell, Cell]) -> list[Cell]:
        path = [end]
        while path[-1] != start:
            path.append(previous[path[-1]])
        path.reverse()
        return path