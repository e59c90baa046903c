"""Character map of roads and cities with names written next to them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice

from .text import to_int

CITY = "*"
ROAD = "#"
EMPTY = "."

_NOT_LETTERS = {CITY, ROAD, EMPTY, "\0"}

# Order in which the cells around a city are searched for its name.
_NAME_OFFSETS = (
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
    (-1, 0),
    (0, -1),
    (0, 1),
    (1, 0),
)


class CityMap:
    """A rectangular map where ``*`` is a city, ``#`` a road and letters name cities."""

    def __init__(self, rows: Sequence[str]) -> None:
        self.width = len(rows[0]) if rows else 0
        self.height = len(rows)
        self._cells = [row[: self.width].ljust(self.width, EMPTY) for row in rows]
        self.cities: dict[str, tuple[int, int]] = {}
        for row, line in enumerate(self._cells):
            for col, char in enumerate(line):
                if char == CITY:
                    position = self.name_position(row, col)
                    name = self.read_name(*position) if position else ""
                    self.cities[name] = (row, col)
        self._names = {position: name for name, position in self.cities.items()}

    @classmethod
    def from_lines(cls, header: str, lines: Iterable[str]) -> CityMap:
        """Build a map from a ``"<width> <height>"`` header and the rows that follow."""
        head, sep, tail = header.partition(" ")
        width, height = (to_int(head), to_int(tail)) if sep else (0, to_int(header))
        rows = [line.rstrip("\n") for line in islice(lines, height)]
        rows.extend("" for _ in range(height - len(rows)))
        return cls([row[:width].ljust(width, EMPTY) for row in rows])

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_city(self, row: int, col: int) -> bool:
        """Whether the cell holds a city."""
        return self._cells[row][col] == CITY

    def is_letter(self, row: int, col: int) -> bool:
        """Whether the cell holds part of a city name."""
        return self._cells[row][col] not in _NOT_LETTERS

    def name_position(self, row: int, col: int) -> tuple[int, int] | None:
        """Find a letter of the name belonging to the city at ``(row, col)``."""
        for d_row, d_col in _NAME_OFFSETS:
            r, c = row + d_row, col + d_col
            if self._inside(r, c) and self.is_letter(r, c):
                return r, c
        return None

    def read_name(self, row: int, col: int) -> str:
        """Read the whole word that contains the letter at ``(row, col)``."""
        if not self._inside(row, col):
            return ""
        while col > 0 and self.is_letter(row, col - 1):
            col -= 1
        letters = []
        while col < self.width and self.is_letter(row, col):
            letters.append(self._cells[row][col])
            col += 1
        return "".join(letters)

    def coordinates(self, name: str) -> tuple[int, int]:
        """Position of the named city; ``(0, 0)`` for a name not on the map."""
        return self.cities.get(name, (0, 0))

    def name_at(self, row: int, col: int) -> str:
        """Name of the city at ``(row, col)``; ``KeyError`` if there is none."""
        try:
            return self._names[(row, col)]
        except KeyError:
            raise KeyError(f"no city at ({row}, {col})") from None

    def passable(self) -> list[list[int]]:
        """Grid of 2 for cities, 1 for roads and 0 for everything else."""
        codes = {CITY: 2, ROAD: 1}
        return [[codes.get(char, 0) for char in line] for line in self._cells]