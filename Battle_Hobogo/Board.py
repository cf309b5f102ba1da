"""Immutable board snapshots, coordinates, and chess-style coordinate names."""

from typing import NamedTuple


class Coord(NamedTuple):
    x: int
    y: int


NEIGHBORS_8 = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class Board:
    """Square grid of cells: None (empty) or the owning player's index.

    A Board is a value: it is never modified after construction, and
    `with_stone` returns a fresh snapshot.
    """

    __slots__ = ("size", "cells")

    def __init__(self, size=9, cells=None):
        if size < 1:
            raise ValueError("board size must be at least 1")
        self.size = size
        if cells is None:
            cells = tuple((None,) * size for _ in range(size))
        self.cells = cells

    @classmethod
    def from_rows(cls, rows):
        """Build a snapshot from nested lists indexed as rows[y][x]."""
        size = len(rows)
        if size < 1:
            raise ValueError("board must have at least one row")
        for row in rows:
            if len(row) != size:
                raise ValueError("board must be square")
            for cell in row:
                if cell is not None and (not isinstance(cell, int) or cell < 0):
                    raise ValueError(f"invalid cell value: {cell!r}")
        return cls(size, tuple(tuple(row) for row in rows))

    def to_rows(self):
        return [list(row) for row in self.cells]

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def at(self, x, y):
        """Cell value, or None when (x, y) is off the board."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def coords(self):
        for y in range(self.size):
            for x in range(self.size):
                yield Coord(x, y)

    def stone_count(self):
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def is_empty(self):
        return self.stone_count() == 0

    def with_stone(self, x, y, player):
        """Return a copy with `player` placed at (x, y); raise if out of bounds or occupied."""
        if not self.in_bounds(x, y):
            raise ValueError("move out of bounds")
        if self.cells[y][x] is not None:
            raise ValueError("cell already occupied")
        row = self.cells[y][:x] + (player,) + self.cells[y][x + 1:]
        return Board(self.size, self.cells[:y] + (row,) + self.cells[y + 1:])

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return hash((self.size, self.cells))

    def __repr__(self):
        return f"Board(size={self.size}, stones={self.stone_count()})"


def create(size):
    return Board(size)


def in_bounds(board, coord):
    return board.in_bounds(coord[0], coord[1])


def cell_at(board, coord):
    """Cell at coord; out-of-bounds lookups read as empty rather than failing."""
    return board.at(coord[0], coord[1])


def column_name(x):
    return chr(ord("A") + x)


def row_name(y):
    return str(y + 1)


def coord_name(coord):
    """Chess name: column letter then 1-based row, e.g. (2, 3) -> "C4"."""
    return f"{column_name(coord[0])}{row_name(coord[1])}"


def parse_coord_name(name):
    """Inverse of coord_name; raise ValueError on malformed names."""
    name = name.strip().upper()
    if len(name) < 2 or not ("A" <= name[0] <= "Z") or not name[1:].isdigit():
        raise ValueError(f"Invalid coordinate name: {name!r}")
    row = int(name[1:])
    if row < 1:
        raise ValueError(f"Invalid coordinate name: {name!r}")
    return Coord(ord(name[0]) - ord("A"), row - 1)
