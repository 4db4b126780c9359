"""Loading and validating game maps in the ``.ber`` format."""

from __future__ import annotations

import os
from dataclasses import dataclass
from os import PathLike
from typing import Sequence

from solong.textutils import find_within, split_words

_TILES = frozenset("10CEP\n")
_EXTENSION = ".ber"


class MapError(ValueError):
    """Raised when the arguments or the map file are not valid."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: rows of tiles and the number of collectibles."""

    rows: tuple[str, ...]
    coins: int

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def find(self, tile: str) -> tuple[int, int]:
        """Return (row, column) of the first cell holding ``tile``."""
        for row, line in enumerate(self.rows):
            col = line.find(tile)
            if col >= 0:
                return row, col
        raise LookupError(f"no {tile!r} on the map")

    def tile(self, row: int, col: int) -> str:
        """Return the tile at (row, column)."""
        if not (0 <= row < self.height and 0 <= col < len(self.rows[row])):
            raise IndexError(f"cell ({row}, {col}) outside the map")
        return self.rows[row][col]


def check_arguments(argv: Sequence[str]) -> str:
    """Check the command-line arguments (without the program name); return the map path."""
    if len(argv) != 1:
        raise MapError("invalid number of arguments")
    path = argv[0]
    dot = path.find(".")
    suffix_length = 0 if dot < 0 else len(path) - dot
    if (suffix_length != 4 and find_within(path, _EXTENSION, 5) is None) or os.path.isdir(path):
        raise MapError("map type is invalid")
    return path


def validate_characters(text: str) -> int:
    """Check the characters of the raw map text and return the number of coins."""
    if not text:
        raise MapError("map is empty")
    missing = any(tile not in text for tile in "PEC")
    first_player = text.find("P")
    first_exit = text.find("E")
    coins = 0
    for index, ch in enumerate(text):
        if ch not in _TILES:
            raise MapError("Invalid character")
        if missing:
            raise MapError("Either P, E or C is missing")
        if (ch == "P" and index != first_player) or (ch == "E" and index != first_exit):
            raise MapError("Duplicate P or E")
        if ch == "C":
            coins += 1
        if ch == "\n" and text[index + 1:index + 2] == "\n":
            raise MapError("Extra lines")
    if text.endswith("\n"):
        raise MapError("Extra line in the end")
    return coins


def validate_walls(rows: Sequence[str]) -> None:
    """Check that the map is closed by walls on every side."""
    last = len(rows) - 1
    for y, row in enumerate(rows):
        if y in (0, last):
            if any(ch != "1" for ch in row):
                raise MapError("Either upper or lower edge is incorrect")
        elif row and (row[0] != "1" or row[-1] != "1"):
            raise MapError("Either left or right edge is incorrect")


def validate_shape(rows: Sequence[str], width: int) -> None:
    """Check that every row is ``width`` tiles long."""
    if any(len(row) != width for row in rows):
        raise MapError("map is not rectangular")


def validate_path(rows: Sequence[str], coins: int) -> None:
    """Check that the player can reach every coin and the exit."""
    starts = [(y, x) for y, row in enumerate(rows) for x, ch in enumerate(row) if ch == "P"]
    if not starts:
        raise MapError("Either P, E or C is missing")
    start = starts[-1]
    seen = {start}
    stack = [start]
    while stack:
        y, x = stack.pop()
        for ny, nx in ((y - 1, x), (y, x + 1), (y + 1, x), (y, x - 1)):
            if (ny, nx) in seen or not (0 <= ny < len(rows) and 0 <= nx < len(rows[ny])):
                continue
            if rows[ny][nx] == "1":
                continue
            seen.add((ny, nx))
            stack.append((ny, nx))
    reached_coins = sum(rows[y][x] == "C" for y, x in seen)
    reached_exits = sum(rows[y][x] == "E" for y, x in seen)
    if reached_coins != coins or reached_exits != 1:
        raise MapError("There is no valid path")


def parse_map(text: str) -> GameMap:
    """Validate the text of a map file and build the map."""
    coins = validate_characters(text)
    lines = text.split("\n")
    # The width comes from the first line as read, newline included.
    width = len(lines[0]) if len(lines) > 1 else len(lines[0]) - 1
    rows = split_words(text, "\n")
    validate_walls(rows)
    validate_shape(rows, width)
    validate_path(rows, coins)
    return GameMap(tuple(rows), coins)


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read and validate a map file."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("map does not exist") from exc
    return parse_map(text)