"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

import enum
from typing import TextIO

from solong.mapfile import GameMap
from solong.printf import cprintf

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"

ESCAPE_KEY = 53


class Direction(enum.Enum):
    """A step on the grid, as (row offset, column offset)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value


class Action(enum.Enum):
    """What a key press led to."""

    IGNORED = "ignored"
    MOVED = "moved"
    QUIT = "quit"
    WON = "won"


KEY_DIRECTIONS: dict[int, Direction] = {
    13: Direction.UP,
    1: Direction.DOWN,
    0: Direction.LEFT,
    2: Direction.RIGHT,
}


class Game:
    """A game in progress on a validated map.

    The player's starting cell is kept as floor; collected coins turn into
    floor as well. Every step is reported on ``stream`` (stdout by default).
    """

    def __init__(self, game_map: GameMap, stream: TextIO | None = None) -> None:
        self.map = game_map
        self.player = game_map.find(PLAYER)
        self.exit = game_map.find(EXIT)
        self.grid = [list(row) for row in game_map.rows]
        row, col = self.player
        self.grid[row][col] = FLOOR
        self.coins = game_map.coins
        self.steps = 0
        self.stream = stream

    def tile(self, row: int, col: int) -> str:
        """Return the current tile at (row, column); cells off the map count as wall."""
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return WALL

    def exit_open(self) -> bool:
        """True once every coin has been collected."""
        return self.coins == 0

    def move(self, direction: Direction) -> bool:
        """Step the player one cell unless a wall is in the way.

        Returns True when the player moved. A coin on the new cell is collected.
        """
        drow, dcol = direction.offset
        row, col = self.player[0] + drow, self.player[1] + dcol
        if self.tile(row, col) == WALL:
            return False
        self.player = (row, col)
        self.steps += 1
        cprintf("Number of steps: %d\n", self.steps, stream=self.stream)
        if self.grid[row][col] == COIN:
            self.coins -= 1
            self.grid[row][col] = FLOOR
        return True

    def handle_key(self, keycode: int) -> Action:
        """Apply a key press and report what it led to."""
        if keycode == ESCAPE_KEY:
            return Action.QUIT
        direction = KEY_DIRECTIONS.get(keycode)
        moved = direction is not None and self.move(direction)
        if self.exit_open() and self.player == self.exit:
            return Action.WON
        return Action.MOVED if moved else Action.IGNORED