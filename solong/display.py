"""Drawing the game with pygame, and the command that starts it."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Sequence

import pygame

from solong.game import COIN, ESCAPE_KEY, EXIT, WALL, Action, Game
from solong.mapfile import MapError, check_arguments, load_map
from solong.printf import cprintf
from solong.xpm import XpmError, XpmImage, load_xpm

WINDOW_TITLE = "So_Long"
SPRITE_DIRECTORY = "imgs"
CLOSE_EVENT = 17

_SPRITE_FILES = {
    "player": "player.xpm",
    "wall": "wall.xpm",
    "background": "bkgrnd.xpm",
    "collectible": "clct.xpm",
    "exit_closed": "exit_x.xpm",
    "exit_open": "exit.xpm",
}

# Key codes the game logic understands, keyed by pygame key.
_PYGAME_KEYS = {
    pygame.K_ESCAPE: ESCAPE_KEY,
    pygame.K_w: 13,
    pygame.K_s: 1,
    pygame.K_a: 0,
    pygame.K_d: 2,
}


@dataclass(frozen=True)
class Sprites:
    """The images the game draws; the wall image fixes the tile size."""

    player: XpmImage
    wall: XpmImage
    background: XpmImage
    collectible: XpmImage
    exit_closed: XpmImage
    exit_open: XpmImage

    @property
    def tile_size(self) -> tuple[int, int]:
        return self.wall.width, self.wall.height


def load_sprites(directory: str | PathLike[str] = SPRITE_DIRECTORY) -> Sprites:
    """Load every sprite from the XPM files in ``directory``."""
    base = Path(directory)
    return Sprites(**{field: load_xpm(base / name) for field, name in _SPRITE_FILES.items()})


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = bytearray()
    for pixel in image.pixels:
        data += bytes((
            (pixel >> 16) & 0xFF,
            (pixel >> 8) & 0xFF,
            pixel & 0xFF,
            0xFF - ((pixel >> 24) & 0xFF),
        ))
    return pygame.image.fromstring(bytes(data), (image.width, image.height), "RGBA")


class GameWindow:
    """Draws a game on a surface and feeds it key presses.

    Every image placed is recorded in ``drawn`` as (sprite name, x, y); it is
    also blitted when a surface is attached.
    """

    def __init__(self, game: Game, sprites: Sprites, surface: pygame.Surface | None = None) -> None:
        self.game = game
        self.sprites = sprites
        self.surface = surface
        tile_w, tile_h = sprites.tile_size
        self.width = game.map.width * tile_w
        self.height = game.map.height * tile_h
        self.drawn: list[tuple[str, int, int]] = []
        self._surfaces: dict[str, pygame.Surface] = {}

    def _place(self, name: str, cell: tuple[int, int]) -> tuple[str, int, int]:
        tile_w, tile_h = self.sprites.tile_size
        row, col = cell
        placement = (name, col * tile_w, row * tile_h)
        self.drawn.append(placement)
        if self.surface is not None:
            image = self._surfaces.get(name)
            if image is None:
                image = self._surfaces[name] = _to_surface(getattr(self.sprites, name))
            self.surface.blit(image, placement[1:])
        return placement

    def draw(self) -> list[tuple[str, int, int]]:
        """Draw the whole map as it stands and return the placements made."""
        placements = []
        for row, line in enumerate(self.game.grid):
            for col, tile in enumerate(line):
                if tile == WALL:
                    placements.append(self._place("wall", (row, col)))
                    continue
                placements.append(self._place("background", (row, col)))
                if tile == COIN:
                    placements.append(self._place("collectible", (row, col)))
                elif tile == EXIT:
                    placements.append(self._place("exit_closed", (row, col)))
        if self.game.exit_open():
            placements.append(self._place("exit_open", self.game.exit))
        placements.append(self._place("player", self.game.player))
        return placements

    def handle_key(self, keycode: int) -> Action:
        """Apply a key press to the game and redraw what changed."""
        before = self.game.player
        action = self.game.handle_key(keycode)
        if action is Action.QUIT:
            return action
        if self.game.player != before:
            left_behind = "exit_closed" if self.game.tile(*before) == EXIT else "background"
            self._place(left_behind, before)
            self._place("player", self.game.player)
        if self.game.exit_open():
            self._place("exit_open", self.game.exit)
        return action

    def run(self) -> Action:
        """Open the window and play until the game is won or closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(WINDOW_TITLE)
            self._surfaces.clear()
            self.draw()
            pygame.display.flip()
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return Action.QUIT
                    if event.type != pygame.KEYDOWN or event.key not in _PYGAME_KEYS:
                        continue
                    action = self.handle_key(_PYGAME_KEYS[event.key])
                    if action in (Action.QUIT, Action.WON):
                        return action
                pygame.display.flip()
                clock.tick(60)
        finally:
            self.surface = None
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arguments(args)
        game_map = load_map(path)
        sprites = load_sprites(SPRITE_DIRECTORY)
    except (MapError, XpmError) as exc:
        cprintf("Error\n%s\n", str(exc))
        return 1
    GameWindow(Game(game_map), sprites).run()
    return 1


if __name__ == "__main__":
    sys.exit(main())