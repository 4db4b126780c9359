import io

import pygame
import pytest

from solong.display import GameWindow, Sprites, load_sprites, main
from solong.game import Action, Game
from solong.mapfile import parse_map
from solong.xpm import TRANSPARENT, XpmError, XpmImage

MAP_TEXT = "11111\n1PCE1\n11111"

COLORS = {
    "player": 0x00FF0000,
    "wall": 0x0000FF00,
    "background": 0x000000FF,
    "collectible": 0x00FFFF00,
    "exit_closed": 0x0000FFFF,
    "exit_open": 0x00FF00FF,
}


def _solid(color, width=2, height=2):
    return XpmImage(width, height, (color,) * (width * height))


def _sprites(**overrides):
    images = {name: _solid(color) for name, color in COLORS.items()}
    images.update(overrides)
    return Sprites(**images)


def _window(surface=None, sprites=None):
    game = Game(parse_map(MAP_TEXT), stream=io.StringIO())
    return GameWindow(game, sprites or _sprites(), surface)


def test_window_size_follows_map_and_tile_size():
    window = _window()
    assert window.width == window.game.map.width * 2
    assert window.height == window.game.map.height * 2


def test_draw_places_every_cell():
    window = _window()
    placements = window.draw()
    assert placements == window.drawn
    assert ("wall", 0, 0) in placements
    assert ("collectible", 4, 2) in placements
    assert ("exit_closed", 6, 2) in placements
    assert placements[-1] == ("player", 2, 2)
    backgrounds = [p for p in placements if p[0] == "background"]
    assert len(backgrounds) == 3
    assert not any(p[0] == "exit_open" for p in placements)


def test_step_onto_coin_redraws_and_opens_exit():
    window = _window()
    assert window.handle_key(2) is Action.MOVED
    assert window.drawn[:2] == [("background", 2, 2), ("player", 4, 2)]
    assert ("exit_open", 6, 2) in window.drawn
    assert window.game.exit_open()


def test_blocked_move_draws_nothing():
    window = _window()
    assert window.handle_key(13) is Action.IGNORED
    assert window.drawn == []
    assert window.game.steps == 0


def test_reaching_open_exit_wins():
    window = _window()
    window.handle_key(2)
    assert window.handle_key(2) is Action.WON


def test_escape_quits_without_drawing():
    window = _window()
    assert window.handle_key(53) is Action.QUIT
    assert window.drawn == []


def test_draw_renders_colours_on_surface():
    surface = pygame.Surface((10, 6))
    window = _window(surface)
    window.draw()
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((2, 2)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((4, 2)))[:3] == (255, 255, 0)


def test_transparent_pixels_show_background():
    player = XpmImage(2, 2, (TRANSPARENT, 0x00FF0000, 0x00FF0000, 0x00FF0000))
    surface = pygame.Surface((10, 6))
    window = _window(surface, _sprites(player=player))
    window.draw()
    assert tuple(surface.get_at((2, 2)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((3, 2)))[:3] == (255, 0, 0)


XPM_TEMPLATE = '''/* XPM */
static char *img[] = {
"1 1 1 1",
"a c #%06X",
"a"
};
'''


def test_load_sprites_reads_every_file(tmp_path):
    names = {
        "player.xpm": 0x112233,
        "wall.xpm": 0x445566,
        "bkgrnd.xpm": 0x778899,
        "clct.xpm": 0xAABBCC,
        "exit_x.xpm": 0xDDEEFF,
        "exit.xpm": 0x010203,
    }
    for name, color in names.items():
        (tmp_path / name).write_text(XPM_TEMPLATE % color)
    sprites = load_sprites(tmp_path)
    assert sprites.player.pixel(0, 0) == 0x112233
    assert sprites.background.pixel(0, 0) == 0x778899
    assert sprites.exit_closed.pixel(0, 0) == 0xDDEEFF
    assert sprites.exit_open.pixel(0, 0) == 0x010203
    assert sprites.tile_size == (1, 1)


def test_load_sprites_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        load_sprites(tmp_path)


def test_main_rejects_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\ninvalid number of arguments\n"


def test_main_reports_missing_map(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing.ber"]) == 1
    assert capsys.readouterr().out == "Error\nmap does not exist\n"


def test_main_reports_invalid_map(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.ber").write_text("11111\n1PXE1\n11111")
    assert main(["bad.ber"]) == 1
    assert capsys.readouterr().out == "Error\nInvalid character\n"