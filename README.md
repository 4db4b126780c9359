# solong

A small tile-based puzzle game. You move a player around a walled map,
pick up every coin, and once the last coin is taken the exit opens.
Step onto it to win. Every step is counted and printed to the terminal
as `Number of steps: N`.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument: the path of a map file, normally
with the `.ber` extension. A directory is refused. Keys:

| Key | Action     |
|-----|------------|
| W   | move up    |
| S   | move down  |
| A   | move left  |
| D   | move right |
| Esc | quit       |

Closing the window also quits, and the game ends as soon as the player
stands on the open exit.

Tile images are read from XPM files in an `imgs/` directory under the
current working directory: `player.xpm`, `wall.xpm`, `bkgrnd.xpm`,
`clct.xpm`, `exit_x.xpm` (exit, closed) and `exit.xpm` (exit, open).
The size of `wall.xpm` sets the size of every tile, and so the size of
the window.

When the arguments, the map or a sprite cannot be used, the command
prints `Error` followed by the reason, for example
`map is not rectangular` or `There is no valid path`, and returns
exit status 1.

## Map format

A map is a text file made of these characters:

- `1` wall
- `0` empty floor
- `C` coin (at least one)
- `E` exit (exactly one)
- `P` player start (exactly one)

Rules a map must follow:

- it is rectangular: every row is as long as the first;
- it is closed: the top and bottom rows and the first and last column
  are all walls;
- it has no blank lines and no newline at the end of the file;
- every coin and the exit can be reached from the player's start.

A valid example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

The modules can be used on their own:

- `solong.mapfile`: `load_map(path)` and `parse_map(text)` read and
  check a map, returning a `GameMap` (with `rows`, `coins`, `width`,
  `height`, `find(tile)` and `tile(row, col)`) or raising `MapError`.
  The single checks are available as `check_arguments`,
  `validate_characters`, `validate_walls`, `validate_shape` and
  `validate_path`.
- `solong.game`: `Game` holds a running game. `Game.move` takes a
  `Direction` and returns whether the player moved; `Game.handle_key`
  takes a key code and returns an `Action` (`IGNORED`, `MOVED`, `QUIT`
  or `WON`); `Game.exit_open()` tells whether every coin is collected.
  Step messages go to the stream given to `Game`, or to stdout.
- `solong.display`: `load_sprites(directory)` loads the six sprites into
  a `Sprites`; `GameWindow` draws a `Game` with pygame and records every
  image it places in `drawn`; `GameWindow.run()` opens the window and
  plays; `main(argv)` is the `solong` command.
- `solong.xpm`: `load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm(lines)` decode XPM images into an `XpmImage` (pixels as
  0xAARRGGBB, alpha 0xFF meaning transparent), raising `XpmError` on bad
  input. `strip_comments` and `quoted_strings` are the helpers they use.
- `solong.colors`: `lookup_color(name)` maps X11 colour names to RGB
  values (raising `KeyError` for unknown names); `resolve_color(name,
  suffix)` handles `#RRGGBB` values and names as written in XPM files.
- `solong.printf`: `cformat(template, *args)` and `cprintf(template,
  *args, stream=None)` format `%c %s %p %d %i %u %x %X %%` with C-style
  integer widths.
- `solong.textutils`: `split_words`, `find_within`, `substring` and
  `read_lines` (a chunked line reader for text or binary streams).

## What it does not do

The game only reads XPM images; it has no other image formats and no
built-in sprites, so an `imgs/` directory must be present. Only the W,
A, S, D and Esc keys are used. There is no level editor, no saved
progress and no high-score storage.

## Running the tests

```
pip install .[test]
pytest
```