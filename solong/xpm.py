"""Reader for XPM images, as used for the game's sprites."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator

from solong.colors import resolve_color

TRANSPARENT = 0xFF000000

_WORD_SEPARATOR = re.compile(r"[ \t]+")
_C_SPACE = " \t\n\v\f\r"


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: pixels are 0xAARRGGBB values in row-major order.

    An alpha byte of 0xFF marks a transparent pixel.
    """

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside a {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _words(line: str) -> list[str]:
    return [word for word in _WORD_SEPARATOR.split(line) if word]


def _atoi(text: str) -> int:
    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    match = re.match(r"[0-9]+", rest)
    return sign * int(match.group()) if match else 0


def _blank_comments(text: str, opener: str, closer: str) -> str:
    quoted = False
    i = 0
    while i < len(text):
        if text[i] == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            end = len(text) if end < 0 else end + len(closer)
            text = text[:i] + " " * (end - i) + text[end:]
            i = end
            continue
        i += 1
    return text


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments lying outside double quotes.

    Comments are replaced by spaces, so the text keeps its length.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    it = iter(lines)
    fields = _words(_next_line(it, "header"))
    if len(fields) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(field) for field in fields[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid header values")

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    replace = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(it, "colour definition")
        words = _words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c': {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        suffix = words[index + 1] if index + 1 < len(words) else None
        value = resolve_color(words[index], suffix)
        key = line[:cpp]
        if replace:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(it, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm(quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm_text(text)