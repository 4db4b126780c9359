"""String helpers and a chunked line reader."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of ``needle`` lying wholly in the first ``limit`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def read_lines(stream: IO[AnyStr], chunk_size: int = 1) -> Iterator[AnyStr]:
    """Yield lines from ``stream``, reading ``chunk_size`` units at a time.

    Each line keeps its trailing newline; a final line without one is yielded
    as is. Works with both text and binary streams.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    buffer = None
    newline = None
    while True:
        chunk = stream.read(chunk_size)
        if buffer is None:
            buffer = chunk[:0]
            newline = "\n" if isinstance(chunk, str) else b"\n"
        if chunk:
            buffer += chunk
        while (index := buffer.find(newline)) != -1:
            yield buffer[:index + 1]
            buffer = buffer[index + 1:]
        if not chunk:
            break
    if buffer:
        yield buffer