"""A tile-based puzzle game: collect every coin on a walled map, then reach the exit."""

__version__ = "1.0.0"

__all__ = ["colors", "display", "game", "mapfile", "printf", "textutils", "xpm"]