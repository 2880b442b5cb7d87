"""Tile-based level editor: level codec, tiles, editable grid, level file storage and a Tk window."""

__version__ = "0.1.0"
__all__ = ["__version__"]