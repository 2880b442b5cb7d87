"""Compact text encoding of level grids.

A level is written row by row, each row run-length encoded (a run longer
than one is prefixed by its length), rows separated by ``|``.  The four
neighbouring level numbers (left, right, up, down) follow after ``::``,
separated by spaces.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import groupby

__all__ = ["DecodeError", "Level", "encode", "decode"]

_DIGITS = "0123456789"
_ROW_SEPARATOR = "|"
_NEXT_LEVEL_SEPARATOR = "::"
_NEXT_LEVEL_RE = re.compile(r"\s*([+-]?\d+)")


class DecodeError(ValueError):
    """Raised when an encoded level cannot be decoded."""


@dataclass(frozen=True)
class Level:
    """A rectangular grid of tile symbols plus the four neighbouring levels."""

    grid: tuple[str, ...]
    next_levels: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        grid = tuple(self.grid)
        next_levels = tuple(int(value) for value in self.next_levels)
        if len(next_levels) != 4:
            raise ValueError("next_levels must hold exactly four values")
        if grid:
            width = len(grid[0])
            if width == 0:
                raise ValueError("level rows must not be empty")
            if any(len(row) != width for row in grid):
                raise ValueError("all level rows must have the same length")
        object.__setattr__(self, "grid", grid)
        object.__setattr__(self, "next_levels", next_levels)

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Number of columns in the grid."""
        return len(self.grid[0]) if self.grid else 0


def _encode_row(row: str) -> str:
    parts = []
    for symbol, run in groupby(row):
        length = sum(1 for _ in run)
        parts.append(f"{length}{symbol}" if length > 1 else symbol)
    return "".join(parts)


def encode(level: Level) -> str:
    """Return the compact text form of ``level``."""
    body = _ROW_SEPARATOR.join(_encode_row(row) for row in level.grid)
    numbers = " ".join(str(value) for value in level.next_levels)
    return f"{body}{_NEXT_LEVEL_SEPARATOR}{numbers}"


def _parse_next_levels(text: str) -> tuple[int, int, int, int]:
    values: list[int] = []
    pos = 0
    while len(values) < 4:
        match = _NEXT_LEVEL_RE.match(text, pos)
        if match is None:
            break
        values.append(int(match.group(1)))
        pos = match.end()
    values.extend([0] * (4 - len(values)))
    return tuple(values)  # type: ignore[return-value]


def decode(text: str) -> Level:
    """Parse the compact text form produced by :func:`encode`.

    Raises :class:`DecodeError` when a run count has no symbol after it or
    when the rows differ in width.
    """
    body, separator, tail = text.partition(_NEXT_LEVEL_SEPARATOR)
    next_levels = _parse_next_levels(tail) if separator else (0, 0, 0, 0)

    pieces: list[str] = []
    rows = 0
    cols = 0
    row_width = 0
    pos = 0
    while pos < len(body):
        char = body[pos]
        if char in _DIGITS:
            end = pos
            while end < len(body) and body[end] in _DIGITS:
                end += 1
            if end == len(body):
                raise DecodeError("run length at end of level data has no symbol")
            count = int(body[pos:end])
            pieces.append(body[end] * count)
            row_width += count
            pos = end + 1
        elif char == _ROW_SEPARATOR:
            if cols == 0:
                cols = row_width
            elif cols != row_width:
                raise DecodeError(f"row {rows + 1} has {row_width} cells, expected {cols}")
            row_width = 0
            rows += 1
            pos += 1
        else:
            pieces.append(char)
            row_width += 1
            pos += 1

    if row_width > 0:
        if cols == 0:
            cols = row_width
        elif cols != row_width:
            raise DecodeError(f"row {rows + 1} has {row_width} cells, expected {cols}")
        rows += 1

    cells = "".join(pieces)
    if rows > 0 and cols == 0:
        raise DecodeError("level has rows but no columns")
    if len(cells) != rows * cols:
        raise DecodeError("level data does not form a rectangular grid")

    grid = tuple(cells[start:start + cols] for start in range(0, rows * cols, cols))
    return Level(grid, next_levels)