"""The editable level grid with tile placement and undo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .codec import Level
from .tiles import TileType, sprite_for_symbol

__all__ = ["TileAction", "LevelGrid"]

_AIR = TileType.AIR.symbol


@dataclass(frozen=True)
class TileAction:
    """A single tile placement, remembered so that it can be undone."""

    row: int
    col: int
    previous: Optional[str]
    was_empty: bool


class LevelGrid:
    """A grid of tile symbols; cells that were never set read as air."""

    def __init__(self, rows: int = 20, cols: int = 20) -> None:
        _check_size(cols, rows)
        self._cells: list[list[Optional[str]]] = [[None] * cols for _ in range(rows)]
        self.history: list[TileAction] = []

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        return len(self._cells[0])

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the level")

    def _raw(self, row: int, col: int) -> Optional[str]:
        self._check_cell(row, col)
        return self._cells[row][col]

    def symbol_at(self, row: int, col: int) -> str:
        """Return the symbol stored at a cell, ``-`` for an unset one."""
        symbol = self._raw(row, col)
        return _AIR if symbol is None else symbol

    def place(self, row: int, col: int, tile: TileType) -> Optional[TileAction]:
        """Put ``tile`` in a cell; return the recorded action, or None if unchanged."""
        current = self._raw(row, col)
        target = TileType(tile).symbol
        if current == target:
            return None
        action = TileAction(
            row=row,
            col=col,
            previous=current,
            was_empty=current is None or sprite_for_symbol(current) is None,
        )
        self._cells[row][col] = target
        self.history.append(action)
        return action

    def undo(self) -> Optional[TileAction]:
        """Revert the most recent placement; return it, or None if there is none."""
        if not self.history:
            return None
        action = self.history.pop()
        if 0 <= action.row < self.rows and 0 <= action.col < self.cols:
            self._cells[action.row][action.col] = _AIR if action.was_empty else action.previous
        return action

    def clear(self) -> None:
        """Fill every cell with air."""
        self._cells = [[_AIR] * self.cols for _ in range(self.rows)]

    def resize(self, width: int, height: int) -> None:
        """Change the size, keeping cells that still fit; new cells are unset."""
        _check_size(width, height)
        resized: list[list[Optional[str]]] = []
        for row in range(height):
            old = self._cells[row] if row < self.rows else []
            kept = old[:width]
            resized.append(kept + [None] * (width - len(kept)))
        self._cells = resized

    def to_level(self, next_levels: Iterable[int] = (0, 0, 0, 0)) -> Level:
        """Return the grid as a :class:`Level` with the given neighbours."""
        grid = tuple(
            "".join(_AIR if symbol is None else symbol for symbol in row)
            for row in self._cells
        )
        return Level(grid, tuple(next_levels))  # type: ignore[arg-type]

    def load(self, level: Level) -> None:
        """Replace the grid with the cells of ``level``."""
        if level.rows == 0 or level.cols == 0:
            raise ValueError("cannot load an empty level")
        self._cells = [list(row) for row in level.grid]


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive integers")