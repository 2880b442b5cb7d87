"""Tile kinds, their map symbols and their sprite files."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["TileType", "tile_for_symbol", "sprite_for_symbol"]


class TileType(IntEnum):
    """A kind of tile that can be placed in a level."""

    AIR = 0
    WALL = 1
    DARK_WALL = 2
    COIN = 3
    SPIKES = 4
    ENEMY = 5
    PLAYER_LEFT = 6
    PLAYER_RIGHT = 7
    PLAYER_UP = 8
    PLAYER_DOWN = 9
    PLATFORM = 10
    SPRING = 11

    @property
    def symbol(self) -> str:
        """The character this tile is stored as in level data."""
        return _SYMBOLS[self]

    @property
    def sprite(self) -> str:
        """Path of the sprite image for this tile."""
        return _SPRITES[self.symbol]


_SYMBOLS: dict[TileType, str] = {
    TileType.AIR: "-",
    TileType.WALL: "#",
    TileType.DARK_WALL: "=",
    TileType.COIN: "*",
    TileType.SPIKES: "^",
    TileType.ENEMY: "&",
    TileType.PLAYER_LEFT: "L",
    TileType.PLAYER_RIGHT: "R",
    TileType.PLAYER_UP: "U",
    TileType.PLAYER_DOWN: "D",
    TileType.PLATFORM: "P",
    TileType.SPRING: "S",
}

_TILES_BY_SYMBOL: dict[str, TileType] = {symbol: tile for tile, symbol in _SYMBOLS.items()}

_SPRITES: dict[str, str] = {
    "-": "data/sprites/air.png",
    "#": "data/sprites/wall.png",
    "=": "data/sprites/wall_dark.png",
    "*": "data/sprites/coin.png",
    "^": "data/sprites/spikes.png",
    "&": "data/sprites/enemy.png",
    "E": "data/sprites/exit.png",
    "L": "data/sprites/player_left.png",
    "R": "data/sprites/player_right.png",
    "U": "data/sprites/player_up.png",
    "D": "data/sprites/player_down.png",
    "P": "data/sprites/platform.png",
    "S": "data/sprites/spring.png",
}


def tile_for_symbol(symbol: str) -> TileType:
    """Return the tile stored as ``symbol``; raise ValueError if there is none."""
    try:
        return _TILES_BY_SYMBOL[symbol]
    except KeyError:
        raise ValueError(f"no tile type for symbol {symbol!r}") from None


def sprite_for_symbol(symbol: str) -> str | None:
    """Return the sprite path drawn for ``symbol``, or None for unknown symbols."""
    return _SPRITES.get(symbol)