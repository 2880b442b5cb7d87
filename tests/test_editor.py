import pytest

from leveleditor.codec import Level, decode, encode
from leveleditor.editor import LevelGrid, TileAction
from leveleditor.tiles import TileType


def test_new_grid_reads_as_air():
    grid = LevelGrid(3, 4)
    assert (grid.rows, grid.cols) == (3, 4)
    assert grid.to_level().grid == ("----",) * 3


def test_default_size_is_twenty():
    grid = LevelGrid()
    assert (grid.rows, grid.cols) == (20, 20)


def test_place_sets_symbol_and_records_action():
    grid = LevelGrid(2, 2)
    action = grid.place(1, 0, TileType.WALL)
    assert grid.symbol_at(1, 0) == TileType.WALL.symbol
    assert action == TileAction(row=1, col=0, previous=None, was_empty=True)
    assert grid.history == [action]


def test_placing_same_tile_is_ignored():
    grid = LevelGrid(2, 2)
    grid.place(0, 0, TileType.COIN)
    assert grid.place(0, 0, TileType.COIN) is None
    assert len(grid.history) == 1


def test_placing_air_on_unset_cell_is_recorded():
    grid = LevelGrid(1, 1)
    assert grid.place(0, 0, TileType.AIR) is not None
    assert len(grid.history) == 1


def test_undo_restores_previous_tile():
    grid = LevelGrid(2, 2)
    grid.place(0, 1, TileType.WALL)
    grid.place(0, 1, TileType.SPIKES)
    undone = grid.undo()
    assert undone.previous == TileType.WALL.symbol
    assert grid.symbol_at(0, 1) == TileType.WALL.symbol
    grid.undo()
    assert grid.symbol_at(0, 1) == TileType.AIR.symbol
    assert grid.undo() is None


def test_undo_of_unknown_symbol_gives_air():
    grid = LevelGrid(1, 1)
    grid.load(Level(("?",)))
    grid.place(0, 0, TileType.WALL)
    grid.undo()
    assert grid.symbol_at(0, 0) == TileType.AIR.symbol


def test_clear_fills_with_air_and_keeps_history():
    grid = LevelGrid(2, 3)
    grid.place(0, 0, TileType.ENEMY)
    grid.clear()
    assert grid.to_level().grid == ("---",) * 2
    assert len(grid.history) == 1


def test_resize_keeps_fitting_cells():
    grid = LevelGrid(2, 2)
    grid.place(0, 0, TileType.WALL)
    grid.place(1, 1, TileType.COIN)
    grid.resize(3, 1)
    assert (grid.rows, grid.cols) == (1, 3)
    assert grid.symbol_at(0, 0) == TileType.WALL.symbol
    assert grid.symbol_at(0, 2) == TileType.AIR.symbol
    with pytest.raises(IndexError):
        grid.symbol_at(1, 1)


def test_undo_after_shrink_is_harmless():
    grid = LevelGrid(3, 3)
    grid.place(2, 2, TileType.WALL)
    grid.resize(1, 1)
    action = grid.undo()
    assert action.row == 2
    assert grid.to_level().grid == ("-",)


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-1, 5)])
def test_invalid_sizes(width, height):
    with pytest.raises(ValueError):
        LevelGrid(height, width)
    with pytest.raises(ValueError):
        LevelGrid(1, 1).resize(width, height)


def test_place_outside_raises():
    grid = LevelGrid(2, 2)
    with pytest.raises(IndexError):
        grid.place(2, 0, TileType.WALL)


def test_to_level_round_trips_through_codec():
    grid = LevelGrid(2, 3)
    grid.place(0, 0, TileType.WALL)
    grid.place(1, 2, TileType.PLAYER_LEFT)
    level = grid.to_level((1, 2, 3, 4))
    decoded = decode(encode(level))
    assert decoded == level
    other = LevelGrid(1, 1)
    other.load(decoded)
    assert other.to_level((1, 2, 3, 4)) == level


def test_load_sets_dimensions():
    grid = LevelGrid()
    grid.load(Level(("#-#", "---")))
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.symbol_at(0, 2) == "#"


def test_load_empty_level_raises():
    with pytest.raises(ValueError):
        LevelGrid().load(Level(()))