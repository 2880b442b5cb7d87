# leveleditor

A desktop editor for tile-based platformer levels. You draw levels on a grid
using a palette of tiles. All levels are kept together in one text file,
`data/saves/levels.rll`. That path is relative to the directory the editor is
started from.

## Installing

```
pip install .
```

The editor window uses Tkinter, which ships with most Python installations. If
Tkinter is missing, starting the window raises `RuntimeError`. The rest of the
package works without it. Python 3.10 or newer is required.

## Running

```
leveleditor
```

Start it from the directory that holds your `data/` folder.

- **Tile images** are read from `data/sprites/`, for example `wall.png`,
  `coin.png` and `player_left.png`. If an image cannot be loaded, its palette
  button shows the tile's symbol instead.
- **Saved levels** go to `data/saves/levels.rll`. The `data/saves` directory is
  created if it is missing.
- **Help text** is read from `Editor.md` in the same directory and shown as
  plain text in its own window.

### Editing

Click or drag with the left mouse button to paint with the selected tile. The
selected tile's button is highlighted in yellow.

Below the palette are four fields: Left, Right, Up and Down. Each holds the
number of the level reached by leaving the current one in that direction. They
accept whole numbers from -2 to 9999, and an empty field counts as 0.

### The level list

The list on the right shows the levels in `levels.rll`. Selecting a level
opens it.

- **Save level** writes the grid to the selected level. If no level is
  selected, it appends the grid as a new level named `Level N`.
- **New level** adds an empty level of the current size, named one above the
  highest level number in use.
- **Delete Level** asks for confirmation, then renumbers the remaining levels
  `Level 1`, `Level 2`, and so on.
- **Import** copies a chosen file into `data/saves` and reloads the list.
- **Export** copies a file from `data/saves` into a chosen directory.

Both Import and Export ask before overwriting a file that already exists.

### Keyboard shortcuts

| Keys     | Action                                 |
|----------|----------------------------------------|
| Ctrl+S   | Save the current level                 |
| Ctrl+N   | Create a new, empty level              |
| Delete   | Delete the selected level              |
| Ctrl+I   | Import a `.rll` file into `data/saves` |
| Ctrl+E   | Export a file from `data/saves`        |
| Ctrl+H   | Show the help page                     |
| Ctrl+C   | Clear the level                        |
| Ctrl+R   | Resize the level                       |
| Ctrl+Z   | Undo the last tile placement           |

## Tiles

| Symbol | Tile                 |
|--------|----------------------|
| `-`    | Air                  |
| `#`    | Wall                 |
| `=`    | Dark wall            |
| `*`    | Coin                 |
| `^`    | Spikes               |
| `&`    | Enemy                |
| `L`    | Player, facing left  |
| `R`    | Player, facing right |
| `U`    | Player, facing up    |
| `D`    | Player, facing down  |
| `P`    | Platform             |
| `S`    | Spring               |

The palette cannot place an `E` (exit), but an `E` found in a loaded file is
drawn with `data/sprites/exit.png`.

## The `.rll` format

Each level starts with a header line beginning with `; Level`. The header is
followed by its data:

```
; Level 1
5#|#3-#|5#::0 2 0 0
```

- Rows are separated by `|`.
- Within a row, a run of the same symbol is written as its length followed by
  the symbol. A single symbol is written alone.
- After `::` come the four neighbouring level numbers: left, right, up, down.
  Missing numbers are read as `0`.
- If a level's data spans several non-empty lines, they are joined with `|`.

## Using the library

### Encoding and decoding levels

`leveleditor.codec` reads and writes the level text:

```python
from leveleditor.codec import DecodeError, Level, decode, encode

level = decode("5#|#3-#|5#::0 2 0 0")
level.rows, level.cols        # (3, 5)
level.next_levels             # (0, 2, 0, 0)
encode(Level(("##", "--")))   # "2#|2-::0 0 0 0"

try:
    decode("#3")
except DecodeError:
    print("not a valid level")
```

`decode` raises `DecodeError`, a subclass of `ValueError`, in two cases: when
rows have different widths, and when a run length has no symbol after it.

### Tiles

`leveleditor.tiles` provides:

- `TileType`, with `.symbol` and `.sprite` properties.
- `tile_for_symbol(symbol)`, which raises `ValueError` for an unknown symbol.
- `sprite_for_symbol(symbol)`, which returns `None` for an unknown symbol.

### The editable grid

`leveleditor.editor.LevelGrid(rows=20, cols=20)` is the editable grid:

- `place(row, col, tile)` records a `TileAction` for undo. It returns `None` if
  the cell already holds that tile.
- `undo()` reverts the most recent placement.
- `clear()` fills the grid with air.
- `resize(width, height)` keeps the cells that still fit.
- `to_level(next_levels)` returns the grid as a `Level`.
- `load(level)` replaces the grid with the cells of a level.
- `symbol_at(row, col)` returns a cell's symbol.

Cells that were never set read as `-`.

### The level file

`leveleditor.store` handles the level file:

- `read_levels(path)` returns a list of `LevelEntry(name, data)`. A missing
  file holds no levels.
- `write_levels(path, entries)` replaces the file's contents.
- `append_level(path, entry)` adds one level to the end of the file.
- `write_renumbered(path, entries)` writes the levels named `Level 1`,
  `Level 2`, and so on.
- `next_level_name(entries)` returns the name for the next new level.
- `copy_file(source, target_dir, overwrite=False)` copies a file. It raises
  `FileNotFoundError` if the source is missing, and `FileExistsError` if the
  destination exists and `overwrite` is false.

## Limitations

- The help page is shown as plain text. Markup in `Editor.md` is not rendered.
- Sprites are scaled only by whole-number factors, so they may not fill their
  cells exactly.

## Running the tests

```
pip install ".[test]"
pytest
```