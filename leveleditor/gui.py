"""Desktop window for editing levels, built on tkinter."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Callable, Optional, Sequence

try:
    import tkinter as tk
    from tkinter import filedialog, messagebox
except ImportError:  # Python built without Tk support
    tk = None  # type: ignore[assignment]
    filedialog = None  # type: ignore[assignment]
    messagebox = None  # type: ignore[assignment]

from .codec import DecodeError, Level, decode, encode
from .editor import LevelGrid
from .store import (
    LevelEntry,
    append_level,
    copy_file,
    next_level_name,
    read_levels,
    write_levels,
    write_renumbered,
)
from .tiles import TileType, sprite_for_symbol

__all__ = ["DirectionInput", "EditorWindow", "parse_direction", "cell_size", "main"]

MIN_CELL_SIZE = 25
DIRECTION_MIN = -2
DIRECTION_MAX = 9999
DIRECTION_LABELS = ("Left:", "Right:", "Up:", "Down:")
SAVES_DIR = "data/saves"
LEVELS_FILE = "levels.rll"
HELP_FILE = "Editor.md"
RLL_FILETYPES = [("RLL Files", "*.rll"), ("All Files", "*")]

_INTEGER_RE = re.compile(r"\s*([+-]?\d+)\s*")
_PARTIAL_DIRECTION_RE = re.compile(r"-?\d{0,4}")


def parse_direction(text: str) -> int:
    """Return the integer written in ``text``, or 0 when it holds none."""
    match = _INTEGER_RE.fullmatch(text)
    return int(match.group(1)) if match else 0


def _acceptable_direction(text: str) -> bool:
    """Whether ``text`` may stand in a direction field while it is being typed."""
    if not _PARTIAL_DIRECTION_RE.fullmatch(text):
        return False
    if text in ("", "-"):
        return True
    return DIRECTION_MIN <= int(text) <= DIRECTION_MAX


def cell_size(width: int, height: int, rows: int, cols: int) -> int:
    """Side length of a square cell so that the grid fits the given area.

    Never smaller than 25 pixels.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError("rows and cols must be positive")
    return max(min(width // cols, height // rows), MIN_CELL_SIZE)


def _require_tk() -> None:
    if tk is None:
        raise RuntimeError("the graphical editor needs tkinter, which is not available")


class DirectionInput:
    """Four fields holding the levels reached by leaving left, right, up and down."""

    def __init__(self, master: "tk.Misc") -> None:
        _require_tk()
        self.frame = tk.Frame(master)
        check = (self.frame.register(_acceptable_direction), "%P")
        self._entries: list[tk.Entry] = []
        for row, label in enumerate(DIRECTION_LABELS):
            tk.Label(self.frame, text=label).grid(row=row, column=0, sticky="e")
            entry = tk.Entry(self.frame, width=8, validate="key", validatecommand=check)
            entry.grid(row=row, column=1, sticky="w")
            self._entries.append(entry)

    def values(self) -> tuple[int, int, int, int]:
        """The four neighbouring level numbers; empty fields read as 0."""
        left, right, up, down = (parse_direction(entry.get()) for entry in self._entries)
        return left, right, up, down

    def set_values(self, values: Sequence[int]) -> None:
        """Show the given four level numbers in the fields."""
        for entry, value in zip(self._entries, values):
            entry.configure(validate="none")
            entry.delete(0, tk.END)
            entry.insert(0, str(value))
            entry.configure(validate="key")


class EditorWindow:
    """The main editor: level grid, tile palette, neighbour fields and level list."""

    def __init__(self, root: "tk.Tk", saves_dir: str = SAVES_DIR, help_file: str = HELP_FILE) -> None:
        _require_tk()
        self.root = root
        self.saves_dir = Path(saves_dir)
        self.levels_path = self.saves_dir / LEVELS_FILE
        self.help_file = Path(help_file)
        self.grid = LevelGrid()
        self.selected = TileType.WALL
        self.entries: list[LevelEntry] = []
        self._drawing = False
        self._images: dict[str, Optional["tk.PhotoImage"]] = {}
        self._scaled: dict[tuple[str, int], "tk.PhotoImage"] = {}
        self._tile_buttons: dict[TileType, tk.Button] = {}

        root.title("Level Editor")
        self._build()
        self._bind_keys()
        self.saves_dir.mkdir(parents=True, exist_ok=True)
        self.reload_levels()
        self._highlight_selected()

    # ----- layout -------------------------------------------------------------

    def _build(self) -> None:
        main = tk.Frame(self.root)
        main.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.canvas = tk.Canvas(main, background="white", highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)

        palette = tk.Frame(main)
        palette.pack(fill=tk.X)
        self._default_button_bg = None
        for tile in TileType:
            button = tk.Button(palette, command=self._selector(tile))
            image = self._sprite(tile.sprite, 32)
            if image is not None:
                button.configure(image=image)
            else:
                button.configure(text=tile.symbol, width=3)
            button.pack(side=tk.LEFT, padx=1, pady=2)
            self._tile_buttons[tile] = button
            if self._default_button_bg is None:
                self._default_button_bg = button.cget("background")

        self.directions = DirectionInput(main)
        self.directions.frame.pack(fill=tk.X, pady=4)

        side = tk.Frame(self.root, padx=6, pady=6)
        side.pack(side=tk.RIGHT, fill=tk.Y)
        tk.Label(side, text="Levels:").pack(anchor="w")
        self.level_list = tk.Listbox(side, exportselection=False)
        self.level_list.pack(fill=tk.BOTH, expand=True)
        self.level_list.bind("<<ListboxSelect>>", self._on_level_selected)

        top_actions: list[tuple[str, Callable[[], None]]] = [
            ("Save level", self.save_level),
            ("New level", self.new_level),
            ("Delete Level", self.delete_level),
            ("Import", self.import_file),
            ("Export", self.export_file),
            ("Help", self.show_help),
        ]
        for label, command in top_actions:
            tk.Button(side, text=label, command=command).pack(fill=tk.X, pady=1)
        tk.Frame(side, height=30).pack()
        bottom_actions: list[tuple[str, Callable[[], None]]] = [
            ("Clear level", self.clear_level),
            ("Resize level", self.resize_dialog),
            ("Undo", self.undo),
        ]
        for label, command in bottom_actions:
            tk.Button(side, text=label, command=command).pack(fill=tk.X, pady=1)

    def _bind_keys(self) -> None:
        shortcuts: dict[str, Callable[[], None]] = {
            "s": self.save_level,
            "n": self.new_level,
            "i": self.import_file,
            "e": self.export_file,
            "h": self.show_help,
            "c": self.clear_level,
            "r": self.resize_dialog,
            "z": self.undo,
        }
        for key, command in shortcuts.items():
            for variant in (key, key.upper()):
                self.root.bind(f"<Control-{variant}>", self._shortcut(command))
        self.root.bind("<Delete>", self._shortcut(self.delete_level))

    @staticmethod
    def _shortcut(command: Callable[[], None]) -> Callable[[object], str]:
        def handler(_event: object) -> str:
            command()
            return "break"

        return handler

    def _selector(self, tile: TileType) -> Callable[[], None]:
        def select() -> None:
            self.selected = tile
            self._highlight_selected()

        return select

    def _highlight_selected(self) -> None:
        for tile, button in self._tile_buttons.items():
            colour = "yellow" if tile == self.selected else self._default_button_bg
            button.configure(background=colour, activebackground=colour)

    # ----- sprites ------------------------------------------------------------

    def _sprite(self, path: str, size: int) -> Optional["tk.PhotoImage"]:
        if path not in self._images:
            try:
                self._images[path] = tk.PhotoImage(file=path)
            except tk.TclError:
                self._images[path] = None
        base = self._images[path]
        if base is None or size <= 0:
            return None
        key = (path, size)
        if key not in self._scaled:
            longest = max(base.width(), base.height(), 1)
            if longest > size:
                image = base.subsample(-(-longest // size))
            elif longest * 2 <= size:
                image = base.zoom(size // longest)
            else:
                image = base
            self._scaled[key] = image
        return self._scaled[key]

    # ----- drawing ------------------------------------------------------------

    def _cell_size(self) -> int:
        return cell_size(
            self.canvas.winfo_width(), self.canvas.winfo_height(), self.grid.rows, self.grid.cols
        )

    def redraw(self) -> None:
        """Draw the whole grid again at the current window size."""
        self.canvas.delete("all")
        size = self._cell_size()
        sprite_size = int(size * 0.95)
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                x0, y0 = col * size, row * size
                self.canvas.create_rectangle(x0, y0, x0 + size, y0 + size, outline="#cccccc")
                symbol = self.grid.symbol_at(row, col)
                path = sprite_for_symbol(symbol)
                image = self._sprite(path, sprite_size) if path else None
                centre = (x0 + size / 2, y0 + size / 2)
                if image is not None:
                    self.canvas.create_image(*centre, image=image)
                elif path is not None and symbol != TileType.AIR.symbol:
                    self.canvas.create_text(*centre, text=symbol)

    def _cell_at(self, x: int, y: int) -> Optional[tuple[int, int]]:
        size = self._cell_size()
        row, col = y // size, x // size
        if x < 0 or y < 0 or row >= self.grid.rows or col >= self.grid.cols:
            return None
        return row, col

    def paint(self, row: int, col: int) -> None:
        """Place the selected tile in a cell and redraw if it changed."""
        if self.grid.place(row, col, self.selected) is not None:
            self.redraw()

    def _on_press(self, event: "tk.Event") -> None:
        self._drawing = True
        cell = self._cell_at(event.x, event.y)
        if cell is not None:
            self.paint(*cell)

    def _on_drag(self, event: "tk.Event") -> None:
        if not self._drawing:
            return
        cell = self._cell_at(event.x, event.y)
        if cell is not None:
            self.paint(*cell)

    def _on_release(self, _event: "tk.Event") -> None:
        self._drawing = False

    # ----- level list ---------------------------------------------------------

    def reload_levels(self) -> None:
        """Read the level list from the saves file."""
        self.entries = read_levels(self.levels_path)
        self._refresh_list()

    def _refresh_list(self, selected: Optional[int] = None) -> None:
        self.level_list.delete(0, tk.END)
        for entry in self.entries:
            self.level_list.insert(tk.END, entry.name)
        if selected is not None:
            self.level_list.selection_set(selected)
            self.level_list.activate(selected)

    def _current_index(self) -> Optional[int]:
        selection = self.level_list.curselection()
        return selection[0] if selection else None

    def _on_level_selected(self, _event: object) -> None:
        index = self._current_index()
        if index is not None:
            self.open_level(self.entries[index].data)

    def open_level(self, data: str) -> None:
        """Decode level data and show it in the grid."""
        try:
            level = decode(data)
            self.grid.load(level)
        except (DecodeError, ValueError):
            messagebox.showwarning("Error", "Can't decode level", parent=self.root)
            return
        self.directions.set_values(level.next_levels)
        self.redraw()

    # ----- actions ------------------------------------------------------------

    def _encoded(self, level: Level) -> str:
        return encode(level)

    def save_level(self) -> None:
        """Store the grid in the selected level, or as a new level if none is selected."""
        data = self._encoded(self.grid.to_level(self.directions.values()))
        index = self._current_index()
        try:
            if index is not None:
                self.entries[index] = LevelEntry(self.entries[index].name, data)
                write_levels(self.levels_path, self.entries)
            else:
                entry = LevelEntry(f"Level {len(self.entries) + 1}", data)
                self.entries.append(entry)
                self._refresh_list(len(self.entries) - 1)
                append_level(self.levels_path, entry)
        except OSError as error:
            messagebox.showwarning("Error", f"Unable to save levels: {error}", parent=self.root)
        self.grid.history.clear()

    def new_level(self) -> None:
        """Add an empty level of the current size and select it."""
        empty = LevelGrid(self.grid.rows, self.grid.cols)
        data = self._encoded(empty.to_level(self.directions.values()))
        self.entries.append(LevelEntry(next_level_name(self.entries), data))
        self._refresh_list(len(self.entries) - 1)
        self.open_level(data)

    def delete_level(self) -> None:
        """Remove the selected level after confirmation and renumber the rest."""
        index = self._current_index()
        if index is None:
            messagebox.showinfo("Info", "No level selected to delete.", parent=self.root)
            return
        if not messagebox.askyesno(
            "Delete Level", "Are you sure you want to delete this level?", parent=self.root
        ):
            return
        del self.entries[index]
        try:
            self.entries = write_renumbered(self.levels_path, self.entries)
        except OSError:
            self._refresh_list()
            messagebox.showwarning("Error", "Unable to update file.", parent=self.root)
            return
        self._refresh_list()

    def _copy_with_confirmation(self, source: str, target_dir: Path, prompt: str, verb: str) -> None:
        try:
            destination = copy_file(source, target_dir)
        except FileNotFoundError:
            messagebox.showwarning("Error", "Selected file does not exist.", parent=self.root)
            return
        except FileExistsError:
            if not messagebox.askyesno("Overwrite?", prompt, parent=self.root):
                return
            try:
                destination = copy_file(source, target_dir, overwrite=True)
            except OSError:
                messagebox.showerror("Error", f"Failed to {verb} the file.", parent=self.root)
                return
        except OSError:
            messagebox.showerror("Error", f"Failed to {verb} the file.", parent=self.root)
            return
        messagebox.showinfo(
            "Success", f"File {verb}ed successfully to:\n{destination}", parent=self.root
        )

    def import_file(self) -> None:
        """Copy a chosen level file into the saves directory and reload the list."""
        source = filedialog.askopenfilename(
            parent=self.root,
            title="Select File to Import",
            initialdir=str(Path.home()),
            filetypes=RLL_FILETYPES,
        )
        if not source:
            messagebox.showwarning("Error", "Selected file does not exist.", parent=self.root)
            return
        self._copy_with_confirmation(
            source, self.saves_dir, "File already exists in data/saves/. Overwrite?", "import"
        )
        self.reload_levels()

    def export_file(self) -> None:
        """Copy a file from the saves directory into a chosen directory."""
        source = filedialog.askopenfilename(
            parent=self.root,
            title="Select File to Export from data/saves",
            initialdir=str(self.saves_dir.resolve()),
            filetypes=RLL_FILETYPES,
        )
        if not source:
            messagebox.showwarning("Error", "Selected file does not exist.", parent=self.root)
            return
        target = filedialog.askdirectory(
            parent=self.root, title="Select Target Directory", initialdir=str(Path.home())
        )
        if not target:
            return
        self._copy_with_confirmation(
            source, Path(target), "File already exists in the target directory. Overwrite?", "export"
        )

    def show_help(self) -> None:
        """Show the editor guide in its own window."""
        try:
            content = self.help_file.read_text(encoding="utf-8")
        except OSError:
            messagebox.showwarning("Error", "Cannot open help file.", parent=self.root)
            return
        dialog = tk.Toplevel(self.root)
        dialog.title("Level Editor Guide")
        dialog.geometry("1200x800")
        text = tk.Text(dialog, wrap="word")
        text.insert("1.0", content)
        text.configure(state="disabled")
        text.pack(fill=tk.BOTH, expand=True)
        dialog.transient(self.root)
        dialog.grab_set()
        self.root.wait_window(dialog)

    def clear_level(self) -> None:
        """Fill the grid with air after confirmation."""
        if messagebox.askyesno(
            "Clear Level", "Are you sure you want to clear the level?", parent=self.root
        ):
            self.grid.clear()
            self.redraw()

    def resize_level(self, width: int, height: int) -> None:
        """Change the grid to ``width`` columns and ``height`` rows."""
        self.grid.resize(width, height)
        self.redraw()

    def resize_dialog(self) -> None:
        """Ask for a new width and height and resize the grid."""
        dialog = tk.Toplevel(self.root)
        dialog.title("Resize Level")
        fields = tk.Frame(dialog, padx=8, pady=8)
        fields.pack()
        tk.Label(fields, text="Width:").grid(row=0, column=0, sticky="e")
        width_edit = tk.Entry(fields)
        width_edit.insert(0, str(self.grid.cols))
        width_edit.grid(row=0, column=1)
        tk.Label(fields, text="Height:").grid(row=1, column=0, sticky="e")
        height_edit = tk.Entry(fields)
        height_edit.insert(0, str(self.grid.rows))
        height_edit.grid(row=1, column=1)

        def apply() -> None:
            try:
                width = int(width_edit.get())
                height = int(height_edit.get())
            except ValueError:
                width = height = 0
            if width > 0 and height > 0:
                self.resize_level(width, height)
                dialog.destroy()
            else:
                messagebox.showwarning(
                    "Invalid Input",
                    "Please enter valid positive integers for width and height.",
                    parent=dialog,
                )

        tk.Button(dialog, text="Apply", command=apply).pack(fill=tk.X, padx=8, pady=(0, 8))
        dialog.transient(self.root)
        dialog.grab_set()
        self.root.wait_window(dialog)

    def undo(self) -> None:
        """Revert the last tile placement."""
        if self.grid.undo() is not None:
            self.redraw()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the level editor window."""
    parser = argparse.ArgumentParser(prog="leveleditor", description="Edit game levels.")
    parser.parse_args(argv)
    _require_tk()
    root = tk.Tk()
    EditorWindow(root)
    try:
        root.state("zoomed")
    except tk.TclError:
        try:
            root.attributes("-zoomed", True)
        except tk.TclError:
            pass
    root.mainloop()
    return 0