"""Reading and writing the level list file and copying save files."""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

__all__ = [
    "LevelEntry",
    "read_levels",
    "write_levels",
    "append_level",
    "write_renumbered",
    "next_level_name",
    "copy_file",
]

StrPath = Union[str, "PathLike[str]"]

_HEADER_PREFIX = "; Level"
_LEVEL_NUMBER_RE = re.compile(r"Level (\d+)")


@dataclass(frozen=True)
class LevelEntry:
    """A named level together with its encoded data."""

    name: str
    data: str


def read_levels(path: StrPath) -> list[LevelEntry]:
    """Read the levels stored in ``path``.

    A line starting with ``; Level`` names a new level; the non-empty lines
    that follow are joined with ``|`` to form its data.  A missing file holds
    no levels.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []

    entries: list[LevelEntry] = []
    name = ""
    data: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith(_HEADER_PREFIX):
            if name:
                entries.append(LevelEntry(name, "|".join(data)))
                data = []
            name = line[2:].strip()
        elif line:
            data.append(line)
    if name:
        entries.append(LevelEntry(name, "|".join(data)))
    return entries


def write_levels(path: StrPath, entries: Iterable[LevelEntry]) -> None:
    """Replace the contents of ``path`` with ``entries``."""
    with open(path, "w", encoding="utf-8") as out:
        for entry in entries:
            out.write(f"; {entry.name}\n")
            out.write(f"{entry.data}\n")


def append_level(path: StrPath, entry: LevelEntry) -> None:
    """Append one level to the end of ``path``."""
    with open(path, "a", encoding="utf-8") as out:
        out.write(f"\n; {entry.name}\n")
        out.write(f"{entry.data}\n")


def write_renumbered(path: StrPath, entries: Iterable[LevelEntry]) -> list[LevelEntry]:
    """Write ``entries`` to ``path`` named ``Level 1``, ``Level 2``, ...

    Returns the renamed entries.
    """
    renamed = [
        LevelEntry(f"Level {number}", entry.data)
        for number, entry in enumerate(entries, start=1)
    ]
    with open(path, "w", encoding="utf-8") as out:
        for entry in renamed:
            out.write(f"\n; {entry.name}\n")
            out.write(f"{entry.data}\n")
    return renamed


def next_level_name(entries: Iterable[LevelEntry]) -> str:
    """Return ``Level N`` where N is one more than the highest level number in use."""
    highest = 0
    for entry in entries:
        match = _LEVEL_NUMBER_RE.search(entry.name)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"Level {highest + 1}"


def copy_file(source: StrPath, target_dir: StrPath, overwrite: bool = False) -> Path:
    """Copy ``source`` into ``target_dir`` under the same file name.

    Raises FileNotFoundError when the source is missing and FileExistsError
    when the destination exists and ``overwrite`` is false.  Returns the
    destination path.
    """
    source_path = Path(source)
    if not source_path.is_file():
        raise FileNotFoundError(f"selected file does not exist: {source_path}")
    destination = Path(target_dir) / source_path.name
    if destination.exists():
        if not overwrite:
            raise FileExistsError(f"file already exists: {destination}")
        destination.unlink()
    shutil.copyfile(source_path, destination)
    return destination