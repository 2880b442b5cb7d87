from pathlib import Path

import pytest

from leveleditor.store import (
    LevelEntry,
    append_level,
    copy_file,
    next_level_name,
    read_levels,
    write_levels,
    write_renumbered,
)


def test_missing_file_has_no_levels(tmp_path):
    assert read_levels(tmp_path / "absent.rll") == []


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "levels.rll"
    entries = [LevelEntry("Level 1", "3#::0 0 0 0"), LevelEntry("Level 2", "2-|2-::1 2 3 4")]
    write_levels(path, entries)
    assert read_levels(path) == entries


def test_write_levels_format(tmp_path):
    path = tmp_path / "levels.rll"
    write_levels(path, [LevelEntry("Level 1", "3#::0 0 0 0")])
    assert path.read_text(encoding="utf-8") == "; Level 1\n3#::0 0 0 0\n"


def test_append_adds_after_existing(tmp_path):
    path = tmp_path / "levels.rll"
    first = LevelEntry("Level 1", "#-::0 0 0 0")
    second = LevelEntry("Level 2", "-#::0 0 0 0")
    write_levels(path, [first])
    append_level(path, second)
    assert read_levels(path) == [first, second]


def test_append_creates_file(tmp_path):
    path = tmp_path / "levels.rll"
    entry = LevelEntry("Level 1", "*::0 0 0 0")
    append_level(path, entry)
    assert read_levels(path) == [entry]


def test_multiline_data_is_joined(tmp_path):
    path = tmp_path / "levels.rll"
    path.write_text("; Level 1\nab\n\ncd\n", encoding="utf-8")
    assert read_levels(path) == [LevelEntry("Level 1", "ab|cd")]


def test_lines_are_trimmed_and_other_headers_ignored(tmp_path):
    path = tmp_path / "levels.rll"
    path.write_text("  ; Level 7  \n  x::0 0 0 0 \n; comment\n", encoding="utf-8")
    entries = read_levels(path)
    assert [e.name for e in entries] == ["Level 7"]
    assert entries[0].data.startswith("x::0 0 0 0")


def test_write_renumbered(tmp_path):
    path = tmp_path / "levels.rll"
    entries = [LevelEntry("Level 3", "a"), LevelEntry("Level 9", "b")]
    renamed = write_renumbered(path, entries)
    assert [e.name for e in renamed] == ["Level 1", "Level 2"]
    assert [e.data for e in renamed] == ["a", "b"]
    assert read_levels(path) == renamed


def test_next_level_name_uses_highest_number():
    entries = [LevelEntry("Level 1", ""), LevelEntry("Level 5", ""), LevelEntry("Other", "")]
    assert next_level_name(entries) == "Level 6"


def test_next_level_name_empty():
    assert next_level_name([]) == "Level 1"


def test_copy_file(tmp_path):
    source = tmp_path / "a.rll"
    source.write_text("data", encoding="utf-8")
    target = tmp_path / "out"
    target.mkdir()
    destination = copy_file(source, target)
    assert destination == target / "a.rll"
    assert destination.read_text(encoding="utf-8") == "data"


def test_copy_file_refuses_existing(tmp_path):
    source = tmp_path / "a.rll"
    source.write_text("new", encoding="utf-8")
    target = tmp_path / "out"
    target.mkdir()
    (target / "a.rll").write_text("old", encoding="utf-8")
    with pytest.raises(FileExistsError):
        copy_file(source, target)
    assert (target / "a.rll").read_text(encoding="utf-8") == "old"


def test_copy_file_overwrites_when_asked(tmp_path):
    source = tmp_path / "a.rll"
    source.write_text("new", encoding="utf-8")
    target = tmp_path / "out"
    target.mkdir()
    (target / "a.rll").write_text("old", encoding="utf-8")
    destination = copy_file(source, target, True)
    assert destination.read_text(encoding="utf-8") == "new"


def test_copy_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing.rll", tmp_path)
    assert not Path(tmp_path / "missing.rll").exists()