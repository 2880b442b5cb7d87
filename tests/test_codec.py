import pytest

from leveleditor.codec import DecodeError, Level, decode, encode


def test_encode_worked_example():
    level = Level(("--##", "####"), (1, 2, 3, 4))
    assert encode(level) == "2-2#|4#::1 2 3 4"


def test_encode_empty_level_has_only_next_levels():
    assert encode(Level(())) == "::0 0 0 0"


def test_decode_worked_example():
    level = decode("2-2#|4#::1 2 3 4")
    assert level.grid == ("--##", "####")
    assert level.next_levels == (1, 2, 3, 4)
    assert level.rows == 2
    assert level.cols == 4


@pytest.mark.parametrize(
    "grid",
    [
        ("-",),
        ("#-#-", "----", "^^&*"),
        ("LRUD", "PPPP", "S=-#"),
        ("-" * 25,) * 12,
    ],
)
def test_round_trip(grid):
    level = Level(grid, (5, -1, 0, 9999))
    assert decode(encode(level)) == level


def test_runs_of_single_symbol_have_no_count():
    text = encode(Level(("#-#",)))
    assert text.startswith("#-#::")


def test_decode_without_separator_zeroes_next_levels():
    level = decode("ab|cd")
    assert level.grid == ("ab", "cd")
    assert level.next_levels == (0, 0, 0, 0)


def test_decode_multi_digit_run():
    level = decode("12x")
    assert level.grid == ("x" * 12,)


def test_decode_missing_next_levels_become_zero():
    level = decode("ab::7")
    assert level.next_levels == (7, 0, 0, 0)


def test_decode_stops_at_unparsable_next_level():
    level = decode("ab::1 x 3 4")
    assert level.next_levels == (1, 0, 0, 0)


def test_decode_negative_next_levels():
    level = decode("ab::-1 -2 3 4")
    assert level.next_levels == (-1, -2, 3, 4)


def test_decode_trailing_separator_adds_no_row():
    assert decode("ab|").grid == ("ab",)


def test_decode_count_without_symbol():
    with pytest.raises(DecodeError):
        decode("ab|3")


def test_decode_row_width_mismatch_in_middle():
    with pytest.raises(DecodeError):
        decode("ab|abc|ab")


def test_decode_row_width_mismatch_at_end():
    with pytest.raises(DecodeError):
        decode("abc|ab")


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        decode("5")


def test_level_rejects_ragged_grid():
    with pytest.raises(ValueError):
        Level(("ab", "abc"))


def test_level_rejects_wrong_next_level_count():
    with pytest.raises(ValueError):
        Level(("ab",), (1, 2, 3))


def test_level_rejects_empty_rows():
    with pytest.raises(ValueError):
        Level(("",))