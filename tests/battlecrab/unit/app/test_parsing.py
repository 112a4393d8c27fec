import pytest

from battlecrab.game.app.parsing import (
    MalformedInputError,
    parse_index,
    parse_name,
    parse_positive_int,
)
from battlecrab.game.core.errors import OutOfBoundsError


def test_parse_name_trims_and_rejects_blank() -> None:
    assert parse_name("  Alice \n") == "Alice"
    with pytest.raises(MalformedInputError):
        parse_name("   ")


@pytest.mark.parametrize(("text", "expected"), [("1", 1), (" 12 ", 12), ("+3", 3)])
def test_parse_positive_int_accepts(text: str, expected: int) -> None:
    assert parse_positive_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1.5", "0", "-3", "+", "1_0", "\u0663", "1 0"])
def test_parse_positive_int_rejects(text: str) -> None:
    with pytest.raises(MalformedInputError):
        parse_positive_int(text)


def test_parse_index_validates_range() -> None:
    assert int(parse_index(" 2 ", 3)) == 2
    with pytest.raises(OutOfBoundsError):
        parse_index("3", 3)
    with pytest.raises(OutOfBoundsError):
        parse_index("-1", 3)
    with pytest.raises(MalformedInputError):
        parse_index("two", 3)
