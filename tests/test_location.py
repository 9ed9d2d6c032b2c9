"""Tests for SourceLocation."""

import pytest

from plexer.location import SourceLocation


class TestFromOffset:
    """Offsets map to 1-indexed line/column pairs."""

    @pytest.mark.parametrize(
        ("source", "offset", "lineno", "col"),
        [
            ("abc", 0, 1, 1),
            ("abc", 2, 1, 3),
            ("ab\ncd", 2, 1, 3),
            ("ab\ncd", 3, 2, 1),
            ("ab\ncd", 5, 2, 3),
            ("\n\n\nx", 3, 4, 1),
            ("", 0, 1, 1),
        ],
    )
    def test_positions(self, source: str, offset: int, lineno: int, col: int) -> None:
        loc = SourceLocation.from_offset(source, offset)
        assert (loc.lineno, loc.col_offset, loc.offset) == (lineno, col, offset)

    @pytest.mark.parametrize("offset", [-1, 4])
    def test_out_of_range(self, offset: int) -> None:
        with pytest.raises(ValueError):
            SourceLocation.from_offset("abc", offset)


def test_str() -> None:
    assert str(SourceLocation(3, 7)) == "3:7"


def test_frozen() -> None:
    loc = SourceLocation(1, 1)
    with pytest.raises(AttributeError):
        loc.lineno = 2  # type: ignore[misc]
