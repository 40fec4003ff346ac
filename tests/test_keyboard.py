"""
Tests for keyboard coloring.

Tests cover:
- gap_key_colors for generated scales (keyboard.py)
- auto_key_colors for equal divisions of the octave (keyboard.py)
"""

import pytest

from chuk_mcp_xen.constants import KeyColor
from chuk_mcp_xen.core import auto_key_colors, gap_key_colors
from chuk_mcp_xen.exceptions import InvalidNumericError

W = KeyColor.WHITE
B = KeyColor.BLACK


def _pattern(colors: list[KeyColor]) -> str:
    return "".join("w" if c == W else "b" for c in colors)


class TestGapKeyColors:
    """Tests for coloring from a generator chain."""

    def test_c_major(self) -> None:
        """Seven fifths starting one below C give the piano from C."""
        assert _pattern(gap_key_colors(7 / 12, 7, 1)) == "wbwbwwbwbwbw"

    def test_meantone_fifth(self) -> None:
        """A tempered fifth gives the same layout."""
        assert _pattern(gap_key_colors(696.578 / 1200, 7, 1)) == "wbwbwwbwbwbw"

    def test_pentatonic(self) -> None:
        """Each large step holds exactly one black key."""
        assert _pattern(gap_key_colors(7 / 12, 5, 1)) == "wwbwwwb"

    def test_equal_steps_all_white(self) -> None:
        assert gap_key_colors(1 / 5, 5, 0) == [W] * 5

    def test_single_white_key(self) -> None:
        assert gap_key_colors(7 / 12, 1, 0) == [W]

    def test_starts_on_white(self) -> None:
        for offset in range(7):
            assert gap_key_colors(7 / 12, 7, offset)[0] == W

    def test_white_count(self) -> None:
        colors = gap_key_colors(7 / 12, 7, 3)
        assert colors.count(W) == 7
        assert colors.count(B) == 5

    def test_invalid_white_count(self) -> None:
        with pytest.raises(InvalidNumericError):
            gap_key_colors(7 / 12, 0, 0)

    def test_invalid_offset(self) -> None:
        with pytest.raises(InvalidNumericError) as exc_info:
            gap_key_colors(7 / 12, 7, 7)
        assert exc_info.value.expected == "offset"
        with pytest.raises(InvalidNumericError):
            gap_key_colors(7 / 12, 7, -1)

    def test_full_cycle_all_white(self) -> None:
        """Twelve fifths cover every key of 12 once."""
        assert gap_key_colors(7 / 12, 12, 0) == [W] * 12

    @pytest.mark.parametrize(
        "generator, white_count",
        [(7 / 12, 13), (7 / 12, 24), (1 / 2, 3), (0.0, 2), (1.0, 2)],
    )
    def test_chain_longer_than_cycle(self, generator: float, white_count: int) -> None:
        """A rational generator cannot give more white keys than its cycle."""
        with pytest.raises(InvalidNumericError) as exc_info:
            gap_key_colors(generator, white_count, 0)
        assert exc_info.value.expected == "white key count"

    def test_non_finite_generator(self) -> None:
        with pytest.raises(InvalidNumericError):
            gap_key_colors(float("nan"), 7, 0)


class TestAutoKeyColors:
    """Tests for automatic coloring of equal divisions."""

    def test_twelve_is_piano_from_a(self) -> None:
        # A A# B C C# D D# E F F# G G#
        assert _pattern(auto_key_colors(12)) == "wbwwbwbwwbwb"

    def test_seventeen(self) -> None:
        assert _pattern(auto_key_colors(17)) == "wwbwwwbwwbwwwbwwb"

    def test_nineteen(self) -> None:
        colors = auto_key_colors(19)
        assert colors.count(W) == 12
        assert colors.count(B) == 7

    def test_thirty_one(self) -> None:
        colors = auto_key_colors(31)
        assert colors.count(W) == 19
        assert colors.count(B) == 12

    def test_non_generating_fifth_spreads_evenly(self) -> None:
        """24 keys: the fifth 14\\24 is not coprime, so keys are spread."""
        colors = auto_key_colors(24)
        assert colors.count(B) == 10
        assert _pattern(auto_key_colors(4)) == "wbwb"

    def test_smallest_divisions(self) -> None:
        assert auto_key_colors(1) == [W]
        assert _pattern(auto_key_colors(2)) == "wb"
        assert _pattern(auto_key_colors(3)) == "wwb"

    @pytest.mark.parametrize("divisions", range(1, 61))
    def test_one_color_per_key(self, divisions: int) -> None:
        colors = auto_key_colors(divisions)
        assert len(colors) == divisions
        assert colors[0] == W
        assert W in colors

    def test_no_adjacent_black_keys(self) -> None:
        for divisions in (5, 7, 12, 17, 19, 22, 31, 41, 53):
            pattern = _pattern(auto_key_colors(divisions))
            assert "bb" not in pattern + pattern[0]

    def test_deterministic(self) -> None:
        assert auto_key_colors(22) == auto_key_colors(22)

    @pytest.mark.parametrize("divisions", [0, -12])
    def test_invalid_divisions(self, divisions: int) -> None:
        with pytest.raises(InvalidNumericError) as exc_info:
            auto_key_colors(divisions)
        assert exc_info.value.expected == "division count"

    def test_non_integer_divisions(self) -> None:
        with pytest.raises(InvalidNumericError):
            auto_key_colors(12.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidNumericError):
            auto_key_colors(True)  # type: ignore[arg-type]
