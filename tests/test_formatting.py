"""
Tests for number formatting.

Tests cover:
- format_exponential fixed and scientific notation
- format_hertz SI prefix selection and edge policy
"""

import math
import random

import pytest

from chuk_mcp_xen.config import FormattingConfig
from chuk_mcp_xen.core import format_exponential, format_hertz
from chuk_mcp_xen.exceptions import InvalidNumericError


class TestFormatExponential:
    """Tests for format_exponential."""

    def test_small_number_as_is(self) -> None:
        """Numbers below 10000 use fixed notation."""
        assert format_exponential(1234.567) == "1234.567"

    def test_tiny_number_not_scientific(self) -> None:
        """Tiny numbers stay in fixed notation."""
        assert format_exponential(0.001) == "0.001"
        assert format_exponential(0.00001) == "0.000"

    def test_large_number_scientific(self) -> None:
        """Large numbers use scientific notation without exponent padding."""
        assert format_exponential(123456.789) == "1.235e+5"

    def test_very_large_number(self) -> None:
        """Very large numbers keep a short exponent."""
        assert format_exponential(23456789e32) == "2.346e+39"

    def test_threshold(self) -> None:
        """Scientific notation starts at exactly 10000."""
        assert format_exponential(9999.9) == "9999.900"
        assert format_exponential(10000) == "1.000e+4"

    def test_negative_numbers(self) -> None:
        """Sign is preserved in both notations."""
        assert format_exponential(-1.5) == "-1.500"
        assert format_exponential(-123456.789) == "-1.235e+5"

    def test_negative_zero(self) -> None:
        """Negative zero renders without a sign."""
        assert format_exponential(-0.0) == "0.000"

    def test_mantissa_carry(self) -> None:
        """Rounding up to 10 renormalizes the mantissa."""
        assert format_exponential(99999.5) == "1.000e+5"
        assert format_exponential(99995.0) == "1.000e+5"
        assert format_exponential(99994.0) == "9.999e+4"

    def test_fraction_digits(self) -> None:
        """Digit count is configurable."""
        assert format_exponential(math.pi, 1) == "3.1"
        assert format_exponential(math.pi, 0) == "3"
        assert format_exponential(123456, 0) == "1e+5"

    def test_config_threshold(self) -> None:
        """Threshold comes from the formatting config."""
        config = FormattingConfig(exponential_threshold=100)
        assert format_exponential(1234.5, config=config) == "1.235e+3"

    def test_agrees_with_fixed_rounding(self) -> None:
        """Below the threshold, output matches plain fixed-point rounding."""
        rng = random.Random(1234)
        for _ in range(200):
            value = rng.random() * 10000
            assert format_exponential(value) == f"{value:.3f}"

    def test_rejects_non_finite(self) -> None:
        """Infinity and NaN are rejected."""
        with pytest.raises(InvalidNumericError):
            format_exponential(math.inf)
        with pytest.raises(InvalidNumericError):
            format_exponential(math.nan)

    def test_many_fraction_digits(self) -> None:
        """Digit counts beyond the default decimal precision still round exactly."""
        assert format_exponential(5000.0, 25) == "5000." + "0" * 25
        assert format_exponential(123456.0, 30) == "1.23456" + "0" * 25 + "e+5"
        assert format_exponential(0.5, 100) == "0.5" + "0" * 99

    @pytest.mark.parametrize("digits", [-1, 101])
    def test_fraction_digits_out_of_range(self, digits: int) -> None:
        with pytest.raises(InvalidNumericError) as exc_info:
            format_exponential(1234.5, digits)
        assert exc_info.value.expected == "fraction digits"


class TestFormatHertz:
    """Tests for format_hertz."""

    def test_reasonable_frequencies_as_is(self) -> None:
        """Audio range frequencies have no prefix."""
        assert format_hertz(12.345) == "12.345Hz"
        assert format_hertz(21234.567) == "21234.567Hz"

    def test_millihertz(self) -> None:
        assert format_hertz(123.456e-3) == "123.456mHz"

    def test_microhertz(self) -> None:
        assert format_hertz(123.456e-6) == "123.456µHz"

    def test_kilohertz(self) -> None:
        assert format_hertz(123.456e3) == "123.456kHz"

    def test_megahertz(self) -> None:
        assert format_hertz(123.456e6) == "123.456MHz"

    def test_ronnahertz(self) -> None:
        assert format_hertz(123.456e27) == "123.456RHz"

    def test_quettahertz(self) -> None:
        """The top of the ladder is quetta."""
        assert format_hertz(123.456e30) == "123.456QHz"

    def test_exponential_fallback(self) -> None:
        """Frequencies beyond the ladder fall back to exponential format."""
        assert format_hertz(1.23456e40) == "1.235e+40Hz"

    def test_zeros_out_tiny_frequencies(self) -> None:
        """Frequencies below quecto saturate to zero."""
        assert format_hertz(1.23456e-40) == "0.000qHz"

    def test_zero(self) -> None:
        assert format_hertz(0) == "0.000Hz"

    def test_prefix_boundary(self) -> None:
        """The next prefix starts at 100000 of the current one."""
        assert format_hertz(99999) == "99999.000Hz"
        assert format_hertz(100000) == "100.000kHz"
        assert format_hertz(1) == "1.000Hz"
        assert format_hertz(0.5) == "500.000mHz"

    def test_prefix_chosen_after_rounding(self) -> None:
        """A value that rounds up to the next boundary takes the next prefix."""
        assert format_hertz(99999.9999) == "100.000kHz"
        assert format_hertz(99999999.9) == "100.000MHz"
        assert format_hertz(0.99999999) == "1.000Hz"
        assert format_hertz(-0.99999999) == "-1.000Hz"
        assert format_hertz(0.99999999e-3) == "1.000mHz"

    def test_sign_preserved(self) -> None:
        """Negative frequencies keep their sign across prefixes."""
        for value in (0.5, 440.0, 123456.0, 1.5e9):
            assert format_hertz(-value) == "-" + format_hertz(value)

    def test_prefix_monotonic(self) -> None:
        """Increasing magnitude never moves to a smaller prefix."""
        ladder = "qryzafpnµm kMGTPEZYRQ"
        previous = -1
        for exponent in range(-30, 31):
            text = format_hertz(1.5 * 10.0**exponent)
            symbol = text[-3] if not text[-3].isdigit() else " "
            index = ladder.index(symbol)
            assert index >= previous
            previous = index

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(InvalidNumericError):
            format_hertz(-math.inf)
