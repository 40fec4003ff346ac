"""
Number formatting - fixed/scientific notation and SI-prefixed frequencies.

Rounding is done on the exact decimal expansion of the float, half away
from zero, so the output does not depend on how the platform's printf
breaks ties.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from chuk_mcp_xen.config import DEFAULT_FORMATTING_CONFIG, FormattingConfig
from chuk_mcp_xen.constants import (
    MAX_FRACTION_DIGITS,
    SI_BASE_INDEX,
    SI_PREFIXES,
    ErrorMessages,
)
from chuk_mcp_xen.exceptions import InvalidNumericError


def _check_finite(x: float) -> None:
    if not math.isfinite(x):
        raise InvalidNumericError(
            ErrorMessages.NON_FINITE.format(token=x), token=str(x), expected="finite number"
        )


def _check_fraction_digits(fraction_digits: int) -> None:
    if (
        isinstance(fraction_digits, bool)
        or not isinstance(fraction_digits, int)
        or not 0 <= fraction_digits <= MAX_FRACTION_DIGITS
    ):
        raise InvalidNumericError(
            ErrorMessages.INVALID_FRACTION_DIGITS.format(
                digits=fraction_digits, limit=MAX_FRACTION_DIGITS
            ),
            token=str(fraction_digits),
            expected="fraction digits",
        )


def _quantize(value: Decimal, exponent: int) -> Decimal:
    """Round half away from zero to a multiple of 10**exponent."""
    with localcontext() as ctx:
        # Room for every kept digit plus a carry
        ctx.prec = max(value.adjusted(), exponent) - exponent + 2
        return value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


def _to_fixed(x: float, fraction_digits: int) -> str:
    """Fixed-point rendering with exactly `fraction_digits` decimals."""
    if x == 0:
        x = 0.0  # drop the sign of negative zero
    return format(_quantize(Decimal(x), -fraction_digits), "f")


def _to_exponential(x: float, fraction_digits: int) -> str:
    """Scientific rendering like 1.235e+5 (no exponent padding)."""
    value = Decimal(x)
    if value == 0:
        return f"{_to_fixed(0.0, fraction_digits)}e+0"

    exponent = value.adjusted()
    rounded = _quantize(value, exponent - fraction_digits)
    if rounded.adjusted() > exponent:
        # 9.9995 -> 10.000, renormalize to 1.000 and bump the exponent
        exponent += 1
        rounded = _quantize(value, exponent - fraction_digits)

    with localcontext() as ctx:
        ctx.prec = fraction_digits + 2
        mantissa = format(rounded.scaleb(-exponent), "f")
    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def format_exponential(
    x: float,
    fraction_digits: int | None = None,
    config: FormattingConfig | None = None,
) -> str:
    """
    Format a number in fixed notation, switching to scientific for large values.

    Args:
        x: Number to format
        fraction_digits: Digits after the decimal point, 0 to 100 (default from config, 3)
        config: Formatting configuration

    Returns:
        e.g. "1234.567" or "1.235e+5"

    Raises:
        InvalidNumericError: If x is infinite or NaN, or fraction_digits is out of range
    """
    config = config or DEFAULT_FORMATTING_CONFIG
    if fraction_digits is None:
        fraction_digits = config.fraction_digits
    _check_fraction_digits(fraction_digits)
    _check_finite(x)

    if abs(x) < config.exponential_threshold:
        return _to_fixed(x, fraction_digits)
    return _to_exponential(x, fraction_digits)


def _scale_to_prefix(x: float, index: int) -> float:
    power = 3 * (index - SI_BASE_INDEX)
    return x / 10.0**power if power >= 0 else x * 10.0**-power


def format_hertz(x: float, config: FormattingConfig | None = None) -> str:
    """
    Format a frequency with an SI prefix.

    Values from 1 Hz up to (but excluding) `prefix_step_up` stay unprefixed.
    The prefix is chosen for the rounded value, so 0.99999999 Hz is
    "1.000Hz" rather than "1000.000mHz". Below the smallest prefix the value
    saturates towards 0.000qHz; above the largest prefix the value falls
    back to scientific notation.

    Args:
        x: Frequency in hertz
        config: Formatting configuration

    Returns:
        e.g. "123.456kHz"
    """
    config = config or DEFAULT_FORMATTING_CONFIG
    _check_finite(x)
    digits = config.fraction_digits
    if x == 0:
        x = 0.0

    index = SI_BASE_INDEX
    magnitude = abs(x)
    if magnitude != 0:
        while magnitude >= config.prefix_step_up:
            magnitude /= 1000
            index += 1
        while magnitude < 1 and index > 0:
            magnitude *= 1000
            index -= 1

    while index < len(SI_PREFIXES):
        rounded = _quantize(Decimal(_scale_to_prefix(x, index)), -digits)
        limit = config.prefix_step_up if index >= SI_BASE_INDEX else 1000
        if abs(rounded) < limit:
            return f"{format(rounded, 'f')}{SI_PREFIXES[index]}Hz"
        # Rounding carried into the next prefix
        index += 1

    return f"{format_exponential(x, digits, config)}Hz"
