"""
Core notation primitives.

These are the pure building blocks everything else composes on:
- ExtendedMonzo: Prime exponents plus residual and cents offset
- Interval: One interval in one of four notations
- Chord: Ordered stack of intervals
- format_exponential / format_hertz: Number display
- auto_key_colors / gap_key_colors: Keyboard coloring
"""

from chuk_mcp_xen.core.chord import Chord
from chuk_mcp_xen.core.formatting import format_exponential, format_hertz
from chuk_mcp_xen.core.interval import (
    CentsValue,
    EqualTemperamentValue,
    Interval,
    MonzoValue,
    RatioValue,
)
from chuk_mcp_xen.core.keyboard import auto_key_colors, gap_key_colors
from chuk_mcp_xen.core.monzo import ExtendedMonzo, factorize, primes

__all__ = [
    # Monzo
    "ExtendedMonzo",
    "factorize",
    "primes",
    # Interval
    "Interval",
    "RatioValue",
    "CentsValue",
    "EqualTemperamentValue",
    "MonzoValue",
    "Chord",
    # Formatting
    "format_exponential",
    "format_hertz",
    # Keyboard
    "auto_key_colors",
    "gap_key_colors",
]
