"""
chuk-mcp-xen - microtonal interval notation and keyboard layouts.

Parses ratios, cents, equal temperament steps and monzos into intervals,
formats numbers and frequencies for display, and colors generalized
keyboards for any equal division of the octave.
"""

from chuk_mcp_xen.config import FormattingConfig, NotationConfig, XenConfig, load_config
from chuk_mcp_xen.constants import DEFAULT_NUMBER_OF_COMPONENTS, IntervalType, KeyColor
from chuk_mcp_xen.core import (
    Chord,
    ExtendedMonzo,
    Interval,
    auto_key_colors,
    format_exponential,
    format_hertz,
    gap_key_colors,
)
from chuk_mcp_xen.exceptions import (
    ConfigurationError,
    InvalidNumericError,
    MalformedTokenError,
    NotationError,
    VectorOverflowError,
    XenError,
)
from chuk_mcp_xen.notation import parse_chord_input, parse_interval

__all__ = [
    "DEFAULT_NUMBER_OF_COMPONENTS",
    "IntervalType",
    "KeyColor",
    # Config
    "NotationConfig",
    "FormattingConfig",
    "XenConfig",
    "load_config",
    # Core
    "Chord",
    "ExtendedMonzo",
    "Interval",
    "format_exponential",
    "format_hertz",
    "auto_key_colors",
    "gap_key_colors",
    # Notation
    "parse_chord_input",
    "parse_interval",
    # Errors
    "XenError",
    "NotationError",
    "MalformedTokenError",
    "InvalidNumericError",
    "VectorOverflowError",
    "ConfigurationError",
]
