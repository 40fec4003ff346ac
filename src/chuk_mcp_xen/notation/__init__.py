"""
Interval notation - text in, intervals out.

The scanner splits text into tokens; the parser classifies each token
and converts it to an Interval.
"""

from chuk_mcp_xen.notation.parser import parse_chord_input, parse_interval
from chuk_mcp_xen.notation.scanner import split_tokens

__all__ = [
    "parse_chord_input",
    "parse_interval",
    "split_tokens",
]
