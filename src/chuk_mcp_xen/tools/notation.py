"""
Notation tools - MCP tools for parsing intervals and formatting numbers.

Tools for reading interval notation and rendering values for display.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_xen.config import DEFAULT_CONFIG, XenConfig
from chuk_mcp_xen.core import Interval, format_exponential, format_hertz
from chuk_mcp_xen.exceptions import NotationError
from chuk_mcp_xen.notation import parse_chord_input, parse_interval

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def notation_error_response(error: NotationError) -> str:
    """JSON error payload pointing at the offending token."""
    return json.dumps(
        {
            "status": "error",
            "message": str(error),
            "token": error.token,
            "expected": error.expected,
        }
    )


def describe_interval(interval: Interval, config: XenConfig) -> dict[str, Any]:
    """Summarize an interval for a tool response."""
    monzo = interval.monzo
    return {
        "type": interval.type.value,
        "notation": str(interval),
        "cents": interval.total_cents(),
        "display": format_exponential(interval.total_cents(), config=config.formatting),
        "monzo": [str(e) for e in monzo.vector],
        "residual": str(monzo.residual),
    }


def register_notation_tools(
    mcp: ChukMCPServer,
    config: XenConfig | None = None,
) -> dict[str, Any]:
    """
    Register notation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Notation and formatting configuration

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    config = config or DEFAULT_CONFIG

    @mcp.tool  # type: ignore[arg-type]
    async def xen_parse_chord(text: str) -> str:
        """
        Parse a chord written in mixed interval notation.

        Tokens are separated by whitespace or any of : ; & | , and may be
        ratios (3/2), cents (701.955), equal temperament steps (7\\12)
        or monzos ([-1 1>). Terms within a token can be stacked with +
        and unstacked with -.

        Args:
            text: Chord text, e.g. "4:5:6" or "3/2 [0 0 1>-4/1"

        Returns:
            JSON string with one entry per interval, in source order

        Example:
            xen_parse_chord(text="3:2400.&11/3|1\\5")
        """
        try:
            chord = parse_chord_input(text, config.notation)
            return json.dumps(
                {
                    "status": "success",
                    "intervals": [describe_interval(i, config) for i in chord],
                    "count": len(chord),
                }
            )
        except NotationError as e:
            return notation_error_response(e)
        except Exception as e:
            logger.exception("Failed to parse chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["xen_parse_chord"] = xen_parse_chord

    @mcp.tool  # type: ignore[arg-type]
    async def xen_interval_cents(interval: str) -> str:
        """
        Get the size of a single interval in cents.

        Args:
            interval: Interval notation, e.g. "3/2", "7\\12", "[-1 1>"

        Returns:
            JSON string with the interval's type and size

        Example:
            xen_interval_cents(interval="5/4")
        """
        try:
            parsed = parse_interval(interval, config.notation)
            return json.dumps({"status": "success", "interval": describe_interval(parsed, config)})
        except NotationError as e:
            return notation_error_response(e)
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["xen_interval_cents"] = xen_interval_cents

    @mcp.tool  # type: ignore[arg-type]
    async def xen_format_number(value: float, fraction_digits: int | None = None) -> str:
        """
        Format a number, using scientific notation for large magnitudes.

        Args:
            value: Number to format
            fraction_digits: Digits after the decimal point (default 3)

        Returns:
            JSON string with the formatted text

        Example:
            xen_format_number(value=123456.789)
        """
        try:
            text = format_exponential(value, fraction_digits, config.formatting)
            return json.dumps({"status": "success", "text": text})
        except NotationError as e:
            return notation_error_response(e)
        except Exception as e:
            logger.exception("Failed to format number")
            return json.dumps({"status": "error", "message": str(e)})

    tools["xen_format_number"] = xen_format_number

    @mcp.tool  # type: ignore[arg-type]
    async def xen_format_frequency(frequency: float) -> str:
        """
        Format a frequency with an SI prefix (mHz, kHz, MHz, ...).

        Args:
            frequency: Frequency in hertz

        Returns:
            JSON string with the formatted text

        Example:
            xen_format_frequency(frequency=440.0)
        """
        try:
            text = format_hertz(frequency, config.formatting)
            return json.dumps({"status": "success", "text": text})
        except NotationError as e:
            return notation_error_response(e)
        except Exception as e:
            logger.exception("Failed to format frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["xen_format_frequency"] = xen_format_frequency

    return tools
