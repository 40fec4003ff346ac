"""
Keyboard tools - MCP tools for generalized keyboard layouts.

Tools for coloring the keys of an equal division white and black.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_xen.config import DEFAULT_CONFIG, XenConfig
from chuk_mcp_xen.constants import CENTS_PER_OCTAVE, KeyColor
from chuk_mcp_xen.core import auto_key_colors, gap_key_colors
from chuk_mcp_xen.exceptions import NotationError
from chuk_mcp_xen.notation import parse_interval
from chuk_mcp_xen.tools.notation import notation_error_response

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _colors_response(colors: list[KeyColor], **extra: Any) -> str:
    return json.dumps(
        {
            "status": "success",
            "colors": [c.value for c in colors],
            "white": colors.count(KeyColor.WHITE),
            "black": colors.count(KeyColor.BLACK),
            **extra,
        }
    )


def register_keyboard_tools(
    mcp: ChukMCPServer,
    config: XenConfig | None = None,
) -> dict[str, Any]:
    """
    Register keyboard layout tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Notation configuration, used to read generator intervals

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    config = config or DEFAULT_CONFIG

    @mcp.tool  # type: ignore[arg-type]
    async def xen_auto_key_colors(divisions: int) -> str:
        """
        Color the keys of an equal division of the octave.

        Picks a chain of fifths as the white keys, so 12 keys give the
        piano layout starting from A.

        Args:
            divisions: Number of keys per octave

        Returns:
            JSON string with one color per key

        Example:
            xen_auto_key_colors(divisions=19)
        """
        try:
            return _colors_response(auto_key_colors(divisions), divisions=divisions)
        except NotationError as e:
            return notation_error_response(e)
        except Exception as e:
            logger.exception("Failed to color keys")
            return json.dumps({"status": "error", "message": str(e)})

    tools["xen_auto_key_colors"] = xen_auto_key_colors

    @mcp.tool  # type: ignore[arg-type]
    async def xen_gap_key_colors(generator: str, white_count: int, offset: int = 0) -> str:
        """
        Color keys from a generated scale.

        The generator is any interval notation; it is reduced to a fraction
        of the octave. White keys are `white_count` notes of the generator
        chain and each large step of that scale holds a black key.

        Args:
            generator: Generator interval, e.g. "7\\12", "3/2" or "696.6"
            white_count: Number of white keys
            offset: How many generators below the reference the chain starts

        Returns:
            JSON string with one color per key

        Example:
            xen_gap_key_colors(generator="7\\12", white_count=7, offset=1)
        """
        try:
            interval = parse_interval(generator, config.notation)
            octaves = interval.total_cents() / CENTS_PER_OCTAVE
            colors = gap_key_colors(octaves, white_count, offset)
            return _colors_response(colors, generator=str(interval), generator_octaves=octaves)
        except NotationError as e:
            return notation_error_response(e)
        except Exception as e:
            logger.exception("Failed to color keys from generator")
            return json.dumps({"status": "error", "message": str(e)})

    tools["xen_gap_key_colors"] = xen_gap_key_colors

    return tools
