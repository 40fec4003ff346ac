#!/usr/bin/env python3
"""
Async Xen MCP Server using chuk-mcp-server

This server provides MCP tools for microtonal interval notation and
generalized keyboard layouts.

The server provides tools for:
- Parsing chords written as ratios, cents, equal temperament steps and monzos
- Measuring single intervals in cents
- Formatting numbers and frequencies for display
- Coloring the keys of any equal division of the octave
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_xen.config import XenConfig, default_config_path, load_config
from chuk_mcp_xen.tools import register_keyboard_tools, register_notation_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Optional project configuration: $XEN_CONFIG or ./xen.yaml
CONFIG_PATH = default_config_path()


def create_server(config: XenConfig) -> tuple[ChukMCPServer, dict]:
    """
    Create the MCP server and register all tools.

    Args:
        config: Notation and formatting configuration

    Returns:
        (server, tools) where tools maps tool names to functions
    """
    server = ChukMCPServer("chuk-mcp-xen")
    tools = {
        **register_notation_tools(server, config),
        **register_keyboard_tools(server, config),
    }
    return server, tools


config = load_config(CONFIG_PATH)
mcp, tools = create_server(config)

# Export tool functions for direct access
xen_parse_chord = tools["xen_parse_chord"]
xen_interval_cents = tools["xen_interval_cents"]
xen_format_number = tools["xen_format_number"]
xen_format_frequency = tools["xen_format_frequency"]
xen_auto_key_colors = tools["xen_auto_key_colors"]
xen_gap_key_colors = tools["xen_gap_key_colors"]

logger.info("CHUK Xen MCP Server initialized")
logger.info(f"  Config path: {CONFIG_PATH}")
logger.info(f"  Monzo components: {config.notation.number_of_components}")
