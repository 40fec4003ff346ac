"""
MCP tool implementations.

Tools are organized by domain:
- notation - Interval parsing and number formatting
- keyboard - Key coloring for equal divisions
"""

from chuk_mcp_xen.tools.keyboard import register_keyboard_tools
from chuk_mcp_xen.tools.notation import register_notation_tools

__all__ = [
    "register_keyboard_tools",
    "register_notation_tools",
]
