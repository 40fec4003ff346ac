#!/usr/bin/env python3
"""
Entry point for the CHUK Xen MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_xen.config import CONFIG_ENV_VAR

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Xen MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: $XEN_CONFIG or ./xen.yaml if present)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.config is not None:
        # Read by async_server when it builds the server on import
        os.environ[CONFIG_ENV_VAR] = str(args.config)
        logger.info(f"Loading configuration from {args.config}")

    # Import after argument parsing to avoid issues
    from chuk_mcp_xen.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Xen MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Xen MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
