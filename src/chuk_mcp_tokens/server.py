#!/usr/bin/env python3
"""
Entry point for the CHUK Tokens MCP Server.

Resolves the exporter configuration from exporter.yaml plus command-line
overrides, then serves the export tools over stdio or http.
"""

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Any

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
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
        "--snapshots-dir",
        type=Path,
        default=None,
        help="Snapshot root (default: ./snapshots)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Export directory (default: ./output)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Exporter configuration file (default: ./exporter.yaml)",
    )
    parser.add_argument(
        "--include-platform",
        action="store_true",
        default=None,
        help="Add each token's platform to its name block",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print exports with this JSON indent",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the configuration keys given on the command line."""
    overrides: dict[str, Any] = {}
    if args.include_platform is not None:
        overrides["include_platform"] = args.include_platform
    if args.indent is not None:
        overrides["indent"] = args.indent
    return overrides


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing so the server sees the log level
    from chuk_mcp_tokens import async_server
    from chuk_mcp_tokens.config import ConfigurationLoader

    config = ConfigurationLoader(args.config or async_server.CONFIG_PATH).load(
        config_overrides(args)
    )
    mcp, _ = async_server.create_server(
        config,
        snapshots_dir=args.snapshots_dir or async_server.SNAPSHOTS_DIR,
        output_dir=args.output_dir or async_server.OUTPUT_DIR,
    )

    if args.transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
