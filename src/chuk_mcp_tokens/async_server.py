#!/usr/bin/env python3
"""
Async Design Token MCP Server using chuk-mcp-server

This server exports design tokens from design system snapshots. Each token
is placed under its root group with a qualified name built from its group
hierarchy, its brand, and its raw property values.

The server provides tools for:
- Structuring raw token payloads
- Exporting a snapshot version to the structured-token file
- Summarizing snapshot versions
"""

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.config import ExporterConfiguration
from chuk_mcp_tokens.exporter import SnapshotProvider
from chuk_mcp_tokens.tools import register_export_tools

logger = logging.getLogger(__name__)

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SNAPSHOTS_DIR = BASE_PATH / "snapshots"
OUTPUT_DIR = BASE_PATH / "output"
CONFIG_PATH = BASE_PATH / "exporter.yaml"


def create_server(
    config: ExporterConfiguration,
    snapshots_dir: Path = SNAPSHOTS_DIR,
    output_dir: Path = OUTPUT_DIR,
) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Create the MCP server and register the export tools.

    Args:
        config: Resolved exporter configuration
        snapshots_dir: Root of the snapshot files
        output_dir: Directory exports are written to

    Returns:
        The server and its registered tool functions
    """
    mcp = ChukMCPServer("chuk-mcp-tokens")
    provider = SnapshotProvider(snapshots_dir)
    tools = register_export_tools(mcp, provider, config, output_dir)

    logger.info("CHUK Tokens MCP Server initialized")
    logger.info(f"  Snapshots dir: {snapshots_dir}")
    logger.info(f"  Output dir: {output_dir}")
    logger.info(f"  Config: {config.model_dump()}")
    return mcp, tools
