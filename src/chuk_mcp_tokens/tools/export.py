"""
Export tools - MCP tools for structuring and exporting design tokens.

Tools for structuring raw token payloads, exporting a design system
snapshot to the structured-token file, and inspecting snapshots.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.config import ExporterConfiguration
from chuk_mcp_tokens.constants import SuccessMessages
from chuk_mcp_tokens.exporter import (
    DesignSystemProvider,
    InMemoryProvider,
    TokenExporter,
    safe_name,
    sort_tokens_by_parent_group,
    write_output_files,
)
from chuk_mcp_tokens.models import RemoteVersionIdentifier, structured_tokens_to_dict
from chuk_mcp_tokens.structuring import structure_tokens_with_report

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    provider: DesignSystemProvider,
    config: ExporterConfiguration,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register token export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        provider: Design system data provider
        config: Exporter configuration
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    exporter = TokenExporter(provider, config)

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_structure(
        tokens: list[dict[str, Any]],
        token_groups: list[dict[str, Any]],
        brands: list[dict[str, Any]] | None = None,
    ) -> str:
        """
        Structure raw design tokens by their root group.

        Accepts tokens, token groups and brands as the design system
        returns them (camelCase keys are fine).

        Args:
            tokens: Token payloads
            token_groups: Token group payloads
            brands: Optional brand payloads

        Returns:
            JSON string with structured tokens and drop counts

        Example:
            tokens_structure(
                tokens=[{"id": "t1", "name": "blue500", "parentGroupId": "g2",
                         "propertyValues": {"variable": "--blue-500"}}],
                token_groups=[{"id": "g1", "name": "Color"},
                              {"id": "g2", "name": "Primary", "parentGroupId": "g1"}],
            )
        """
        try:
            data = InMemoryProvider.from_dict(
                {"tokens": tokens, "tokenGroups": token_groups, "brands": brands or []}
            )
            ordered = sort_tokens_by_parent_group(data.tokens) if config.sort_tokens else data.tokens
            report = structure_tokens_with_report(data.token_groups, ordered, data.brands, config)

            return json.dumps(
                {
                    "status": "success",
                    "tokens": structured_tokens_to_dict(report.tokens),
                    "structured_count": report.structured_count,
                    "dropped_token_ids": report.dropped_token_ids,
                    "message": SuccessMessages.TOKENS_STRUCTURED.format(
                        count=report.structured_count, groups=len(report.tokens)
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to structure tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_structure"] = tokens_structure

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_export(
        design_system_id: str,
        version_id: str,
        output_name: str | None = None,
    ) -> str:
        """
        Export a design system version to the structured-token file.

        Args:
            design_system_id: Design system ID
            version_id: Version ID
            output_name: Optional subdirectory of the output directory (a single
                path component; separators are replaced)

        Returns:
            JSON string with the written file path

        Example:
            tokens_export(design_system_id="acme", version_id="v1")
        """
        try:
            version = RemoteVersionIdentifier(
                design_system_id=design_system_id, version_id=version_id
            )
            files = await exporter.export(version)
            target_dir = output_dir / safe_name(output_name) if output_name else output_dir
            paths = write_output_files(files, target_dir)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(paths[0]),
                    "bytes": len(files[0].content.encode("utf-8")),
                    "message": SuccessMessages.EXPORT_WRITTEN.format(
                        file_name=files[0].file_name, path=paths[0].parent
                    ),
                }
            )
        except FileNotFoundError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_export"] = tokens_export

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_snapshot(design_system_id: str, version_id: str) -> str:
        """
        Summarize a design system version.

        Reports how many tokens, groups and brands it has, the root
        groups tokens resolve to, and how many tokens would be dropped.

        Args:
            design_system_id: Design system ID
            version_id: Version ID

        Returns:
            JSON string with the summary

        Example:
            tokens_describe_snapshot(design_system_id="acme", version_id="v1")
        """
        try:
            version = RemoteVersionIdentifier(
                design_system_id=design_system_id, version_id=version_id
            )
            groups = await provider.get_token_groups(version)
            brands = await provider.get_brands(version)
            report = await exporter.structure(version)

            return json.dumps(
                {
                    "status": "success",
                    "version": str(version),
                    "token_count": report.total_count,
                    "group_count": len(groups),
                    "brands": [b.name for b in brands],
                    "root_groups": {name: len(items) for name, items in report.tokens.items()},
                    "dropped_count": report.dropped_count,
                }
            )
        except FileNotFoundError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe snapshot")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_snapshot"] = tokens_describe_snapshot

    return tools
