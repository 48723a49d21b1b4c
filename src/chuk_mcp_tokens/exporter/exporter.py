"""
Token exporter - fetches design system data and produces the output file.

export() runs: fetch (concurrently) -> sort -> structure -> serialize.
"""

from __future__ import annotations

import asyncio
import logging

from chuk_mcp_tokens.config import ExporterConfiguration
from chuk_mcp_tokens.constants import SuccessMessages
from chuk_mcp_tokens.exporter.emitter import OutputFile, create_text_file, format_for_content
from chuk_mcp_tokens.exporter.provider import DesignSystemProvider
from chuk_mcp_tokens.models.tokens import RemoteVersionIdentifier, Token
from chuk_mcp_tokens.structuring import StructuringReport, structure_tokens_with_report

logger = logging.getLogger(__name__)


def sort_tokens_by_parent_group(tokens: list[Token]) -> list[Token]:
    """
    Sort tokens by parent group ID (stable; tokens without one sort first).

    Returns a new list.
    """
    return sorted(tokens, key=lambda t: t.parent_group_id or "")


class TokenExporter:
    """
    Exports one design system version to a single structured-token file.

    The configuration is fixed per exporter instance.
    """

    def __init__(
        self,
        provider: DesignSystemProvider,
        config: ExporterConfiguration | None = None,
    ):
        """
        Initialize the exporter.

        Args:
            provider: Where tokens, groups and brands come from
            config: Exporter configuration (defaults if None)
        """
        self.provider = provider
        self.config = config or ExporterConfiguration()

    async def structure(self, version: RemoteVersionIdentifier) -> StructuringReport:
        """
        Fetch and structure a version's tokens.

        Args:
            version: Design system version

        Returns:
            Structuring report with the structured tokens
        """
        tokens, groups, brands = await asyncio.gather(
            self.provider.get_tokens(version),
            self.provider.get_token_groups(version),
            self.provider.get_brands(version),
        )

        if self.config.sort_tokens:
            tokens = sort_tokens_by_parent_group(tokens)

        report = structure_tokens_with_report(groups, tokens, brands, self.config)
        logger.info(
            SuccessMessages.TOKENS_STRUCTURED.format(
                count=report.structured_count, groups=len(report.tokens)
            )
        )
        if report.dropped_count:
            logger.debug(f"{report.dropped_count} tokens of {version} had no resolvable group")
        return report

    async def export(self, version: RemoteVersionIdentifier) -> list[OutputFile]:
        """
        Export a version.

        Args:
            version: Design system version

        Returns:
            A single-element list with the output file
        """
        report = await self.structure(version)
        content = format_for_content(report.tokens, indent=self.config.indent)
        return [create_text_file(content)]
