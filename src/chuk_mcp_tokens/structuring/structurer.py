"""
Token structurer - groups tokens under their root group.

Tokens whose parent group can't be found are dropped, and tokens whose
brand can't be found are kept with no brand. Neither raises.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from chuk_mcp_tokens.config import ExporterConfiguration
from chuk_mcp_tokens.constants import DEFAULT_BRAND_MODE
from chuk_mcp_tokens.models.structured import (
    StructuredToken,
    StructuredTokenName,
    StructuredTokens,
)
from chuk_mcp_tokens.models.tokens import Brand, Token, TokenGroup
from chuk_mcp_tokens.structuring.lookup import find_brand_name_by_id, index_by_id
from chuk_mcp_tokens.structuring.resolver import resolve_root_group_and_name

logger = logging.getLogger(__name__)


@dataclass
class StructuringReport:
    """Structured tokens plus what was dropped along the way."""

    tokens: StructuredTokens = field(default_factory=dict)
    structured_count: int = 0
    dropped_token_ids: list[str] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        """Number of tokens with no resolvable parent group."""
        return len(self.dropped_token_ids)

    @property
    def total_count(self) -> int:
        """Number of tokens processed."""
        return self.structured_count + self.dropped_count


def structure_tokens(
    groups: Sequence[TokenGroup],
    tokens: Sequence[Token],
    brands: Sequence[Brand],
    config: ExporterConfiguration | None = None,
) -> StructuredTokens:
    """
    Structure tokens by root group.

    Tokens are processed in the order given; sort them by parent group ID
    beforehand for group-clustered output.

    Args:
        groups: All token groups
        tokens: Tokens to structure
        brands: All brands
        config: Exporter configuration (defaults if None)

    Returns:
        Mapping of root group name to structured tokens
    """
    return structure_tokens_with_report(groups, tokens, brands, config).tokens


def structure_tokens_with_report(
    groups: Sequence[TokenGroup],
    tokens: Sequence[Token],
    brands: Sequence[Brand],
    config: ExporterConfiguration | None = None,
) -> StructuringReport:
    """
    Structure tokens by root group and report dropped tokens.

    Same output as structure_tokens, plus the count of structured tokens
    and the IDs of tokens that were dropped.
    """
    config = config or ExporterConfiguration()
    groups_by_id = index_by_id(groups)
    brands_by_id = index_by_id(brands)
    report = StructuringReport()

    for token in tokens:
        group = groups_by_id.get(token.parent_group_id) if token.parent_group_id else None
        if group is None:
            logger.debug("Dropping token %s: parent group %s not found", token.id, token.parent_group_id)
            report.dropped_token_ids.append(token.id)
            continue

        resolution = resolve_root_group_and_name(groups_by_id, group, token.name)
        root_name = resolution.root_group.name

        structured = StructuredToken(
            name=StructuredTokenName(
                brand=find_brand_name_by_id(brands_by_id, token.brand_id),
                brand_mode=DEFAULT_BRAND_MODE,
                category=resolution.category,
                platform=token.platform if config.include_platform else None,
                raw_name=token.variable,
                type=root_name,
            ),
            values=dict(token.property_values),
            usage=token.description,
        )

        report.tokens.setdefault(root_name, []).append(structured)
        report.structured_count += 1

    logger.debug(
        "Structured %d tokens into %d root groups (%d dropped)",
        report.structured_count,
        len(report.tokens),
        report.dropped_count,
    )
    return report
