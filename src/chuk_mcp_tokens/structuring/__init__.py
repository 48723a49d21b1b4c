"""
Token structuring - rebuilds each token's naming hierarchy from its groups.

The resolver walks a group chain to its root; the structurer groups every
token under its root group with its brand and qualified name.
"""

from chuk_mcp_tokens.structuring.lookup import (
    find_brand_name_by_id,
    find_group_by_id,
    index_by_id,
)
from chuk_mcp_tokens.structuring.resolver import (
    RootGroupResolution,
    resolve_root_group_and_name,
    split_category,
)
from chuk_mcp_tokens.structuring.structurer import (
    StructuringReport,
    structure_tokens,
    structure_tokens_with_report,
)

__all__ = [
    "RootGroupResolution",
    "StructuringReport",
    "find_brand_name_by_id",
    "find_group_by_id",
    "index_by_id",
    "resolve_root_group_and_name",
    "split_category",
    "structure_tokens",
    "structure_tokens_with_report",
]
