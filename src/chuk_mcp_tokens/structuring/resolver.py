"""
Group resolver - walks a token's group chain up to its root.

Each ancestor's name is prepended to the token's local name, so a token
'blue500' in Color > Primary > Brand resolves from 'Brand' to the qualified
name 'Color__Primary__blue500' with root group 'Color'. The starting group's
own name is not part of the qualified name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from chuk_mcp_tokens.constants import NAME_SEPARATOR
from chuk_mcp_tokens.models.tokens import TokenGroup
from chuk_mcp_tokens.structuring.lookup import index_by_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootGroupResolution:
    """Result of walking a group chain."""

    root_group: TokenGroup | None
    qualified_name: str

    @property
    def category(self) -> str:
        """The first segment of the qualified name."""
        return split_category(self.qualified_name)


def split_category(qualified_name: str) -> str:
    """Return the text before the first separator, or the whole name."""
    return qualified_name.split(NAME_SEPARATOR, 1)[0]


def resolve_root_group_and_name(
    groups: Sequence[TokenGroup] | Mapping[str, TokenGroup],
    start_group: TokenGroup | None,
    leaf_name: str,
) -> RootGroupResolution:
    """
    Find the root group above start_group and build the qualified name.

    The walk stops when the current group has no parent id, the parent id
    matches no group, the parent is the group itself, or the parent was
    already visited. None of these are errors: the current group is the root.

    Args:
        groups: All groups, as a list or an id-keyed mapping
        start_group: The token's immediate parent group (may be None)
        leaf_name: The token's local name

    Returns:
        The root group and the qualified name
    """
    if start_group is None:
        return RootGroupResolution(root_group=None, qualified_name=leaf_name)

    by_id = groups if isinstance(groups, Mapping) else index_by_id(groups)

    current = start_group
    name = leaf_name
    visited = {current.id}

    while current.parent_group_id:
        parent = by_id.get(current.parent_group_id)
        if parent is None or parent.id == current.id:
            break
        if parent.id in visited:
            logger.debug("Group cycle at %s -> %s, stopping walk", current.id, parent.id)
            break

        name = f"{parent.name}{NAME_SEPARATOR}{name}"
        visited.add(parent.id)
        current = parent

    return RootGroupResolution(root_group=current, qualified_name=name)
