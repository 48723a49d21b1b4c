"""
Lookup helpers for groups and brands.

The find_* helpers scan a list and return the first match. The structurer
builds id-keyed dicts once with index_by_id instead; the first occurrence
of an id wins there too, so both give the same answer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol, TypeVar

from chuk_mcp_tokens.models.tokens import Brand, TokenGroup


class HasId(Protocol):
    """Anything with an id."""

    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=HasId)


def index_by_id(items: Iterable[T]) -> dict[str, T]:
    """
    Build an id -> item dict.

    Args:
        items: Items to index

    Returns:
        Dict keyed by id; on duplicate ids the first item is kept
    """
    index: dict[str, T] = {}
    for item in items:
        index.setdefault(item.id, item)
    return index


def find_group_by_id(groups: Iterable[TokenGroup], group_id: str | None) -> TokenGroup | None:
    """Return the first group with this id, or None."""
    if isinstance(groups, Mapping):
        return groups.get(group_id) if group_id is not None else None
    return next((group for group in groups if group.id == group_id), None)


def find_brand_name_by_id(brands: Iterable[Brand], brand_id: str | None) -> str | None:
    """Return the name of the first brand with this id, or None."""
    if isinstance(brands, Mapping):
        brand = brands.get(brand_id) if brand_id is not None else None
    else:
        brand = next((b for b in brands if b.id == brand_id), None)
    return brand.name if brand else None
