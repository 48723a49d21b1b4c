"""
Output models - the flattened, brand-aware token records.

Serialized with camelCase keys; fields that are None are left out of
the output the same way an unresolved brand is.
"""

from __future__ import annotations

from typing import Any, TypeAlias

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import DEFAULT_BRAND_MODE


class StructuredTokenName(BaseModel):
    """Naming block of a structured token."""

    brand: str | None = Field(default=None, description="Resolved brand name")
    brand_mode: str = Field(
        default=DEFAULT_BRAND_MODE,
        alias="brandMode",
        description="Brand mode (always 'default')",
    )
    category: str = Field(..., description="First segment of the qualified name")
    platform: str | None = Field(
        default=None,
        description="Platform property (only set when platform export is enabled)",
    )
    raw_name: str | None = Field(
        default=None,
        alias="rawName",
        description="The token's 'variable' property",
    )
    type: str = Field(..., description="Root group name")

    model_config = {"frozen": True, "populate_by_name": True}


class StructuredToken(BaseModel):
    """One exported token."""

    name: StructuredTokenName
    values: dict[str, Any] = Field(
        default_factory=dict,
        description="The token's property values, verbatim",
    )
    usage: str | None = Field(default=None, description="Usage documentation")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Root group name -> tokens, in processing order
StructuredTokens: TypeAlias = dict[str, list[StructuredToken]]


def structured_tokens_to_dict(structured: StructuredTokens) -> dict[str, list[dict[str, Any]]]:
    """Convert a structured mapping to plain JSON-ready data."""
    return {key: [token.to_dict() for token in tokens] for key, tokens in structured.items()}
