"""
Pydantic models for the token exporter.

This module provides:
- Token, TokenGroup, Brand: Design system input
- RemoteVersionIdentifier: Which design system version to export
- StructuredToken, StructuredTokens: Exported output
"""

from chuk_mcp_tokens.models.structured import (
    StructuredToken,
    StructuredTokenName,
    StructuredTokens,
    structured_tokens_to_dict,
)
from chuk_mcp_tokens.models.tokens import (
    Brand,
    RemoteVersionIdentifier,
    Token,
    TokenGroup,
)

__all__ = [
    "Brand",
    "RemoteVersionIdentifier",
    "StructuredToken",
    "StructuredTokenName",
    "StructuredTokens",
    "Token",
    "TokenGroup",
    "structured_tokens_to_dict",
]
