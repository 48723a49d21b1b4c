"""
Input models - tokens, token groups and brands as the design system returns them.

Field names are snake_case; the provider's camelCase keys are accepted
through aliases so raw API payloads validate directly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import PLATFORM_PROPERTY, VARIABLE_PROPERTY


class RemoteVersionIdentifier(BaseModel):
    """Identifies one version of a design system."""

    design_system_id: str = Field(..., alias="designSystemId", description="Design system ID")
    version_id: str = Field(..., alias="versionId", description="Version ID")

    model_config = {"frozen": True, "populate_by_name": True}

    def __str__(self) -> str:
        return f"{self.design_system_id}@{self.version_id}"


class TokenGroup(BaseModel):
    """
    A node in the token group tree.

    A group whose parent_group_id equals its own id is a root.
    """

    id: str = Field(..., description="Group ID")
    name: str = Field(..., description="Group name")
    parent_group_id: str | None = Field(
        default=None,
        alias="parentGroupId",
        description="ID of the parent group (None for top-level groups)",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class Brand(BaseModel):
    """A brand tokens can belong to."""

    id: str = Field(..., description="Brand ID")
    name: str = Field(..., description="Brand name")

    model_config = {"frozen": True, "populate_by_name": True}


class Token(BaseModel):
    """A single design token."""

    id: str = Field(..., description="Token ID")
    name: str = Field(..., description="Local (leaf) token name")
    parent_group_id: str | None = Field(
        default=None,
        alias="parentGroupId",
        description="ID of the group that owns this token",
    )
    brand_id: str | None = Field(
        default=None,
        alias="brandId",
        description="ID of the brand this token belongs to",
    )
    property_values: dict[str, Any] = Field(
        default_factory=dict,
        alias="propertyValues",
        description="Named property values (includes 'variable', may include 'platform')",
    )
    description: str | None = Field(
        default=None,
        description="Usage documentation",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def variable(self) -> str | None:
        """The token's variable name."""
        value = self.property_values.get(VARIABLE_PROPERTY)
        return None if value is None else str(value)

    @property
    def platform(self) -> str:
        """The token's platform, or an empty string."""
        value = self.property_values.get(PLATFORM_PROPERTY)
        return str(value) if value else ""
