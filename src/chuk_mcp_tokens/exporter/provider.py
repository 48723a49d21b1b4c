"""
Design system data providers.

The exporter needs three collections for a design system version: tokens,
token groups and brands. A provider supplies them. Failures here propagate
to whoever called the export.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import yaml

from chuk_mcp_tokens.constants import SNAPSHOT_EXTENSIONS, ErrorMessages
from chuk_mcp_tokens.models.tokens import Brand, RemoteVersionIdentifier, Token, TokenGroup

logger = logging.getLogger(__name__)


class DesignSystemProvider(Protocol):
    """Source of design system data."""

    async def get_tokens(self, version: RemoteVersionIdentifier) -> list[Token]: ...

    async def get_token_groups(self, version: RemoteVersionIdentifier) -> list[TokenGroup]: ...

    async def get_brands(self, version: RemoteVersionIdentifier) -> list[Brand]: ...


class InMemoryProvider:
    """Serves the same collections for every version."""

    def __init__(
        self,
        tokens: list[Token] | None = None,
        token_groups: list[TokenGroup] | None = None,
        brands: list[Brand] | None = None,
    ):
        self.tokens = list(tokens or [])
        self.token_groups = list(token_groups or [])
        self.brands = list(brands or [])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InMemoryProvider:
        """Build a provider from raw (camelCase or snake_case) data."""
        return cls(
            tokens=[Token.model_validate(t) for t in data.get("tokens") or []],
            token_groups=[TokenGroup.model_validate(g) for g in _token_groups_data(data)],
            brands=[Brand.model_validate(b) for b in data.get("brands") or []],
        )

    async def get_tokens(self, version: RemoteVersionIdentifier) -> list[Token]:
        return list(self.tokens)

    async def get_token_groups(self, version: RemoteVersionIdentifier) -> list[TokenGroup]:
        return list(self.token_groups)

    async def get_brands(self, version: RemoteVersionIdentifier) -> list[Brand]:
        return list(self.brands)


class SnapshotProvider:
    """
    Reads design system snapshots from disk.

    Snapshots live at <root>/<design_system_id>/<version_id>.yaml (.yml and
    .json are also accepted) and hold 'tokens', 'tokenGroups' and 'brands'
    lists. Parsed snapshots are cached per version.
    """

    def __init__(self, root: Path):
        """
        Initialize the provider.

        Args:
            root: Directory holding one subdirectory per design system
        """
        self.root = root
        self._cache: dict[RemoteVersionIdentifier, InMemoryProvider] = {}

    def snapshot_path(self, version: RemoteVersionIdentifier) -> Path | None:
        """Return the snapshot file for a version, or None if there is none."""
        base = self.root / safe_name(version.design_system_id)
        for extension in SNAPSHOT_EXTENSIONS:
            path = base / f"{safe_name(version.version_id)}{extension}"
            if path.exists():
                return path
        return None

    async def get_tokens(self, version: RemoteVersionIdentifier) -> list[Token]:
        return await self._snapshot(version).get_tokens(version)

    async def get_token_groups(self, version: RemoteVersionIdentifier) -> list[TokenGroup]:
        return await self._snapshot(version).get_token_groups(version)

    async def get_brands(self, version: RemoteVersionIdentifier) -> list[Brand]:
        return await self._snapshot(version).get_brands(version)

    def clear_cache(self) -> None:
        """Clear the snapshot cache."""
        self._cache.clear()

    def _snapshot(self, version: RemoteVersionIdentifier) -> InMemoryProvider:
        """Load (or fetch from cache) the snapshot for a version."""
        if version in self._cache:
            return self._cache[version]

        path = self.snapshot_path(version)
        if path is None:
            raise FileNotFoundError(
                ErrorMessages.SNAPSHOT_NOT_FOUND.format(
                    design_system_id=version.design_system_id,
                    version_id=version.version_id,
                )
            )

        data = self._read_file(path)
        snapshot = InMemoryProvider.from_dict(data)
        logger.debug(
            "Loaded snapshot %s: %d tokens, %d groups, %d brands",
            path,
            len(snapshot.tokens),
            len(snapshot.token_groups),
            len(snapshot.brands),
        )
        self._cache[version] = snapshot
        return snapshot

    def _read_file(self, path: Path) -> dict[str, Any]:
        """Parse a snapshot file."""
        try:
            with open(path) as f:
                data = json.load(f) if path.suffix == ".json" else yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Could not parse snapshot '{path}': {e}") from e

        if not isinstance(data, dict):
            raise ValueError(ErrorMessages.SNAPSHOT_INVALID.format(path=path))
        return data


def safe_name(name: str) -> str:
    """
    Make an id usable as a single path component.

    Separators and spaces become underscores, and a name made only of dots
    becomes underscores too, so the result never leaves its directory.
    """
    safe = name.replace(" ", "_").replace("/", "_").replace("\\", "_")
    if not safe.strip("."):
        safe = safe.replace(".", "_")
    return safe or "_"


def _token_groups_data(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Token groups may be keyed 'tokenGroups' or 'token_groups'."""
    groups = data.get("tokenGroups")
    if groups is None:
        groups = data.get("token_groups")
    return groups or []
