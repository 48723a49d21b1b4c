"""
Exporter configuration.

The configuration is resolved once from defaults, an optional YAML file and
explicit overrides, then passed into the exporter and structurer as a value.
Nothing reads it from module state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import ErrorMessages


class ExporterConfiguration(BaseModel):
    """Options that shape an export."""

    include_platform: bool = Field(
        default=False,
        description="Add each token's 'platform' property to its name block",
    )
    sort_tokens: bool = Field(
        default=True,
        description="Sort tokens by parent group ID before structuring",
    )
    indent: int | None = Field(
        default=None,
        ge=0,
        description="JSON indent for the output file (None for compact output)",
    )

    model_config = {"frozen": True, "extra": "forbid"}


class ConfigurationLoader:
    """
    Resolves an ExporterConfiguration.

    Precedence, lowest first: model defaults, the YAML file, overrides.
    A missing file is not an error; the defaults are used.
    """

    def __init__(self, config_path: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_path: Optional path to a YAML configuration file
        """
        self.config_path = config_path

    def load(self, overrides: dict[str, Any] | None = None) -> ExporterConfiguration:
        """
        Load the configuration.

        Args:
            overrides: Values that win over the file and the defaults

        Returns:
            The resolved configuration

        Raises:
            ValueError: If the file or overrides name unknown keys, or the
                file is not a YAML mapping
        """
        data: dict[str, Any] = {}
        data.update(self._read_file())
        if overrides:
            data.update(overrides)

        unknown = sorted(set(data) - set(ExporterConfiguration.model_fields))
        if unknown:
            raise ValueError(ErrorMessages.CONFIG_UNKNOWN_KEYS.format(keys=", ".join(unknown)))

        return ExporterConfiguration(**data)

    def _read_file(self) -> dict[str, Any]:
        """Read the YAML file, or return nothing if there is none."""
        if self.config_path is None or not self.config_path.exists():
            return {}

        with open(self.config_path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Exporter configuration must be a mapping: {self.config_path}")
        return data
