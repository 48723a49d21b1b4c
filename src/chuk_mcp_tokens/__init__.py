"""
chuk-mcp-tokens - design token structuring and export.

Rebuilds each token's naming hierarchy from its group tree and exports
the tokens grouped by root group, with brand and raw property values.
"""

from chuk_mcp_tokens.config import ConfigurationLoader, ExporterConfiguration
from chuk_mcp_tokens.exporter import TokenExporter
from chuk_mcp_tokens.structuring import resolve_root_group_and_name, structure_tokens

__all__ = [
    "ConfigurationLoader",
    "ExporterConfiguration",
    "TokenExporter",
    "resolve_root_group_and_name",
    "structure_tokens",
]
