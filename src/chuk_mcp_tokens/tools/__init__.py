"""
MCP tool implementations.

- export - Structuring and exporting design tokens
"""

from chuk_mcp_tokens.tools.export import register_export_tools

__all__ = [
    "register_export_tools",
]
