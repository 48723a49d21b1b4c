"""
Export pipeline - data providers, the exporter and output files.
"""

from chuk_mcp_tokens.exporter.emitter import (
    OutputFile,
    create_text_file,
    format_for_content,
    write_output_files,
)
from chuk_mcp_tokens.exporter.exporter import TokenExporter, sort_tokens_by_parent_group
from chuk_mcp_tokens.exporter.provider import (
    DesignSystemProvider,
    InMemoryProvider,
    SnapshotProvider,
    safe_name,
)

__all__ = [
    "DesignSystemProvider",
    "InMemoryProvider",
    "OutputFile",
    "SnapshotProvider",
    "TokenExporter",
    "create_text_file",
    "format_for_content",
    "safe_name",
    "sort_tokens_by_parent_group",
    "write_output_files",
]
