#!/usr/bin/env python3
"""
Example: Exporting a design system snapshot.

Loads examples/snapshots/acme/v1.yaml, structures its tokens by root
group and writes the result to a temporary directory.

Usage:
    python examples/export_snapshot.py
"""

import asyncio
import json
import tempfile
from pathlib import Path

from chuk_mcp_tokens import ConfigurationLoader, TokenExporter
from chuk_mcp_tokens.exporter import SnapshotProvider, write_output_files
from chuk_mcp_tokens.models import RemoteVersionIdentifier


async def main() -> None:
    """Export the example snapshot."""
    print("CHUK Tokens Export Demo")
    print("=" * 40)
    print()

    snapshots = Path(__file__).parent / "snapshots"
    version = RemoteVersionIdentifier(design_system_id="acme", version_id="v1")

    # Pretty-print and keep each token's platform
    config = ConfigurationLoader().load({"indent": 2, "include_platform": True})
    exporter = TokenExporter(SnapshotProvider(snapshots), config)

    report = await exporter.structure(version)
    print(f"Structured {report.structured_count} tokens")
    print(f"Dropped (no group): {report.dropped_token_ids}")
    for root, tokens in report.tokens.items():
        print(f"  {root}: {[t.name.raw_name for t in tokens]}")
    print()

    files = await exporter.export(version)
    with tempfile.TemporaryDirectory() as tmp:
        for path in write_output_files(files, Path(tmp)):
            print(f"Wrote {path.name}:")
            print(path.read_text())


if __name__ == "__main__":
    asyncio.run(main())
