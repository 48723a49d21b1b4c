"""
Output file emission.

An export produces one text file holding the structured tokens as JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from chuk_mcp_tokens.constants import OUTPUT_FILE_NAME, OUTPUT_RELATIVE_PATH
from chuk_mcp_tokens.models.structured import StructuredTokens, structured_tokens_to_dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputFile:
    """A text file produced by an export."""

    relative_path: str
    file_name: str
    content: str

    def target_path(self, output_dir: Path) -> Path:
        """Where this file lands under output_dir."""
        return output_dir / self.relative_path / self.file_name


def format_for_content(structured: StructuredTokens, indent: int | None = None) -> str:
    """
    Serialize structured tokens to JSON.

    Keys keep insertion order. With no indent the output is compact, with
    no whitespace after separators.

    Args:
        structured: Structured tokens
        indent: Optional indent for pretty output

    Returns:
        JSON text
    """
    data = structured_tokens_to_dict(structured)
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def create_text_file(
    content: str,
    file_name: str = OUTPUT_FILE_NAME,
    relative_path: str = OUTPUT_RELATIVE_PATH,
) -> OutputFile:
    """Wrap content in an OutputFile."""
    return OutputFile(relative_path=relative_path, file_name=file_name, content=content)


def write_output_files(files: list[OutputFile], output_dir: Path) -> list[Path]:
    """
    Write output files under a directory.

    Args:
        files: Files to write
        output_dir: Base directory (created if missing)

    Returns:
        Paths written, in order
    """
    written: list[Path] = []
    for output_file in files:
        path = output_file.target_path(output_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output_file.content, encoding="utf-8")
        logger.info(f"Wrote {path}")
        written.append(path)
    return written
