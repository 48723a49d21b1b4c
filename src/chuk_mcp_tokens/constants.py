"""
Constants for the token exporter.

No magic strings - the separator, brand mode and output file name live here.
"""

# Joins ancestor group names in a qualified token name
NAME_SEPARATOR = "__"

# Only one brand mode is exported
DEFAULT_BRAND_MODE = "default"

# Output artifact
OUTPUT_FILE_NAME = "test.md"
OUTPUT_RELATIVE_PATH = "./"

# Snapshot file extensions, in lookup order
SNAPSHOT_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml", ".json")

# Property keys read from a token's property values
VARIABLE_PROPERTY = "variable"
PLATFORM_PROPERTY = "platform"


class ErrorMessages:
    """Standardized error messages."""

    SNAPSHOT_NOT_FOUND = "Snapshot not found for design system '{design_system_id}' version '{version_id}'."
    SNAPSHOT_INVALID = "Snapshot '{path}' is not a mapping of tokens, token groups and brands."
    CONFIG_UNKNOWN_KEYS = "Unknown exporter configuration keys: {keys}."


class SuccessMessages:
    """Standardized success messages."""

    TOKENS_STRUCTURED = "Structured {count} tokens into {groups} root groups."
    EXPORT_WRITTEN = "Wrote {file_name} to {path}."
