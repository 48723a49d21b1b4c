"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_tokens.models import Brand, Token, TokenGroup


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def groups() -> list[TokenGroup]:
    """Color > Primary > Accent, plus a separate Spacing root."""
    return [
        TokenGroup(id="g1", name="Color"),
        TokenGroup(id="g2", name="Primary", parent_group_id="g1"),
        TokenGroup(id="g3", name="Accent", parent_group_id="g2"),
        TokenGroup(id="g4", name="Spacing"),
    ]


@pytest.fixture
def brands() -> list[Brand]:
    """Two brands."""
    return [Brand(id="b1", name="Acme"), Brand(id="b2", name="Globex")]


@pytest.fixture
def example_tokens() -> list[Token]:
    """The single-token end-to-end example."""
    return [
        Token.model_validate(
            {
                "id": "t1",
                "parentGroupId": "g2",
                "name": "blue500",
                "brandId": "b1",
                "propertyValues": {"variable": "--blue-500", "value": "#0000FF"},
                "description": "primary accent",
            }
        )
    ]


@pytest.fixture
def snapshot_data() -> dict:
    """Raw snapshot payload in the design system's camelCase shape."""
    return {
        "tokens": [
            {
                "id": "t2",
                "name": "small",
                "parentGroupId": "g4",
                "propertyValues": {"variable": "--space-sm", "value": "4px"},
            },
            {
                "id": "t1",
                "name": "blue500",
                "parentGroupId": "g2",
                "brandId": "b1",
                "propertyValues": {"variable": "--blue-500", "value": "#0000FF"},
                "description": "primary accent",
            },
            {
                "id": "t3",
                "name": "orphan",
                "parentGroupId": "missing",
                "propertyValues": {"variable": "--orphan"},
            },
        ],
        "tokenGroups": [
            {"id": "g1", "name": "Color"},
            {"id": "g2", "name": "Primary", "parentGroupId": "g1"},
            {"id": "g4", "name": "Spacing"},
        ],
        "brands": [{"id": "b1", "name": "Acme"}],
    }
