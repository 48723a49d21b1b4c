"""
Tests for the export pipeline.

Tests cover:
- SnapshotProvider and InMemoryProvider
- Output file formatting and writing
- TokenExporter end to end
"""

import json
from pathlib import Path

import pytest
import yaml

from chuk_mcp_tokens.config import ExporterConfiguration
from chuk_mcp_tokens.exporter import (
    InMemoryProvider,
    OutputFile,
    SnapshotProvider,
    TokenExporter,
    create_text_file,
    format_for_content,
    safe_name,
    sort_tokens_by_parent_group,
    write_output_files,
)
from chuk_mcp_tokens.models import RemoteVersionIdentifier, Token

VERSION = RemoteVersionIdentifier(design_system_id="acme", version_id="v1")


def write_snapshot(root: Path, data: dict, suffix: str = ".yaml") -> Path:
    """Write a snapshot file for VERSION."""
    path = root / VERSION.design_system_id / f"{VERSION.version_id}{suffix}"
    path.parent.mkdir(parents=True)
    if suffix == ".json":
        path.write_text(json.dumps(data))
    else:
        path.write_text(yaml.safe_dump(data))
    return path


class TestRemoteVersionIdentifier:
    """Tests for RemoteVersionIdentifier."""

    def test_camel_case(self):
        version = RemoteVersionIdentifier.model_validate({"designSystemId": "ds", "versionId": "v"})
        assert version.design_system_id == "ds"
        assert str(version) == "ds@v"

    def test_hashable(self):
        assert {VERSION: 1}[RemoteVersionIdentifier(design_system_id="acme", version_id="v1")] == 1


class TestSnapshotProvider:
    """Tests for SnapshotProvider."""

    @pytest.mark.asyncio
    async def test_load_yaml(self, temp_dir: Path, snapshot_data: dict):
        write_snapshot(temp_dir, snapshot_data)
        provider = SnapshotProvider(temp_dir)

        tokens = await provider.get_tokens(VERSION)
        groups = await provider.get_token_groups(VERSION)
        brands = await provider.get_brands(VERSION)

        assert [t.id for t in tokens] == ["t2", "t1", "t3"]
        assert tokens[1].brand_id == "b1"
        assert tokens[1].property_values["value"] == "#0000FF"
        assert groups[1].parent_group_id == "g1"
        assert brands[0].name == "Acme"

    @pytest.mark.asyncio
    async def test_load_json(self, temp_dir: Path, snapshot_data: dict):
        write_snapshot(temp_dir, snapshot_data, ".json")
        provider = SnapshotProvider(temp_dir)
        assert len(await provider.get_tokens(VERSION)) == 3

    @pytest.mark.asyncio
    async def test_snake_case_groups_key(self, temp_dir: Path, snapshot_data: dict):
        snapshot_data["token_groups"] = snapshot_data.pop("tokenGroups")
        write_snapshot(temp_dir, snapshot_data)
        provider = SnapshotProvider(temp_dir)
        assert len(await provider.get_token_groups(VERSION)) == 3

    @pytest.mark.asyncio
    async def test_missing_snapshot(self, temp_dir: Path):
        provider = SnapshotProvider(temp_dir)
        assert provider.snapshot_path(VERSION) is None
        with pytest.raises(FileNotFoundError, match="acme"):
            await provider.get_tokens(VERSION)

    @pytest.mark.asyncio
    async def test_not_a_mapping(self, temp_dir: Path):
        path = temp_dir / "acme" / "v1.yaml"
        path.parent.mkdir(parents=True)
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="not a mapping"):
            await SnapshotProvider(temp_dir).get_tokens(VERSION)

    @pytest.mark.asyncio
    async def test_malformed_json(self, temp_dir: Path):
        path = temp_dir / "acme" / "v1.json"
        path.parent.mkdir(parents=True)
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Could not parse"):
            await SnapshotProvider(temp_dir).get_brands(VERSION)

    @pytest.mark.asyncio
    async def test_cache(self, temp_dir: Path, snapshot_data: dict):
        """Snapshots are read once until the cache is cleared."""
        path = write_snapshot(temp_dir, snapshot_data)
        provider = SnapshotProvider(temp_dir)
        await provider.get_tokens(VERSION)

        path.unlink()
        assert len(await provider.get_tokens(VERSION)) == 3

        provider.clear_cache()
        with pytest.raises(FileNotFoundError):
            await provider.get_tokens(VERSION)

    @pytest.mark.asyncio
    async def test_numeric_property_values(self, temp_dir: Path, snapshot_data: dict):
        """Unquoted numbers in property values pass through unchanged."""
        snapshot_data["tokens"][1]["propertyValues"] = {
            "variable": "--weight-bold",
            "value": 700,
            "opacity": 0.5,
        }
        write_snapshot(temp_dir, snapshot_data)
        exporter = TokenExporter(SnapshotProvider(temp_dir))

        files = await exporter.export(VERSION)
        token = json.loads(files[0].content)["Color"][0]
        assert token["values"] == {"variable": "--weight-bold", "value": 700, "opacity": 0.5}
        assert token["name"]["rawName"] == "--weight-bold"

    @pytest.mark.asyncio
    async def test_design_system_id_cannot_leave_root(self, temp_dir: Path, snapshot_data: dict):
        """An id with path separators does not reach files outside the root."""
        outside = temp_dir / "x" / "v1.yaml"
        outside.parent.mkdir()
        outside.write_text(yaml.safe_dump(snapshot_data))
        provider = SnapshotProvider(temp_dir / "snapshots")

        version = RemoteVersionIdentifier(design_system_id="../x", version_id="v1")
        assert provider.snapshot_path(version) is None
        with pytest.raises(FileNotFoundError):
            await provider.get_tokens(version)

    @pytest.mark.asyncio
    async def test_dot_dot_ids_stay_in_root(self, temp_dir: Path, snapshot_data: dict):
        """A design system id of '..' does not resolve to the root's parent."""
        (temp_dir / "v1.yaml").write_text(yaml.safe_dump(snapshot_data))
        provider = SnapshotProvider(temp_dir / "snapshots")

        version = RemoteVersionIdentifier(design_system_id="..", version_id="v1")
        with pytest.raises(FileNotFoundError):
            await provider.get_brands(version)


class TestSafeName:
    """Tests for safe_name."""

    def test_plain_name_unchanged(self):
        assert safe_name("acme-v1.2") == "acme-v1.2"

    def test_separators_replaced(self):
        assert safe_name("../secret") == ".._secret"
        assert safe_name("a\\b c") == "a_b_c"

    def test_dots_only(self):
        assert safe_name("..") == "__"
        assert safe_name(".") == "_"

    def test_empty(self):
        assert safe_name("") == "_"


class TestInMemoryProvider:
    """Tests for InMemoryProvider."""

    @pytest.mark.asyncio
    async def test_returns_copies(self, snapshot_data: dict):
        provider = InMemoryProvider.from_dict(snapshot_data)
        tokens = await provider.get_tokens(VERSION)
        tokens.clear()
        assert len(await provider.get_tokens(VERSION)) == 3

    def test_empty(self):
        provider = InMemoryProvider.from_dict({})
        assert provider.tokens == []
        assert provider.token_groups == []
        assert provider.brands == []


class TestEmitter:
    """Tests for output formatting and writing."""

    def test_format_empty(self):
        assert format_for_content({}) == "{}"

    def test_format_indent(self, groups, brands, example_tokens):
        from chuk_mcp_tokens.structuring import structure_tokens

        structured = structure_tokens(groups, example_tokens, brands)
        pretty = format_for_content(structured, indent=2)
        assert "\n  " in pretty
        assert json.loads(pretty) == json.loads(format_for_content(structured))

    def test_non_ascii_kept(self):
        from chuk_mcp_tokens.models import StructuredToken, StructuredTokenName

        token = StructuredToken(
            name=StructuredTokenName(category="Farbe", type="Farbe"),
            usage="Grün",
        )
        assert "Grün" in format_for_content({"Farbe": [token]})

    def test_create_text_file_defaults(self):
        output = create_text_file("{}")
        assert output == OutputFile(relative_path="./", file_name="test.md", content="{}")

    def test_write_output_files(self, temp_dir: Path):
        files = [create_text_file('{"a":[]}')]
        paths = write_output_files(files, temp_dir / "out")
        assert paths == [temp_dir / "out" / "test.md"]
        assert paths[0].read_text() == '{"a":[]}'


class TestSortTokens:
    """Tests for sort_tokens_by_parent_group."""

    def test_sorted_and_stable(self):
        tokens = [
            Token(id="a", name="a", parent_group_id="g2"),
            Token(id="b", name="b", parent_group_id="g1"),
            Token(id="c", name="c", parent_group_id="g2"),
            Token(id="d", name="d"),
        ]
        result = sort_tokens_by_parent_group(tokens)
        assert [t.id for t in result] == ["d", "b", "a", "c"]
        assert [t.id for t in tokens] == ["a", "b", "c", "d"]


class TestTokenExporter:
    """Tests for TokenExporter."""

    @pytest.mark.asyncio
    async def test_export_single_file(self, snapshot_data: dict):
        exporter = TokenExporter(InMemoryProvider.from_dict(snapshot_data))
        files = await exporter.export(VERSION)

        assert len(files) == 1
        assert files[0].file_name == "test.md"
        assert files[0].relative_path == "./"

        data = json.loads(files[0].content)
        # Sorted by parent group id: g2 (Color) before g4 (Spacing)
        assert list(data) == ["Color", "Spacing"]
        assert data["Color"][0]["name"]["brand"] == "Acme"
        assert data["Spacing"][0]["name"]["rawName"] == "--space-sm"
        assert "brand" not in data["Spacing"][0]["name"]
        assert "usage" not in data["Spacing"][0]

    @pytest.mark.asyncio
    async def test_unsorted_keeps_input_order(self, snapshot_data: dict):
        config = ExporterConfiguration(sort_tokens=False)
        exporter = TokenExporter(InMemoryProvider.from_dict(snapshot_data), config)
        files = await exporter.export(VERSION)
        assert list(json.loads(files[0].content)) == ["Spacing", "Color"]

    @pytest.mark.asyncio
    async def test_structure_report(self, snapshot_data: dict):
        exporter = TokenExporter(InMemoryProvider.from_dict(snapshot_data))
        report = await exporter.structure(VERSION)
        assert report.structured_count == 2
        assert report.dropped_token_ids == ["t3"]

    @pytest.mark.asyncio
    async def test_config_indent(self, snapshot_data: dict):
        config = ExporterConfiguration(indent=4)
        exporter = TokenExporter(InMemoryProvider.from_dict(snapshot_data), config)
        files = await exporter.export(VERSION)
        assert '\n    "Color"' in files[0].content

    @pytest.mark.asyncio
    async def test_export_from_snapshot(self, temp_dir: Path, snapshot_data: dict):
        write_snapshot(temp_dir / "snapshots", snapshot_data)
        exporter = TokenExporter(SnapshotProvider(temp_dir / "snapshots"))
        files = await exporter.export(VERSION)
        paths = write_output_files(files, temp_dir / "output")
        assert json.loads(paths[0].read_text())["Color"][0]["usage"] == "primary accent"

    @pytest.mark.asyncio
    async def test_provider_errors_propagate(self, temp_dir: Path):
        exporter = TokenExporter(SnapshotProvider(temp_dir))
        with pytest.raises(FileNotFoundError):
            await exporter.export(VERSION)
