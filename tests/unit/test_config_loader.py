"""Tests for configuration loader."""

import json

import pytest
from pydantic import BaseModel

from merge_config import (
    ArrayFieldTypeMismatch,
    ConfigLoader,
    FileOpenError,
    FinalDecodeError,
    KeywordFilter,
    MergePolicy,
    ObjectFieldTypeMismatch,
    ParseError,
    PathMetadataError,
    UnsupportedFileType,
    WildcardFilter,
    merge_config_files,
    parse_config_files,
    parse_config_paths,
)


class ServiceConfig(BaseModel):
    name: str
    addresses: list[str]
    values: dict[str, str]


@pytest.fixture
def layered_dir(tmp_path):
    """Base TOML + prod JSON + local TOML in one directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    (config_dir / "00-base.toml").write_text(
        """
name = "inventory"
addresses = ["10.0.0.1"]

[values]
log_level = "info"
region = "eu-west-1"
"""
    )
    (config_dir / "10-prod.json").write_text(
        json.dumps({"addresses": ["10.0.0.2"], "values": {"log_level": "warn"}})
    )
    (config_dir / "20-local.toml").write_text(
        """
[values]
cache_dir = "/tmp/inventory"
"""
    )
    return config_dir


class TestParseConfigPaths:
    """Tests for parse_config_paths."""

    def test_directory_into_model(self, layered_dir):
        """Should merge all files of a directory into a typed model."""
        # Act
        config = parse_config_paths([layered_dir], target=ServiceConfig)

        # Assert
        assert config.name == "inventory"
        assert config.addresses == ["10.0.0.1", "10.0.0.2"]
        assert config.values == {
            "log_level": "warn",
            "region": "eu-west-1",
            "cache_dir": "/tmp/inventory",
        }

    def test_defaults_to_dict(self, layered_dir):
        """Without a target the merged dict should be returned."""
        config = parse_config_paths([layered_dir])

        assert isinstance(config, dict)
        assert config["values"]["log_level"] == "warn"

    def test_no_extend_array(self, layered_dir):
        """Arrays should be replaced when extend_array is off."""
        config = parse_config_paths(
            [layered_dir], extend_array=False, target=ServiceConfig
        )

        assert config.addresses == ["10.0.0.2"]

    def test_no_merge_nested(self, layered_dir):
        """Tables should be replaced when merge_nested is off."""
        config = parse_config_paths(
            [layered_dir], merge_nested=False, target=ServiceConfig
        )

        assert config.values == {"cache_dir": "/tmp/inventory"}

    def test_keyword_filter(self, layered_dir):
        """Only files containing all keywords should be merged."""
        config = parse_config_paths([layered_dir], KeywordFilter(["base"]))

        assert config["values"] == {"log_level": "info", "region": "eu-west-1"}

    def test_wildcard_filter(self, layered_dir):
        """Only files matching a pattern should be merged."""
        config = parse_config_paths([layered_dir], WildcardFilter(["*.toml"]))

        assert config["addresses"] == ["10.0.0.1"]
        assert config["values"]["cache_dir"] == "/tmp/inventory"

    def test_empty_directory_match_decodes_empty(self, layered_dir):
        """No matching files should merge to an empty document."""
        assert parse_config_paths([layered_dir], WildcardFilter([])) == {}

    def test_file_after_directory_wins(self, tmp_path, layered_dir):
        """Explicit file listed last should override directory contents."""
        # Arrange
        override = tmp_path / "override.json"
        override.write_text(json.dumps({"name": "override"}))

        # Act
        config = parse_config_paths([layered_dir, override], target=ServiceConfig)

        # Assert
        assert config.name == "override"

    def test_missing_location(self, tmp_path):
        """Missing location should fail before any file is loaded."""
        with pytest.raises(PathMetadataError):
            parse_config_paths([tmp_path / "missing"])

    def test_yaml_in_directory_rejected(self, layered_dir):
        """Unsupported files in a directory should fail, not be skipped."""
        (layered_dir / "30-extra.yaml").write_text("key: value")

        with pytest.raises(UnsupportedFileType):
            parse_config_paths([layered_dir])

    def test_decode_error(self, layered_dir):
        """Merged content not fitting the target should raise FinalDecodeError."""
        with pytest.raises(FinalDecodeError):
            parse_config_paths([layered_dir], KeywordFilter(["local"]), target=ServiceConfig)


class TestParseConfigFiles:
    """Tests for parse_config_files and merge_config_files."""

    def test_order_significance(self, tmp_path):
        """Later files should override earlier ones."""
        # Arrange
        paths = []
        for i in (1, 2, 3):
            path = tmp_path / f"{i}.json"
            path.write_text(json.dumps({"a": i}))
            paths.append(path)

        # Act & Assert
        assert parse_config_files(paths) == {"a": 3}
        assert parse_config_files(list(reversed(paths))) == {"a": 1}

    def test_type_mismatch_on_objects(self, tmp_path):
        """Object replaced by array should fail when merging nested."""
        # Arrange
        base = tmp_path / "base.toml"
        base.write_text("[a]\nx = 1\n")
        override = tmp_path / "override.json"
        override.write_text(json.dumps({"a": [1, 2]}))

        # Act & Assert
        with pytest.raises(ObjectFieldTypeMismatch) as exc_info:
            merge_config_files([base, override])

        assert exc_info.value.key == "a"

    def test_type_mismatch_on_arrays(self, tmp_path):
        """Array replaced by string should fail when extending."""
        base = tmp_path / "base.json"
        base.write_text(json.dumps({"a": [1]}))
        override = tmp_path / "override.json"
        override.write_text(json.dumps({"a": "x"}))

        with pytest.raises(ArrayFieldTypeMismatch):
            merge_config_files([base, override])

    def test_mismatch_allowed_without_recursion(self, tmp_path):
        """Same files should merge when both policies replace."""
        base = tmp_path / "base.json"
        base.write_text(json.dumps({"a": {"x": 1}, "b": [1]}))
        override = tmp_path / "override.json"
        override.write_text(json.dumps({"a": [1, 2], "b": "x"}))

        result = merge_config_files([base, override], merge_nested=False, extend_array=False)

        assert result == {"a": [1, 2], "b": "x"}

    def test_missing_file_aborts(self, tmp_path):
        """A missing file should abort the merge."""
        base = tmp_path / "base.json"
        base.write_text("{}")

        with pytest.raises(FileOpenError):
            merge_config_files([base, tmp_path / "missing.json"])

    def test_invalid_file_aborts(self, tmp_path):
        """A broken file should abort the merge with ParseError."""
        bad = tmp_path / "bad.toml"
        bad.write_text("invalid: yaml: content: {{")

        with pytest.raises(ParseError):
            merge_config_files([bad])

    def test_no_files(self):
        """No files should merge to an empty dict."""
        assert merge_config_files([]) == {}


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_policy_from_flags(self):
        """Flags should be stored as an immutable policy."""
        loader = ConfigLoader(merge_nested=False, extend_array=True)

        assert loader.policy == MergePolicy(merge_nested=False, extend_array=True)

    def test_resolve(self, layered_dir):
        """Should resolve files with the configured filter."""
        loader = ConfigLoader(path_filter=KeywordFilter(["prod"]))

        assert [p.name for p in loader.resolve([layered_dir])] == ["10-prod.json"]

    def test_merge(self, layered_dir):
        """Should return the merged document."""
        loader = ConfigLoader(extend_array=False)

        merged = loader.merge([layered_dir])

        assert merged["addresses"] == ["10.0.0.2"]

    def test_load(self, layered_dir):
        """Should decode into the target type."""
        loader = ConfigLoader()

        config = loader.load([layered_dir], target=ServiceConfig)

        assert config.values["region"] == "eu-west-1"

    def test_calls_are_independent(self, layered_dir):
        """Repeated loads should not share state."""
        loader = ConfigLoader()

        first = loader.merge([layered_dir])
        first["addresses"].append("mutated")
        second = loader.merge([layered_dir])

        assert second["addresses"] == ["10.0.0.1", "10.0.0.2"]


class TestLazyFold:
    """Tests for loading files one at a time during the merge."""

    def test_stops_loading_after_conflict(self, tmp_path, monkeypatch):
        """Files after a failing layer should never be read."""
        # Arrange
        from merge_config.config import loader as loader_module

        names = ["1.json", "2.json", "3.json"]
        contents = [{"a": {"x": 1}}, {"a": 5}, {"b": 1}]
        paths = []
        for name, content in zip(names, contents):
            path = tmp_path / name
            path.write_text(json.dumps(content))
            paths.append(path)

        loaded = []
        real_parse = loader_module.parse_config_file

        def recording_parse(path):
            loaded.append(path.name)
            return real_parse(path)

        monkeypatch.setattr(loader_module, "parse_config_file", recording_parse)

        # Act & Assert
        with pytest.raises(ObjectFieldTypeMismatch):
            merge_config_files(paths)

        assert loaded == ["1.json", "2.json"]

    def test_config_loader_uses_policy(self, layered_dir, monkeypatch):
        """ConfigLoader should hand its MergePolicy to the fold."""
        from merge_config.config import loader as loader_module

        seen = []
        real_merge = loader_module.merge_with_policy

        def recording_merge(documents, policy):
            seen.append(policy)
            return real_merge(documents, policy)

        monkeypatch.setattr(loader_module, "merge_with_policy", recording_merge)

        ConfigLoader(merge_nested=False, extend_array=False).merge([layered_dir])

        assert seen == [MergePolicy(merge_nested=False, extend_array=False)]
