"""
Unit Tests for Document Scanning and Source Resolution

Author: config-complete Project
License: MIT
"""

import json
import pytest

from config_complete import DocumentFormat, MalformedDocumentError, SourceNotFoundError, ValidationAggregateError, create
from config_complete.core.documents import list_documents, read_mapping
from config_complete.core.resolver import ConfigSource, Resolver, SourceKind


@pytest.fixture
def yaml_sources(tmp_path):
    """Preset and custom directories holding YAML documents."""
    presets = tmp_path / "presets"
    customs = tmp_path / "customs"
    presets.mkdir()
    customs.mkdir()

    (presets / "production.yaml").write_text("name: preset production\nhttp:\n  port: 80\n")
    (customs / "production.yaml").write_text("name: custom production\nhttp:\n  port: 8080\n")
    (customs / "qa.yaml").write_text("name: qa\n")
    (customs / "qa.json").write_text('{"name": "json qa"}')

    return str(presets), str(customs)


class TestDocuments:
    """Test suite for directory scanning and parsing."""

    def test_list_documents_filters_extension(self, presets_dir):
        """Test that only matching filenames are kept."""
        names = list_documents(presets_dir, ".json")

        assert "development.json" in names
        assert "notes.txt" not in names

    def test_list_documents_without_directory(self):
        """Test that no directory yields no documents."""
        assert list_documents(None, ".json") == frozenset()

    def test_read_mapping_rejects_other_roots(self, tmp_path):
        """Test that a list document is reported as malformed."""
        path = tmp_path / "development.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(MalformedDocumentError) as exc_info:
            read_mapping(str(path), DocumentFormat.JSON)

        assert exc_info.value.found_type == "list"

    def test_invalid_json_propagates(self, tmp_path):
        """Test that parser errors reach the caller unchanged."""
        (tmp_path / "development.json").write_text("{not json")
        accessor = create(str(tmp_path))

        with pytest.raises(json.JSONDecodeError):
            accessor.get_conf()

    def test_format_for_path(self):
        """Test picking a parser from a file suffix."""
        assert DocumentFormat.for_path("description.yml") == DocumentFormat.YAML
        assert DocumentFormat.for_path("description.YAML") == DocumentFormat.YAML
        assert DocumentFormat.for_path("description.json") == DocumentFormat.JSON


class TestResolver:
    """Test suite for the Resolver."""

    def test_sources_are_scanned_once(self, presets_dir, customs_dir):
        """Test the captured source state."""
        resolver = Resolver(presets_dir, customs_dir)

        assert resolver.presets.kind == SourceKind.PRESET
        assert resolver.customs.kind == SourceKind.CUSTOM
        assert resolver.presets.provides("development.json")
        assert resolver.customs.provides("dev-local.json")
        assert isinstance(resolver.presets.available, frozenset)

    def test_disabled_source(self, presets_dir):
        """Test that a source without directory is disabled and empty."""
        resolver = Resolver(presets_dir, None)

        assert resolver.customs.enabled is False
        assert resolver.customs.available == frozenset()

    def test_new_files_after_construction_are_not_seen(self, tmp_path):
        """Test that the directory listing is captured at construction."""
        resolver = Resolver(str(tmp_path))
        (tmp_path / "late.json").write_text("{}")

        with pytest.raises(SourceNotFoundError):
            resolver.load("late.json")

    def test_source_scan_is_frozen(self, tmp_path):
        """Test that a scanned source cannot be reassigned."""
        source = ConfigSource.scan(SourceKind.PRESET, str(tmp_path), ".json")

        with pytest.raises(AttributeError):
            source.directory = "/elsewhere"


class TestYamlDocuments:
    """Test suite for accessors reading YAML documents."""

    def test_preset_wins(self, yaml_sources):
        """Test precedence with YAML documents."""
        presets, customs = yaml_sources
        accessor = create(presets, None, customs, document_format="yaml")

        assert accessor.get_conf("production") == {
            "name": "preset production",
            "http": {"port": 80},
            "env": "production",
        }

    def test_only_yaml_files_are_environments(self, yaml_sources):
        """Test that the accessor format decides the scanned extension."""
        presets, customs = yaml_sources
        accessor = create(presets, None, customs, document_format=DocumentFormat.YAML)

        assert accessor.available_environments == ["production", "qa"]
        assert accessor.get_conf("qa")["name"] == "qa"

    def test_yaml_validation(self, yaml_sources, tmp_path):
        """Test validation of YAML documents against a YAML description."""
        presets, customs = yaml_sources
        description = tmp_path / "description.yaml"
        description.write_text("name: the name\nhttp:\n  port: the port\n")
        accessor = create(presets, str(description), customs, document_format="yml")

        assert accessor.get_conf("production")["http"]["port"] == 80
        with pytest.raises(ValidationAggregateError) as exc_info:
            accessor.get_conf("qa")

        assert exc_info.value.missing == [
            "http (missing the whole configuration node)",
            "http.port (the port)",
        ]
        assert str(exc_info.value).startswith("qa.yaml misses")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
