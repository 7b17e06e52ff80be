"""Tests for lexis.i18n.loader module."""

from pathlib import Path

import pytest

from lexis.i18n import Config, I18nError, SourceError
from lexis.i18n.loader import (
    expand_source,
    expand_sources,
    locale_from_path,
    parse_file,
)
from lexis.i18n.models import Source, SourceKind
from lexis.i18n.tree import Leaf, Node


@pytest.mark.unit
class TestLocaleFromPath:
    """Tests for locale_from_path()."""

    @pytest.mark.parametrize(
        "name, locale",
        [
            ("en.yml", "en"),
            ("de.json", "de"),
            ("incident.fr-FR.yml", "fr-FR"),
            ("a.b.pt-BR.toml", "pt-BR"),
        ],
    )
    def test_last_stem_part(self, name, locale):
        """The locale is the last dot-separated part of the stem."""
        assert locale_from_path(Path(name)) == locale


@pytest.mark.unit
class TestParseFile:
    """Tests for parse_file()."""

    def test_parse_yaml(self, temp_locales_dir):
        """YAML files are parsed with safe_load."""
        data = parse_file(temp_locales_dir / "en.yml")
        assert data["greeting"] == "Hello, World!"

    def test_parse_json(self, temp_locales_dir):
        """JSON files are parsed."""
        data = parse_file(temp_locales_dir / "incident.en.json")
        assert data["incident"]["created"] == "Incident %{incident_id} created"

    def test_parse_toml(self, temp_locales_dir):
        """TOML files are parsed."""
        data = parse_file(temp_locales_dir / "fr.toml")
        assert data["greeting"] == "Bonjour le monde!"
        assert data["incident"]["created"] == "Incident %{incident_id} créé"

    def test_empty_yaml_is_none(self, tmp_path):
        """An empty YAML file parses to None."""
        path = tmp_path / "en.yml"
        path.write_text("", encoding="utf-8")
        assert parse_file(path) is None

    def test_invalid_yaml_raises_source_error(self, tmp_path):
        """Syntax errors are wrapped in SourceError."""
        path = tmp_path / "en.yml"
        path.write_text("greeting: [unclosed", encoding="utf-8")
        with pytest.raises(SourceError) as exc_info:
            parse_file(path)
        assert exc_info.value.source_id == str(path)
        assert isinstance(exc_info.value, I18nError)

    def test_invalid_json_raises_source_error(self, tmp_path):
        """JSON syntax errors are wrapped in SourceError."""
        path = tmp_path / "en.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SourceError):
            parse_file(path)

    def test_invalid_toml_raises_source_error(self, tmp_path):
        """TOML syntax errors are wrapped in SourceError."""
        path = tmp_path / "en.toml"
        path.write_text("greeting = ", encoding="utf-8")
        with pytest.raises(SourceError):
            parse_file(path)

    def test_unsupported_extension_raises(self, tmp_path):
        """parse_file() refuses unknown file types."""
        path = tmp_path / "en.txt"
        path.write_text("greeting", encoding="utf-8")
        with pytest.raises(SourceError):
            parse_file(path)

    def test_missing_file_raises_source_error(self, tmp_path):
        """Read failures are wrapped in SourceError."""
        with pytest.raises(SourceError):
            parse_file(tmp_path / "missing.yml")


@pytest.mark.unit
class TestExpandSource:
    """Tests for expand_source() and expand_sources()."""

    def test_pattern_derives_locales_from_names(self, temp_locales_dir):
        """Globbed files carry the locale of their file name, sorted by path."""
        loaded = expand_source(
            Source(SourceKind.PATTERN, location=str(temp_locales_dir / "*.*"))
        )
        assert [(Path(s.source_id).name, s.locale) for s in loaded] == [
            ("de.yml", "de"),
            ("en.yml", "en"),
            ("fr.toml", "fr"),
            ("incident.en.json", "en"),
        ]

    def test_pattern_skips_unsupported_files(self, temp_locales_dir):
        """Files with unknown extensions are skipped, not errors."""
        (temp_locales_dir / "README.md").write_text("notes", encoding="utf-8")
        loaded = expand_source(
            Source(SourceKind.PATTERN, location=str(temp_locales_dir / "*"))
        )
        assert all(not s.source_id.endswith(".md") for s in loaded)
        assert len(loaded) == 4

    def test_pattern_without_matches(self, tmp_path):
        """A pattern matching nothing loads nothing."""
        assert expand_source(Source(SourceKind.PATTERN, location=str(tmp_path / "*.yml"))) == []

    def test_recursive_pattern(self, tmp_path):
        """** patterns descend into subdirectories."""
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "de.json").write_text('{"greeting": "Hallo"}', encoding="utf-8")
        loaded = expand_source(
            Source(SourceKind.PATTERN, location=str(tmp_path / "**" / "*.json"))
        )
        assert [s.locale for s in loaded] == ["de"]

    def test_localized_path_uses_given_locale(self, temp_locales_dir):
        """Explicit paths use the configured locale, not the file name."""
        loaded = expand_source(
            Source(SourceKind.PATH, location=str(temp_locales_dir / "de.yml"), locale="de-AT")
        )
        assert loaded[0].locale == "de-AT"
        assert loaded[0].tree.get("greeting") == Leaf("Hallo Welt!")

    def test_localized_path_missing(self, tmp_path):
        """A configured file that does not exist is a SourceError."""
        with pytest.raises(SourceError):
            expand_source(
                Source(SourceKind.PATH, location=str(tmp_path / "nope.yml"), locale="en")
            )

    def test_tree_source(self):
        """In-memory trees pass through from_data()."""
        loaded = expand_source(Source(SourceKind.TREE, data={"a": "b"}))
        assert loaded[0].locale is None
        assert loaded[0].tree == Node({"a": Leaf("b")})
        assert loaded[0].source_id == "<tree:*>"

    def test_tree_source_with_bad_value(self):
        """Unsupported values in a tree are a SourceError."""
        with pytest.raises(SourceError):
            expand_source(Source(SourceKind.TREE, data={"a": object()}, locale="en"))

    def test_expand_sources_keeps_config_order(self, temp_locales_dir):
        """Sources are loaded in the order they were configured."""
        config = (
            Config()
            .with_tree({"greeting": "in memory"}, locale="en")
            .with_localized_path("en", temp_locales_dir / "en.yml")
        )
        loaded = expand_sources(config)
        assert [s.source_id for s in loaded] == [
            "<tree:en>",
            str(temp_locales_dir / "en.yml"),
        ]


@pytest.mark.unit
class TestScalarFiles:
    """Tests for file values that are not plain strings."""

    def test_yaml_date_loads_as_iso_text(self, tmp_path):
        """Unquoted YAML dates become their ISO text."""
        path = tmp_path / "en.yml"
        path.write_text("released: 2024-01-01\ngreeting: Hi\n", encoding="utf-8")
        loaded = expand_source(Source(SourceKind.PATH, location=str(path), locale="en"))
        assert loaded[0].tree.get("released") == Leaf("2024-01-01")
        assert loaded[0].tree.get("greeting") == Leaf("Hi")

    def test_toml_datetime_loads_as_iso_text(self, tmp_path):
        """TOML date-times become their ISO text."""
        path = tmp_path / "en.toml"
        path.write_text("updated = 2024-01-01T12:00:05\n", encoding="utf-8")
        loaded = expand_source(Source(SourceKind.PATH, location=str(path), locale="en"))
        assert loaded[0].tree.get("updated") == Leaf("2024-01-01T12:00:05")

    def test_yaml_key_without_value_is_absent(self, tmp_path):
        """A bare "key:" line defines nothing."""
        path = tmp_path / "en.yml"
        path.write_text("greeting:\nfarewell: Bye\n", encoding="utf-8")
        loaded = expand_source(Source(SourceKind.PATH, location=str(path), locale="en"))
        assert loaded[0].tree.get("greeting") is None
        assert loaded[0].tree.get("farewell") == Leaf("Bye")
