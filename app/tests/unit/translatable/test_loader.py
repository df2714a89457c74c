"""Tests for translatable.loader module."""

from pathlib import Path

import pytest

from tests.factories.translations import write_toml, write_yaml
from translatable.errors import DocumentSyntaxError, SourceReadError
from translatable.loader import FileTranslationLoader, load_documents


class TestFileTranslationLoader:
    """Tests for FileTranslationLoader."""

    def test_loads_toml_and_yaml(self, translations_dir):
        """Both document formats are parsed into generic data."""
        documents = load_documents(translations_dir)
        by_path = {document.path: document for document in documents}

        assert set(by_path) == {Path("common.toml"), Path("ui/menu.yml")}
        assert by_path[Path("common.toml")].data["greeting"]["es"] == "¡Hola {name}!"
        assert by_path[Path("ui/menu.yml")].data["menu"]["edit"] == {"en": "Edit"}

    def test_segments_from_directories_and_stem(self, translations_dir):
        """Sub-directories and the file stem become path segments."""
        documents = load_documents(translations_dir)
        segments = {document.segments for document in documents}

        assert segments == {("common",), ("ui", "menu")}

    def test_yaml_extension_and_uppercase_suffix(self, tmp_path):
        """.yaml files and upper-case suffixes are recognised."""
        write_yaml(tmp_path, "a.yaml", {"x": {"en": "X"}})
        write_toml(tmp_path, "b.TOML", '[y]\nen = "Y"\n')

        documents = load_documents(tmp_path)

        assert [document.segments for document in documents] == [("a",), ("b",)]

    def test_missing_root_raises(self, tmp_path):
        """A missing translations directory is an initialisation error."""
        loader = FileTranslationLoader(tmp_path / "missing")
        documents = loader.iter_documents()

        with pytest.raises(SourceReadError) as exc_info:
            next(documents)

        assert exc_info.value.path == tmp_path / "missing"

    def test_unsupported_file_raises(self, translations_dir):
        """Files that are not translation documents are rejected."""
        (translations_dir / "ui" / "notes.txt").write_text("hello")

        with pytest.raises(SourceReadError) as exc_info:
            load_documents(translations_dir)

        assert "notes.txt" in str(exc_info.value)

    def test_undecodable_file_raises(self, tmp_path):
        """Files that are not UTF-8 are reported as read errors."""
        (tmp_path / "broken.toml").write_bytes(b"\xff\xfe\x00broken")

        with pytest.raises(SourceReadError):
            load_documents(tmp_path)

    def test_toml_syntax_error_has_position(self, tmp_path):
        """TOML parse failures carry file and 1-based line."""
        write_toml(tmp_path, "bad.toml", 'ok = "fine"\nbroken = = 2\n')

        with pytest.raises(DocumentSyntaxError) as exc_info:
            load_documents(tmp_path)

        error = exc_info.value
        assert error.path == Path("bad.toml")
        assert error.line == 2
        assert "bad.toml" in str(error)

    def test_yaml_syntax_error_has_position(self, tmp_path):
        """YAML parse failures carry file and line."""
        (tmp_path / "bad.yml").write_text("greeting: [unclosed\n", encoding="utf-8")

        with pytest.raises(DocumentSyntaxError) as exc_info:
            load_documents(tmp_path)

        assert exc_info.value.path == Path("bad.yml")
        assert exc_info.value.line is not None

    def test_yaml_yes_no_on_off_keys_stay_strings(self, tmp_path):
        """Norwegian (no) and similar keys are not read as booleans."""
        (tmp_path / "switches.yml").write_text(
            "greeting:\n  en: Hello\n  no: Hei\non:\n  en: Enabled\noff:\n  en: Disabled\n"
            "answer:\n  en: yes\n",
            encoding="utf-8",
        )

        (document,) = load_documents(tmp_path)

        assert document.data == {
            "greeting": {"en": "Hello", "no": "Hei"},
            "on": {"en": "Enabled"},
            "off": {"en": "Disabled"},
            "answer": {"en": "yes"},
        }

    def test_yaml_true_and_false_are_booleans(self, tmp_path):
        (tmp_path / "flags.yml").write_text("flag:\n  en: true\n", encoding="utf-8")

        (document,) = load_documents(tmp_path)

        assert document.data["flag"]["en"] is True

    def test_empty_directory_yields_nothing(self, tmp_path):
        """A directory without documents yields no documents."""
        assert load_documents(tmp_path) == []

    def test_documents_are_yielded_lazily(self, translations_dir):
        """iter_documents is a generator over the directory walk."""
        documents = FileTranslationLoader(translations_dir).iter_documents()
        first = next(documents)
        assert first.path == Path("common.toml")
