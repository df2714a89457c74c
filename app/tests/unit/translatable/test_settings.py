"""Tests for translatable.configuration.settings module."""

from pathlib import Path

import pytest

from translatable.configuration import (
    LoggingSettings,
    TranslatableSettings,
    load_settings,
)
from translatable.errors import ConfigurationError
from translatable.languages import Language
from translatable.models import SeekMode, TranslationOverlap


@pytest.mark.unit
class TestTranslatableSettings:
    """Tests for TranslatableSettings sources and defaults."""

    def test_defaults(self):
        settings = TranslatableSettings()

        assert settings.path == "./translations"
        assert settings.seek_mode == SeekMode.ALPHABETICAL
        assert settings.overlap == TranslationOverlap.OVERWRITE
        assert settings.namespace_sources is False

    def test_keyword_arguments(self):
        settings = TranslatableSettings(
            path="./locales", seek_mode="unalphabetical", overlap="ignore"
        )

        assert settings.path == "./locales"
        assert settings.seek_mode == SeekMode.UNALPHABETICAL
        assert settings.overlap == TranslationOverlap.IGNORE

    def test_unrelated_environment_variables_are_ignored(self, monkeypatch):
        """Only the documented names are read, so PATH never fills path."""
        monkeypatch.setenv("PATH", "/usr/local/bin:/usr/bin:/bin")
        monkeypatch.setenv("OVERLAP", "ignore")

        settings = load_settings()

        assert settings.path == "./translations"
        assert settings.overlap == TranslationOverlap.OVERWRITE

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOCALES_PATH", "/srv/locales")
        monkeypatch.setenv("SEEK_MODE", "unalphabetical")
        monkeypatch.setenv("TRANSLATION_OVERLAP", "ignore")
        monkeypatch.setenv("NAMESPACE_SOURCES", "true")

        settings = TranslatableSettings()

        assert settings.path == "/srv/locales"
        assert settings.seek_mode == SeekMode.UNALPHABETICAL
        assert settings.overlap == TranslationOverlap.IGNORE
        assert settings.namespace_sources is True

    def test_enum_values_are_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("SEEK_MODE", "  UnAlphabetical ")
        monkeypatch.setenv("TRANSLATION_OVERLAP", "IGNORE")

        settings = TranslatableSettings()

        assert settings.seek_mode == SeekMode.UNALPHABETICAL
        assert settings.overlap == TranslationOverlap.IGNORE

    def test_toml_file_in_working_directory(self):
        """translatable.toml in the working directory is read."""
        Path("translatable.toml").write_text(
            'path = "./from-toml"\nseek_mode = "unalphabetical"\noverlap = "ignore"\n',
            encoding="utf-8",
        )

        settings = TranslatableSettings()

        assert settings.path == "./from-toml"
        assert settings.seek_mode == SeekMode.UNALPHABETICAL
        assert settings.overlap == TranslationOverlap.IGNORE

    def test_environment_takes_precedence_over_toml(self, monkeypatch):
        Path("translatable.toml").write_text('path = "./from-toml"\n', encoding="utf-8")
        monkeypatch.setenv("LOCALES_PATH", "./from-env")

        assert TranslatableSettings().path == "./from-env"

    def test_fallbacks_default_to_none(self):
        settings = TranslatableSettings()

        assert settings.fallback_language is None
        assert settings.fallback_translation is None

    def test_fallbacks_from_environment(self, monkeypatch):
        monkeypatch.setenv("FALLBACK_LANGUAGE", "English")
        monkeypatch.setenv("FALLBACK_TRANSLATION", "Missing: {name}")

        settings = TranslatableSettings()

        assert settings.fallback_language is Language.EN
        assert settings.fallback_translation == "Missing: {name}"

    def test_toml_tables(self):
        """[sources] and [fallbacks] tables map onto their fields."""
        Path("translatable.toml").write_text(
            "[sources]\n"
            'path = "./tabled"\n'
            "[fallbacks]\n"
            'language = "es"\n'
            'translation = "Sin traducción"\n',
            encoding="utf-8",
        )

        settings = TranslatableSettings()

        assert settings.path == "./tabled"
        assert settings.fallback_language is Language.ES
        assert settings.fallback_translation == "Sin traducción"

    def test_flat_toml_key_wins_over_table(self):
        Path("translatable.toml").write_text(
            'path = "./flat"\n[sources]\npath = "./tabled"\n',
            encoding="utf-8",
        )

        assert TranslatableSettings().path == "./flat"

    def test_config_path_from_environment(self, monkeypatch, tmp_path):
        config = tmp_path / "conf" / "custom.toml"
        config.parent.mkdir()
        config.write_text('[sources]\npath = "./custom"\n', encoding="utf-8")
        Path("translatable.toml").write_text('path = "./ignored"\n', encoding="utf-8")
        monkeypatch.setenv("TRANSLATABLE_CONFIG_PATH", str(config))

        assert TranslatableSettings().path == "./custom"

    def test_missing_config_path_uses_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRANSLATABLE_CONFIG_PATH", str(tmp_path / "absent.toml"))

        assert TranslatableSettings().path == "./translations"

    def test_cache_key(self):
        settings = TranslatableSettings(path="./x", overlap="ignore")
        assert settings.cache_key == (
            "./x",
            SeekMode.ALPHABETICAL,
            TranslationOverlap.IGNORE,
            False,
        )


@pytest.mark.unit
class TestLoadSettings:
    """Tests for load_settings."""

    def test_returns_settings(self):
        assert load_settings(path="./locales").path == "./locales"

    def test_invalid_value_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(seek_mode="sideways")

        assert "seek_mode" in str(exc_info.value)

    def test_invalid_environment_value_names_field(self, monkeypatch):
        monkeypatch.setenv("TRANSLATION_OVERLAP", "merge")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()

        assert "overlap" in str(exc_info.value)

    def test_invalid_fallback_language_names_field(self, monkeypatch):
        monkeypatch.setenv("FALLBACK_LANGUAGE", "Klingon")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()

        assert "fallback_language" in str(exc_info.value)

    def test_invalid_fallback_template_names_field(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(fallback_translation="Missing {1st}")

        assert "fallback_translation" in str(exc_info.value)


@pytest.mark.unit
class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_production_when_prefix_empty(self):
        assert LoggingSettings(PREFIX="").is_production is True

    def test_not_production_with_prefix(self):
        assert LoggingSettings(PREFIX="dev-").is_production is False

    def test_log_level(self):
        assert LoggingSettings(LOG_LEVEL="DEBUG").LOG_LEVEL == "DEBUG"
