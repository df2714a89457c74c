"""Translatable configuration settings.

Settings are read, in order of precedence, from explicit keyword arguments,
environment variables, a ``.env`` file and finally a ``translatable.toml``
file. The TOML file is looked up in the working directory unless
``TRANSLATABLE_CONFIG_PATH`` names another one. A missing file is not an
error; every field has a default.

Environment variables are matched case-sensitively, so only the names listed
below are read (``PATH`` never feeds ``path``).

Environment Variables:
    LOCALES_PATH: Root directory holding the translation sources
    SEEK_MODE: Source ordering before merge (alphabetical, unalphabetical)
    TRANSLATION_OVERLAP: Duplicate translation policy (overwrite, ignore)
    NAMESPACE_SOURCES: Nest each file's tree under its relative path
    FALLBACK_LANGUAGE: Language used when a translation lacks the requested one
    FALLBACK_TRANSLATION: Template returned when nothing else resolves
    TRANSLATABLE_CONFIG_PATH: Location of the TOML configuration file
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    PREFIX: Environment prefix, empty in production

Example ``translatable.toml``:
    ```toml
    seek_mode = "unalphabetical"
    overlap = "ignore"

    [sources]
    path = "./locales"

    [fallbacks]
    language = "en"
    translation = "Missing translation"
    ```
"""

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from translatable.errors import ConfigurationError, InvalidLanguage
from translatable.languages import Language, validate_language
from translatable.models import SeekMode, TranslationOverlap
from translatable.templating import TemplateString

CONFIG_PATH_ENV_VAR = "TRANSLATABLE_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "translatable.toml"

# (table, key) in translatable.toml -> settings field
_TOML_TABLE_FIELDS = {
    ("sources", "path"): "path",
    ("fallbacks", "language"): "fallback_language",
    ("fallbacks", "translation"): "fallback_translation",
}


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    LOG_LEVEL: str = "INFO"
    PREFIX: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)


class TranslatableTomlSource(TomlConfigSettingsSource):
    """TOML source accepting both flat keys and ``[sources]``/``[fallbacks]`` tables.

    Flat top-level keys win over their table form when a file holds both.
    """

    def _read_file(self, file_path: Path) -> dict[str, Any]:
        data = super()._read_file(file_path)
        for (table, key), field_name in _TOML_TABLE_FIELDS.items():
            section = data.get(table)
            if isinstance(section, dict) and key in section:
                data.setdefault(field_name, section[key])
        return data


def config_file_path() -> Path:
    """Location of the TOML configuration file."""
    return Path(os.environ.get(CONFIG_PATH_ENV_VAR) or DEFAULT_CONFIG_PATH)


class TranslatableSettings(BaseSettings):
    """Translation source configuration.

    Attributes:
        path: Root directory containing only translation documents.
        seek_mode: Order in which source files are merged.
        overlap: Which value wins when two sources define the same
            (path, language) pair.
        namespace_sources: When True, each file's tree is merged under its
            relative path segments instead of at the root.
        fallback_language: Language served when a translation object lacks
            the requested one.
        fallback_translation: Template served when neither the requested nor
            the fallback language resolves, including unknown paths.
    """

    path: str = Field(
        default="./translations",
        validation_alias="LOCALES_PATH",
        description="Root directory holding the translation sources",
    )
    seek_mode: SeekMode = Field(
        default=SeekMode.ALPHABETICAL,
        validation_alias="SEEK_MODE",
        description="Source ordering applied before merge",
    )
    overlap: TranslationOverlap = Field(
        default=TranslationOverlap.OVERWRITE,
        validation_alias="TRANSLATION_OVERLAP",
        description="Conflict policy for duplicate translations",
    )
    namespace_sources: bool = Field(
        default=False,
        validation_alias="NAMESPACE_SOURCES",
        description="Prefix each source tree with its relative path segments",
    )
    fallback_language: Optional[Language] = Field(
        default=None,
        validation_alias="FALLBACK_LANGUAGE",
        description="Language used when the requested one is unavailable",
    )
    fallback_translation: Optional[str] = Field(
        default=None,
        validation_alias="FALLBACK_TRANSLATION",
        description="Template returned when no translation resolves",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("seek_mode", "overlap", mode="before")
    @classmethod
    def _normalize_enum(cls, v: Optional[Any]) -> Any:
        """Accept enum values regardless of case or surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("fallback_language", mode="before")
    @classmethod
    def _parse_language(cls, v: Optional[Any]) -> Any:
        """Accept a language code or English name, like any query."""
        if v is None or isinstance(v, Language):
            return v
        try:
            return validate_language(v)
        except InvalidLanguage as e:
            raise ValueError(str(e)) from e

    @field_validator("fallback_translation")
    @classmethod
    def _check_template(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            TemplateString.parse(v)
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TranslatableTomlSource(settings_cls, toml_file=config_file_path()),
        )

    @property
    def cache_key(self) -> tuple:
        """Identity of the configuration for the translation tree cache."""
        return (self.path, self.seek_mode, self.overlap, self.namespace_sources)


def load_settings(**overrides: Any) -> TranslatableSettings:
    """Load translation settings, reporting bad values as ConfigurationError.

    Args:
        **overrides: Field values taking precedence over every other source.

    Returns:
        TranslatableSettings instance.

    Raises:
        ConfigurationError: If any source holds a value that fails validation.
    """
    try:
        return TranslatableSettings(**overrides)
    except ValidationError as e:
        aliases = {
            field.validation_alias: name
            for name, field in TranslatableSettings.model_fields.items()
        }
        fields = sorted(
            {
                aliases.get(str(error["loc"][0]), str(error["loc"][0]))
                for error in e.errors()
                if error["loc"]
            }
        )
        raise ConfigurationError(
            f"Invalid translatable configuration for: {', '.join(fields)}"
        ) from e
