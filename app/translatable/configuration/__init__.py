"""Translatable configuration module - public API.

Exports:
    TranslatableSettings: Translation source settings (path, ordering, overlap)
    LoggingSettings: Logging level and environment settings
    load_settings: Build TranslatableSettings, raising ConfigurationError

Example:
    ```python
    from translatable.configuration import load_settings

    settings = load_settings()
    root = settings.path
    ```
"""

from translatable.configuration.settings import (
    LoggingSettings,
    TranslatableSettings,
    load_settings,
)

__all__ = ["LoggingSettings", "TranslatableSettings", "load_settings"]
