import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing
# `translatable` works during pytest collection regardless of invocation.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from translatable.factory import clear_tree_cache

SETTINGS_ENV_VARS = (
    "LOCALES_PATH",
    "SEEK_MODE",
    "TRANSLATION_OVERLAP",
    "NAMESPACE_SOURCES",
    "FALLBACK_LANGUAGE",
    "FALLBACK_TRANSLATION",
    "TRANSLATABLE_CONFIG_PATH",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without ambient translatable configuration.

    Clears the settings environment variables and moves into an empty
    working directory so no ``.env`` or ``translatable.toml`` is picked up.
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    working_dir = tmp_path / "cwd"
    working_dir.mkdir()
    monkeypatch.chdir(working_dir)


@pytest.fixture(autouse=True)
def reset_tree_cache():
    """Start and finish every test with an empty translation tree cache."""
    clear_tree_cache()
    yield
    clear_tree_cache()
