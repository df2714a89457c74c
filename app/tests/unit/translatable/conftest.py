"""Feature-level fixtures for translation engine tests.

Provides translation source directories written to ``tmp_path`` and
translators over in-memory trees.
"""

import pytest

from tests.factories.translations import make_translator, write_toml, write_yaml

COMMON_TOML = """\
[greeting]
en = "Hello {name}!"
es = "¡Hola {name}!"

[farewell]
en = "Goodbye"
"""


@pytest.fixture
def translations_dir(tmp_path):
    """Create a translations directory with TOML and YAML sources.

    Layout:
    - common.toml      greeting (en, es), farewell (en)
    - ui/menu.yml      menu.file (en, es), menu.edit (en)
    """
    root = tmp_path / "translations"
    write_toml(root, "common.toml", COMMON_TOML)
    write_yaml(
        root,
        "ui/menu.yml",
        {
            "menu": {
                "file": {"en": "File", "es": "Archivo"},
                "edit": {"en": "Edit"},
            }
        },
    )
    return root


@pytest.fixture
def translator():
    """Translator over the standard in-memory tree."""
    return make_translator()
