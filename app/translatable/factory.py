"""Factory functions for building the translation tree and translators.

The tree is built at most once per configuration. Concurrent first callers
block on a lock until construction completes; a failed build caches nothing
and every later call retries it.
"""

import threading
from pathlib import Path
from typing import Optional

from translatable.configuration import TranslatableSettings, load_settings
from translatable.loader import FileTranslationLoader
from translatable.logging import get_module_logger, translation_log_context
from translatable.merger import merge_sources
from translatable.models import TranslationTree
from translatable.structure import build_source_tree
from translatable.translator import Translator

logger = get_module_logger()

_tree_cache: dict[tuple, TranslationTree] = {}
_tree_lock = threading.Lock()


def build_translation_tree(settings: TranslatableSettings) -> TranslationTree:
    """Load, validate and merge every source under the configured path.

    Args:
        settings: Source location, seek mode, overlap policy.

    Returns:
        The merged translation tree.

    Raises:
        SourceReadError, DocumentSyntaxError, StructuralError,
        InvalidLanguage, MergeConflictError: If any source is unusable.
            No partial tree is ever returned.
    """
    loader = FileTranslationLoader(Path(settings.path))
    with translation_log_context(
        translations_path=settings.path,
        seek_mode=settings.seek_mode.value,
        overlap=settings.overlap.value,
    ):
        sources = [build_source_tree(document) for document in loader.iter_documents()]
        tree = merge_sources(
            sources,
            seek_mode=settings.seek_mode,
            overlap=settings.overlap,
            namespaced=settings.namespace_sources,
        )
    logger.info(
        "translation_tree_built",
        path=settings.path,
        source_count=len(sources),
        top_level_keys=len(tree.children),
    )
    return tree


def get_translation_tree(
    settings: Optional[TranslatableSettings] = None,
) -> TranslationTree:
    """Return the tree for a configuration, building it on first use.

    Args:
        settings: Configuration; loaded from the environment when omitted.

    Returns:
        The shared, immutable translation tree.

    Raises:
        ConfigurationError: If settings are loaded and invalid.
        Any initialisation error raised by ``build_translation_tree``.
    """
    settings = settings or load_settings()
    key = settings.cache_key

    tree = _tree_cache.get(key)
    if tree is not None:
        logger.debug("translation_tree_cache_hit", path=settings.path)
        return tree

    with _tree_lock:
        tree = _tree_cache.get(key)
        if tree is None:
            tree = build_translation_tree(settings)
            _tree_cache[key] = tree
    return tree


def clear_tree_cache() -> None:
    """Discard every cached tree."""
    with _tree_lock:
        _tree_cache.clear()


def create_translator(
    settings: Optional[TranslatableSettings] = None,
) -> Translator:
    """Create a Translator over the shared tree for a configuration.

    Usage:
        # Defaults from env / .env / translatable.toml
        translator = create_translator()

        # Explicit source directory
        translator = create_translator(load_settings(path="./locales"))
    """
    settings = settings or load_settings()
    return Translator(
        get_translation_tree(settings),
        fallback_language=settings.fallback_language,
        fallback_translation=settings.fallback_translation,
    )
