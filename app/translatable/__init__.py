"""translatable - translation resolution engine.

Loads a directory of TOML/YAML translation documents into one immutable
tree and resolves (language, path) queries against it, with placeholder
substitution.

Main components:
- loader: TranslationLoader and FileTranslationLoader
- structure: group/translation validation of parsed documents
- languages: ISO 639-1 registry, validation and suggestions
- merger: seek-mode ordering and overlap-aware tree merging
- resolvers: path and language resolution
- templating: TemplateString parsing and rendering
- translator: Translator with ahead-of-time and per-query strategies
- context: translation_context class decorator
"""

from translatable.context import context_path, translation_context
from translatable.errors import (
    ConfigurationError,
    DocumentSyntaxError,
    InvalidLanguage,
    LanguageNotAvailable,
    MergeConflictError,
    PathNotFound,
    SourceReadError,
    StructuralError,
    TemplateSyntaxError,
    TranslatableError,
)
from translatable.factory import (
    build_translation_tree,
    clear_tree_cache,
    create_translator,
    get_translation_tree,
)
from translatable.languages import Language, suggest_languages, validate_language
from translatable.models import (
    Dynamic,
    Group,
    Leaf,
    SeekMode,
    Static,
    TranslationOverlap,
    TranslationTree,
)
from translatable.operations import TranslationResult, TranslationStatus
from translatable.service import TranslationService
from translatable.templating import TemplateString
from translatable.translator import PreparedTranslation, Translator

__all__ = [
    "Language",
    "SeekMode",
    "TranslationOverlap",
    "Group",
    "Leaf",
    "TranslationTree",
    "TemplateString",
    "Static",
    "Dynamic",
    "Translator",
    "PreparedTranslation",
    "TranslationService",
    "TranslationResult",
    "TranslationStatus",
    "translation_context",
    "context_path",
    "validate_language",
    "suggest_languages",
    "build_translation_tree",
    "get_translation_tree",
    "clear_tree_cache",
    "create_translator",
    "TranslatableError",
    "ConfigurationError",
    "SourceReadError",
    "DocumentSyntaxError",
    "StructuralError",
    "TemplateSyntaxError",
    "MergeConflictError",
    "InvalidLanguage",
    "PathNotFound",
    "LanguageNotAvailable",
]
