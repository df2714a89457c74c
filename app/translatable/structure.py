"""Structural validation of translation documents.

Converts the generic nested value produced by a document parser into the
typed translation tree. Every object in a document must be exactly one of:

- a group: every value is itself an object;
- a translation: every value is a string, keyed by language.

Anything else (mixed values, numbers, lists, empty objects) is rejected
before it reaches the tree. The top level of a document must be a group.
"""

from pathlib import Path
from typing import Any, Optional

from translatable.errors import InvalidLanguage, StructuralError, TemplateSyntaxError
from translatable.languages import Language, validate_language
from translatable.logging import get_module_logger
from translatable.models import Group, Leaf, Node, SourceDocument, SourceTree
from translatable.templating import TemplateError, TemplateString

logger = get_module_logger()


def build_node(
    value: Any,
    source: Optional[Path] = None,
    key_path: tuple[str, ...] = (),
) -> Node:
    """Convert one generic nested value into a Group or Leaf.

    Args:
        value: Parsed object (a dict of dicts or a dict of strings).
        source: Document the value came from, for error messages.
        key_path: Keys leading to ``value`` inside the document.

    Returns:
        The validated node.

    Raises:
        StructuralError: If the object mixes kinds, holds an unsupported
            value or is empty.
        TemplateSyntaxError: If a translation string is malformed.
        InvalidLanguage: If a translation key is not a language.
    """
    if not isinstance(value, dict):
        raise StructuralError(
            f"Expected an object, found {type(value).__name__}", source, key_path
        )
    if not value:
        raise StructuralError(
            "An object must contain either nested objects or translations, found nothing",
            source,
            key_path,
        )

    for key, item in value.items():
        if not isinstance(key, str):
            raise StructuralError(
                f"Keys must be strings, found {type(key).__name__} {key!r}",
                source,
                key_path,
            )
        if not isinstance(item, (dict, str)):
            raise StructuralError(
                "Only strings and objects are allowed for nested objects, "
                f"found {type(item).__name__}",
                source,
                key_path + (key,),
            )

    nested = [isinstance(item, dict) for item in value.values()]
    if all(nested):
        return Group(
            {
                key: build_node(item, source, key_path + (key,))
                for key, item in value.items()
            }
        )
    if not any(nested):
        return _build_leaf(value, source, key_path)

    logger.warning(
        "mixed_translation_object",
        source=str(source) if source else None,
        key_path=".".join(key_path),
    )
    raise StructuralError(
        "A nesting can contain either strings or other nestings, but not both",
        source,
        key_path,
    )


def _build_leaf(
    value: dict[str, str], source: Optional[Path], key_path: tuple[str, ...]
) -> Leaf:
    translations: dict[Language, TemplateString] = {}

    for key, raw in value.items():
        try:
            language = validate_language(key)
        except InvalidLanguage as e:
            raise InvalidLanguage(
                e.attempt, e.candidates, source=source, key_path=key_path
            ) from e

        if language in translations:
            raise StructuralError(
                f"Duplicate translation for language '{language.value}' (key '{key}')",
                source,
                key_path,
            )

        try:
            translations[language] = TemplateString.parse(raw)
        except TemplateError as e:
            raise TemplateSyntaxError(
                f"Template validation failed for '{language.value}': {e}",
                source,
                key_path,
            ) from e

    return Leaf(translations)


def build_source_tree(document: SourceDocument) -> SourceTree:
    """Validate a whole document.

    Args:
        document: Parsed document from a loader.

    Returns:
        SourceTree holding the document's top-level Group.

    Raises:
        StructuralError: If the document is not a valid group (a document
            holding bare translations at the top level is rejected).
    """
    node = build_node(document.data, source=document.path)
    match node:
        case Group():
            return SourceTree(path=document.path, segments=document.segments, root=node)
        case Leaf():
            raise StructuralError(
                "Translations are not allowed at the top level of a document",
                document.path,
            )
