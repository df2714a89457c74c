"""Translation contexts: typed groups of translations loaded together.

A translation context is a class whose fields are all ``str``; each field
maps to a path under a common base path. Decorating the class checks every
path (and the fallback language, when given) once, ahead of time, so that
loading a context at runtime can only fail on the requested language.

Usage:
    @translation_context("checkout", fallback_language="en")
    class CheckoutText:
        title: str
        pay_button: str = context_path("buttons.pay")

    text = CheckoutText.load_translations(user_language, {"total": "12.00"})
    text.title

Without a fallback language ``load_translations`` returns a
TranslationResult instead of the instance.
"""

import inspect
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from translatable.errors import InvalidLanguage, PathNotFound
from translatable.factory import create_translator
from translatable.languages import Language, validate_language
from translatable.logging import get_module_logger
from translatable.models import Leaf
from translatable.operations import TranslationResult
from translatable.resolvers import normalize_path, resolve_path, resolve_translation
from translatable.translator import LanguageLike, Translator

logger = get_module_logger()

T = TypeVar("T")

PATH_METADATA_KEY = "translatable_path"


def context_path(path: str) -> Any:
    """Declare the path of a context field, relative to the base path.

    Args:
        path: Dotted path; defaults to the field name when not declared.
    """
    return field(metadata={PATH_METADATA_KEY: path})


def _check_field_types(cls: type) -> None:
    for name, annotation in inspect.get_annotations(cls).items():
        if annotation not in (str, "str"):
            raise TypeError(
                f"Translation context field '{cls.__name__}.{name}' must be "
                f"annotated as str, found {annotation!r}"
            )


def translation_context(
    base_path: Union[str, tuple[str, ...]] = "",
    fallback_language: Optional[LanguageLike] = None,
    translator: Optional[Translator] = None,
) -> Callable[[type[T]], type[T]]:
    """Turn a class of ``str`` fields into a translation context.

    Args:
        base_path: Path prefix shared by every field.
        fallback_language: Language used for any field the requested
            language lacks. Must exist at every field path.
        translator: Translator to load from; the shared default when omitted.

    Returns:
        Class decorator producing a frozen dataclass with a
        ``load_translations(language, substitutions=None)`` classmethod.

    Raises:
        TypeError: If a field is not annotated as ``str``.
        PathNotFound: If a field path has no translation object.
        InvalidLanguage: If the fallback language is not valid.
        LanguageNotAvailable: If the fallback is missing at some field path.
    """

    def decorate(cls: type[T]) -> type[T]:
        _check_field_types(cls)
        context_cls = dataclass(frozen=True)(cls)

        source = translator or create_translator()

        base = normalize_path(base_path)
        paths = {
            f.name: base + normalize_path(f.metadata.get(PATH_METADATA_KEY, f.name))
            for f in fields(context_cls)
        }
        leaves = {name: resolve_path(source.tree, path) for name, path in paths.items()}

        fallback = None
        if fallback_language is not None:
            fallback = validate_language(fallback_language)
            for name, leaf in leaves.items():
                resolve_translation(leaf, fallback, paths[name])

        def load_translations(
            cls_: type[T],
            language: Any,
            substitutions: Optional[Mapping[str, Any]] = None,
        ) -> Union[T, TranslationResult]:
            if fallback is not None:
                return _load_with_fallback(
                    cls_, leaves, language, fallback, substitutions
                )
            return _load_strict(cls_, leaves, paths, language, substitutions)

        context_cls.load_translations = classmethod(load_translations)
        context_cls.translation_paths = MappingProxyType(paths)
        context_cls.fallback_language = fallback

        logger.debug(
            "translation_context_registered",
            context=cls.__name__,
            field_count=len(paths),
            fallback_language=fallback.value if fallback else None,
        )
        return context_cls

    return decorate


def _load_with_fallback(
    cls: type[T],
    leaves: Mapping[str, Leaf],
    language: Any,
    fallback: Language,
    substitutions: Optional[Mapping[str, Any]],
) -> T:
    try:
        requested: Optional[Language] = validate_language(language)
    except InvalidLanguage as e:
        logger.warning(
            "translation_context_invalid_language",
            context=cls.__name__,
            error=str(e),
            fallback_language=fallback.value,
        )
        requested = None

    values = {}
    for name, leaf in leaves.items():
        template = leaf.get(requested) if requested is not None else None
        if template is None:
            template = leaf.translations[fallback]
        values[name] = template.render(substitutions)
    return cls(**values)


def _load_strict(
    cls: type[T],
    leaves: Mapping[str, Leaf],
    paths: Mapping[str, tuple[str, ...]],
    language: Any,
    substitutions: Optional[Mapping[str, Any]],
) -> TranslationResult:
    try:
        requested = validate_language(language)
        values = {
            name: resolve_translation(leaf, requested, paths[name]).render(substitutions)
            for name, leaf in leaves.items()
        }
    except (InvalidLanguage, PathNotFound) as e:
        logger.warning(
            "translation_context_load_failed",
            context=cls.__name__,
            error_type=type(e).__name__,
            error=str(e),
        )
        return TranslationResult.failure(e)
    return TranslationResult.success(cls(**values))
