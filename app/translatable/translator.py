"""Translation service: resolution strategies over the translation tree.

Every translation runs the same pipeline (validate language, resolve path,
select language, render) and the only thing that varies is *when* each
check runs:

- Inputs known before any query executes (static) are checked once, in
  ``Translator.prepare``. A failure there raises immediately: the query is
  never issued.
- Inputs only known when the query executes (dynamic) are checked per
  query in ``PreparedTranslation.resolve``, which returns a
  TranslationResult instead of raising.

``Translator.translation`` is the front-end entry point: it accepts bare or
``Static`` values and ``Dynamic`` values for the language and the path, and
returns a plain string when both are static or a TranslationResult
otherwise.

A Translator may carry configured fallbacks. The fallback language is
served when a translation object lacks the requested language; the
fallback translation is served when neither language resolves or the path
has no translation object. An invalid language is always an error.
"""

from typing import Any, Mapping, Optional, Union

from translatable.errors import InvalidLanguage, PathNotFound
from translatable.languages import Language, validate_language
from translatable.logging import get_module_logger
from translatable.models import Dynamic, Leaf, Static, TranslationTree
from translatable.operations import TranslationResult
from translatable.resolvers import (
    PathLike,
    normalize_path,
    resolve_path,
    resolve_translation,
)
from translatable.templating import TemplateString

logger = get_module_logger()

LanguageLike = Union[str, Language]

_UNSET: Any = object()


class PreparedTranslation:
    """A translation whose static inputs have already been validated.

    Created by ``Translator.prepare``. Holds whatever could be resolved
    ahead of time: the language, the translation object, or the final
    template when both inputs were static.
    """

    def __init__(
        self,
        translator: "Translator",
        language: Optional[Language] = None,
        path: Optional[tuple[str, ...]] = None,
        leaf: Optional[Leaf] = None,
        template: Optional[TemplateString] = None,
    ):
        self._translator = translator
        self.language = language
        self.path = path
        self._leaf = leaf
        self._template = template

    @property
    def is_static(self) -> bool:
        """True when both language and path were fixed ahead of time."""
        return self._template is not None

    @property
    def template(self) -> Optional[TemplateString]:
        return self._template

    def render(self, substitutions: Optional[Mapping[str, Any]] = None) -> str:
        """Render a fully static translation.

        Args:
            substitutions: Placeholder name -> value.

        Returns:
            The rendered string.

        Raises:
            TypeError: If the language or the path is still deferred.
        """
        if self._template is None:
            raise TypeError(
                "Only a translation prepared with both language and path can be "
                "rendered directly; use resolve() instead"
            )
        return self._template.render(substitutions)

    def resolve(
        self,
        substitutions: Optional[Mapping[str, Any]] = None,
        *,
        language: Any = _UNSET,
        path: Any = _UNSET,
    ) -> TranslationResult:
        """Run the deferred checks and render.

        Args:
            substitutions: Placeholder name -> value.
            language: Language for this query; required when it was not
                prepared, rejected when it was.
            path: Path for this query; required when it was not prepared,
                rejected when it was.

        Returns:
            TranslationResult with the rendered string, or the
            InvalidLanguage / PathNotFound / LanguageNotAvailable error.

        Raises:
            TypeError: If an input is missing or supplied twice.
        """
        query_language = self._pick("language", self.language, language)
        query_path = self._pick("path", self.path, path)

        try:
            template = self._template
            if template is None:
                resolved_language = self.language or validate_language(query_language)
                if self.path is not None:
                    segments, leaf = self.path, self._leaf
                else:
                    segments, leaf = self._translator._locate(query_path)
                template = self._translator._select(leaf, resolved_language, segments)
        except (InvalidLanguage, PathNotFound) as e:
            logger.warning(
                "translation_query_failed",
                error_type=type(e).__name__,
                error=str(e),
            )
            return TranslationResult.failure(e)

        return TranslationResult.success(template.render(substitutions))

    @staticmethod
    def _pick(name: str, prepared: Any, supplied: Any) -> Any:
        if prepared is not None and supplied is not _UNSET:
            raise TypeError(f"The {name} was fixed when the translation was prepared")
        if prepared is None and supplied is _UNSET:
            raise TypeError(f"A {name} is required for this translation")
        return prepared if prepared is not None else supplied


def _split_input(value: Any) -> tuple[Any, Any]:
    """Split a front-end input into (static value, dynamic value)."""
    match value:
        case Dynamic(value=inner):
            return None, inner
        case Static(value=inner):
            return inner, _UNSET
        case _:
            return value, _UNSET


class Translator:
    """Service for resolving and rendering translations from a tree.

    Attributes:
        tree: Merged, immutable translation tree.
        fallback_language: Language served when an object lacks the
            requested language, or None.
        fallback_translation: Template served when nothing else resolves,
            or None.
    """

    def __init__(
        self,
        tree: TranslationTree,
        fallback_language: Optional[LanguageLike] = None,
        fallback_translation: Optional[str] = None,
    ):
        self.tree = tree
        self.fallback_language = (
            validate_language(fallback_language) if fallback_language is not None else None
        )
        self.fallback_translation = (
            TemplateString.parse(fallback_translation)
            if fallback_translation is not None
            else None
        )

    def _locate(self, path: Any) -> tuple[tuple[str, ...], Optional[Leaf]]:
        """Resolve a path; with a fallback translation a missing path yields None."""
        try:
            segments = normalize_path(path)
            return segments, resolve_path(self.tree, segments)
        except PathNotFound as e:
            if self.fallback_translation is None:
                raise
            logger.debug("translation_fallback_used", reason="path", error=str(e))
            return e.path, None

    def _select(
        self, leaf: Optional[Leaf], language: Language, segments: tuple[str, ...]
    ) -> TemplateString:
        if leaf is not None:
            template = leaf.get(language)
            if template is not None:
                return template
            if self.fallback_language is not None:
                template = leaf.get(self.fallback_language)
                if template is not None:
                    logger.debug(
                        "translation_fallback_used",
                        reason="language",
                        language=language.value,
                        fallback_language=self.fallback_language.value,
                        path=".".join(segments),
                    )
                    return template
        if self.fallback_translation is not None:
            logger.debug(
                "translation_fallback_used",
                reason="translation",
                language=language.value,
                path=".".join(segments),
            )
            return self.fallback_translation
        return resolve_translation(leaf, language, segments)

    def prepare(
        self,
        language: Optional[LanguageLike] = None,
        path: Optional[PathLike] = None,
    ) -> PreparedTranslation:
        """Validate the inputs known ahead of time.

        Args:
            language: Language to fix now, or None to supply it per query.
            path: Path to fix now, or None to supply it per query.

        Returns:
            PreparedTranslation ready for ``render`` (both fixed) or
            ``resolve`` (something deferred).

        Raises:
            InvalidLanguage: If the fixed language is not valid.
            PathNotFound: If the fixed path has no translation object
                and no fallback translation is configured.
            LanguageNotAvailable: If both are fixed and the object lacks
                the language and no fallback covers it.
        """
        resolved_language = validate_language(language) if language is not None else None
        segments, leaf = self._locate(path) if path is not None else (None, None)

        template = None
        if segments is not None and resolved_language is not None:
            template = self._select(leaf, resolved_language, segments)

        return PreparedTranslation(
            self,
            language=resolved_language,
            path=segments,
            leaf=leaf,
            template=template,
        )

    def translation(
        self,
        language: Any,
        path: Any,
        substitutions: Optional[Mapping[str, Any]] = None,
    ) -> Union[str, TranslationResult]:
        """Resolve a translation, deferring only the ``Dynamic`` inputs.

        Args:
            language: Language code/name, ``Static(...)`` or ``Dynamic(...)``.
            path: Dotted path or segments, ``Static(...)`` or ``Dynamic(...)``.
            substitutions: Placeholder name -> value.

        Returns:
            The rendered string when both inputs are static, otherwise a
            TranslationResult.

        Raises:
            InvalidLanguage, PathNotFound, LanguageNotAvailable: If a static
                input fails its ahead-of-time check.
        """
        static_language, dynamic_language = _split_input(language)
        static_path, dynamic_path = _split_input(path)

        prepared = self.prepare(static_language, static_path)
        if prepared.is_static:
            return prepared.render(substitutions)
        return prepared.resolve(
            substitutions, language=dynamic_language, path=dynamic_path
        )

    def translate(
        self,
        language: LanguageLike,
        path: PathLike,
        substitutions: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve and render, raising on any error."""
        return self.prepare(language, path).render(substitutions)

    def try_translate(
        self,
        language: Any,
        path: Any,
        substitutions: Optional[Mapping[str, Any]] = None,
    ) -> TranslationResult:
        """Resolve and render with every check deferred; never raises."""
        return PreparedTranslation(self).resolve(
            substitutions, language=language, path=path
        )

    def has_translation(self, language: Any, path: Any) -> bool:
        """Check if the tree itself defines the language at the path.

        Configured fallbacks are not consulted.
        """
        try:
            leaf = resolve_path(self.tree, normalize_path(path))
            return leaf.get(validate_language(language)) is not None
        except (InvalidLanguage, PathNotFound):
            return False

    def available_languages(self, path: PathLike) -> frozenset[Language]:
        """Languages defined at a path.

        Raises:
            PathNotFound: If no translation object exists at the path.
        """
        return resolve_path(self.tree, path).languages
