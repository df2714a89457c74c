"""Translation service for dependency injection.

Provides a class-based interface to the translation engine for easier DI and
testing.
"""

from typing import Any, Mapping, Optional

from translatable.factory import create_translator
from translatable.languages import Language
from translatable.operations import TranslationResult
from translatable.translator import LanguageLike, Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator; all work is delegated to it.

    Usage:
        service = TranslationService()
        service.translate("es", "greeting", {"name": "John"})

        result = service.try_translate(user_language, "greeting")
        if result.is_success:
            ...
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        language: LanguageLike,
        path: Any,
        substitutions: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve and render a translation.

        Raises:
            InvalidLanguage, PathNotFound, LanguageNotAvailable
        """
        return self._translator.translate(language, path, substitutions)

    def try_translate(
        self,
        language: Any,
        path: Any,
        substitutions: Optional[Mapping[str, Any]] = None,
    ) -> TranslationResult:
        """Resolve and render a translation without raising for query errors."""
        return self._translator.try_translate(language, path, substitutions)

    def has_translation(self, language: Any, path: Any) -> bool:
        return self._translator.has_translation(language, path)

    def available_languages(self, path: Any) -> frozenset[Language]:
        return self._translator.available_languages(path)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
