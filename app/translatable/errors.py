"""Custom exceptions for the translation engine.

Initialization errors (reading, parsing, validating and merging sources)
abort tree construction. Resolution errors (invalid language, missing path)
are raised when a query is prepared ahead of time and returned inside a
TranslationResult when the query is deferred.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from translatable.languages import Language, LanguageSuggestion


def _display_path(path: Sequence[str]) -> str:
    return ".".join(path)


class TranslatableError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            translator.translate("es", "greeting")
        except TranslatableError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class ConfigurationError(TranslatableError):
    """Raised when a configuration source holds an invalid value.

    Example:
        >>> load_settings(seek_mode="sideways")
        Traceback (most recent call last):
        ...
        ConfigurationError: Invalid translatable configuration for: seek_mode
    """

    pass


class SourceReadError(TranslatableError):
    """Raised when a translation source cannot be read.

    Covers I/O failures, a missing root directory and files that are not
    translation documents.

    Attributes:
        path: Filesystem path that could not be read.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class DocumentSyntaxError(TranslatableError):
    """Raised when a translation document cannot be parsed.

    Attributes:
        path: Document path.
        line: 1-based line reported by the parser, when available.
        column: 1-based column reported by the parser, when available.
        reason: Parser message.
    """

    def __init__(
        self,
        path: Path,
        reason: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        location = f"{path}:{line}:{column}" if line is not None else str(path)
        super().__init__(f"Syntax error in {location}: {reason}")
        self.path = path
        self.reason = reason
        self.line = line
        self.column = column


class StructuralError(TranslatableError):
    """Raised when a document breaks the group/translation nesting rules.

    An object may contain either nested objects or translation strings,
    never both, and nothing else.

    Attributes:
        source: Document the offending object came from.
        key_path: Keys leading to the offending object.
        reason: Description of the violation.
    """

    def __init__(
        self,
        reason: str,
        source: Optional[Path] = None,
        key_path: Sequence[str] = (),
    ):
        self.source = source
        self.key_path = tuple(key_path)
        self.reason = reason
        location = _display_path(self.key_path) or "<root>"
        if source is not None:
            location = f"{source} at {location}"
        super().__init__(f"Invalid translation structure in {location}: {reason}")


class TemplateSyntaxError(StructuralError):
    """Raised when a translation string holds a malformed placeholder."""

    pass


class MergeConflictError(TranslatableError):
    """Raised when sources disagree on whether a path is a group or a translation.

    Attributes:
        path: Path holding incompatible node kinds.
    """

    def __init__(self, path: Sequence[str], reason: str = ""):
        self.path = tuple(path)
        message = (
            f"Incompatible translation sources at '{_display_path(self.path)}': "
            "a group and a translation share the same path"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidLanguage(TranslatableError):
    """Raised when a language is not an ISO 639-1 code or English name.

    Attributes:
        attempt: The rejected input.
        candidates: Closest registry entries, most similar first.
        source: Document holding the key, when raised during validation.
        key_path: Keys leading to the translation object, when applicable.
    """

    def __init__(
        self,
        attempt: str,
        candidates: Sequence["LanguageSuggestion"] = (),
        source: Optional[Path] = None,
        key_path: Sequence[str] = (),
    ):
        self.attempt = attempt
        self.candidates = list(candidates)
        self.source = source
        self.key_path = tuple(key_path)

        message = f'"{attempt}" is not a valid language'
        if self.candidates:
            closest = ", ".join(
                f'"{c.code}" ({c.display_name})' for c in self.candidates
            )
            message = f"{message}, perhaps you meant {closest}?"
        else:
            message = f"{message}."
        if source is not None:
            message = f"{message} Found in {source} at {_display_path(self.key_path)}."
        super().__init__(message)

    @property
    def closest(self) -> Optional["LanguageSuggestion"]:
        """Best suggestion, or None when the registry offered nothing."""
        return self.candidates[0] if self.candidates else None


class PathNotFound(TranslatableError):
    """Raised when no translation exists at the requested path.

    Attributes:
        path: The full path as requested.
    """

    def __init__(self, path: Sequence[str], message: Optional[str] = None):
        self.path = tuple(path)
        super().__init__(
            message or f"The path '{_display_path(self.path)}' could not be found"
        )


class LanguageNotAvailable(PathNotFound):
    """Raised when a translation exists at the path but not in the language.

    Attributes:
        language: The requested language.
        path: The path of the translation object.
    """

    def __init__(self, language: "Language", path: Sequence[str]):
        self.language = language
        super().__init__(
            path,
            f"The language '{language.value}' ({language.display_name}) "
            f"is not available for the path '{_display_path(path)}'",
        )
