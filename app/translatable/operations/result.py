"""Translation result dataclass.

Uniform outcome returned by query-time translations, holding either the
rendered string or the error that prevented it.
"""

from dataclasses import dataclass
from typing import Any, Optional

from translatable.errors import (
    InvalidLanguage,
    LanguageNotAvailable,
    PathNotFound,
    TranslatableError,
)
from translatable.operations.status import TranslationStatus


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of a query-time translation.

    Attributes:
        status: TranslationStatus -- high-level outcome
        value: Optional[Any] -- rendered string (or context instance) on success
        error: Optional[TranslatableError] -- the failure, when not successful
    """

    status: TranslationStatus
    value: Optional[Any] = None
    error: Optional[TranslatableError] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if the translation succeeded.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == TranslationStatus.SUCCESS

    @property
    def message(self) -> str:
        """Human-friendly description of the outcome."""
        return "ok" if self.error is None else str(self.error)

    @classmethod
    def success(cls, value: Any) -> "TranslationResult":
        """Create a SUCCESS result holding the translated value."""
        return cls(status=TranslationStatus.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: TranslatableError) -> "TranslationResult":
        """Create an error result; the status is derived from the error type.

        Args:
            error: InvalidLanguage, PathNotFound or LanguageNotAvailable.

        Returns:
            TranslationResult with the matching error status.

        Raises:
            TypeError: If the error is not a query-time error.
        """
        match error:
            case InvalidLanguage():
                status = TranslationStatus.INVALID_LANGUAGE
            case LanguageNotAvailable():
                status = TranslationStatus.LANGUAGE_NOT_AVAILABLE
            case PathNotFound():
                status = TranslationStatus.PATH_NOT_FOUND
            case _:
                raise TypeError(
                    f"{type(error).__name__} is not a query-time translation error"
                )
        return cls(status=status, error=error)

    def unwrap(self) -> Any:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        """Return the value, or ``default`` on failure."""
        return self.value if self.is_success else default
