"""Translation status enumeration.

Status codes for query-time translation outcomes, so callers can branch on
the kind of failure without inspecting exception types.
"""

from enum import Enum


class TranslationStatus(Enum):
    """Status codes for translation results.

    Attributes:
        SUCCESS: Translation resolved and rendered
        INVALID_LANGUAGE: Language is not an ISO 639-1 code or name
        PATH_NOT_FOUND: No translation object at the path
        LANGUAGE_NOT_AVAILABLE: Translation object lacks the language
    """

    SUCCESS = "success"
    INVALID_LANGUAGE = "invalid_language"
    PATH_NOT_FOUND = "path_not_found"
    LANGUAGE_NOT_AVAILABLE = "language_not_available"
