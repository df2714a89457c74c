"""Translation result types and status enums.

Query-time translations return a TranslationResult instead of raising, so
a missing translation never aborts the caller.
"""

from translatable.operations.result import TranslationResult
from translatable.operations.status import TranslationStatus

__all__ = ["TranslationResult", "TranslationStatus"]
