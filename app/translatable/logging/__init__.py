"""Structured logging for the translation engine.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
    - translation_log_context(): Bind engine context for a block of work
"""

from translatable.logging.setup import (
    configure_logging,
    get_module_logger,
    translation_log_context,
)

__all__ = ["configure_logging", "get_module_logger", "translation_log_context"]
