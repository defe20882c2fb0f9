"""Core domain types."""

from gtx_translator.core.errors import (
    NoTranslationFoundError,
    RequestFailedError,
    ResponseParsingError,
    TranslationError,
)

__all__ = [
    "TranslationError",
    "RequestFailedError",
    "ResponseParsingError",
    "NoTranslationFoundError",
]
