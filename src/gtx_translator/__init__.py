"""
GTX Translator - a small async client for the public Google translate endpoint.

This package provides:
- Translator: one word in, one translated string out
- A bounded, randomized retry for responses without a translation
- Typed errors for transport, parsing and missing translations
"""

__version__ = "0.1.0"

# Make key components available at package level
from gtx_translator.core import (
    NoTranslationFoundError,
    RequestFailedError,
    ResponseParsingError,
    TranslationError,
)
from gtx_translator.services.translation import RetryPolicy, Translator

__all__ = [
    "Translator",
    "RetryPolicy",
    "TranslationError",
    "RequestFailedError",
    "ResponseParsingError",
    "NoTranslationFoundError",
]
