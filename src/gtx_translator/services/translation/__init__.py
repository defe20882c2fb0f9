"""Translation services - abstract interface and the gtx endpoint implementation."""

from gtx_translator.services.translation.translation_service import TranslationService
from gtx_translator.services.translation.retry_policy import RetryPolicy
from gtx_translator.services.translation.response_parser import extract_translation, parse_body
from gtx_translator.services.translation.translator import TRANSLATE_URL, Translator

__all__ = [
    "TranslationService",
    "RetryPolicy",
    "Translator",
    "TRANSLATE_URL",
    "extract_translation",
    "parse_body",
]
