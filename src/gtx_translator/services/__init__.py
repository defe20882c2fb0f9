"""Services layer - configuration and external integrations."""

from gtx_translator.services.settings_manager import SettingsManager

# Translation services
from gtx_translator.services.translation import RetryPolicy, TranslationService, Translator

__all__ = [
	"SettingsManager",
	"TranslationService",
	"RetryPolicy",
	"Translator",
]
