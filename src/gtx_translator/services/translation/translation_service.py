"""Translation Service - abstract interface for word translators."""

from abc import ABC, abstractmethod


class TranslationService(ABC):
    """
    Abstract service for translating a single word.

    Implementations (e.g., Translator) handle the network calls and raise
    a TranslationError subclass on failure.
    """

    @abstractmethod
    async def translate(self, word: str) -> str:
        """
        Translate a word between the configured languages.

        Args:
            word: Text to translate. Not validated.

        Returns:
            The translated text.

        Raises:
            TranslationError: If no translation could be obtained.
        """
        pass
