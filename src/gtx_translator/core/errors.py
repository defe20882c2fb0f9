"""Translation errors - the failure taxonomy raised by translators."""


class TranslationError(Exception):
    """Base class for every failure raised by a translator."""


class RequestFailedError(TranslationError):
    """The request never produced a response (connection, DNS, timeout...)."""

    def __init__(self, message: str = "Failed to send translation request"):
        super().__init__(message)


class ResponseParsingError(TranslationError):
    """The response body could not be decoded as text or as JSON."""

    def __init__(self, message: str = "Failed to parse response body as JSON"):
        super().__init__(message)


class NoTranslationFoundError(TranslationError):
    """
    The endpoint answered with valid JSON but never included a translation.

    Raised only after the retry budget is exhausted.

    Attributes:
        word: The word that was submitted.
        attempts: Total number of requests made before giving up.
    """

    def __init__(self, word: str, attempts: int):
        self.word = word
        self.attempts = attempts
        super().__init__(f"No translation found for: {word}")
