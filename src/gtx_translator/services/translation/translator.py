"""Translator - word translation via the public translate_a/single endpoint."""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

import httpx

from gtx_translator.core.errors import (
    NoTranslationFoundError,
    RequestFailedError,
    ResponseParsingError,
)
from gtx_translator.services.translation.response_parser import extract_translation, parse_body
from gtx_translator.services.translation.retry_policy import RetryPolicy
from gtx_translator.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)

TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"
CLIENT_ID = "gtx"
# dt=t asks for the translated text segments only.
RESPONSE_FORMAT = "t"


class Translator(TranslationService):
    """
    Translation service backed by the unofficial Google translate endpoint.

    The endpoint needs no key, but it sometimes answers with valid JSON that
    carries no translation. Those answers are retried a bounded number of
    times with a random delay; every other failure is raised immediately.

    The HTTP client is reusable and safe to share between concurrent calls.
    Language codes are passed through verbatim.
    """

    def __init__(
        self,
        source_lang: str,
        target_lang: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        endpoint: str = TRANSLATE_URL,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the translator.

        Args:
            source_lang: Language code of the input word (e.g. "en").
            target_lang: Language code to translate into (e.g. "fr").
            client: Shared HTTP client. If None, one is created and owned
                    by this translator.
            endpoint: URL of the translation endpoint.
            retry_policy: Retry budget and delay. Defaults to RetryPolicy().
            sleep: Coroutine used to wait between attempts.
            rng: Random source for retry delays.
        """
        self._source_lang = source_lang
        self._target_lang = target_lang
        self._endpoint = endpoint
        self._retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    @property
    def source_lang(self) -> str:
        return self._source_lang

    @property
    def target_lang(self) -> str:
        return self._target_lang

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this translator created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    def _build_params(self, word: str) -> list[tuple[str, str]]:
        return [
            ("client", CLIENT_ID),
            ("dt", RESPONSE_FORMAT),
            ("sl", self._source_lang),
            ("tl", self._target_lang),
            ("q", word),
        ]

    async def _fetch_text(self, word: str) -> str:
        """Send one request and return the decoded body."""
        try:
            response = await self._client.get(self._endpoint, params=self._build_params(word))
        except httpx.HTTPError as e:
            logger.warning(f"Translation request failed for {word!r}: {e}")
            raise RequestFailedError() from e

        try:
            return response.content.decode(response.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as e:
            raise ResponseParsingError() from e

    async def translate(self, word: str) -> str:
        """
        Translate a word from source_lang to target_lang.

        Args:
            word: Text to translate. Empty strings are sent as-is.

        Returns:
            The string found at [0][0][0] of the response.

        Raises:
            RequestFailedError: Transport failure. Not retried.
            ResponseParsingError: Body is not text or not JSON. Not retried.
            NoTranslationFoundError: No translation after the retry budget.
        """
        policy = self._retry_policy
        attempt = 0

        while True:
            attempt += 1
            payload = parse_body(await self._fetch_text(word))

            translation = extract_translation(payload)
            if translation is not None:
                logger.debug(f"Translated {word!r} on attempt {attempt}/{policy.total_attempts}")
                return translation

            if attempt >= policy.total_attempts:
                logger.warning(f"No translation for {word!r} after {attempt} attempts")
                raise NoTranslationFoundError(word, attempts=attempt)

            delay = policy.next_delay(self._rng)
            logger.debug(
                f"Empty translation for {word!r} "
                f"(attempt {attempt}/{policy.total_attempts}). Retrying in {delay:g}s..."
            )
            await self._sleep(delay)
