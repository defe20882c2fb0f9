"""Parsing helpers for the translate_a/single response body."""

import json
from typing import Any, Optional

from gtx_translator.core.errors import ResponseParsingError

# Depth of the [0][0][0] extraction path.
_PATH_DEPTH = 3


def parse_body(text: str) -> Any:
    """
    Decode a response body as JSON.

    Raises:
        ResponseParsingError: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except ValueError as e:
        raise ResponseParsingError() from e


def extract_translation(payload: Any) -> Optional[str]:
    """
    Read the translated string at position [0][0][0] of a decoded response.

    The endpoint answers with nested arrays, e.g.
    ``[[["Bonjour", "hello", null, null, 10]], null, "en", ...]``.
    Each level must be a non-empty list and the leaf must be a string.

    Returns:
        The translation, or None if the path is missing or not a string.
    """
    node = payload
    for _ in range(_PATH_DEPTH):
        if not isinstance(node, list) or not node:
            return None
        node = node[0]
    return node if isinstance(node, str) else None
