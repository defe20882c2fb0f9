"""Main entry point for the gtx translator."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from gtx_translator.services import SettingsManager, Translator


def build_parser(settings: SettingsManager) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtx-translate",
        description="Translate a word with the public Google translate endpoint.",
    )
    parser.add_argument("word", nargs="?", default="hello", help="word to translate (default: hello)")
    parser.add_argument("-s", "--source", default=settings.get_source_lang(), help="source language code")
    parser.add_argument("-t", "--target", default=settings.get_target_lang(), help="target language code")
    parser.add_argument("-v", "--verbose", action="store_true", help="log retries and requests")
    return parser


async def run(word: str, source_lang: str, target_lang: str) -> str:
    async with Translator(source_lang, target_lang) as translator:
        return await translator.translate(word)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Translate one word and print it.

    Failures are not handled here: a TranslationError ends the process.
    """
    # 1. Configuration
    settings = SettingsManager()
    args = build_parser(settings).parse_args(argv)

    # 2. Logging
    level = logging.DEBUG if args.verbose else settings.get_log_level()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 3. Translate
    translation = asyncio.run(run(args.word, args.source, args.target))
    print(translation)

    return 0


if __name__ == "__main__":
    sys.exit(main())
