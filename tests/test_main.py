"""Tests for the command-line entry point."""

import logging

import pytest

from gtx_translator import NoTranslationFoundError
from gtx_translator import main as main_module


class FakeTranslator:
    """Records construction and returns a canned translation."""

    instances = []

    def __init__(self, source_lang, target_lang):
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.words = []
        self.closed = False
        FakeTranslator.instances.append(self)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    async def translate(self, word):
        self.words.append(word)
        if word == "missing":
            raise NoTranslationFoundError(word, attempts=4)
        return "Bonjour"


@pytest.fixture
def fake_translator(monkeypatch):
    FakeTranslator.instances = []
    monkeypatch.setattr(main_module, "Translator", FakeTranslator)
    for name in ("TRANSLATOR_SOURCE_LANG", "TRANSLATOR_TARGET_LANG", "TRANSLATOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return FakeTranslator


def test_default_run_translates_hello_en_to_fr(fake_translator, capsys):
    """No arguments: en -> fr, word 'hello', printed to stdout."""
    assert main_module.main([]) == 0

    translator = fake_translator.instances[0]
    assert (translator.source_lang, translator.target_lang) == ("en", "fr")
    assert translator.words == ["hello"]
    assert translator.closed
    assert capsys.readouterr().out == "Bonjour\n"


def test_arguments_override_defaults(fake_translator, capsys):
    main_module.main(["chat", "--source", "fr", "-t", "en"])

    translator = fake_translator.instances[0]
    assert (translator.source_lang, translator.target_lang) == ("fr", "en")
    assert translator.words == ["chat"]


def test_environment_supplies_language_defaults(fake_translator, monkeypatch):
    monkeypatch.setenv("TRANSLATOR_SOURCE_LANG", "de")
    monkeypatch.setenv("TRANSLATOR_TARGET_LANG", "es")

    main_module.main(["hallo"])

    translator = fake_translator.instances[0]
    assert (translator.source_lang, translator.target_lang) == ("de", "es")


def test_errors_propagate_to_caller(fake_translator):
    """The entry point does not swallow translation failures."""
    with pytest.raises(NoTranslationFoundError):
        main_module.main(["missing"])


def test_verbose_enables_debug_logging(fake_translator, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    main_module.main(["-v"])

    assert calls[0]["level"] == logging.DEBUG


def test_unknown_log_level_does_not_stop_translation(fake_translator, monkeypatch, capsys):
    monkeypatch.setenv("TRANSLATOR_LOG_LEVEL", "verbose")

    assert main_module.main([]) == 0
    assert capsys.readouterr().out == "Bonjour\n"
