"""
Shared test fixtures and utilities for the mslg test suite.
"""

from unittest.mock import Mock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from mslg.models import Provider, TranslatorModel, TranslatorRegistry
from mslg.parsing.parser import LGParser
from mslg.translation.base import TextTranslator
from mslg.translation.config import TranslationConfig


class RecordingTranslator(TextTranslator):
    """Translator that upper-cases text and records every call."""

    def __init__(self):
        self.calls: list[tuple[str, str, str | None]] = []

    def translate(self, text: str, to_lang: str, src_lang: str | None = None) -> str:
        self.calls.append((text, to_lang, src_lang))
        return text.upper()


@pytest.fixture
def parser():
    """Parser with default (lenient) variation handling."""
    return LGParser()


@pytest.fixture
def translator():
    """Recording translator that never touches the network."""
    return RecordingTranslator()


@pytest.fixture
def translation_config():
    """Config translating to German with comments and links left alone."""
    return TranslationConfig(to_lang="de", src_lang="en")


@pytest.fixture
def fake_chat_model():
    """Fake chat model answering "Hallo Welt" with surrounding whitespace."""
    return FakeListChatModel(responses=[" Hallo Welt \n"])


@pytest.fixture
def mock_registry(fake_chat_model):
    """TranslatorRegistry whose "translator" model is the fake chat model.

    Usage:
        def test_something(mock_registry):
            translator = LLMTranslator(mock_registry, "translator")
    """
    registry = Mock(spec=TranslatorRegistry)
    registry.get.return_value = TranslatorModel(Provider.openai, "gpt-4o-mini")
    registry.create_chat_model.return_value = fake_chat_model
    registry.names.return_value = ["translator"]
    return registry
