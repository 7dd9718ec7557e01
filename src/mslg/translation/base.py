"""Translator interface shared by all translation backends."""

from abc import ABC, abstractmethod


class TextTranslator(ABC):
    """Translates a single piece of text between languages."""

    @abstractmethod
    def translate(self, text: str, to_lang: str, src_lang: str | None = None) -> str:
        """
        Translate text.

        Params:
            text: Text to translate
            to_lang: Target language code
            src_lang: Source language code, None to auto-detect

        Returns:
            Translated text

        Raises:
            TranslationServiceError: When the backend call fails
        """
