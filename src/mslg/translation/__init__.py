"""
Machine translation of LG files.

This package provides the translator backends and the driver that
localizes LG files line by line.
"""

from mslg.translation.base import TextTranslator
from mslg.translation.config import TranslationConfig
from mslg.translation.llm import LLMTranslator
from mslg.translation.localize import (
    localize_files,
    output_path_for,
    translate_lg_content,
    translate_line,
)
from mslg.translation.microsoft import MicrosoftTranslator

__all__ = [
    "LLMTranslator",
    "MicrosoftTranslator",
    "TextTranslator",
    "TranslationConfig",
    "localize_files",
    "output_path_for",
    "translate_lg_content",
    "translate_line",
]
