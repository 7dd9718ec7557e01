"""
Tests for TranslationConfig.
"""

import attrs
import pytest

from mslg.translation.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    TranslationConfig,
)


class TestDefaults:
    """Test values when only the target language is given."""

    def test_defaults(self):
        """Test the default settings."""
        config = TranslationConfig(to_lang="de")

        assert config.src_lang is None
        assert config.translate_comments is False
        assert config.translate_link_text is False
        assert config.subscription_key is None
        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
        assert config.llm_model is None

    def test_translate_url(self):
        """Test that the translate URL is built without a doubled slash."""
        config = TranslationConfig(to_lang="de", endpoint="https://x.example.com/")

        assert config.translate_url == "https://x.example.com/translate"

    def test_frozen(self):
        """Test that the config cannot be modified."""
        config = TranslationConfig(to_lang="de")

        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            config.to_lang = "fr"

    def test_key_hidden_from_repr(self):
        """Test that the subscription key is not printed."""
        config = TranslationConfig(to_lang="de", subscription_key="secret")

        assert "secret" not in repr(config)


class TestFromEnv:
    """Test building the config from environment variables."""

    def test_reads_all_variables(self):
        """Test that every MSLG_* variable is picked up."""
        config = TranslationConfig.from_env(
            {
                "MSLG_TO_LANG": "fr",
                "MSLG_SRC_LANG": "en",
                "MSLG_TRANSLATE_KEY": "key",
                "MSLG_TRANSLATOR_ENDPOINT": "https://x.example.com",
                "MSLG_TRANSLATOR_TIMEOUT": "3",
                "MSLG_TRANSLATE_COMMENTS": "yes",
                "MSLG_TRANSLATE_LINK_TEXT": "1",
                "MSLG_LLM_MODEL": "openai:gpt-4o-mini",
            }
        )

        assert config == TranslationConfig(
            to_lang="fr",
            src_lang="en",
            translate_comments=True,
            translate_link_text=True,
            subscription_key="key",
            endpoint="https://x.example.com",
            timeout_seconds=3.0,
            llm_model="openai:gpt-4o-mini",
        )

    def test_missing_target_language(self):
        """Test that a target language is required."""
        with pytest.raises(ValueError, match="MSLG_TO_LANG"):
            TranslationConfig.from_env({})

    def test_overrides_win(self):
        """Test that keyword overrides take precedence over the environment."""
        config = TranslationConfig.from_env({"MSLG_TO_LANG": "fr"}, to_lang="es")

        assert config.to_lang == "es"

    def test_override_supplies_target_language(self):
        """Test that an override satisfies the target language requirement."""
        assert TranslationConfig.from_env({}, to_lang="it").to_lang == "it"

    @pytest.mark.parametrize(
        "value, expected",
        [("true", True), ("ON", True), (" yes ", True), ("0", False), ("no", False), ("", False)],
    )
    def test_bool_parsing(self, value, expected):
        """Test the accepted spellings of boolean flags."""
        config = TranslationConfig.from_env(
            {"MSLG_TO_LANG": "de", "MSLG_TRANSLATE_COMMENTS": value}
        )

        assert config.translate_comments is expected

    def test_empty_values_use_defaults(self):
        """Test that empty strings fall back to defaults."""
        config = TranslationConfig.from_env(
            {"MSLG_TO_LANG": "de", "MSLG_SRC_LANG": "", "MSLG_TRANSLATOR_ENDPOINT": ""}
        )

        assert config.src_lang is None
        assert config.endpoint == DEFAULT_ENDPOINT

    def test_reads_os_environ(self, monkeypatch):
        """Test that os.environ is used when no mapping is given."""
        monkeypatch.setenv("MSLG_TO_LANG", "nl")

        assert TranslationConfig.from_env().to_lang == "nl"
