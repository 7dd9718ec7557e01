"""
Tests for the Microsoft Translator backend.
"""

import uuid
from unittest.mock import MagicMock, patch

import pytest
import requests

from mslg.exceptions import TranslationServiceError
from mslg.translation.config import TranslationConfig
from mslg.translation.microsoft import MicrosoftTranslator

ENDPOINT = "https://translator.example.com/"


@pytest.fixture
def ms_translator():
    """Translator pointed at a test endpoint."""
    return MicrosoftTranslator("secret", endpoint=ENDPOINT, timeout_seconds=5.0)


def _mock_translate_response(text: str) -> MagicMock:
    """Build a mock requests.Response for a successful translation."""
    mock_resp = MagicMock()
    mock_resp.ok = True
    mock_resp.json.return_value = [{"translations": [{"text": text, "to": "de"}]}]
    return mock_resp


class TestTranslateSuccess:
    """Test requests sent and values returned on success."""

    def test_returns_first_translation(self, ms_translator):
        """Test that the first translation text is returned."""
        with patch("requests.post", return_value=_mock_translate_response("Hallo")):
            assert ms_translator.translate("Hello", "de") == "Hallo"

    def test_request_shape(self, ms_translator):
        """Test URL, query parameters, body and timeout of the request."""
        with patch("requests.post", return_value=_mock_translate_response("Hallo")) as mock:
            ms_translator.translate("Hello", "de", "en")

        args, kwargs = mock.call_args
        assert args[0] == "https://translator.example.com/translate"
        assert kwargs["params"] == {
            "api-version": "3.0",
            "to": "de",
            "includeAlignment": "true",
            "from": "en",
        }
        assert kwargs["json"] == [{"Text": "Hello"}]
        assert kwargs["timeout"] == 5.0

    def test_source_language_omitted(self, ms_translator):
        """Test that no source language lets the service auto-detect."""
        with patch("requests.post", return_value=_mock_translate_response("Hallo")) as mock:
            ms_translator.translate("Hello", "de")

        assert "from" not in mock.call_args[1]["params"]

    def test_headers(self, ms_translator):
        """Test the subscription key and a fresh trace id on each call."""
        with patch("requests.post", return_value=_mock_translate_response("Hallo")) as mock:
            ms_translator.translate("Hello", "de")
            ms_translator.translate("Hello", "de")

        first = mock.call_args_list[0][1]["headers"]
        second = mock.call_args_list[1][1]["headers"]
        assert first["Ocp-Apim-Subscription-Key"] == "secret"
        assert first["Content-Type"] == "application/json"
        uuid.UUID(first["X-ClientTraceId"])
        assert first["X-ClientTraceId"] != second["X-ClientTraceId"]


class TestTranslateFailure:
    """Test that every failure surfaces as TranslationServiceError."""

    def test_http_error_status(self, ms_translator):
        """Test that a non-2xx response raises with the status code."""
        mock_resp = MagicMock()
        mock_resp.ok = False
        mock_resp.status_code = 401
        mock_resp.reason = "Unauthorized"
        with patch("requests.post", return_value=mock_resp):
            with pytest.raises(TranslationServiceError) as exc_info:
                ms_translator.translate("Hello", "de")

        assert exc_info.value.status_code == 401
        assert "[401] : Unauthorized" in str(exc_info.value)

    def test_timeout(self, ms_translator):
        """Test that a timeout raises."""
        with patch("requests.post", side_effect=requests.exceptions.Timeout):
            with pytest.raises(TranslationServiceError) as exc_info:
                ms_translator.translate("Hello", "de")

        assert exc_info.value.status_code is None

    def test_connection_error(self, ms_translator):
        """Test that a connection error raises."""
        with patch("requests.post", side_effect=requests.exceptions.ConnectionError):
            with pytest.raises(TranslationServiceError):
                ms_translator.translate("Hello", "de")

    def test_unexpected_body(self, ms_translator):
        """Test that a malformed response body raises."""
        mock_resp = MagicMock()
        mock_resp.ok = True
        mock_resp.json.return_value = {"error": "nope"}
        with patch("requests.post", return_value=mock_resp):
            with pytest.raises(TranslationServiceError, match="Unexpected response"):
                ms_translator.translate("Hello", "de")

    def test_invalid_json(self, ms_translator):
        """Test that an undecodable response body raises."""
        mock_resp = MagicMock()
        mock_resp.ok = True
        mock_resp.json.side_effect = ValueError("no json")
        with patch("requests.post", return_value=mock_resp):
            with pytest.raises(TranslationServiceError):
                ms_translator.translate("Hello", "de")


class TestConstruction:
    """Test building the translator."""

    def test_empty_key(self):
        """Test that a subscription key is required."""
        with pytest.raises(ValueError):
            MicrosoftTranslator("")

    def test_from_config(self):
        """Test that connection settings come from the config."""
        config = TranslationConfig(
            to_lang="de",
            subscription_key="k",
            endpoint="https://other.example.com",
            timeout_seconds=2.5,
        )
        translator = MicrosoftTranslator.from_config(config)

        with patch("requests.post", return_value=_mock_translate_response("x")) as mock:
            translator.translate("Hello", "de")

        assert mock.call_args[0][0] == "https://other.example.com/translate"
        assert mock.call_args[1]["timeout"] == 2.5
        assert mock.call_args[1]["headers"]["Ocp-Apim-Subscription-Key"] == "k"

    def test_from_config_without_key(self):
        """Test that a config without a key cannot build the translator."""
        with pytest.raises(ValueError):
            MicrosoftTranslator.from_config(TranslationConfig(to_lang="de"))
