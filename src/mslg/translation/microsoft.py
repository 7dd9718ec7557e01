"""Microsoft Translator Text API backend.

``MicrosoftTranslator`` posts one text per request to the v3.0
``/translate`` endpoint and returns the first translation. Any transport
failure or non-2xx status raises ``TranslationServiceError``; there is no
retry.
"""

import logging
import uuid

import requests

from mslg.exceptions import TranslationServiceError
from mslg.translation.base import TextTranslator
from mslg.translation.config import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT_SECONDS, TranslationConfig

logger = logging.getLogger(__name__)

API_VERSION = "3.0"


class MicrosoftTranslator(TextTranslator):
    """Synchronous client for the Microsoft Translator ``/translate`` endpoint.

    Attributes:
        _subscription_key: Value sent as ``Ocp-Apim-Subscription-Key``.
        _translate_url:    Full ``/translate`` URL.
        _timeout:          HTTP request timeout in seconds.
    """

    def __init__(
        self,
        subscription_key: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        if not subscription_key:
            raise ValueError("A translator subscription key is required")
        self._subscription_key = subscription_key
        self._translate_url = f"{endpoint.rstrip('/')}/translate"
        self._timeout = timeout_seconds

    @classmethod
    def from_config(cls, config: TranslationConfig) -> "MicrosoftTranslator":
        """Create a translator from the connection settings of ``config``."""
        return cls(
            config.subscription_key,
            endpoint=config.endpoint,
            timeout_seconds=config.timeout_seconds,
        )

    def translate(self, text: str, to_lang: str, src_lang: str | None = None) -> str:
        params = {"api-version": API_VERSION, "to": to_lang, "includeAlignment": "true"}
        if src_lang:
            params["from"] = src_lang

        try:
            response = requests.post(
                self._translate_url,
                params=params,
                json=[{"Text": text}],
                headers=self._build_headers(),
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as exc:
            logger.error("MicrosoftTranslator: request failed: %s", exc)
            raise TranslationServiceError(f"Text translator service call failed: {exc}") from exc

        if not response.ok:
            logger.error(
                "MicrosoftTranslator: service returned %d %s",
                response.status_code,
                response.reason,
            )
            raise TranslationServiceError(
                f"Text translator service call failed with [{response.status_code}] : "
                f"{response.reason}.\nPlease check key & language code validity",
                status_code=response.status_code,
            )

        try:
            return response.json()[0]["translations"][0]["text"]
        except (ValueError, LookupError, TypeError) as exc:
            raise TranslationServiceError(
                f"Unexpected response from text translator service: {exc}"
            ) from exc

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Ocp-Apim-Subscription-Key": self._subscription_key,
            "X-ClientTraceId": str(uuid.uuid4()),
        }
