"""Translation configuration.

``TranslationConfig`` carries everything the localization driver needs
besides the translator itself: target and source languages, what to
translate beyond variation lines, and the Microsoft Translator connection
settings. It is frozen after construction.

Environment variables read by ``TranslationConfig.from_env``:

- ``MSLG_TO_LANG``              target language code (required)
- ``MSLG_SRC_LANG``             source language code (auto-detect when unset)
- ``MSLG_TRANSLATE_KEY``        Microsoft Translator subscription key
- ``MSLG_TRANSLATOR_ENDPOINT``  service base URL
- ``MSLG_TRANSLATOR_TIMEOUT``   HTTP timeout in seconds
- ``MSLG_TRANSLATE_COMMENTS``   translate ``>`` comment lines (true/false)
- ``MSLG_TRANSLATE_LINK_TEXT``  translate file reference labels (true/false)
- ``MSLG_LLM_MODEL``            ``<provider>:<model>`` for LLM translation
"""

import os
from collections.abc import Mapping

from attrs import field, frozen

DEFAULT_ENDPOINT = "https://api.cognitive.microsofttranslator.com"
DEFAULT_TIMEOUT_SECONDS = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _as_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


@frozen
class TranslationConfig:
    """Immutable settings for translating LG files.

    Attributes:
        to_lang:             Target language code (e.g. ``"de"``).
        src_lang:            Source language code; ``None`` lets the service
                             detect it.
        translate_comments:  Translate ``>`` comment lines instead of copying.
        translate_link_text: Translate the label of ``[label](file.lg)``
                             lines; the link target is never translated.
        subscription_key:    Microsoft Translator subscription key.
        endpoint:            Translator service base URL.
        timeout_seconds:     HTTP request timeout for each call.
        llm_model:           ``"<provider>:<model>"`` spec for LLM translation.
    """

    to_lang: str
    src_lang: str | None = None
    translate_comments: bool = False
    translate_link_text: bool = False
    subscription_key: str | None = field(default=None, repr=False)
    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    llm_model: str | None = None

    @property
    def translate_url(self) -> str:
        """Full ``/translate`` URL constructed from ``endpoint``."""
        return f"{self.endpoint.rstrip('/')}/translate"

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides
    ) -> "TranslationConfig":
        """Build a config from ``MSLG_*`` environment variables.

        Args:
            environ:    Mapping to read instead of ``os.environ``.
            **overrides: Field values that take precedence over the environment.

        Returns:
            A populated, frozen ``TranslationConfig``.

        Raises:
            ValueError: If no target language is configured.
        """
        env = os.environ if environ is None else environ
        values = {
            "to_lang": env.get("MSLG_TO_LANG"),
            "src_lang": env.get("MSLG_SRC_LANG") or None,
            "translate_comments": _as_bool(env.get("MSLG_TRANSLATE_COMMENTS")),
            "translate_link_text": _as_bool(env.get("MSLG_TRANSLATE_LINK_TEXT")),
            "subscription_key": env.get("MSLG_TRANSLATE_KEY") or None,
            "endpoint": env.get("MSLG_TRANSLATOR_ENDPOINT") or DEFAULT_ENDPOINT,
            "timeout_seconds": float(
                env.get("MSLG_TRANSLATOR_TIMEOUT") or DEFAULT_TIMEOUT_SECONDS
            ),
            "llm_model": env.get("MSLG_LLM_MODEL") or None,
        }
        values.update(overrides)
        if not values["to_lang"]:
            raise ValueError("Target language is required (set MSLG_TO_LANG)")
        return cls(**values)
