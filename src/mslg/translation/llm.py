"""Chat-model translation backend.

``LLMTranslator`` renders a translation prompt for each line and sends it to
a chat model created from a ``TranslatorRegistry``. Placeholders in braces
and brackets must survive translation untouched, which the system prompt
states explicitly. Provider and LangChain failures surface as
``TranslationServiceError``; prompt formatting errors propagate unchanged.
"""

from anthropic import APIError as AnthropicAPIError
from langchain_core.exceptions import LangChainException
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import (
    ChatPromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)
from langchain_core.rate_limiters import BaseRateLimiter
from langchain_google_genai.chat_models import ChatGoogleGenerativeAIError
from openai import APIError as OpenAIAPIError

from mslg.exceptions import TranslationServiceError
from mslg.models import DEFAULT_MODEL_NAME, TranslatorRegistry
from mslg.translation.base import TextTranslator
from mslg.translation.config import TranslationConfig

SYSTEM_PROMPT = (
    "You translate lines of a language generation template file. "
    "Translate the user's text {source_clause}into the language with code '{to_lang}'. "
    "Keep every {{placeholder}} in curly braces and every [reference] in square "
    "brackets exactly as written. Reply with the translated text only."
)

# Errors raised by the chat model call itself
CHAT_MODEL_ERRORS = (
    LangChainException,
    OpenAIAPIError,
    AnthropicAPIError,
    ChatGoogleGenerativeAIError,
)


def build_translation_prompt(instructions: str | None = None) -> ChatPromptTemplate:
    """
    Assemble the system/human prompt for translating one line.

    Params:
        instructions: Extra system prompt text appended verbatim

    Returns:
        Prompt taking ``text``, ``to_lang`` and ``source_clause`` inputs
    """
    system_prompt = SYSTEM_PROMPT
    if instructions:
        # Braces in the instructions are literal text, not template fields
        escaped = instructions.replace("{", "{{").replace("}", "}}")
        system_prompt = f"{SYSTEM_PROMPT}\n{escaped}"
    return ChatPromptTemplate.from_messages(
        messages=[
            SystemMessagePromptTemplate.from_template(system_prompt),
            HumanMessagePromptTemplate.from_template("{text}"),
        ]
    )


class LLMTranslator(TextTranslator):
    """Translator backed by a chat model from ``TranslatorRegistry``."""

    def __init__(
        self,
        registry: TranslatorRegistry,
        model_name: str = DEFAULT_MODEL_NAME,
        rate_limiter: BaseRateLimiter | None = None,
    ):
        """
        Initialize the translator.

        Params:
            registry: Registry holding the model settings
            model_name: Registered model name
            rate_limiter: Limiter overriding the model's own request rate

        Raises:
            KeyError: If ``model_name`` is not registered
        """
        settings = registry.get(model_name)
        self._prompt = build_translation_prompt(settings.instructions)
        self._chain = (
            registry.create_chat_model(model_name, rate_limiter=rate_limiter)
            | StrOutputParser()
        )

    @classmethod
    def from_config(cls, config: TranslationConfig) -> "LLMTranslator":
        """
        Create a translator for the ``llm_model`` spec of ``config``.

        Raises:
            ValueError: If the config names no model or a malformed spec
        """
        if not config.llm_model:
            raise ValueError("An LLM model spec is required (set MSLG_LLM_MODEL)")
        return cls(TranslatorRegistry.from_spec(config.llm_model))

    def translate(self, text: str, to_lang: str, src_lang: str | None = None) -> str:
        source_clause = f"from the language with code '{src_lang}' " if src_lang else ""
        messages = self._prompt.format_messages(
            text=text, to_lang=to_lang, source_clause=source_clause
        )
        try:
            translated = self._chain.invoke(messages)
        except CHAT_MODEL_ERRORS as exc:
            raise TranslationServiceError(f"Chat model translation failed: {exc}") from exc
        return translated.strip()
