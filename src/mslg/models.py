"""
Chat models available for LLM-backed LG translation.

Translation sends one request per variation line, so every registered model
carries its own request rate; the registry turns that rate into a LangChain
rate limiter when the chat model is created. Models are named by a
``"<provider>:<model>"`` spec such as ``"openai:gpt-4o-mini"``.
"""

import logging
from enum import Enum

from attrs import frozen
from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_core.rate_limiters import BaseRateLimiter, InMemoryRateLimiter
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "default"


class Provider(Enum):
    anthropic = "anthropic"
    google = "google"
    openai = "openai"


CHAT_MODEL_CLASSES: dict[Provider, type[BaseChatModel]] = {
    Provider.openai: ChatOpenAI,
    Provider.google: ChatGoogleGenerativeAI,
    Provider.anthropic: ChatAnthropic,
}


def line_rate_limiter(requests_per_second: float) -> InMemoryRateLimiter:
    """Rate limiter allowing one translated line at a time at the given rate."""
    return InMemoryRateLimiter(
        requests_per_second=requests_per_second,
        check_every_n_seconds=max(0.1, 1.0 / requests_per_second),
        max_bucket_size=1,
    )


@frozen
class TranslatorModel:
    """
    Chat model settings for translating LG lines.

    Params:
        provider: Chat model vendor
        model: Vendor model identifier
        temperature: Sampling temperature, 0 keeps translations stable
        requests_per_second: Request rate applied when no limiter is given,
            None to disable limiting
        instructions: Extra system prompt text, e.g. a glossary or tone
    """

    provider: Provider
    model: str
    temperature: float = 0.0
    requests_per_second: float | None = 1.0
    instructions: str | None = None

    @classmethod
    def from_spec(cls, spec: str, **kwargs) -> "TranslatorModel":
        """
        Build settings from a ``"<provider>:<model>"`` spec.

        Params:
            spec: Provider and model separated by a colon
            **kwargs: Remaining TranslatorModel fields

        Raises:
            ValueError: If the spec is malformed or names an unknown provider
        """
        provider_name, separator, model = spec.partition(":")
        if not separator or not model.strip():
            raise ValueError(f'Model spec "{spec}" must look like "<provider>:<model>"')
        try:
            provider = Provider(provider_name.strip().lower())
        except ValueError as exc:
            known = ", ".join(p.value for p in Provider)
            raise ValueError(f'Unknown provider "{provider_name}" (expected one of {known})') from exc
        return cls(provider, model.strip(), **kwargs)


class TranslatorRegistry:
    """Named translator models and the factory for their chat models.

    Notes:
      - Does not cache chat models; each LLMTranslator owns the one it creates.
    """

    def __init__(self, models: dict[str, TranslatorModel] | None = None):
        self._models = dict(models or {})

    @classmethod
    def from_spec(cls, spec: str, **kwargs) -> "TranslatorRegistry":
        """Registry holding a single model under ``DEFAULT_MODEL_NAME``."""
        return cls({DEFAULT_MODEL_NAME: TranslatorModel.from_spec(spec, **kwargs)})

    def register(self, name: str, model: TranslatorModel) -> None:
        """Add a model, replacing any model registered under the same name."""
        self._models[name] = model

    def names(self) -> list[str]:
        return list(self._models)

    def get(self, name: str) -> TranslatorModel:
        """
        Look up a registered model.

        Raises:
            KeyError: If no model is registered under ``name``
        """
        try:
            return self._models[name]
        except KeyError:
            raise KeyError(
                f'Translator model "{name}" is not registered. Registered models: {self.names()}'
            ) from None

    def create_chat_model(
        self, name: str, rate_limiter: BaseRateLimiter | None = None
    ) -> BaseChatModel:
        """
        Instantiate the chat model registered under ``name``.

        Params:
            name: Registered model name
            rate_limiter: Limiter to use instead of the model's own rate

        Returns:
            LangChain chat model

        Raises:
            KeyError: If no model is registered under ``name``
        """
        settings = self.get(name)
        if rate_limiter is None and settings.requests_per_second:
            rate_limiter = line_rate_limiter(settings.requests_per_second)
        logger.debug("Creating %s chat model %s", settings.provider.value, settings.model)
        chat_class = CHAT_MODEL_CLASSES[settings.provider]
        return chat_class(
            model=settings.model,
            temperature=settings.temperature,
            rate_limiter=rate_limiter,
        )
