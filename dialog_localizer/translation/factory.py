from typing import ClassVar

from dialog_localizer.config.settings import Settings
from dialog_localizer.translation.base import BaseTranslator
from dialog_localizer.translation.client_base import BaseTranslationClient
from dialog_localizer.translation.example_client_adapter import ExampleClientAdapter
from dialog_localizer.translation.openai_client_adapter import OpenAIClientAdapter
from dialog_localizer.translation.translator import Translator


class TranslatorFactory:
    """Creates the configured translator."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTranslator:
        """Create a configured translator from application settings."""
        provider = settings.translation_provider.lower()
        return Translator(
            client=cls._create_client(provider, settings),
            model=settings.translation_model_name if provider != "example" else "example",
            temperature=settings.translation_temperature,
            source_language=settings.translation_source_language,
            target_language=settings.translation_target_language,
            max_attempts=settings.translation_max_attempts,
            retry_delay_seconds=settings.translation_retry_delay_seconds,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseTranslationClient:
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.translation_api_key,
            timeout_seconds=settings.translation_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            provider_routing=(
                settings.translation_provider_routing if provider == "openrouter" else None
            ),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        configured = settings.translation_base_url.strip()
        if provider == "openai":
            return configured or None
        if provider == "openai_compatible":
            if not configured:
                raise ValueError(
                    "translation_base_url is required for "
                    "translation_provider=openai_compatible"
                )
            return configured
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return configured or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown translation provider '{provider}'. Choose from: {supported}"
        )
