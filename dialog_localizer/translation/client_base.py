from abc import ABC, abstractmethod


class BaseTranslationClient(ABC):
    """Contract for provider-specific translation AI clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return provider response as plain text.

        Raises:
            TranslationNetworkError: on provider or transport failures.
            TranslationResponseError: when the provider returns no content.
        """
