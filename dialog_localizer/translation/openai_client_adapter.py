from typing import Any

import httpx
import openai

from dialog_localizer.translation.client_base import BaseTranslationClient
from dialog_localizer.translation.exceptions import (
    TranslationNetworkError,
    TranslationResponseError,
)


class OpenAIClientAdapter(BaseTranslationClient):
    """Translation client built on the OpenAI-compatible chat API.

    ``provider_routing`` is forwarded as OpenRouter's ``provider.only``
    preference; other providers ignore it when left empty.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        provider_routing: list[str] | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._provider_routing = list(provider_routing or [])

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        extra_body: dict[str, Any] | None = None
        if self._provider_routing:
            extra_body = {"provider": {"only": self._provider_routing}}

        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                extra_body=extra_body,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TranslationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise TranslationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise TranslationResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise TranslationResponseError("AI returned empty response")
        return content
