"""Example translation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseTranslationClient and register the provider in TranslatorFactory.
"""

import json

from dialog_localizer.translation.client_base import BaseTranslationClient
from dialog_localizer.translation.exceptions import TranslationResponseError


class ExampleClientAdapter(BaseTranslationClient):
    """Echo adapter: fills every empty field of the request with the source text.

    No network calls. Placeholders and tags pass through untouched, which
    makes it useful for dry runs of the translate job and for tests.
    """

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt
        try:
            request = json.loads(user_prompt)
        except json.JSONDecodeError as exc:
            raise TranslationResponseError(
                f"Example adapter expects a JSON request: {exc}"
            ) from exc
        if not isinstance(request, dict):
            raise TranslationResponseError("Example adapter expects a JSON object request")

        source = next((v for v in request.values() if isinstance(v, str) and v), "")
        return json.dumps(
            {key: value or source for key, value in request.items()},
            ensure_ascii=False,
        )
