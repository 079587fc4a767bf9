"""AI-powered dialog translator with a bounded retry policy."""

import json
from pathlib import Path

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from dialog_localizer.logging.logger import Log
from dialog_localizer.translation.base import BaseTranslator
from dialog_localizer.translation.client_base import BaseTranslationClient
from dialog_localizer.translation.exceptions import TranslationError, TranslationResponseError
from dialog_localizer.translation.prompt_loader import load_system_prompt_template


def preview(text: str, limit: int = 50) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


class Translator(BaseTranslator):
    """Translates masked dialog through an AI provider using a JSON contract.

    Request: ``{"<source>": text, "<target>": ""}``; the provider answers
    with the same object, target filled in. Failed attempts are retried
    with a fixed delay; once attempts run out the input text is returned
    unchanged.
    """

    def __init__(
        self,
        *,
        client: BaseTranslationClient,
        model: str,
        temperature: float = 0.3,
        source_language: str = "English",
        target_language: str = "Indonesian",
        max_attempts: int = 3,
        retry_delay_seconds: float = 5.0,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._source_key = source_language.lower()
        self._target_key = target_language.lower()
        self._max_attempts = max(1, max_attempts)
        self._retry_delay_seconds = max(0.0, retry_delay_seconds)
        self._system_prompt = load_system_prompt_template(system_prompt_path).format(
            target_language=target_language,
            source_key=self._source_key,
            target_key=self._target_key,
        )

    def translate(self, text: str) -> str:
        retrying = Retrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_fixed(self._retry_delay_seconds),
            retry=retry_if_exception_type(TranslationError),
            before=self._log_attempt,
            before_sleep=self._log_retry,
            retry_error_callback=self._give_up,
        )
        return retrying(self._attempt, text)

    def _attempt(self, text: str) -> str:
        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=self._build_user_prompt(text),
        )
        Log.debug(f"AI raw response:\n{raw_response}")
        return self._parse_response(raw_response, text)

    def _build_user_prompt(self, text: str) -> str:
        return json.dumps({self._source_key: text, self._target_key: ""}, ensure_ascii=False)

    def _parse_response(self, raw: str, text: str) -> str:
        """Pull the target field out of the first {...} block of *raw*.

        No braces at all means the provider ignored the contract; the input
        is kept as-is. Invalid JSON inside the braces is retried.
        """
        first = raw.find("{")
        last = raw.rfind("}")
        if first == -1 or last == -1 or last < first:
            Log.warning(f"Response without JSON object, keeping source: {preview(raw)}")
            return text

        try:
            parsed = json.loads(raw[first : last + 1])
        except json.JSONDecodeError as exc:
            raise TranslationResponseError(f"Invalid JSON response: {exc}") from exc
        if not isinstance(parsed, dict):
            raise TranslationResponseError("JSON response must be an object")

        translated = parsed.get(self._target_key)
        if not isinstance(translated, str) or not translated:
            return text
        return translated

    def _log_attempt(self, retry_state: RetryCallState) -> None:
        text = retry_state.args[0] if retry_state.args else ""
        Log.info(
            f"Translation attempt {retry_state.attempt_number}/{self._max_attempts} "
            f'for: "{preview(text)}"'
        )

    def _log_retry(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        Log.warning(
            f"Translation attempt {retry_state.attempt_number}/{self._max_attempts} failed: "
            f"{exc}. Retrying in {self._retry_delay_seconds:g} seconds..."
        )

    def _give_up(self, retry_state: RetryCallState) -> str:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        Log.error(
            f"All {self._max_attempts} translation attempts failed ({exc}). Keeping source text."
        )
        return retry_state.args[0]
