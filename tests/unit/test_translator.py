import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dialog_localizer.translation.client_base import BaseTranslationClient
from dialog_localizer.translation.exceptions import (
    TranslationNetworkError,
    TranslationResponseError,
)
from dialog_localizer.translation.translator import Translator, preview


def _make_translator(client: MagicMock, max_attempts: int = 3) -> Translator:
    return Translator(
        client=client,
        model="test-model",
        temperature=0.3,
        source_language="English",
        target_language="Indonesian",
        max_attempts=max_attempts,
        retry_delay_seconds=0,
    )


def _client(*responses: object) -> MagicMock:
    client = MagicMock(spec=BaseTranslationClient)
    client.create_chat_completion.side_effect = list(responses)
    return client


class TestTranslate:
    def test_returns_target_field(self) -> None:
        client = _client('{"english": "Hello", "indonesian": "Halo"}')
        assert _make_translator(client).translate("Hello") == "Halo"

    def test_sends_json_contract(self) -> None:
        client = _client('{"english": "Hi [Location_a1]", "indonesian": "Hai [Location_a1]"}')
        _make_translator(client).translate("Hi [Location_a1]")

        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.3
        assert json.loads(kwargs["user_prompt"]) == {
            "english": "Hi [Location_a1]",
            "indonesian": "",
        }
        assert "Indonesian" in kwargs["system_prompt"]
        assert '{"english": "source text", "indonesian": "translated text"}' in (
            kwargs["system_prompt"]
        )

    def test_extracts_json_wrapped_in_prose(self) -> None:
        client = _client('Sure!\n```json\n{"english": "Yes", "indonesian": "Ya"}\n```')
        assert _make_translator(client).translate("Yes") == "Ya"

    def test_non_ascii_is_sent_verbatim(self) -> None:
        client = _client('{"english": "Dovahkiin", "indonesian": "Dovahkiin"}')
        _make_translator(client).translate("Fus Ro Dah, café")
        assert "café" in client.create_chat_completion.call_args.kwargs["user_prompt"]

    def test_response_without_braces_returns_source_without_retry(self) -> None:
        client = _client("I cannot translate that.")
        assert _make_translator(client).translate("Hello") == "Hello"
        assert client.create_chat_completion.call_count == 1

    @pytest.mark.parametrize(
        "response",
        [
            '{"english": "Hello", "indonesian": ""}',
            '{"english": "Hello"}',
            '{"english": "Hello", "indonesian": 42}',
        ],
    )
    def test_missing_target_returns_source(self, response: str) -> None:
        client = _client(response)
        assert _make_translator(client).translate("Hello") == "Hello"


class TestRetry:
    def test_retries_invalid_json_then_succeeds(self) -> None:
        client = _client('{"indonesian": oops}', '{"english": "Hi", "indonesian": "Hai"}')
        assert _make_translator(client).translate("Hi") == "Hai"
        assert client.create_chat_completion.call_count == 2

    def test_retries_network_error_then_succeeds(self) -> None:
        client = _client(
            TranslationNetworkError("down"),
            '{"english": "Hi", "indonesian": "Hai"}',
        )
        assert _make_translator(client).translate("Hi") == "Hai"
        assert client.create_chat_completion.call_count == 2

    def test_returns_source_after_max_attempts(self) -> None:
        client = _client(
            TranslationNetworkError("down"),
            TranslationResponseError("empty"),
            TranslationNetworkError("down"),
        )
        assert _make_translator(client, max_attempts=3).translate("Hello") == "Hello"
        assert client.create_chat_completion.call_count == 3

    def test_concatenated_objects_are_retried(self) -> None:
        client = _client('{"a": 1} and {"b": 2}', '{"english": "A", "indonesian": "B"}')
        assert _make_translator(client).translate("A") == "B"

    def test_unexpected_error_propagates(self) -> None:
        client = _client(RuntimeError("bug"))
        with pytest.raises(RuntimeError, match="bug"):
            _make_translator(client).translate("Hello")
        assert client.create_chat_completion.call_count == 1

    def test_single_attempt_policy(self) -> None:
        client = _client(TranslationNetworkError("down"))
        assert _make_translator(client, max_attempts=1).translate("Hello") == "Hello"
        assert client.create_chat_completion.call_count == 1


class TestSystemPrompt:
    def test_custom_prompt_file(self, tmp_path: Path) -> None:
        prompt = tmp_path / "prompt.txt"
        prompt.write_text("Translate {source_key} into {target_key} ({target_language})")
        client = _client('{"english": "a", "indonesian": "b"}')

        Translator(
            client=client,
            model="m",
            retry_delay_seconds=0,
            system_prompt_path=prompt,
        ).translate("a")

        assert (
            client.create_chat_completion.call_args.kwargs["system_prompt"]
            == "Translate english into indonesian (Indonesian)"
        )


class TestPreview:
    def test_short_text_unchanged(self) -> None:
        assert preview("short") == "short"

    def test_long_text_truncated(self) -> None:
        assert preview("x" * 60) == "x" * 50 + "..."
