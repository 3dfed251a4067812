# tests/unit/test_chat_client.py
"""
Tests for the OpenAI-compatible chat client.

HTTP is served by httpx.MockTransport; no network.
"""

from __future__ import annotations

import json

import httpx
import pytest

from syllabus_rag.config.schema import ChatConfig
from syllabus_rag.core.exceptions import ChatError, ChatResponseError, CredentialError
from syllabus_rag.generation.chat import ChatClient, OpenAIChatClient

MESSAGES = [
    {"role": "system", "content": "rules"},
    {"role": "user", "content": "what is torque"},
]


def completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def make_client(handler, **kwargs) -> OpenAIChatClient:
    return OpenAIChatClient(
        model="test-model",
        base_url="https://llm.test/v1/",
        api_key=kwargs.pop("api_key", "sk-test"),
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestChat:
    def test_request_shape(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["auth"] = request.headers.get("Authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=completion("  Torque is r x F.  "))

        with make_client(handler, temperature=0.5) as client:
            text = client.chat(MESSAGES)

        assert text == "Torque is r x F."
        assert seen["path"] == "/v1/chat/completions"
        assert seen["auth"] == "Bearer sk-test"
        assert seen["body"] == {"model": "test-model", "messages": MESSAGES, "temperature": 0.5}

    def test_no_auth_header_without_key(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=completion("ok"))

        make_client(handler, api_key=None).chat(MESSAGES)

        assert seen["auth"] is None

    def test_satisfies_protocol(self):
        client = make_client(lambda r: httpx.Response(200, json=completion("ok")))

        assert isinstance(client, ChatClient)


class TestErrors:
    def test_http_error_status(self):
        client = make_client(lambda r: httpx.Response(429, text="rate limited"))

        with pytest.raises(ChatError) as exc_info:
            client.chat(MESSAGES)

        assert exc_info.value.status_code == 429
        assert "HTTP 429" in str(exc_info.value)

    def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ChatError, match="Chat request failed"):
            make_client(handler).chat(MESSAGES)

    @pytest.mark.parametrize(
        "payload",
        [
            {"choices": []},
            {"error": "nope"},
            completion(None),
            completion(["not", "text"]),
        ],
    )
    def test_unusable_payload(self, payload):
        client = make_client(lambda r: httpx.Response(200, json=payload))

        with pytest.raises(ChatResponseError):
            client.chat(MESSAGES)

    def test_non_json_body(self):
        client = make_client(lambda r: httpx.Response(200, text="<html>"))

        with pytest.raises(ChatResponseError):
            client.chat(MESSAGES)


class TestFromConfig:
    def test_uses_config_values(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("Authorization")
            seen["model"] = json.loads(request.content)["model"]
            return httpx.Response(200, json=completion("ok"))

        config = ChatConfig(
            model="llama3", base_url="http://localhost:11434/v1", api_key="cfg-key"
        )
        OpenAIChatClient.from_config(config, transport=httpx.MockTransport(handler)).chat(MESSAGES)

        assert seen == {
            "url": "http://localhost:11434/v1/chat/completions",
            "auth": "Bearer cfg-key",
            "model": "llama3",
        }

    def test_missing_key(self):
        with pytest.raises(CredentialError):
            OpenAIChatClient.from_config(ChatConfig(provider="openai"))

    def test_keyless_provider(self):
        client = OpenAIChatClient.from_config(ChatConfig(provider="ollama"))

        assert client.model == "gpt-4o-mini"
        client.close()
