# syllabus_rag/generation/chat.py
"""
Chat client for the final answer.

Speaks the OpenAI-compatible /chat/completions API over httpx. The pipeline
only depends on the ChatClient protocol, so tests and other providers can
substitute any object with a chat(messages) method.

Usage:
    client = OpenAIChatClient.from_config(config.chat)
    text = client.chat([{"role": "user", "content": "Hello"}])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, runtime_checkable

import httpx

from syllabus_rag.core.exceptions import ChatError, ChatResponseError
from syllabus_rag.generation.credentials import resolve_api_key
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import CHAT

if TYPE_CHECKING:
    from syllabus_rag.config.schema import ChatConfig

logger = get_logger(__name__)

Message = Dict[str, str]

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@runtime_checkable
class ChatClient(Protocol):
    """Anything that turns a message list into answer text."""

    def chat(self, messages: List[Message]) -> str: ...


def create_api_client(
    base_url: str,
    api_key: Optional[str] = None,
    timeout: float = 120.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Configured httpx client with JSON headers and bearer auth."""
    headers = dict(DEFAULT_HEADERS)
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"

    return httpx.Client(
        base_url=base_url.rstrip("/"),
        headers=headers,
        timeout=timeout,
        transport=transport,
    )


class OpenAIChatClient:
    """
    OpenAI-compatible chat completions client.

    Errors:
        ChatError: transport failure or non-2xx status
        ChatResponseError: 2xx response without a usable message
    """

    def __init__(
        self,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        api_key: Optional[str] = None,
        temperature: float = 0.2,
        timeout: float = 120.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self._client = create_api_client(base_url, api_key, timeout, transport)

    @classmethod
    def from_config(
        cls,
        config: "ChatConfig",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "OpenAIChatClient":
        """
        Build from the chat config section.

        Raises:
            CredentialError: If no API key can be resolved.
        """
        return cls(
            model=config.model,
            base_url=config.base_url,
            api_key=resolve_api_key(config.provider, config.api_key),
            temperature=config.temperature,
            timeout=config.timeout,
            transport=transport,
        )

    def chat(self, messages: List[Message]) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
        }

        logger.debug(f"{CHAT} POST /chat/completions model={self.model} messages={len(messages)}")
        try:
            response = self._client.post("/chat/completions", json=payload)
        except httpx.HTTPError as e:
            raise ChatError(f"Chat request failed: {e}") from e

        if response.is_error:
            raise ChatError(
                f"Chat API error: {response.text[:200]}",
                status_code=response.status_code,
            )

        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ChatResponseError(f"Unexpected chat response shape: {e}") from e

        if not isinstance(content, str):
            raise ChatResponseError("Chat response content is not text")
        return content.strip()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "OpenAIChatClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


__all__ = ["ChatClient", "OpenAIChatClient", "create_api_client"]
