# syllabus_rag/generation/credentials.py
"""
Credential resolution for chat providers.

Resolution order:
  1. Explicit config value
  2. Provider-specific env var
  3. Generic fallback env var (SYLLABUS_RAG_API_KEY)
"""

from __future__ import annotations

import os
from typing import Optional

from syllabus_rag.core.exceptions import CredentialError
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import CHAT

logger = get_logger(__name__)

GENERIC_API_KEY_ENV = "SYLLABUS_RAG_API_KEY"

PROVIDER_ENV_MAP: dict[str, list[str]] = {
    "openai": ["OPENAI_API_KEY"],
    "openai_compatible": ["OPENAI_API_KEY"],
    "groq": ["GROQ_API_KEY"],
    "together": ["TOGETHER_API_KEY"],
}

# Local servers (ollama, llama.cpp, vLLM) accept any key or none.
KEYLESS_PROVIDERS = frozenset({"local", "ollama"})


def resolve_api_key(provider: str, api_key: Optional[str] = None) -> Optional[str]:
    """
    Resolve the API key for a provider.

    Returns None for keyless local providers.

    Raises:
        CredentialError: If no key could be resolved for a hosted provider.
    """
    if api_key:
        logger.debug(f"{CHAT} Using API key from explicit config for provider '{provider}'")
        return api_key

    for env_var in PROVIDER_ENV_MAP.get(provider, []):
        value = os.environ.get(env_var)
        if value:
            logger.debug(f"{CHAT} Using API key from {env_var}")
            return value

    value = os.environ.get(GENERIC_API_KEY_ENV)
    if value:
        logger.debug(f"{CHAT} Using API key from {GENERIC_API_KEY_ENV}")
        return value

    if provider in KEYLESS_PROVIDERS:
        return None

    expected = PROVIDER_ENV_MAP.get(provider, []) + [GENERIC_API_KEY_ENV]
    raise CredentialError(
        f"No API key found for provider '{provider}'. "
        f"Set one of: {', '.join(expected)} or chat.api_key in the config."
    )


__all__ = ["GENERIC_API_KEY_ENV", "PROVIDER_ENV_MAP", "resolve_api_key"]
