# syllabus_rag/generation/__init__.py
"""
Answer generation: prompt building and the chat client.
"""

from .chat import ChatClient, OpenAIChatClient
from .credentials import resolve_api_key
from .prompt import build_messages, build_system_prompt, build_user_prompt, format_notes

__all__ = [
    "ChatClient",
    "OpenAIChatClient",
    "build_messages",
    "build_system_prompt",
    "build_user_prompt",
    "format_notes",
    "resolve_api_key",
]
