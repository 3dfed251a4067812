# syllabus_rag/generation/prompt.py
"""
Prompt construction for the tutor.

The system prompt fixes the tutor's rules and answer format; the user prompt
carries the question and the retrieved notes as SOURCE/EXCERPT blocks.
"""

from __future__ import annotations

from typing import Sequence

from syllabus_rag.core.chunk import ChunkLike
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import PROMPT

logger = get_logger(__name__)

NOTES_SEPARATOR = "\n\n---\n\n"
NO_NOTES_PLACEHOLDER = "(no matching notes found)"

SYSTEM_PROMPT_TEMPLATE = """\
You are an exam-focused {subject} tutor.

STRICT RULES:
1) Only answer within {subject} syllabus scope.
2) You must ground answers in the provided "SITE NOTES" excerpts.
3) If notes are insufficient, say what is missing and ask a short follow-up,
   OR give a minimal syllabus-level explanation clearly marked as "Standard syllabus knowledge".
4) If the question is outside the syllabus / beyond syllabus / unrelated: refuse politely and explain why.

EXAM-READY FORMAT (use headings):
1. Concept / Definition
2. Law / Principle (name it explicitly)
3. Step-by-step Reasoning
4. Final Answer (with units / direction where relevant)
5. Common Mistakes (optional)
6. Exam Tip (optional)

Style:
- concise, precise, marks-scoring
- correct symbols and units
- do not hallucinate references
"""

USER_PROMPT_TEMPLATE = """\
STUDENT QUESTION:
{question}

SITE NOTES (use these as primary grounding):
{notes}

Now answer in the required exam-ready format.
"""


def build_system_prompt(subject: str = "Singapore H2 Physics") -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(subject=subject)


def format_notes(chunks: Sequence[ChunkLike]) -> str:
    """Render chunks as SOURCE/EXCERPT blocks, in retrieval order."""
    if not chunks:
        return NO_NOTES_PLACEHOLDER
    return NOTES_SEPARATOR.join(f"SOURCE: {c.source}\nEXCERPT: {c.text}" for c in chunks)


def build_user_prompt(question: str, chunks: Sequence[ChunkLike]) -> str:
    return USER_PROMPT_TEMPLATE.format(question=question.strip(), notes=format_notes(chunks))


def build_messages(
    question: str,
    chunks: Sequence[ChunkLike],
    subject: str = "Singapore H2 Physics",
) -> list[dict[str, str]]:
    """Chat-completions message list: system rules, then question plus notes."""
    user_prompt = build_user_prompt(question, chunks)
    logger.debug(f"{PROMPT} {len(chunks)} excerpts, user prompt {len(user_prompt)} chars")
    return [
        {"role": "system", "content": build_system_prompt(subject)},
        {"role": "user", "content": user_prompt},
    ]


__all__ = [
    "build_messages",
    "build_system_prompt",
    "build_user_prompt",
    "format_notes",
]
