# syllabus_rag/ingestion/parser/mdx.py
"""
Rough MDX / Markdown markup stripper.

Removes what would only add noise to keyword scoring:
- fenced code blocks
- JSX / HTML tags
- {...} expressions (imports of props, inline JS)
- images

Links keep their label. This is a heuristic, not an MDX parser: a literal
"{" in prose also starts an expression.
"""

from __future__ import annotations

import re

_FENCED_CODE_RE = re.compile(r"```[\s\S]*?```")
_TAG_RE = re.compile(r"<[^>]+>")
_EXPRESSION_RE = re.compile(r"\{[\s\S]*?\}")
_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]+\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]+\)")
_IMPORT_EXPORT_RE = re.compile(r"^(?:import|export)\s.*$", re.MULTILINE)


def strip_mdx(raw: str) -> str:
    """Strip MDX/Markdown markup, keeping the prose."""
    text = _FENCED_CODE_RE.sub("", raw)
    text = _IMPORT_EXPORT_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    text = _EXPRESSION_RE.sub("", text)
    text = _IMAGE_RE.sub("", text)
    text = _LINK_RE.sub(r"\1", text)
    return text.strip()


__all__ = ["strip_mdx"]
