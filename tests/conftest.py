# tests/conftest.py
"""
Root conftest - shared fixtures.

Test Tiers:
===========
- tier1: Critical path tests - pure logic, no I/O (<10s)
         Run: pytest -m tier1
- tier2: Unit tests with tmp files, mock transports and CliRunner
         Run: pytest -m "tier1 or tier2"

Tiers are assigned in tests/unit/conftest.py by file name.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from syllabus_rag.ingestion.chunking.plugins.overlap import OverlapChunker
from syllabus_rag.ingestion.corpus import Corpus, build_corpus

# =============================================================================
# Sample Notes
# =============================================================================

CAPACITORS_NOTES = """\
# Capacitors

Capacitance is the ratio of charge stored to the potential difference across
the plates. The capacitance formula for a parallel-plate capacitor is
C = epsilon A / d. Remember the capacitance formula when the plate separation
changes.
"""

KINEMATICS_NOTES = """\
# Kinematics

For uniformly accelerated motion, v = u + at and s = ut + 0.5at^2.
A projectile has constant horizontal velocity and constant vertical acceleration.
"""

CIRCUITS_NOTES = """\
# DC circuits

Kirchhoff's current law: the sum of currents into a junction equals the sum
of currents out. Resistance R = V / I.
"""

MDX_NOTES = """\
import Figure from '../components/Figure'

export const meta = { title: 'Fields' }

# Electric field

<Figure src="field-lines.png" />

The electric field strength E is the force per unit positive charge.
See [Coulomb's law](./coulomb.mdx) and ![lines](lines.png).

```python
print("ignored")
```
"""


@pytest.fixture
def sample_documents() -> list[tuple[str, str]]:
    return [
        ("capacitors.md", CAPACITORS_NOTES),
        ("kinematics.md", KINEMATICS_NOTES),
        ("circuits.md", CIRCUITS_NOTES),
    ]


@pytest.fixture
def sample_corpus(sample_documents) -> Corpus:
    """Small corpus, one chunk per document."""
    return build_corpus(sample_documents, OverlapChunker(chunk_size=1200, chunk_overlap=200))


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """A content root with nested Markdown/MDX notes and a file that must be ignored."""
    root = tmp_path / "physics"
    (root / "electricity").mkdir(parents=True)
    (root / "capacitors.md").write_text(CAPACITORS_NOTES, encoding="utf-8")
    (root / "kinematics.mdx").write_text(KINEMATICS_NOTES, encoding="utf-8")
    (root / "electricity" / "circuits.md").write_text(CIRCUITS_NOTES, encoding="utf-8")
    (root / "electricity" / "fields.mdx").write_text(MDX_NOTES, encoding="utf-8")
    (root / "diagram.png").write_bytes(b"\x89PNG")
    return root


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch, tmp_path):
    """Keep user config and API keys from the developer's environment out of tests."""
    for var in (
        "SYLLABUS_RAG_CONFIG",
        "SYLLABUS_RAG_API_KEY",
        "OPENAI_API_KEY",
        "GROQ_API_KEY",
        "TOGETHER_API_KEY",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)

