# tests/unit/conftest.py
"""
Tier assignment for unit tests.

Tier 1 (every commit): pure logic, no I/O
Tier 2 (PR merge): tmp files, mock transports, CLI runner
"""

from __future__ import annotations

import pytest


def pytest_collection_modifyitems(items):
    """Add tier markers to unit tests based on file name."""
    TIER1_PATTERNS = [
        "test_overlap_chunker",
        "test_keyword_retriever",
        "test_scope_classifier",
        "test_mdx_parser",
        "test_prompt",
    ]

    for item in items:
        fspath = str(item.fspath)

        if "/unit/" not in fspath and "\\unit\\" not in fspath:
            continue

        has_tier = any(marker.name.startswith("tier") for marker in item.iter_markers())
        if has_tier:
            continue

        if any(pattern in fspath for pattern in TIER1_PATTERNS):
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)
