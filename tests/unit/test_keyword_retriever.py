# tests/unit/test_keyword_retriever.py
"""
Tests for the keyword retriever.

Scoring = sum(occurrences * length weight) over query tokens, plus a flat
bonus when the whole normalized query appears in the chunk.
"""

from __future__ import annotations

import pytest

from syllabus_rag.config.schema import RetrievalConfig
from syllabus_rag.retrieval.keyword.retriever import (
    DEFAULT_STOPWORDS,
    KeywordRetriever,
    count_occurrences,
    normalize,
    retrieve,
    token_weight,
    tokenize,
)

from .helpers import make_chunk


class TestNormalize:
    def test_lowercases_and_collapses_whitespace(self):
        assert normalize("  Electric\n\nFIELD  ") == "electric field"

    def test_keeps_physics_notation(self):
        assert normalize("E = mc^2 at 30°, 50% + 3.5 m/s") == "e mc 2 at 30° 50% + 3.5 m/s"

    def test_keeps_minus_sign(self):
        assert normalize("-9.81") == "-9.81"

    def test_empty(self):
        assert normalize("") == ""


class TestTokenize:
    def test_drops_stopwords(self):
        assert tokenize("what is the electric field") == ["electric", "field"]

    def test_drops_instructional_verbs(self):
        assert tokenize("explain and calculate the momentum") == ["momentum"]

    def test_drops_single_characters(self):
        assert tokenize("v of a car") == ["car"]

    def test_keeps_order_and_duplicates(self):
        assert tokenize("field lines field") == ["field", "lines", "field"]

    def test_stopword_only_query(self):
        assert tokenize("what is the") == []

    def test_custom_stopwords(self):
        assert tokenize("electric field", stopwords=["field"]) == ["electric"]


class TestScoringHelpers:
    def test_count_occurrences_is_non_overlapping(self):
        assert count_occurrences("aaaa", "aa") == 2
        assert count_occurrences("aaa", "aa") == 1

    def test_count_occurrences_is_literal(self):
        assert count_occurrences("v = u + at", "u + a") == 1
        assert count_occurrences("uuu", ".") == 0

    def test_count_occurrences_empty_needle(self):
        assert count_occurrences("abc", "") == 0

    @pytest.mark.parametrize(
        "token,weight",
        [
            ("field", 1.0),
            ("charge", 1.0),
            ("current", 1.6),
            ("velocity", 1.6),
            ("resistance", 2.2),
            ("capacitance", 2.2),
        ],
    )
    def test_token_weight_tiers(self, token, weight):
        assert token_weight(token) == weight

    def test_phrase_bonus_for_long_query(self):
        retriever = KeywordRetriever()
        q = "electric field"

        score = retriever.score(q, ["electric", "field"], "the electric field points outward")

        assert score == pytest.approx(1.6 + 1.0 + 8.0)

    def test_no_phrase_bonus_for_short_query(self):
        retriever = KeywordRetriever()

        assert retriever.score("ohm law", ["ohm", "law"], "ohm law") == pytest.approx(2.0)

    def test_phrase_bonus_starts_at_twelve_characters(self):
        retriever = KeywordRetriever()
        eleven, twelve = "work output", "power output"

        assert len(eleven) == 11 and len(twelve) == 12
        assert retriever.score(eleven, tokenize(eleven), eleven) == pytest.approx(2.0)
        assert retriever.score(twelve, tokenize(twelve), twelve) == pytest.approx(10.0)

    def test_more_occurrences_never_lower_the_score(self):
        retriever = KeywordRetriever()
        tokens = ["momentum"]

        once = retriever.score("momentum", tokens, "momentum is conserved")
        twice = retriever.score("momentum", tokens, "momentum is conserved, momentum")

        assert twice > once


class TestRetrieve:
    def test_repeated_phrase_ranks_first(self):
        chunks = [
            make_chunk("kinematics.md", "velocity and acceleration of a projectile"),
            make_chunk("capacitors.md", "Capacitance is charge per unit potential difference."),
            make_chunk(
                "formulae.md",
                "The capacitance formula: C = Q/V. Learn the capacitance formula by heart.",
            ),
        ]

        results = retrieve("capacitance formula", chunks, 3)

        assert [c.source for c in results] == ["formulae.md", "capacitors.md"]

    def test_scores_are_descending_and_positive(self):
        retriever = KeywordRetriever()
        chunks = [
            make_chunk("a.md", "current", 0),
            make_chunk("b.md", "current current current", 0),
            make_chunk("c.md", "current current", 0),
        ]

        results = retriever.retrieve_scored("current", chunks)

        assert [r.chunk.source for r in results] == ["b.md", "c.md", "a.md"]
        assert [r.score for r in results] == pytest.approx([4.8, 3.2, 1.6])

    def test_zero_score_chunks_are_excluded(self, sample_corpus):
        results = retrieve("doppler shift", sample_corpus.chunks)

        assert results == []

    def test_stopword_only_query_returns_nothing(self, sample_corpus):
        assert retrieve("what is the", sample_corpus.chunks) == []

    def test_empty_query_returns_nothing(self, sample_corpus):
        assert retrieve("", sample_corpus.chunks) == []

    @pytest.mark.parametrize("top_k", [0, -1])
    def test_non_positive_top_k_returns_nothing(self, sample_corpus, top_k):
        assert retrieve("capacitance", sample_corpus.chunks, top_k) == []

    def test_top_k_limits_results(self):
        chunks = [make_chunk(f"{i}.md", "torque " * (i + 1)) for i in range(10)]

        results = retrieve("torque", chunks, top_k=3)

        assert [c.source for c in results] == ["9.md", "8.md", "7.md"]

    def test_ties_keep_corpus_order(self):
        chunks = [make_chunk(f"{name}.md", "same torque text") for name in ("x", "y", "z")]

        results = retrieve("torque", chunks)

        assert [c.source for c in results] == ["x.md", "y.md", "z.md"]

    def test_matching_is_case_insensitive(self):
        chunks = [make_chunk("a.md", "KIRCHHOFF'S CURRENT LAW")]

        assert retrieve("kirchhoff", chunks) == chunks

    def test_symbols_in_query_match(self):
        chunks = [
            make_chunk("eff.md", "Efficiency of 50% is typical."),
            make_chunk("other.md", "Efficiency of transformers."),
        ]

        results = retrieve("efficiency 50%", chunks)

        assert results[0].source == "eff.md"

    def test_returns_chunks_unchanged(self, sample_corpus):
        results = retrieve("capacitance", sample_corpus.chunks)

        assert all(c in sample_corpus.chunks for c in results)

    def test_empty_corpus(self):
        assert retrieve("capacitance", []) == []


class TestKeywordRetrieverConfig:
    def test_extra_stopwords(self):
        retriever = KeywordRetriever.with_extra_stopwords(["Formula"])
        chunks = [make_chunk("a.md", "formula sheet")]

        assert "formula" in retriever.stopwords
        assert DEFAULT_STOPWORDS <= retriever.stopwords
        assert retriever.retrieve("formula", chunks) == []

    def test_from_config(self):
        config = RetrievalConfig(top_k=2, phrase_bonus=0.0, extra_stopwords=["notes"])

        retriever = KeywordRetriever.from_config(config)

        assert retriever.default_top_k == 2
        assert retriever.phrase_bonus == 0.0
        assert "notes" in retriever.stopwords

    def test_default_top_k_used_when_not_given(self):
        retriever = KeywordRetriever(default_top_k=1)
        chunks = [make_chunk("a.md", "wave"), make_chunk("b.md", "wave wave")]

        assert [c.source for c in retriever.retrieve("wave", chunks)] == ["b.md"]

    def test_disabled_phrase_bonus(self):
        retriever = KeywordRetriever(phrase_bonus=0.0)
        chunks = [make_chunk("a.md", "electric field")]

        results = retriever.retrieve_scored("electric field", chunks)

        assert results[0].score == pytest.approx(2.6)
