# syllabus_rag/pipeline/engine.py
"""
Tutor pipeline - scope gate, keyword retrieval, then generation.

Flow:
    question
      -> ScopeClassifier   (rejected: refusal answer, nothing else runs)
      -> KeywordRetriever  (top-K chunks from the Corpus)
      -> prompt builder
      -> ChatClient

The corpus is built before the pipeline and passed in; the pipeline never
mutates it, so one pipeline can answer concurrent questions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from syllabus_rag.config.schema import GenerationConfig, SyllabusRagConfig
from syllabus_rag.core.chunk import Chunk
from syllabus_rag.core.exceptions import GenerationError
from syllabus_rag.generation.chat import ChatClient, OpenAIChatClient
from syllabus_rag.generation.prompt import build_messages
from syllabus_rag.ingestion.corpus import Corpus, load_corpus
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import PIPELINE
from syllabus_rag.retrieval.keyword.retriever import KeywordRetriever
from syllabus_rag.scope.classifier import ScopeCategory, ScopeClassifier

logger = get_logger(__name__)


@dataclass
class TutorAnswer:
    """Answer text plus the notes it was grounded on."""

    text: str
    allowed: bool
    category: ScopeCategory
    sources: List[Chunk] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.text is None:
            raise ValueError("Answer text cannot be None (use empty string for no answer)")


class TutorPipeline:
    """
    Question answering over a fixed notes corpus.

    Args:
        corpus: Chunks to retrieve from
        classifier: Scope gate
        retriever: Keyword retriever
        chat: Chat client; None means answer() can only refuse or return
            the insufficient-notes message, use prepare() to get prompts
        generation: Answer assembly settings
        top_k: Chunks handed to the model
    """

    def __init__(
        self,
        corpus: Corpus,
        classifier: ScopeClassifier,
        retriever: KeywordRetriever,
        chat: Optional[ChatClient] = None,
        generation: Optional[GenerationConfig] = None,
        top_k: int = 6,
    ) -> None:
        self.corpus = corpus
        self.classifier = classifier
        self.retriever = retriever
        self.chat = chat
        self.generation = generation or GenerationConfig()
        self.top_k = top_k

    @classmethod
    def from_config(
        cls,
        config: SyllabusRagConfig,
        corpus: Optional[Corpus] = None,
        content_root: Union[str, Path, None] = None,
        chat: Optional[ChatClient] = None,
        with_chat: bool = True,
    ) -> "TutorPipeline":
        """
        Wire every component from config.

        The corpus is loaded from the content root unless given. The chat
        client is built from config.chat unless given or with_chat is False.

        Raises:
            DocumentSourceError: Content root missing
            CredentialError: Chat API key missing
        """
        if corpus is None:
            corpus = load_corpus(config, root=content_root)

        retriever = KeywordRetriever.from_config(config.retrieval)

        if chat is None and with_chat:
            chat = OpenAIChatClient.from_config(config.chat)

        return cls(
            corpus=corpus,
            classifier=ScopeClassifier(config.scope),
            retriever=retriever,
            chat=chat,
            generation=config.generation,
            top_k=config.retrieval.top_k,
        )

    def prepare(
        self, question: str
    ) -> tuple[Optional[TutorAnswer], List[Chunk], List[Dict[str, str]]]:
        """
        Run everything up to the model call.

        Returns:
            (early_answer, chunks, messages). early_answer is set when the
            question is refused or when there are no notes and
            skip_on_empty_context is on; messages is then empty.
        """
        decision = self.classifier.classify(question)
        if not decision.allowed:
            logger.info(f"{PIPELINE} Refused ({decision.category.value}): {question!r}")
            refusal = TutorAnswer(
                text=decision.refusal or "",
                allowed=False,
                category=decision.category,
                metadata={"matched_term": decision.matched_term},
            )
            return refusal, [], []

        chunks = self.retriever.retrieve(question, self.corpus.chunks, self.top_k)
        logger.info(f"{PIPELINE} Retrieved {len(chunks)} chunks for {question!r}")

        if not chunks and self.generation.skip_on_empty_context:
            fallback = TutorAnswer(
                text=self.generation.insufficient_notes_message,
                allowed=True,
                category=decision.category,
                metadata={"matched_term": decision.matched_term, "insufficient_notes": True},
            )
            return fallback, [], []

        messages = build_messages(question, chunks, subject=self.generation.subject)
        return None, chunks, messages

    def answer(self, question: str) -> TutorAnswer:
        """
        Answer one question.

        Raises:
            GenerationError: Chat client failed, or no chat client is set
                when one is needed
        """
        early, chunks, messages = self.prepare(question)
        if early is not None:
            return early

        if self.chat is None:
            raise GenerationError("No chat client configured for this pipeline")

        text = self.chat.chat(messages)
        return TutorAnswer(
            text=text,
            allowed=True,
            category=ScopeCategory.IN_SCOPE,
            sources=list(chunks),
            metadata={"chunk_ids": [c.id for c in chunks]},
        )


__all__ = ["TutorAnswer", "TutorPipeline"]
