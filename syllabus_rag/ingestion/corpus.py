# syllabus_rag/ingestion/corpus.py
"""
Corpus - the in-memory chunk collection served by the retriever.

The corpus is built once, before any question is answered, and is never
mutated afterwards. It is an ordinary value: callers construct it and pass
it by reference, tests build small ones directly.

Usage:
    corpus = build_corpus(
        [("notes/kinematics.mdx", text)],
        OverlapChunker(chunk_size=1200, chunk_overlap=200),
    )
    hits = retrieve("projectile motion", corpus.chunks)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator, Tuple, Union

from syllabus_rag.core.chunk import Chunk
from syllabus_rag.ingestion.chunking.base import ChunkerPlugin
from syllabus_rag.ingestion.chunking.plugins.overlap import OverlapChunker
from syllabus_rag.ingestion.parser.mdx import strip_mdx
from syllabus_rag.ingestion.source.filesystem import FileSystemSource, SourceDocument
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import INGEST

if TYPE_CHECKING:
    from syllabus_rag.config.schema import SyllabusRagConfig

logger = get_logger(__name__)

DocumentLike = Union[SourceDocument, Tuple[str, str]]


@dataclass(frozen=True)
class Corpus:
    """Immutable collection of chunks plus the sources they came from."""

    chunks: Tuple[Chunk, ...]
    sources: Tuple[str, ...]
    chunker_id: str = ""

    def __len__(self) -> int:
        return len(self.chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def for_source(self, source: str) -> Tuple[Chunk, ...]:
        """Chunks of one source, in sequence order."""
        return tuple(c for c in self.chunks if c.source == source)

    @classmethod
    def empty(cls) -> "Corpus":
        return cls(chunks=(), sources=())


def _as_pair(doc: DocumentLike) -> Tuple[str, str]:
    if isinstance(doc, SourceDocument):
        return doc.path, doc.text
    identifier, text = doc
    return identifier, text


def build_corpus(documents: Iterable[DocumentLike], chunker: ChunkerPlugin) -> Corpus:
    """
    Chunk every document into one immutable Corpus.

    Args:
        documents: (identifier, text) pairs or SourceDocument objects, markup
            already stripped.
        chunker: Any ChunkerPlugin.

    Returns:
        Corpus with chunks in document order, then sequence order.
    """
    chunks: list[Chunk] = []
    sources: list[str] = []

    for doc in documents:
        identifier, text = _as_pair(doc)
        doc_chunks = chunker.chunk(text, identifier)
        if not doc_chunks:
            logger.debug(f"{INGEST} Skipping empty document {identifier}")
            continue
        sources.append(identifier)
        chunks.extend(doc_chunks)

    logger.info(
        f"{INGEST} Built corpus: {len(sources)} documents, {len(chunks)} chunks "
        f"({chunker.chunker_id})"
    )
    return Corpus(chunks=tuple(chunks), sources=tuple(sources), chunker_id=chunker.chunker_id)


def load_corpus(
    config: "SyllabusRagConfig",
    root: Union[str, Path, None] = None,
) -> Corpus:
    """
    Build the corpus from the configured notes folder.

    Reads every Markdown/MDX file, strips markup and chunks the result.

    Raises:
        DocumentSourceError: If the content root is missing or unreadable.
    """
    source = FileSystemSource(extensions=config.content.extensions)
    chunker = OverlapChunker(
        chunk_size=config.chunking.chunk_size,
        chunk_overlap=config.chunking.chunk_overlap,
    )

    documents = source.load(root if root is not None else config.content.root)
    stripped = [SourceDocument(path=d.path, text=strip_mdx(d.text)) for d in documents]
    return build_corpus(stripped, chunker)


__all__ = ["Corpus", "build_corpus", "load_corpus"]
