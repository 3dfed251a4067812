# syllabus_rag/ingestion/source/filesystem.py
"""
Local filesystem source for the notes corpus.

Discovers Markdown / MDX files under a content root and yields
(identifier, raw text) pairs. Identifiers are POSIX paths relative to the
root, so chunk ids stay stable across machines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, List

from syllabus_rag.core.exceptions import DocumentSourceError
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import INGEST

logger = get_logger(__name__)

DEFAULT_EXTENSIONS: FrozenSet[str] = frozenset({".md", ".mdx"})


@dataclass(frozen=True)
class SourceDocument:
    """One document as read from storage: identifier plus raw text."""

    path: str
    text: str


@dataclass
class FileSystemSource:
    """
    Source for discovering notes files from the local filesystem.

    Example:
        source = FileSystemSource()
        for doc in source.load("./content/physics"):
            print(doc.path, len(doc.text))
    """

    plugin_name: str = field(default="filesystem", repr=False)
    extensions: Iterable[str] = field(default_factory=lambda: DEFAULT_EXTENSIONS)
    recursive: bool = True
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.extensions = frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in self.extensions
        )

    def discover(self, root: str | Path) -> List[Path]:
        """
        Find every matching file under root, sorted for deterministic ingestion.

        Raises:
            DocumentSourceError: If root does not exist.
        """
        root_path = Path(root)
        if not root_path.exists():
            raise DocumentSourceError(f"Content root not found: {root_path}")

        if root_path.is_file():
            return [root_path] if self._matches(root_path) else []

        pattern = "**/*" if self.recursive else "*"
        files = sorted(p for p in root_path.glob(pattern) if p.is_file() and self._matches(p))
        logger.debug(f"{INGEST} Discovered {len(files)} files under {root_path}")
        return files

    def load(self, root: str | Path) -> List[SourceDocument]:
        """
        Read every discovered file.

        Raises:
            DocumentSourceError: If root is missing or a file cannot be read.
        """
        root_path = Path(root)
        documents: List[SourceDocument] = []

        for path in self.discover(root_path):
            try:
                text = path.read_text(encoding=self.encoding)
            except (OSError, UnicodeDecodeError) as e:
                raise DocumentSourceError(f"Failed to read {path}: {e}") from e

            documents.append(SourceDocument(path=self._identifier(root_path, path), text=text))

        logger.info(f"{INGEST} Loaded {len(documents)} documents from {root_path}")
        return documents

    def _matches(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    @staticmethod
    def _identifier(root: Path, path: Path) -> str:
        if root.is_file():
            return path.name
        return path.relative_to(root).as_posix()


__all__ = ["DEFAULT_EXTENSIONS", "FileSystemSource", "SourceDocument"]
