"""
Source document loader.

Reads the sales CSV as text and extracts text from the project PDF.
Both are truncated to the configured character limit. File IO and PDF
parsing run in the threadpool so the event loop stays free.

Dependencies: langchain_community.document_loaders (pypdf), fastapi.concurrency
System role: loadDocument(kind) for the index builder and summaries
"""

import logging
import re
from pathlib import Path

from fastapi.concurrency import run_in_threadpool
from langchain_community.document_loaders import PyPDFLoader

from docs_chat.configs.documents import DocumentSettings
from docs_chat.core.exceptions import DocumentLoadError
from docs_chat.models.retrieval import SourceKind

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE.sub(" ", text).strip()


class DocumentLoader:
    """Load the fixed CSV and PDF sources as raw text."""

    def __init__(self, settings: DocumentSettings | None = None) -> None:
        """
        Initialize loader.

        Args:
            settings: Source paths and size limit (loaded from env if None)
        """
        self._settings = settings or DocumentSettings()

    def path_for(self, kind: SourceKind) -> Path:
        if kind is SourceKind.CSV:
            return self._settings.csv_path
        return self._settings.pdf_path

    async def load(self, kind: SourceKind) -> str:
        """
        Load the raw text of one document.

        Args:
            kind: Which document to load

        Returns:
            str: Document text, truncated to the configured limit

        Raises:
            DocumentLoadError: When the file is missing or cannot be parsed
        """
        path = self.path_for(kind)
        if not path.exists():
            raise DocumentLoadError(f"File not found: {path}", kind=kind.value, path=str(path))

        reader = self._read_csv if kind is SourceKind.CSV else self._read_pdf
        try:
            text = await run_in_threadpool(reader, path)
        except Exception as e:
            raise DocumentLoadError(
                f"Failed to load {kind.value} document: {e}",
                kind=kind.value,
                path=str(path),
            ) from e

        logger.info(f"{__name__}:load - {kind.value}: {len(text)} chars from {path.name}")
        return text[: self._settings.max_chars]

    @staticmethod
    def _read_csv(path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @staticmethod
    def _read_pdf(path: Path) -> str:
        pages = PyPDFLoader(str(path)).load()
        return normalize_whitespace(" ".join(page.page_content or "" for page in pages))
