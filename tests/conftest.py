"""
Shared test fixtures and configuration for entire test suite.

Provides: settings objects, mocked Bedrock gateway and document loader,
index entry factory, sample documents
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from docs_chat.configs.retrieval import RetrievalSettings
from docs_chat.models.retrieval import Chunk, IndexEntry, SourceKind

CSV_HEADER = "date,region,product,units,revenue"


@pytest.fixture
def csv_text() -> str:
    """Sales CSV with a header and five data rows."""
    rows = [f"2023-0{i}-01,north,shirt,{i * 10},{i * 250}" for i in range(1, 6)]
    return "\n".join([CSV_HEADER, *rows]) + "\n"


@pytest.fixture
def pdf_text() -> str:
    """Whitespace-normalized PDF text (a single paragraph)."""
    return (
        "Online Garment Tracking and Management System. "
        "The system tracks garment orders from cutting to dispatch. "
        "Phase one covers inventory and order intake."
    )


@pytest.fixture
def retrieval_settings() -> RetrievalSettings:
    """Retrieval settings with the standard defaults."""
    return RetrievalSettings(
        top_k=5,
        csv_rows_per_chunk=120,
        max_chunk_chars=900,
        embed_input_max_chars=2000,
        query_max_chars=4000,
    )


@pytest.fixture
def mock_gateway() -> MagicMock:
    """
    Create mock BedrockGateway.

    Returns:
        MagicMock: Gateway with async embed/generate and static model info
    """
    gateway = MagicMock()
    gateway.model_id = "anthropic.claude-3-haiku-20240307-v1:0"
    gateway.embed_model_id = "amazon.titan-embed-text-v1"
    gateway.region = "us-east-1"
    gateway.embed = AsyncMock(return_value=[0.1, 0.2, 0.3])
    gateway.generate = AsyncMock(return_value="Revenue grew steadily.")
    return gateway


@pytest.fixture
def mock_loader(csv_text: str, pdf_text: str) -> MagicMock:
    """
    Create mock DocumentLoader serving the sample documents.

    Returns:
        MagicMock: Loader whose async load(kind) returns sample text
    """
    documents = {SourceKind.CSV: csv_text, SourceKind.PDF: pdf_text}

    async def load(kind: SourceKind) -> str:
        return documents[kind]

    loader = MagicMock()
    loader.load = AsyncMock(side_effect=load)
    return loader


@pytest.fixture
def make_entry():
    """Factory for index entries with known vectors."""

    def _make(
        idx: int,
        vector: list[float],
        source: SourceKind = SourceKind.PDF,
        text: str | None = None,
    ) -> IndexEntry:
        chunk = Chunk(
            source=source,
            id=f"{source.value}-{idx}",
            text=text if text is not None else f"{source.value} chunk {idx}",
        )
        return IndexEntry(chunk=chunk, vector=tuple(vector))

    return _make
