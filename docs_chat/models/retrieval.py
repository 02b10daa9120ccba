"""
Retrieval domain models.

Chunks, embedded index entries and per-query scored results.

Dependencies: pydantic
System role: Data structures shared by the chunker, index builder and ranker
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SourceKind(str, Enum):
    """The two fixed source documents."""

    CSV = "csv"
    PDF = "pdf"


class Chunk(BaseModel):
    """Bounded fragment of a source document. Identity is (source, id)."""

    model_config = ConfigDict(frozen=True)

    source: SourceKind = Field(description="Document the chunk was cut from")
    id: str = Field(description="Ordinal identifier, unique within the source")
    text: str = Field(description="Chunk text content")


class IndexEntry(BaseModel):
    """Chunk paired with its embedding vector."""

    model_config = ConfigDict(frozen=True)

    chunk: Chunk
    vector: tuple[float, ...] = Field(description="Embedding vector")

    @property
    def source(self) -> SourceKind:
        return self.chunk.source

    @property
    def id(self) -> str:
        return self.chunk.id

    @property
    def text(self) -> str:
        return self.chunk.text


class ScoredChunk(BaseModel):
    """Index entry with its similarity to a query."""

    model_config = ConfigDict(frozen=True)

    entry: IndexEntry
    score: float = Field(ge=-1.0, le=1.0, description="Cosine similarity to the query")
