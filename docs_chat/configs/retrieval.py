"""
Retrieval configuration settings.

Chunk sizing, embedding input limits and result count for the in-memory
semantic index.

Dependencies: pydantic, pydantic_settings
System role: Retrieval index configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Chunking and ranking configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRIEVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=5, ge=0, description="Number of chunks returned per query")
    csv_rows_per_chunk: int = Field(
        default=120,
        gt=0,
        description="Data rows per tabular chunk (header is repeated in each)",
    )
    max_chunk_chars: int = Field(
        default=900,
        gt=0,
        description="Maximum characters per free-text chunk",
    )
    embed_input_max_chars: int = Field(
        default=2000,
        gt=0,
        description="Chunk text is truncated to this length before embedding",
    )
    query_max_chars: int = Field(
        default=4000,
        gt=0,
        description="Query text is truncated to this length before embedding",
    )
