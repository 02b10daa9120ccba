"""
Retrieval subsystem.

Chunker, index state, index builder, similarity ranker and retrieval facade.
"""

from docs_chat.core.retrieval.chunker import ChunkingPolicy, chunk_document
from docs_chat.core.retrieval.index_builder import IndexBuilder
from docs_chat.core.retrieval.index_state import IndexSnapshot, IndexState, IndexStatus
from docs_chat.core.retrieval.retrieval_service import RetrievalResult, RetrievalService
from docs_chat.core.retrieval.similarity import cosine_similarity, rank

__all__ = [
    "ChunkingPolicy",
    "IndexBuilder",
    "IndexSnapshot",
    "IndexState",
    "IndexStatus",
    "RetrievalResult",
    "RetrievalService",
    "chunk_document",
    "cosine_similarity",
    "rank",
]
