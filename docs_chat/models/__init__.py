"""API and domain data models."""

from docs_chat.models.chat import ChatRequest, ChatResponse
from docs_chat.models.common import ErrorResponse
from docs_chat.models.health import HealthResponse
from docs_chat.models.retrieval import Chunk, IndexEntry, ScoredChunk, SourceKind
from docs_chat.models.summary import SummaryResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "Chunk",
    "ErrorResponse",
    "HealthResponse",
    "IndexEntry",
    "ScoredChunk",
    "SourceKind",
    "SummaryResponse",
]
