"""
Retrieval facade.

Entry point used by request handlers: checks readiness, embeds the query,
ranks the current index snapshot and serializes the top results into one
context block.

Dependencies: docs_chat.core.retrieval, docs_chat.boundary.aws
System role: Query-time retrieval
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docs_chat.configs.retrieval import RetrievalSettings
from docs_chat.core.exceptions import IndexNotReady
from docs_chat.core.retrieval.index_state import IndexState
from docs_chat.core.retrieval.similarity import rank
from docs_chat.models.retrieval import ScoredChunk

if TYPE_CHECKING:
    from docs_chat.boundary.aws.bedrock_client import BedrockGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetrievalResult:
    """Outcome of a best-effort retrieval: context, or the not-ready reason."""

    context: str = ""
    error: IndexNotReady | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_context(results: list[ScoredChunk]) -> str:
    """
    Serialize ranked chunks into a labelled context block.

    Args:
        results: Chunks in descending relevance

    Returns:
        str: One ``Chunk {rank} [{source}]:`` section per result, or ""
    """
    return "\n\n".join(
        f"Chunk {position} [{scored.entry.source.value}]:\n{scored.entry.text}"
        for position, scored in enumerate(results, start=1)
    )


class RetrievalService:
    """Query-time retrieval over the shared index state."""

    def __init__(
        self,
        state: IndexState,
        gateway: "BedrockGateway",
        settings: RetrievalSettings | None = None,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            state: Index state to read snapshots from
            gateway: Embedding capability for queries
            settings: Query limits and default top-k (defaults if None)
        """
        self._state = state
        self._gateway = gateway
        self._settings = settings or RetrievalSettings()

    async def retrieve_context(self, query: str, k: int | None = None) -> str:
        """
        Build a context block for the query.

        Args:
            query: User question
            k: Number of chunks (settings default if None)

        Returns:
            str: Context block; empty only when k resolves to no entries

        Raises:
            IndexNotReady: When the index is building or the last build failed
            EmbeddingFailure: When the query cannot be embedded
        """
        snapshot = self._state.snapshot
        if not snapshot.is_ready:
            raise IndexNotReady(snapshot.status.value, snapshot.error)

        top_k = self._settings.top_k if k is None else k
        query_vector = await self._gateway.embed(query[: self._settings.query_max_chars])
        results = rank(query_vector, snapshot.entries, top_k)
        logger.debug(
            f"{__name__}:retrieve_context - {len(results)} chunks, "
            f"top_score={results[0].score if results else None}"
        )
        return format_context(results)

    async def try_retrieve_context(self, query: str, k: int | None = None) -> RetrievalResult:
        """
        Best-effort variant: a not-ready index yields an empty result.

        Only IndexNotReady is converted; embedding failures propagate.

        Args:
            query: User question
            k: Number of chunks (settings default if None)

        Returns:
            RetrievalResult: Context on success, the IndexNotReady error otherwise
        """
        try:
            context = await self.retrieve_context(query, k)
        except IndexNotReady as e:
            return RetrievalResult(error=e)
        return RetrievalResult(context=context)
