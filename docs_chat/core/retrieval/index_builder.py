"""
Embedding index builder.

Fetches both source documents concurrently, chunks them, embeds every
chunk sequentially and publishes the finished index in one swap.
Any failure aborts the attempt and is recorded on the index state.

Dependencies: asyncio, docs_chat.boundary, docs_chat.core.retrieval
System role: Sole writer of IndexState
"""

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from docs_chat.configs.retrieval import RetrievalSettings
from docs_chat.core.exceptions import BuildFailure
from docs_chat.core.retrieval.chunker import ChunkingPolicy, chunk_document
from docs_chat.core.retrieval.index_state import IndexSnapshot, IndexState
from docs_chat.models.retrieval import Chunk, IndexEntry, SourceKind
from docs_chat.observability.log_utils import log_failure, log_stage

if TYPE_CHECKING:
    from docs_chat.boundary.aws.bedrock_client import BedrockGateway
    from docs_chat.boundary.documents.loader import DocumentLoader

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Build the in-memory retrieval index from the fixed documents."""

    def __init__(
        self,
        state: IndexState,
        loader: "DocumentLoader",
        gateway: "BedrockGateway",
        settings: RetrievalSettings | None = None,
    ) -> None:
        """
        Initialize builder with its collaborators.

        Args:
            state: Index state this builder owns
            loader: Source document loader
            gateway: Embedding capability
            settings: Chunking and embedding limits (defaults if None)
        """
        self._state = state
        self._loader = loader
        self._gateway = gateway
        self._settings = settings or RetrievalSettings()
        self._policy = ChunkingPolicy(
            rows_per_chunk=self._settings.csv_rows_per_chunk,
            max_chunk_chars=self._settings.max_chunk_chars,
        )
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    async def build(self) -> IndexSnapshot:
        """
        Run one build attempt and record the outcome.

        Concurrent calls are serialized. Never raises for build errors;
        the failure is stored on the index state instead.

        Returns:
            IndexSnapshot: State after the attempt (ready or failed)
        """
        async with self._lock:
            start_time = time.perf_counter()
            logger.info(f"{__name__}:build - START")
            try:
                entries = await self._build_entries()
                if not entries:
                    raise BuildFailure("No chunks produced from source documents", stage="chunk")
                snapshot = self._state.publish(entries, embed_model_id=self._gateway.embed_model_id)
            except asyncio.CancelledError:
                self._state.fail(BuildFailure("Index build cancelled", stage="cancelled"))
                raise
            except BuildFailure as e:
                log_failure(logger, "Embedding index build failed", e)
                return self._state.fail(e)
            except Exception as e:
                failure = BuildFailure(f"Index build failed: {e}", stage="publish")
                failure.__cause__ = e
                log_failure(logger, "Embedding index build failed", failure)
                return self._state.fail(failure)

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            log_stage(
                logger,
                "publish",
                f"{__name__}:build - Embedded {snapshot.size} chunks for retrieval "
                f"in {elapsed_ms:.0f}ms",
                chunks=snapshot.size,
                elapsed_ms=round(elapsed_ms),
            )
            return snapshot

    async def _build_entries(self) -> list[IndexEntry]:
        """Fetch, chunk and embed; every stage failure becomes a BuildFailure."""
        kinds = list(SourceKind)

        try:
            texts = await asyncio.gather(*(self._loader.load(kind) for kind in kinds))
        except Exception as e:
            raise BuildFailure(f"Failed to fetch source documents: {e}", stage="fetch") from e

        try:
            corpus: list[Chunk] = []
            for kind, text in zip(kinds, texts):
                chunks = chunk_document(text, kind, self._policy)
                log_stage(
                    logger,
                    "chunk",
                    f"{__name__}:build - {kind.value}: {len(chunks)} chunks",
                    source=kind,
                    chunks=len(chunks),
                )
                corpus.extend(chunks)
        except Exception as e:
            raise BuildFailure(f"Failed to chunk source documents: {e}", stage="chunk") from e

        return await self._embed_corpus(corpus)

    async def _embed_corpus(self, corpus: list[Chunk]) -> list[IndexEntry]:
        """Embed chunks one at a time, in corpus order."""
        max_chars = self._settings.embed_input_max_chars
        entries: list[IndexEntry] = []
        dimension: int | None = None

        for chunk in corpus:
            try:
                vector = await self._gateway.embed(chunk.text[:max_chars])
            except Exception as e:
                raise BuildFailure(
                    f"Failed to embed chunk {chunk.id}: {e}",
                    stage="embed",
                    details={"chunk_id": chunk.id},
                ) from e

            if dimension is None:
                dimension = len(vector)
            elif len(vector) != dimension:
                raise BuildFailure(
                    f"Embedding dimension changed mid-build ({dimension} -> {len(vector)})",
                    stage="embed",
                    details={"chunk_id": chunk.id},
                )
            entries.append(IndexEntry(chunk=chunk, vector=tuple(vector)))

        return entries
