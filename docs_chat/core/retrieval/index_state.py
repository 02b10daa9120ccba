"""
Retrieval index state.

Holds the current index snapshot. Snapshots are immutable and replaced
as a whole, so readers only ever see a complete Ready index or a Failed
state, never a half-built one.

Dependencies: dataclasses, docs_chat.models.retrieval
System role: Shared readiness/index handle between builder and readers
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from docs_chat.models.retrieval import IndexEntry


class IndexStatus(str, Enum):
    """Lifecycle of the index for one build attempt."""

    BUILDING = "building"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class IndexSnapshot:
    """Point-in-time view of the index."""

    status: IndexStatus
    entries: tuple[IndexEntry, ...] = ()
    error: BaseException | None = None
    embed_model_id: str | None = None
    built_at: datetime | None = None

    @property
    def is_ready(self) -> bool:
        return self.status is IndexStatus.READY and bool(self.entries)

    @property
    def size(self) -> int:
        return len(self.entries)

    @property
    def error_message(self) -> str | None:
        return str(self.error) if self.error is not None else None


@dataclass
class IndexState:
    """
    Process-wide index handle.

    Only the index builder calls ``publish`` and ``fail``; everyone else reads
    ``snapshot`` once per operation and works against that value.
    """

    _snapshot: IndexSnapshot = field(
        default_factory=lambda: IndexSnapshot(status=IndexStatus.BUILDING)
    )

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    def publish(self, entries: list[IndexEntry], embed_model_id: str | None = None) -> IndexSnapshot:
        """
        Swap in a freshly built index and mark it ready.

        Args:
            entries: Complete, non-empty list of embedded chunks
            embed_model_id: Model that produced every vector

        Returns:
            IndexSnapshot: The new snapshot
        """
        if not entries:
            raise ValueError("Cannot publish an empty index")
        self._snapshot = IndexSnapshot(
            status=IndexStatus.READY,
            entries=tuple(entries),
            embed_model_id=embed_model_id,
            built_at=datetime.now(timezone.utc),
        )
        return self._snapshot

    def fail(self, error: BaseException) -> IndexSnapshot:
        """
        Mark the index failed, keeping the previous entries for inspection.

        Args:
            error: Error that aborted the build

        Returns:
            IndexSnapshot: The new snapshot
        """
        previous = self._snapshot
        self._snapshot = IndexSnapshot(
            status=IndexStatus.FAILED,
            entries=previous.entries,
            error=error,
            embed_model_id=previous.embed_model_id,
            built_at=previous.built_at,
        )
        return self._snapshot
