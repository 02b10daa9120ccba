"""
Document chunker.

Splits raw document text into bounded, self-describing fragments:
tabular text into header-prefixed row batches, free text into paragraphs
with oversized paragraphs hard-split into fixed windows.

Dependencies: pydantic, docs_chat.models.retrieval
System role: First stage of the retrieval index build
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from docs_chat.models.retrieval import Chunk, SourceKind

_LINE_BREAK = re.compile(r"\r?\n")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n+")


class ChunkingPolicy(BaseModel):
    """Sizing limits applied when chunking a document."""

    model_config = ConfigDict(frozen=True)

    rows_per_chunk: int = Field(default=120, gt=0, description="Data rows per tabular chunk")
    max_chunk_chars: int = Field(default=900, gt=0, description="Maximum free-text chunk length")


def chunk_tabular(text: str, rows_per_chunk: int = 120) -> list[str]:
    """
    Group data rows into batches that each repeat the header line.

    Args:
        text: Tabular text whose first line is the header
        rows_per_chunk: Data rows per batch

    Returns:
        list[str]: Chunk bodies labelled with their 1-based row range
    """
    if rows_per_chunk <= 0:
        raise ValueError("rows_per_chunk must be positive")
    if not text.strip():
        return []

    lines = _LINE_BREAK.split(text)
    header, rows = lines[0], lines[1:]
    while rows and not rows[-1].strip():
        rows.pop()

    chunks = []
    for start in range(0, len(rows), rows_per_chunk):
        batch = rows[start:start + rows_per_chunk]
        end = start + len(batch)
        body = "\n".join(batch)
        chunks.append(f"CSV chunk (rows {start + 1}-{end}):\n{header}\n{body}")
    return chunks


def chunk_free_text(text: str, max_chunk_chars: int = 900) -> list[str]:
    """
    Split free text on blank lines; hard-split paragraphs over the limit.

    Args:
        text: Extracted document text
        max_chunk_chars: Maximum characters per chunk

    Returns:
        list[str]: Paragraph chunks in document order, no overlap
    """
    if max_chunk_chars <= 0:
        raise ValueError("max_chunk_chars must be positive")

    paragraphs = (part.strip() for part in _PARAGRAPH_BREAK.split(text))
    chunks = []
    for paragraph in paragraphs:
        if not paragraph:
            continue
        if len(paragraph) <= max_chunk_chars:
            chunks.append(paragraph)
            continue
        for start in range(0, len(paragraph), max_chunk_chars):
            chunks.append(paragraph[start:start + max_chunk_chars])
    return chunks


def chunk_document(
    text: str,
    source: SourceKind,
    policy: ChunkingPolicy | None = None,
) -> list[Chunk]:
    """
    Chunk a document with the policy matching its kind.

    Chunk ids are zero-based ordinals prefixed with the source
    (``csv-0``, ``pdf-3``). They are only stable within one build.

    Args:
        text: Raw document text
        source: Which document the text came from
        policy: Sizing limits (defaults if None)

    Returns:
        list[Chunk]: Ordered chunks, empty for empty input
    """
    policy = policy or ChunkingPolicy()
    if source is SourceKind.CSV:
        bodies = chunk_tabular(text, policy.rows_per_chunk)
    else:
        bodies = chunk_free_text(text, policy.max_chunk_chars)

    return [
        Chunk(source=source, id=f"{source.value}-{idx}", text=body)
        for idx, body in enumerate(bodies)
    ]
