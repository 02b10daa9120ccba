"""
Similarity ranker.

Scores index entries against a query vector by cosine similarity and
returns the top-K in descending order.

Dependencies: numpy, docs_chat.models.retrieval
System role: Per-query ranking over the in-memory index
"""

from collections.abc import Sequence

import numpy as np

from docs_chat.models.retrieval import IndexEntry, ScoredChunk

DEFAULT_TOP_K = 5


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity over the common prefix of two vectors.

    Vectors of different length are compared on their shared prefix only.
    A zero-norm or non-finite vector on either side scores 0.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: Similarity in [-1, 1]
    """
    length = min(len(a), len(b))
    if length == 0:
        return 0.0

    va = np.asarray(a[:length], dtype=np.float64)
    vb = np.asarray(b[:length], dtype=np.float64)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    score = float(np.dot(va, vb) / (norm_a * norm_b))
    if not np.isfinite(score):
        return 0.0
    return max(-1.0, min(1.0, score))


def rank(
    query_vector: Sequence[float],
    entries: Sequence[IndexEntry],
    k: int = DEFAULT_TOP_K,
) -> list[ScoredChunk]:
    """
    Rank entries by similarity to the query vector.

    Ties keep index order. Inputs are not modified.

    Args:
        query_vector: Query embedding
        entries: Index entries to score
        k: Maximum number of results

    Returns:
        list[ScoredChunk]: min(k, len(entries)) results, non-increasing score

    Raises:
        ValueError: When k is negative
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0 or not entries:
        return []

    scores = np.array([cosine_similarity(query_vector, entry.vector) for entry in entries])
    order = np.argsort(-scores, kind="stable")[:k]
    return [ScoredChunk(entry=entries[i], score=float(scores[i])) for i in order]
