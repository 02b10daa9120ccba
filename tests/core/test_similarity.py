"""
Test suite for cosine similarity and ranking.

System role: Verification of the similarity ranker
"""

import math

import pytest

from docs_chat.core.retrieval.similarity import cosine_similarity, rank

VECTOR_PAIRS = [
    ([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]),
    ([1.0, 0.0], [0.0, 1.0]),
    ([0.3, -0.7, 0.2, 0.9], [-0.5, 0.1, 0.8, -0.2]),
    ([2.0, 2.0], [-1.0, -1.0]),
    ([1e-8, 3e-8], [5.0, -2.0]),
]


class TestCosineSimilarity:
    """Test suite for cosine_similarity."""

    @pytest.mark.parametrize("a,b", VECTOR_PAIRS)
    def test_should_be_symmetric_and_bounded(self, a: list[float], b: list[float]) -> None:
        """cos(a, b) == cos(b, a) and lies in [-1, 1]."""
        forward = cosine_similarity(a, b)
        backward = cosine_similarity(b, a)

        assert forward == pytest.approx(backward)
        assert -1.0 <= forward <= 1.0

    def test_identical_vectors_should_score_one(self) -> None:
        assert cosine_similarity([0.2, 0.4, 0.6], [0.2, 0.4, 0.6]) == pytest.approx(1.0)

    def test_opposite_vectors_should_score_minus_one(self) -> None:
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_known_value(self) -> None:
        expected = 0.9 / math.sqrt(0.82)

        assert cosine_similarity([1.0, 0.0], [0.9, 0.1]) == pytest.approx(expected)

    @pytest.mark.parametrize("a", [[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [-4.0, 0.5, 9.0]])
    def test_zero_vector_should_score_zero(self, a: list[float]) -> None:
        """A zero-norm side scores exactly 0 and never divides by zero."""
        zero = [0.0, 0.0, 0.0]

        assert cosine_similarity(a, zero) == 0.0
        assert cosine_similarity(zero, a) == 0.0

    def test_different_lengths_should_compare_common_prefix(self) -> None:
        """Only the shared prefix is compared."""
        assert cosine_similarity([1.0, 0.0, 5.0], [1.0, 0.0]) == pytest.approx(1.0)
        assert cosine_similarity([0.0, 1.0], [0.0, 1.0, -7.0, 3.0]) == pytest.approx(1.0)

    def test_empty_vector_should_score_zero(self) -> None:
        assert cosine_similarity([], [1.0, 2.0]) == 0.0

    @pytest.mark.parametrize("b", [[math.nan, 0.0], [math.inf, 0.0], [1.0, -math.inf]])
    def test_non_finite_vector_should_score_zero(self, b: list[float]) -> None:
        assert cosine_similarity([1.0, 0.0], b) == 0.0
        assert cosine_similarity(b, [1.0, 0.0]) == 0.0


class TestRank:
    """Test suite for rank."""

    def test_should_return_top_k_by_descending_similarity(self, make_entry) -> None:
        """[1,0], [0,1], [0.9,0.1] against [1,0] with k=2 gives chunk 1 then 3."""
        entries = [
            make_entry(1, [1.0, 0.0]),
            make_entry(2, [0.0, 1.0]),
            make_entry(3, [0.9, 0.1]),
        ]

        results = rank([1.0, 0.0], entries, k=2)

        assert [r.entry.id for r in results] == ["pdf-1", "pdf-3"]
        assert results[0].score == pytest.approx(1.0)

    def test_output_length_should_be_min_of_k_and_index_size(self, make_entry) -> None:
        entries = [make_entry(i, [float(i), 1.0]) for i in range(3)]

        assert len(rank([1.0, 1.0], entries, k=10)) == 3
        assert len(rank([1.0, 1.0], entries, k=2)) == 2

    def test_scores_should_be_non_increasing(self, make_entry) -> None:
        entries = [
            make_entry(i, vector)
            for i, vector in enumerate(
                [[0.1, 0.9], [0.8, 0.2], [-1.0, 0.0], [0.5, 0.5], [0.0, 0.0], [0.99, 0.01]]
            )
        ]

        scores = [r.score for r in rank([1.0, 0.0], entries, k=6)]

        assert scores == sorted(scores, reverse=True)

    def test_ties_should_keep_index_order(self, make_entry) -> None:
        entries = [make_entry(i, [1.0, 1.0]) for i in range(4)]

        results = rank([1.0, 1.0], entries, k=4)

        assert [r.entry.id for r in results] == ["pdf-0", "pdf-1", "pdf-2", "pdf-3"]

    def test_default_k_should_be_five(self, make_entry) -> None:
        entries = [make_entry(i, [1.0, float(i)]) for i in range(8)]

        assert len(rank([1.0, 0.0], entries)) == 5

    def test_zero_k_or_empty_index_should_return_empty(self, make_entry) -> None:
        assert rank([1.0], [make_entry(0, [1.0])], k=0) == []
        assert rank([1.0], [], k=5) == []

    def test_negative_k_should_raise(self, make_entry) -> None:
        with pytest.raises(ValueError):
            rank([1.0], [make_entry(0, [1.0])], k=-1)

    def test_should_not_mutate_inputs(self, make_entry) -> None:
        entries = [make_entry(1, [0.0, 1.0]), make_entry(2, [1.0, 0.0])]
        snapshot = list(entries)
        query = [1.0, 0.0]

        rank(query, entries, k=1)

        assert entries == snapshot
        assert query == [1.0, 0.0]

    def test_non_finite_entry_should_not_outrank_match(self, make_entry) -> None:
        entries = [make_entry(0, [0.0, 1.0]), make_entry(1, [math.nan, 0.0])]

        results = rank([0.0, 1.0], entries, k=2)

        assert [r.entry.id for r in results] == ["pdf-0", "pdf-1"]
        assert results[0].score == pytest.approx(1.0)
        assert results[1].score == 0.0
