"""Unit tests for cineniche_recommendation_service.ml.similarity."""
import itertools

import pytest

from cineniche_recommendation_service.ml.similarity import jaccard_similarity, rank_by_similarity
from cineniche_recommendation_service.models import Category

from conftest import make_record

A = Category.ACTION
D = Category.DRAMAS
C = Category.COMEDIES
T = Category.THRILLERS

SAMPLE_SETS = [
    frozenset(),
    frozenset({A}),
    frozenset({A, D}),
    frozenset({C}),
    frozenset({A, D, C, T}),
]


class TestJaccardSimilarity:
    """Tests for jaccard_similarity function."""

    def test_identical_sets(self):
        assert jaccard_similarity({A, D}, {A, D}) == 1.0

    def test_partial_overlap(self):
        assert jaccard_similarity({A, D}, {A}) == 0.5

    def test_disjoint_sets(self):
        assert jaccard_similarity({A}, {C}) == 0.0

    def test_empty_set_scores_zero(self):
        assert jaccard_similarity(set(), {A}) == 0.0
        assert jaccard_similarity({A}, set()) == 0.0
        assert jaccard_similarity(set(), set()) == 0.0

    def test_three_of_four(self):
        assert jaccard_similarity({A, D, C}, {A, D, C, T}) == pytest.approx(0.75)

    @pytest.mark.parametrize("a, b", list(itertools.product(SAMPLE_SETS, repeat=2)))
    def test_symmetric_and_bounded(self, a, b):
        score = jaccard_similarity(a, b)

        assert score == jaccard_similarity(b, a)
        assert 0.0 <= score <= 1.0


class TestRankBySimilarity:
    """Tests for rank_by_similarity function."""

    def test_ranks_most_similar_first(self):
        # Arrange
        target = make_record('a', A, D)
        candidates = [make_record('c', C), make_record('b', A)]

        # Act
        ranked = rank_by_similarity(target, candidates)

        # Assert
        assert [movie.show_id for movie, _ in ranked] == ['b', 'c']
        assert [score for _, score in ranked] == [0.5, 0.0]

    def test_excludes_target(self):
        # Arrange
        target = make_record('a', A)
        candidates = [make_record('a', A), make_record('b', A)]

        # Act
        ranked = rank_by_similarity(target, candidates)

        # Assert
        assert [movie.show_id for movie, _ in ranked] == ['b']

    def test_ties_broken_by_show_id(self):
        # Arrange
        target = make_record('t', A)
        candidates = [make_record('z', A), make_record('m', C), make_record('b', A), make_record('a', C)]

        # Act
        ranked = rank_by_similarity(target, candidates)

        # Assert
        assert [movie.show_id for movie, _ in ranked] == ['b', 'z', 'a', 'm']

    def test_empty_candidates(self):
        assert rank_by_similarity(make_record('a', A), []) == []

    def test_target_without_categories_scores_all_zero(self):
        # Arrange
        target = make_record('a')
        candidates = [make_record('c', C), make_record('b', A)]

        # Act
        ranked = rank_by_similarity(target, candidates)

        # Assert
        assert [score for _, score in ranked] == [0.0, 0.0]
        assert [movie.show_id for movie, _ in ranked] == ['b', 'c']
