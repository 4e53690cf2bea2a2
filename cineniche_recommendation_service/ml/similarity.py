"""Genre similarity scoring for content-based recommendations."""
from typing import AbstractSet, Iterable, List, Tuple

from cineniche_recommendation_service.models import MovieRecord


def jaccard_similarity(categories_a: AbstractSet, categories_b: AbstractSet) -> float:
    """
    Compute Jaccard similarity between two category sets.

    Args:
        categories_a: First category set
        categories_b: Second category set

    Returns:
        |A & B| / |A | B| in [0, 1]; 0.0 when either set is empty
    """
    if not categories_a or not categories_b:
        return 0.0

    return len(categories_a & categories_b) / len(categories_a | categories_b)


def rank_by_similarity(
    target: MovieRecord,
    candidates: Iterable[MovieRecord]
) -> List[Tuple[MovieRecord, float]]:
    """
    Score candidates against a target and sort them, most similar first.

    The target itself is never included. Ties are broken by show_id ascending.

    Args:
        target: Movie to compare against
        candidates: Movies to score

    Returns:
        List of (movie, similarity) pairs
    """
    scored = [
        (candidate, jaccard_similarity(target.categories, candidate.categories))
        for candidate in candidates
        if candidate.show_id != target.show_id
    ]
    scored.sort(key=lambda pair: (-pair[1], pair[0].show_id))
    return scored
