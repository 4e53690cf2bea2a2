"""Service for content-based, hybrid and collaborative movie recommendations."""
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from cineniche_recommendation_service.config import get_collab_csv_path
from cineniche_recommendation_service.ml.similarity import rank_by_similarity
from cineniche_recommendation_service.models import MovieRecord
from cineniche_recommendation_service.models.database import SessionLocal
from cineniche_recommendation_service.repos import MovieRepository, RatingRepository
from cineniche_recommendation_service.storage import CollaborativeTable

logger = logging.getLogger(__name__)


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


class RecommendationService:
    """
    Ranks catalog titles for a target title and, optionally, a user.

    The catalog and ratings are read fresh on every call, one session per
    call. The collaborative table is loaded once at construction and never
    changes afterwards, so concurrent calls need no locking.
    """

    def __init__(
            self,
            collab_table: Optional[CollaborativeTable] = None,
            collab_csv_path: Optional[Path] = None,
            session_factory: Optional[Callable[[], Session]] = None
    ):
        """
        Initialize the recommendation service.

        Args:
            collab_table: Preloaded collaborative table (skips loading from disk)
            collab_csv_path: CSV to load the collaborative table from (default from config)
            session_factory: Callable returning a new database session

        Raises:
            CollaborativeTableError: If the collaborative table cannot be loaded
        """
        if collab_table is None:
            collab_csv_path = collab_csv_path or get_collab_csv_path()
            collab_table = CollaborativeTable.from_csv(collab_csv_path)

        self.collab_table = collab_table
        self.session_factory = session_factory or SessionLocal

        logger.info("Initialized RecommendationService")

    def _content_based(self, db: Session, show_id: str, count: int) -> List[MovieRecord]:
        movie_repo = MovieRepository(db)

        target = movie_repo.get_movie(show_id)
        if target is None:
            logger.warning(f"Movie {show_id} not found, no recommendations")
            return []

        if count == 0:
            return []

        candidates = movie_repo.get_all_movies(exclude_show_id=show_id)
        ranked = rank_by_similarity(target, candidates)

        return [movie for movie, _ in ranked[:count]]

    def content_based_recommendations(self, show_id: str, count: int = 10) -> List[MovieRecord]:
        """
        Get titles whose genres overlap most with the target's.

        Args:
            show_id: Target title ID
            count: Maximum number of recommendations

        Returns:
            Up to count MovieRecords, most similar first; empty if the target is unknown
        """
        _check_count("count", count)

        db = self.session_factory()
        try:
            return self._content_based(db, show_id, count)
        finally:
            db.close()

    def hybrid_recommendations(
            self,
            show_id: str,
            user_id: Optional[int] = None,
            count: int = 10
    ) -> List[MovieRecord]:
        """
        Get content-based recommendations re-ranked by the user's own ratings.

        Twice the requested number of content-based candidates are fetched.
        Titles the user has already rated move to the front, each group keeping
        its similarity order. This is a fixed re-rank heuristic, not a learned
        model. Without a user the result is plain content-based ordering.

        Args:
            show_id: Target title ID
            user_id: Optional user whose ratings bias the ranking
            count: Maximum number of recommendations

        Returns:
            Up to count MovieRecords
        """
        _check_count("count", count)

        db = self.session_factory()
        try:
            candidates = self._content_based(db, show_id, count * 2)

            if user_id is not None and candidates:
                rated_ids = RatingRepository(db).get_rated_show_ids(user_id)
                rated = [movie for movie in candidates if movie.show_id in rated_ids]
                unrated = [movie for movie in candidates if movie.show_id not in rated_ids]
                candidates = rated + unrated

            return candidates[:count]
        finally:
            db.close()

    def collaborative_movie_ids(self, user_id: int, top_n: int = 30) -> List[str]:
        """
        Get a user's top title IDs from the precomputed collaborative table.

        Args:
            user_id: User ID
            top_n: Maximum number of IDs

        Returns:
            Title IDs by predicted rating descending; empty if the user has no rows
        """
        _check_count("top_n", top_n)

        show_ids = self.collab_table.top_show_ids_for_user(user_id, top_n)
        if not show_ids:
            logger.warning(f"No collaborative recommendations for user {user_id}")
        return show_ids

    def collaborative_recommendations(self, user_id: int, top_n: int = 30) -> List[MovieRecord]:
        """
        Resolve collaborative_movie_ids to catalog records.

        Order follows the predicted rating; IDs missing from the catalog are dropped.
        """
        show_ids = self.collaborative_movie_ids(user_id, top_n)
        if not show_ids:
            return []

        db = self.session_factory()
        try:
            return MovieRepository(db).get_movies_by_ids(show_ids)
        finally:
            db.close()

    def get_stats(self) -> Dict:
        """Get statistics about the recommendation data."""
        db = self.session_factory()
        try:
            return {
                'catalog_movies': MovieRepository(db).count_movies(),
                'ratings': RatingRepository(db).count_ratings(),
                'collaborative_rows': len(self.collab_table),
                'collaborative_users': self.collab_table.user_count
            }
        finally:
            db.close()
