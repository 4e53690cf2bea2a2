"""Repository for reading the movie catalog."""

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from cineniche_recommendation_service.models import MovieRecord, MovieTitle

logger = logging.getLogger(__name__)


class MovieRepository:
    """
    Read-only access to catalog titles as MovieRecord objects.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_movie(self, show_id: str) -> MovieRecord | None:
        """Get a title by ID, or None if it is not in the catalog."""
        movie = self.db.get(MovieTitle, show_id)
        return movie.to_record() if movie is not None else None

    # noinspection PyTypeChecker
    def get_all_movies(self, exclude_show_id: str | None = None) -> list[MovieRecord]:
        """
        Get every title in the catalog.

        Args:
            exclude_show_id: Title to leave out of the result

        Returns:
            List of MovieRecord in show_id order
        """
        query = self.db.query(MovieTitle)
        if exclude_show_id is not None:
            query = query.filter(MovieTitle.show_id != exclude_show_id)

        return [movie.to_record() for movie in query.order_by(MovieTitle.show_id).all()]

    # noinspection PyTypeChecker
    def get_movies_by_ids(self, show_ids: Iterable[str]) -> list[MovieRecord]:
        """
        Get titles by ID, in the order the IDs were given.

        IDs missing from the catalog are skipped.

        Args:
            show_ids: Title IDs to look up

        Returns:
            List of MovieRecord
        """
        show_ids = list(show_ids)
        if not show_ids:
            return []

        rows = self.db.query(MovieTitle).filter(MovieTitle.show_id.in_(show_ids)).all()
        by_id = {row.show_id: row.to_record() for row in rows}

        missing = [show_id for show_id in show_ids if show_id not in by_id]
        if missing:
            logger.warning(f"{len(missing)} requested titles not in catalog: {missing[:5]}")

        return [by_id[show_id] for show_id in show_ids if show_id in by_id]

    def count_movies(self) -> int:
        """Count catalog titles."""
        return self.db.query(MovieTitle).count()
