"""Repository for reading user ratings."""

from sqlalchemy.orm import Session

from cineniche_recommendation_service.models import MovieRating, RatingRecord


class RatingRepository:
    """
    Read-only access to user ratings.
    """

    def __init__(self, db: Session):
        self.db = db

    # noinspection PyTypeChecker
    def get_ratings_for_user(self, user_id: int) -> list[RatingRecord]:
        """Get all ratings a user has given."""
        ratings = (
            self.db.query(MovieRating)
            .filter(MovieRating.user_id == user_id)
            .all()
        )
        return [rating.to_record() for rating in ratings]

    def get_rated_show_ids(self, user_id: int) -> set[str]:
        """Get IDs of the titles a user has rated."""
        return {rating.show_id for rating in self.get_ratings_for_user(user_id)}

    def count_ratings(self) -> int:
        """Count all ratings."""
        return self.db.query(MovieRating).count()
