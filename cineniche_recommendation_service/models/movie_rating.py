"""User ratings of catalog titles"""
from sqlalchemy import Column, Float, Integer, String, Text

from cineniche_recommendation_service.models.base import Base
from cineniche_recommendation_service.models.records import RatingRecord


class MovieRating(Base):
    """One user's rating of one title.

    The composite primary key allows at most one rating per user per title.
    """
    __tablename__ = 'movies_ratings'

    user_id = Column(Integer, primary_key=True)
    show_id = Column(String(50), primary_key=True)

    rating = Column(Float, nullable=True)
    review = Column(Text, nullable=True)

    def to_record(self) -> RatingRecord:
        return RatingRecord(
            user_id=self.user_id,
            show_id=self.show_id,
            rating=float(self.rating) if self.rating is not None else None,
            review=self.review,
        )

    def __repr__(self):
        return f"<MovieRating(user_id={self.user_id}, show_id='{self.show_id}', rating={self.rating})>"
