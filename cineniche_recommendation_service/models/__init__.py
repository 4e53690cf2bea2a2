"""SQLAlchemy models and domain records"""

from cineniche_recommendation_service.models.base import Base
from cineniche_recommendation_service.models.category import Category
from cineniche_recommendation_service.models.records import (
    CollaborativeRecommendation,
    MovieRecord,
    RatingRecord,
)
from cineniche_recommendation_service.models.movie_title import MovieTitle
from cineniche_recommendation_service.models.movie_rating import MovieRating

__all__ = [
    "Base",
    "Category",
    "CollaborativeRecommendation",
    "MovieRecord",
    "MovieRating",
    "MovieTitle",
    "RatingRecord",
]
