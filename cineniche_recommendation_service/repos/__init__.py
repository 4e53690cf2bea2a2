"""Repository classes"""

from cineniche_recommendation_service.repos.movie_repository import MovieRepository
from cineniche_recommendation_service.repos.rating_repository import RatingRepository

__all__ = [
    "MovieRepository",
    "RatingRepository",
]
