"""Movie recommendation endpoints."""
import azure.functions as func
import logging
import json
from typing import Dict, Optional, Tuple

from cineniche_recommendation_service.config import (
    get_default_recommendation_count,
    get_default_collaborative_top_n
)
from cineniche_recommendation_service.services import RecommendationService

# Initialize blueprint
bp = func.Blueprint()

MAX_RECOMMENDATIONS = 50
MAX_COLLABORATIVE = 100

logger = logging.getLogger(__name__)

_recommendation_service: Optional[RecommendationService] = None


def get_recommendation_service() -> RecommendationService:
    """Get the shared service, constructing it on first use."""
    global _recommendation_service
    if _recommendation_service is None:
        _recommendation_service = RecommendationService()
    return _recommendation_service


def _json_response(body: Dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body),
        status_code=status_code,
        mimetype="application/json"
    )


def _parse_int(value: Optional[str], name: str, default: Optional[int]) -> Tuple[Optional[int], Optional[str]]:
    """Parse an integer parameter. Returns (value, error message)."""
    if value is None or value == '':
        return default, None
    try:
        return int(value), None
    except ValueError:
        return None, f"{name} must be an integer"


def _parse_count(req: func.HttpRequest, default: int, maximum: int) -> Tuple[Optional[int], Optional[str]]:
    n, error = _parse_int(req.params.get('n'), 'n', default)
    if error:
        return None, error
    if n < 1 or n > maximum:
        return None, f"n must be between 1 and {maximum}"
    return n, None


@bp.route(route="movies/titles/{show_id}/recommendations", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_movie_recommendations(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get hybrid recommendations for a movie.

    Query Parameters:
        - userId: Optional user whose ratings re-rank the results
        - n: Number of recommendations (default: 10, max: 50)
    """
    try:
        show_id = req.route_params.get('show_id')
        if not show_id:
            return _json_response({"error": "show_id is required"}, 400)

        user_id, error = _parse_int(req.params.get('userId', req.params.get('user_id')), 'userId', None)
        if error:
            return _json_response({"error": error}, 400)

        n, error = _parse_count(req, get_default_recommendation_count(), MAX_RECOMMENDATIONS)
        if error:
            return _json_response({"error": error}, 400)

        recommendations = get_recommendation_service().hybrid_recommendations(
            show_id=show_id,
            user_id=user_id,
            count=n
        )

        if not recommendations:
            return _json_response({
                "show_id": show_id,
                "user_id": user_id,
                "recommendations": [],
                "message": "No recommendations found for this movie"
            }, 404)

        return _json_response({
            "show_id": show_id,
            "user_id": user_id,
            "count": len(recommendations),
            "recommendations": [movie.to_dict() for movie in recommendations]
        })

    except Exception as e:
        logger.error(f"Error getting recommendations: {str(e)}", exc_info=True)
        return _json_response({"error": "Internal server error"}, 500)


@bp.route(route="movies/titles/{show_id}/similar", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_similar_movies(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get content-based (genre similarity) recommendations for a movie.

    Query Parameters:
        - n: Number of recommendations (default: 10, max: 50)
    """
    try:
        show_id = req.route_params.get('show_id')
        if not show_id:
            return _json_response({"error": "show_id is required"}, 400)

        n, error = _parse_count(req, get_default_recommendation_count(), MAX_RECOMMENDATIONS)
        if error:
            return _json_response({"error": error}, 400)

        recommendations = get_recommendation_service().content_based_recommendations(
            show_id=show_id,
            count=n
        )

        if not recommendations:
            return _json_response({
                "show_id": show_id,
                "recommendations": [],
                "message": "No similar movies found"
            }, 404)

        return _json_response({
            "show_id": show_id,
            "count": len(recommendations),
            "recommendations": [movie.to_dict() for movie in recommendations]
        })

    except Exception as e:
        logger.error(f"Error getting similar movies: {str(e)}", exc_info=True)
        return _json_response({"error": "Internal server error"}, 500)


@bp.route(route="recommendations/collaborative/{user_id}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_collaborative_recommendations(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get precomputed collaborative filtering recommendations for a user.

    Query Parameters:
        - n: Number of recommendations (default: 30, max: 100)
    """
    try:
        user_id, error = _parse_int(req.route_params.get('user_id'), 'user_id', None)
        if error:
            return _json_response({"error": error}, 400)
        if user_id is None:
            return _json_response({"error": "user_id is required"}, 400)

        n, error = _parse_count(req, get_default_collaborative_top_n(), MAX_COLLABORATIVE)
        if error:
            return _json_response({"error": error}, 400)

        recommendations = get_recommendation_service().collaborative_recommendations(
            user_id=user_id,
            top_n=n
        )

        if not recommendations:
            return _json_response({
                "user_id": user_id,
                "recommendations": [],
                "message": "No recommendations found for this user"
            }, 404)

        return _json_response({
            "user_id": user_id,
            "count": len(recommendations),
            "recommendations": [movie.to_dict() for movie in recommendations]
        })

    except Exception as e:
        logger.error(f"Error getting collaborative recommendations: {str(e)}", exc_info=True)
        return _json_response({"error": "Internal server error"}, 500)


# noinspection PyUnusedLocal
@bp.route(route="recommendations/stats", methods=["GET"])
def get_recommendation_stats(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get statistics about the recommendation data.
    """
    try:
        return _json_response(get_recommendation_service().get_stats())

    except Exception as e:
        logger.error(f"Error getting stats: {str(e)}", exc_info=True)
        return _json_response({"error": "Internal server error"}, 500)


# noinspection PyUnusedLocal
@bp.route(route="recommendations/health", methods=["GET"])
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint."""
    return _json_response({
        "status": "healthy",
        "service": "cineniche-recommendation-service",
        "version": "1.0.0"
    })
