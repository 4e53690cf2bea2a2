"""Static data sources"""

from cineniche_recommendation_service.storage.collab_table import (
    CollaborativeTable,
    CollaborativeTableError,
)

__all__ = ["CollaborativeTable", "CollaborativeTableError"]
