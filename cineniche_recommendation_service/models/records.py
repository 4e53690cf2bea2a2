"""Immutable records handed to and returned by the recommendation engine."""
import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from cineniche_recommendation_service.models.category import Category

_HOURS_PATTERN = re.compile(r'(\d+)\s*h(?:ou)?r?s?(?![a-z])', re.IGNORECASE)
_MINUTES_PATTERN = re.compile(r'(\d+)\s*min', re.IGNORECASE)


def parse_runtime_minutes(duration: Optional[str]) -> Optional[int]:
    """
    Parse a duration string into minutes.

    Handles "90 min", "1h 30min" and "1 hr 30 min". Durations expressed in
    seasons ("2 Seasons") have no runtime.

    Args:
        duration: Duration text from the catalog

    Returns:
        Runtime in minutes, or None if no runtime can be read
    """
    if not duration:
        return None

    hours = _HOURS_PATTERN.search(duration)
    minutes = _MINUTES_PATTERN.search(duration)
    if hours is None and minutes is None:
        return None

    total = 0
    if hours is not None:
        total += int(hours.group(1)) * 60
    if minutes is not None:
        total += int(minutes.group(1))
    return total


@dataclass(frozen=True)
class MovieRecord:
    """A catalog title with its genre flags collapsed into a category set."""
    show_id: str
    title: Optional[str] = None
    type: Optional[str] = None
    director: Optional[str] = None
    cast: Optional[str] = None
    country: Optional[str] = None
    release_year: Optional[int] = None
    rating: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    categories: frozenset[Category] = field(default_factory=frozenset)

    @property
    def runtime_minutes(self) -> Optional[int]:
        return parse_runtime_minutes(self.duration)

    def to_dict(self) -> Dict:
        """Serialize for JSON responses."""
        return {
            'show_id': self.show_id,
            'type': self.type,
            'title': self.title,
            'director': self.director,
            'cast': self.cast,
            'country': self.country,
            'release_year': self.release_year,
            'rating': self.rating,
            'duration': self.duration,
            'description': self.description,
            'categories': sorted(category.value for category in self.categories),
            'runtime_minutes': self.runtime_minutes,
        }


@dataclass(frozen=True)
class RatingRecord:
    user_id: int
    show_id: str
    rating: Optional[float] = None
    review: Optional[str] = None


@dataclass(frozen=True)
class CollaborativeRecommendation:
    """One row of the offline collaborative filtering output."""
    user_id: int
    show_id: str
    predicted_rating: float
