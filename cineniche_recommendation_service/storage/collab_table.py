"""In-memory table of precomputed collaborative filtering predictions."""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from cineniche_recommendation_service.models import CollaborativeRecommendation

logger = logging.getLogger(__name__)

# Accepted header spellings, keyed by lowercase name without underscores
_COLUMN_ALIASES = {
    'userid': 'user_id',
    'showid': 'show_id',
    'movieid': 'show_id',
    'predictedrating': 'predicted_rating',
}
_REQUIRED_COLUMNS = ('user_id', 'show_id', 'predicted_rating')
_MAX_REPORTED_ROWS = 5


class CollaborativeTableError(RuntimeError):
    """Raised when the collaborative table cannot be loaded."""


class CollaborativeTable:
    """
    Immutable (user_id, show_id, predicted_rating) rows produced offline.

    Rows are indexed by user at construction, each user's rows sorted by
    predicted rating descending with ties kept in source order. Duplicate
    rows are kept as-is.
    """

    def __init__(self, rows: Iterable[CollaborativeRecommendation]):
        self._rows: Tuple[CollaborativeRecommendation, ...] = tuple(rows)

        by_user: Dict[int, List[CollaborativeRecommendation]] = {}
        for row in self._rows:
            by_user.setdefault(row.user_id, []).append(row)

        self._by_user = MappingProxyType({
            user_id: tuple(sorted(user_rows, key=lambda r: -r.predicted_rating))
            for user_id, user_rows in by_user.items()
        })

        logger.info(f"✓ Loaded {len(self._rows)} collaborative rows for {len(self._by_user)} users")

    @classmethod
    def from_csv(cls, path: Path | str) -> "CollaborativeTable":
        """
        Load the table from a CSV file.

        Args:
            path: CSV with user_id, show_id and predicted_rating columns
                (UserId/ShowId/PredictedRating headers are also accepted)

        Returns:
            CollaborativeTable

        Raises:
            CollaborativeTableError: If the file is missing, unreadable or malformed
        """
        path = Path(path)
        if not path.is_file():
            raise CollaborativeTableError(f"Collaborative table not found: {path}")

        logger.info(f"Loading collaborative table from {path}...")
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise CollaborativeTableError(f"Could not read collaborative table {path}: {e}") from e

        return cls.from_dataframe(df, source=str(path))

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, source: str = "<dataframe>") -> "CollaborativeTable":
        """
        Build the table from a DataFrame, validating every row.

        Args:
            df: Raw table
            source: Name used in error messages

        Returns:
            CollaborativeTable

        Raises:
            CollaborativeTableError: If a column is missing or any row is malformed
        """
        df = df.rename(columns={
            column: _COLUMN_ALIASES.get(str(column).strip().lower().replace('_', ''), column)
            for column in df.columns
        })

        clashing = sorted(set(df.columns[df.columns.duplicated()]))
        if clashing:
            raise CollaborativeTableError(
                f"Collaborative table {source} has duplicate columns after header normalization: {clashing}"
            )

        missing =[column for column in _REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise CollaborativeTableError(f"Collaborative table {source} is missing columns: {missing}")

        if df.empty:
            logger.warning(f"Collaborative table {source} has no rows")
            return cls([])

        show_ids = df['show_id'].astype(str).str.strip()
        user_ids = pd.to_numeric(df['user_id'].astype(str).str.strip(), errors='coerce')
        ratings = pd.to_numeric(df['predicted_rating'].astype(str).str.strip(), errors='coerce')

        malformed = (
            df['show_id'].isna()
            | (show_ids == '')
            | user_ids.isna()
            | (user_ids % 1 != 0)
            | ratings.isna()
            | (ratings.abs() == float('inf'))
        )
        if malformed.any():
            bad_rows = [int(i) + 1 for i in malformed[malformed].index[:_MAX_REPORTED_ROWS]]
            raise CollaborativeTableError(
                f"Collaborative table {source} has {int(malformed.sum())} malformed rows "
                f"(data rows {bad_rows})"
            )

        return cls(
            CollaborativeRecommendation(
                user_id=int(user_id),
                show_id=show_id,
                predicted_rating=float(rating)
            )
            for user_id, show_id, rating in zip(user_ids, show_ids, ratings)
        )

    @property
    def rows(self) -> Tuple[CollaborativeRecommendation, ...]:
        return self._rows

    @property
    def user_count(self) -> int:
        return len(self._by_user)

    def __len__(self) -> int:
        return len(self._rows)

    def top_show_ids_for_user(self, user_id: int, top_n: int = 30) -> List[str]:
        """
        Get a user's highest-predicted title IDs.

        Args:
            user_id: User ID
            top_n: Maximum number of IDs to return

        Returns:
            Title IDs sorted by predicted rating descending; empty for unknown users
        """
        if top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {top_n}")

        return [row.show_id for row in self._by_user.get(user_id, ())[:top_n]]
