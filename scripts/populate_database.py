"""
Populate the database with the movie catalog and user ratings.
This script loads seed CSV files into the database read by the recommendation service.
"""

import sys
from pathlib import Path

# Add parent directory to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import logging
import pandas as pd
import numpy as np
import argparse

from sqlalchemy.orm import Session

from cineniche_recommendation_service.models import Base, Category, MovieRating, MovieTitle

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

MOVIE_COLUMNS = [
    'show_id', 'type', 'title', 'director', 'cast', 'country',
    'release_year', 'rating', 'duration', 'description'
]


def clean_dataframe_for_db(df: pd.DataFrame) -> pd.DataFrame:
    """
    Clean DataFrame by replacing NaN/NA values with None for database compatibility.

    Args:
        df: Input DataFrame

    Returns:
        Cleaned DataFrame
    """
    # Replace various types of missing values with None
    df = df.astype(object)
    df = df.replace({np.nan: None, pd.NA: None})
    df = df.where(pd.notnull(df), None)

    return df


def parse_flag(value) -> bool:
    """Read a genre flag cell (1/0, true/false, yes/no) as a boolean."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in ('1', '1.0', 'true', 'yes', 'y')
    return bool(value)


def load_movies(db: Session, movies_path: Path, batch_size: int = 500) -> int:
    """
    Replace the catalog with the titles in a CSV file.

    Args:
        db: Database session
        movies_path: CSV with show_id, descriptive columns and one column per genre flag
        batch_size: Batch size for inserts

    Returns:
        Number of titles stored
    """
    if not movies_path.exists():
        raise FileNotFoundError(f"Movies file not found: {movies_path}")

    movies_df = clean_dataframe_for_db(pd.read_csv(movies_path))
    logger.info(f"Loaded {len(movies_df)} titles from {movies_path}")

    missing_flags = [c.value for c in Category if c.value not in movies_df.columns]
    if missing_flags:
        logger.warning(f"Genre columns missing from {movies_path.name}, treated as unset: {missing_flags}")

    records = []
    for row in movies_df.to_dict('records'):
        if not row.get('show_id'):
            logger.warning(f"Skipping title without show_id: {row.get('title')}")
            continue

        values = {column: row.get(column) for column in MOVIE_COLUMNS}
        values['show_id'] = str(values['show_id'])
        if values['release_year'] is not None:
            values['release_year'] = int(values['release_year'])
        for category in Category:
            values[category.value] = parse_flag(row.get(category.value))

        records.append(MovieTitle(**values))

    # Clear existing data
    logger.info("Clearing existing catalog...")
    db.query(MovieTitle).delete()
    db.commit()

    # Batch insert
    count = 0
    for i in range(0, len(records), batch_size):
        batch = records[i:i + batch_size]
        db.bulk_save_objects(batch)
        db.commit()
        count += len(batch)

    logger.info(f"✓ Stored {count} titles")
    return count


def load_ratings(db: Session, ratings_path: Path, batch_size: int = 1000) -> int:
    """
    Replace user ratings with the rows in a CSV file.

    Duplicate (user_id, show_id) pairs keep the last row.

    Args:
        db: Database session
        ratings_path: CSV with user_id, show_id, rating and optional review columns
        batch_size: Batch size for inserts

    Returns:
        Number of ratings stored
    """
    if not ratings_path.exists():
        raise FileNotFoundError(f"Ratings file not found: {ratings_path}")

    ratings_df = pd.read_csv(ratings_path)
    logger.info(f"Loaded {len(ratings_df)} ratings from {ratings_path}")

    before = len(ratings_df)
    ratings_df = ratings_df.drop_duplicates(subset=['user_id', 'show_id'], keep='last')
    if len(ratings_df) < before:
        logger.warning(f"Dropped {before - len(ratings_df)} duplicate ratings")

    ratings_df = clean_dataframe_for_db(ratings_df)

    records = [
        MovieRating(
            user_id=int(row['user_id']),
            show_id=str(row['show_id']),
            rating=float(row['rating']) if row.get('rating') is not None else None,
            review=row.get('review')
        )
        for row in ratings_df.to_dict('records')
    ]

    logger.info("Clearing existing ratings...")
    db.query(MovieRating).delete()
    db.commit()

    count = 0
    for i in range(0, len(records), batch_size):
        batch = records[i:i + batch_size]
        db.bulk_save_objects(batch)
        db.commit()
        count += len(batch)

    logger.info(f"✓ Stored {count} ratings")
    return count


def verify_recommendations(service, show_ids: list[str], count: int = 5):
    """
    Log content-based recommendations for a few titles.

    Args:
        service: RecommendationService instance
        show_ids: Titles to test
        count: Recommendations per title
    """
    logger.info("\n" + "="*70)
    logger.info("TESTING RECOMMENDATIONS")
    logger.info("="*70)

    for show_id in show_ids:
        logger.info(f"\nRecommendations for {show_id}:")

        recommendations = service.content_based_recommendations(show_id, count=count)

        if recommendations:
            for i, movie in enumerate(recommendations, 1):
                genres = sorted(category.label for category in movie.categories)
                logger.info(f"  {i}. {movie.title} (genres: {genres})")
        else:
            logger.warning("  No recommendations found")


def main():
    """Main execution function."""
    parser = argparse.ArgumentParser(
        description='Populate database with movie catalog and ratings'
    )
    parser.add_argument(
        '--input-dir',
        type=str,
        default='data',
        help='Input directory with seed CSV files (default: data)'
    )
    parser.add_argument(
        '--movies-file',
        type=str,
        default='movies_titles.csv',
        help='Catalog CSV file name (default: movies_titles.csv)'
    )
    parser.add_argument(
        '--ratings-file',
        type=str,
        default='movies_ratings.csv',
        help='Ratings CSV file name (default: movies_ratings.csv)'
    )
    parser.add_argument(
        '--skip-ratings',
        action='store_true',
        help='Skip loading ratings'
    )
    parser.add_argument(
        '--skip-test',
        action='store_true',
        help='Skip recommendation testing (also skips loading the collaborative table)'
    )

    args = parser.parse_args()

    input_dir = project_root / args.input_dir

    logger.info("="*70)
    logger.info("POPULATE DATABASE")
    logger.info("="*70)
    logger.info(f"Input directory: {input_dir}")
    logger.info(f"Skip ratings: {args.skip_ratings}")
    logger.info(f"Skip testing: {args.skip_test}")
    logger.info("="*70)

    from cineniche_recommendation_service.models.database import SessionLocal, engine

    try:
        Base.metadata.create_all(engine)

        db = SessionLocal()
        try:
            movie_count = load_movies(db, input_dir / args.movies_file)

            rating_count = 0
            if not args.skip_ratings:
                rating_count = load_ratings(db, input_dir / args.ratings_file)
            else:
                logger.info("\n⊘ Skipping ratings")

            sample_ids = [row[0] for row in db.query(MovieTitle.show_id).limit(3).all()]
        finally:
            db.close()

        if not args.skip_test:
            from cineniche_recommendation_service.services import RecommendationService
            verify_recommendations(RecommendationService(), sample_ids)
        else:
            logger.info("\n⊘ Skipping recommendation testing")

        logger.info("\n" + "="*70)
        logger.info("✓ DATABASE POPULATION COMPLETE")
        logger.info("="*70)
        logger.info(f"Titles: {movie_count}")
        logger.info(f"Ratings: {rating_count}")

    except Exception as e:
        logger.error(f"Error during database population: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
