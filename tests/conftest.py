"""Shared test fixtures and configuration for pytest."""
import pytest
from pathlib import Path
from unittest.mock import Mock
from typing import Iterable, List
import tempfile
import json
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cineniche_recommendation_service.models import (
    Base,
    Category,
    CollaborativeRecommendation,
    MovieRating,
    MovieRecord,
    MovieTitle,
)
from cineniche_recommendation_service.storage import CollaborativeTable


def make_movie(show_id: str, title: str, categories: Iterable[Category] = (), **kwargs) -> MovieTitle:
    """Build a MovieTitle with the given genre flags set."""
    movie = MovieTitle(show_id=show_id, title=title, **kwargs)
    for category in categories:
        setattr(movie, category.value, True)
    return movie


def make_record(show_id: str, *categories: Category) -> MovieRecord:
    """Build a MovieRecord with the given categories."""
    return MovieRecord(show_id=show_id, title=f"Movie {show_id}", categories=frozenset(categories))


# ===== Database Fixtures =====

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_db_engine):
    """Session factory bound to the test database."""
    return sessionmaker(bind=test_db_engine)


@pytest.fixture(scope="function")
def test_db_session(session_factory):
    """Create a database session for testing."""
    session = session_factory()
    yield session
    session.close()


# ===== Sample Data Fixtures =====

@pytest.fixture
def sample_movies(test_db_session) -> List[MovieTitle]:
    """
    Create a small catalog.

    Against s1 (Action, Dramas): s4 scores 1.0, s2 0.5, s3 and s5 0.0.
    """
    movies = [
        make_movie(
            's1', 'Alpha', [Category.ACTION, Category.DRAMAS],
            type='Movie', director='Ann Director', release_year=2019,
            rating='PG-13', duration='120 min', description='An action drama.'
        ),
        make_movie('s2', 'Bravo', [Category.ACTION], type='Movie', duration='95 min'),
        make_movie('s3', 'Charlie', [Category.COMEDIES], type='Movie', duration='1h 30min'),
        make_movie('s4', 'Delta', [Category.DRAMAS, Category.ACTION], type='TV Show', duration='2 Seasons'),
        make_movie('s5', 'Echo', [], type='Movie'),
    ]

    for movie in movies:
        test_db_session.add(movie)
    test_db_session.commit()

    return movies


@pytest.fixture
def sample_ratings(test_db_session) -> List[MovieRating]:
    """User 7 rated s3; user 8 rated s2 and s5."""
    ratings = [
        MovieRating(user_id=7, show_id='s3', rating=4.0, review='Funny'),
        MovieRating(user_id=8, show_id='s2', rating=5.0),
        MovieRating(user_id=8, show_id='s5', rating=2.0),
    ]

    for rating in ratings:
        test_db_session.add(rating)
    test_db_session.commit()

    return ratings


@pytest.fixture
def collab_rows() -> List[CollaborativeRecommendation]:
    """Collaborative rows, deliberately not sorted."""
    return [
        CollaborativeRecommendation(user_id=7, show_id='s1', predicted_rating=3.2),
        CollaborativeRecommendation(user_id=8, show_id='s2', predicted_rating=5.0),
        CollaborativeRecommendation(user_id=7, show_id='s3', predicted_rating=4.5),
        CollaborativeRecommendation(user_id=7, show_id='missing', predicted_rating=4.0),
    ]


@pytest.fixture
def collab_table(collab_rows) -> CollaborativeTable:
    return CollaborativeTable(collab_rows)


@pytest.fixture
def recommendation_service(collab_table, session_factory, sample_movies, sample_ratings):
    """RecommendationService over the sample catalog, ratings and collab table."""
    from cineniche_recommendation_service.services import RecommendationService
    return RecommendationService(collab_table=collab_table, session_factory=session_factory)


# ===== Temporary Directory Fixtures =====

@pytest.fixture
def temp_data_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def collab_csv_path(temp_data_dir) -> Path:
    """Write a valid collab CSV and return its path."""
    path = temp_data_dir / 'collab.csv'
    path.write_text(
        "user_id,show_id,predicted_rating\n"
        "7,x,4.5\n"
        "7,y,3.2\n"
        "8,z,5.0\n"
    )
    return path


# ===== Configuration Fixtures =====

@pytest.fixture
def mock_config(monkeypatch, collab_csv_path):
    """Mock configuration values."""
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///:memory:')
    monkeypatch.setenv('COLLAB_CSV_PATH', str(collab_csv_path))
    monkeypatch.setenv('DEFAULT_RECOMMENDATION_COUNT', '10')
    monkeypatch.setenv('DEFAULT_COLLABORATIVE_TOP_N', '30')


@pytest.fixture
def mock_local_settings(tmp_path):
    """Write a local.settings.json file into a temporary project root."""
    settings = {
        "Values": {
            "DATABASE_URL": "sqlite:///from-settings.db",
            "COLLAB_CSV_PATH": "/data/from-settings.csv",
        }
    }

    settings_file = tmp_path / "local.settings.json"
    with open(settings_file, 'w') as f:
        json.dump(settings, f)

    yield settings_file


# ===== Azure Functions Fixtures =====

@pytest.fixture
def mock_http_request():
    """Mock Azure Functions HttpRequest."""
    mock_req = Mock()
    mock_req.route_params = {}
    mock_req.params = {}
    mock_req.get_json.return_value = {}
    return mock_req
