"""Application configuration"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _get_config_value(key: str, default: str | None = None) -> str | None:
    """
    Get configuration value from environment or local.settings.json.

    Priority:
    1. Environment variable
    2. local.settings.json (Values.key)
    3. Default value

    Args:
        key: Configuration key name
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # Try environment variable first
    value = os.getenv(key)
    if value:
        return value

    # Try local.settings.json
    project_root = Path(__file__).resolve().parent.parent
    local_settings_path = project_root / "local.settings.json"

    if local_settings_path.exists():
        try:
            with open(local_settings_path) as f:
                settings = json.load(f)
                value = settings.get("Values", {}).get(key)
                if value:
                    return value
        except (json.JSONDecodeError, KeyError):
            pass

    # Return default
    return default


def _get_int_config_value(key: str, default: int) -> int:
    """Get an integer configuration value, falling back to default when unparseable."""
    value = _get_config_value(key)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key}: {value!r}, using default {default}")
        return default


def get_database_url() -> str | None:
    """
    Get database URL from environment or config.

    Returns:
        Database connection string
    """
    return _get_config_value("DATABASE_URL", default="sqlite:///cineniche.db")


def get_collab_csv_path() -> Path:
    """
    Get path of the precomputed collaborative filtering table.

    Returns:
        Path to collab CSV (default: data/collab.csv in project root)
    """
    value = _get_config_value("COLLAB_CSV_PATH")
    if value:
        return Path(value)

    project_root = Path(__file__).resolve().parent.parent
    return project_root / "data" / "collab.csv"


def get_default_recommendation_count() -> int:
    """Default number of content-based/hybrid recommendations."""
    return _get_int_config_value("DEFAULT_RECOMMENDATION_COUNT", 10)


def get_default_collaborative_top_n() -> int:
    """Default number of collaborative recommendations."""
    return _get_int_config_value("DEFAULT_COLLABORATIVE_TOP_N", 30)
