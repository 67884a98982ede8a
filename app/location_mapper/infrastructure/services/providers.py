"""
Factory functions for dependency injection.

Provides process-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from typing import Optional

from location_mapper.infrastructure.configuration import Settings
from location_mapper.infrastructure.clients.maxmind import MaxMindClient


@lru_cache
def get_settings() -> Settings:
    """
    Get process-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_maxmind_client(db_path: Optional[str] = None) -> MaxMindClient:
    """Provider for a MaxMind client.

    Not cached: each client owns the reader it opens and is closed by the
    caller at the end of the run.

    Args:
        db_path: Database path override. Defaults to settings.maxmind.MAXMIND_DB_PATH.

    Returns:
        MaxMindClient: Unopened client for the configured database.
    """
    if db_path is None:
        db_path = get_settings().maxmind.MAXMIND_DB_PATH
    return MaxMindClient(db_path=db_path)
