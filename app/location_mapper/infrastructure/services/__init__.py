"""Infrastructure service providers.

Usage:
    from location_mapper.infrastructure.services import (
        get_settings,
        get_maxmind_client,
    )
"""

from location_mapper.infrastructure.services.providers import (
    get_maxmind_client,
    get_settings,
)

__all__ = [
    "get_settings",
    "get_maxmind_client",
]
