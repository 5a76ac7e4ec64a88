"""
Services module - Business logic.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
"""
from meetup_demo.services.metar_service import (
    MetarService,
    get_metar_service,
    reset_metar_service,
)

__all__ = [
    "MetarService",
    "get_metar_service",
    "reset_metar_service",
]
