"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- demo.py  : Hello-world and fixed JSON endpoints
- metar.py : Stub METAR report API
"""
from meetup_demo.api.routes.demo import router as demo_router
from meetup_demo.api.routes.metar import router as metar_router

__all__ = [
    "demo_router",
    "metar_router",
]
