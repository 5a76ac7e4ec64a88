"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request body parsing
- Response formatting
- Error handling
- Route definitions
"""
from meetup_demo.api.main import app, create_app

__all__ = ["app", "create_app"]
