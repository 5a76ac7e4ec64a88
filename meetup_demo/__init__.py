"""
Meetup demo application package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI application and routes
- core/      : Configuration, logging, middleware and cross-cutting utilities
- services/  : Business logic (stub METAR reports)
- models/    : Pydantic models for response schemas
"""
