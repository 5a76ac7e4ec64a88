"""
Models module - Pydantic schemas for API responses.
"""
from meetup_demo.models.demo import DemoInfo, ErrorResponse
from meetup_demo.models.metar import MetarReport, MetarUnits

__all__ = [
    "DemoInfo",
    "ErrorResponse",
    "MetarReport",
    "MetarUnits",
]
