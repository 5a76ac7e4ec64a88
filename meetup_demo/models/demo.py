"""
Response models for the demo routes and errors.
"""
from pydantic import BaseModel, ConfigDict, Field


class DemoInfo(BaseModel):
    """Fixed payload returned by GET /json."""
    model_config = ConfigDict(populate_by_name=True)

    framework: str = "Kitura"
    application_name: str = Field(default="iOS-Meetup-Demo", alias="applicationName")
    presenter: str = "Michael duPont"
    presentation_count: int = Field(default=2, alias="presentation-count")
    organization: str = "Orlando iOS Developers Group"
    location: str = "Orlando, Florida"


class ErrorResponse(BaseModel):
    """Standard error response model."""
    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., alias="Error")
