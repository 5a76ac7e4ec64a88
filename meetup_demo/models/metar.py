"""
Response models for the METAR API.

Field names are Python identifiers; the aliases carry the wire names
(``Station``, ``Wind-Speed``...) used in the JSON payload.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MetarUnits(BaseModel):
    """Units the numeric report fields are expressed in."""
    model_config = ConfigDict(populate_by_name=True)

    temperature: str = Field(default="C", alias="Temperature")
    wind_speed: str = Field(default="kt", alias="Wind-Speed")


class MetarReport(BaseModel):
    """
    Stub METAR report for a single station.

    Attributes:
        station: Station code the report was requested for
        report: Raw report text, prefixed with the station code
        opts: Echo of the optional ``opts`` query parameter
    """
    model_config = ConfigDict(populate_by_name=True)

    station: str = Field(..., alias="Station", examples=["KLEX"])
    report: str = Field(..., alias="Report", examples=["KLEX 123456Z 09013KT 13/11"])
    time: str = Field(..., alias="Time")
    wind_speed: int = Field(..., alias="Wind-Speed")
    wind_direction: int = Field(..., alias="Wind-Direction")
    temperature: int = Field(..., alias="Temperature")
    dewpoint: int = Field(..., alias="Dewpoint")
    units: MetarUnits = Field(default_factory=MetarUnits, alias="Units")
    opts: Optional[str] = Field(
        default=None,
        description="Optional query parameter echoed back when present"
    )
