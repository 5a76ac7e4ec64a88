"""
METAR Service - Stub weather report lookup.

No real weather source is consulted: every valid station gets the same
canned observation, with the station code stamped onto the report.

Why a service layer:
1. Separation of concerns - Routes stay thin
2. Testability - Service can be tested without HTTP
"""
from typing import Any, Optional

from meetup_demo.core.exceptions import InvalidPayloadError, InvalidStationError
from meetup_demo.core.logging_config import LoggerMixin
from meetup_demo.core.validators import validate_process_payload, validate_station
from meetup_demo.models.metar import MetarReport, MetarUnits

# Canned observation: 13 kt from 090, 13C over 11C dewpoint
REPORT_TIME = "123456Z"
REPORT_BODY = f" {REPORT_TIME} 09013KT 13/11"


class MetarService(LoggerMixin):
    """
    Service answering METAR lookups and process requests.

    Holds no per-request state, so one instance serves every request.

    Example:
        >>> service = MetarService()
        >>> service.lookup("KLEX").report
        'KLEX 123456Z 09013KT 13/11'
    """

    def lookup(self, station: str, opts: Optional[str] = None) -> MetarReport:
        """
        Build the report for a station.

        Args:
            station: Station code from the URL
            opts: Optional query parameter to echo back

        Returns:
            MetarReport for the station

        Raises:
            InvalidStationError: If the station is not on the allow-list
        """
        is_valid, error = validate_station(station)
        if not is_valid:
            self.logger.info(f"Rejected METAR lookup for unknown station {station!r}")
            raise InvalidStationError(station, error)

        self.logger.debug(f"Building METAR report for {station}")
        return MetarReport(
            station=station,
            report=station + REPORT_BODY,
            time=REPORT_TIME,
            wind_speed=13,
            wind_direction=90,
            temperature=13,
            dewpoint=11,
            units=MetarUnits(),
            opts=opts,
        )

    def process(self, payload: Any) -> str:
        """
        Accept a decoded /api/process body.

        Returns:
            The station the payload names

        Raises:
            InvalidPayloadError: If the payload is not an object with a
                string "Station" field
        """
        is_valid, station, error = validate_process_payload(payload)
        if not is_valid:
            raise InvalidPayloadError(error, field="Station")

        self.logger.info(f"Processing station {station}")
        return station


_metar_service: MetarService | None = None


def get_metar_service() -> MetarService:
    """Get or create METAR service singleton."""
    global _metar_service
    if _metar_service is None:
        _metar_service = MetarService()
    return _metar_service


def reset_metar_service() -> None:
    """Reset the METAR service singleton (useful for testing)."""
    global _metar_service
    _metar_service = None
