"""
Input Validators - Request payload checks.

This module provides the small validation rules the API relies on:
- Station allow-list membership
- Text body decoding
- Process payload shape
"""
from typing import Any, Optional, Tuple

from meetup_demo.core.logging_config import get_logger

logger = get_logger(__name__)

# Stations the stub METAR lookup knows about
VALID_STATIONS = ("KLEX", "KMCO", "KSFB")


def validate_station(station: str) -> Tuple[bool, Optional[str]]:
    """
    Check a station code against the allow-list.

    Matching is exact: codes are case-sensitive.

    Args:
        station: Station code taken from the URL

    Returns:
        Tuple of (is_valid, error_message)
    """
    if station not in VALID_STATIONS:
        return False, "Not a valid station"
    return True, None


def decode_text(body: Optional[bytes]) -> str:
    """
    Decode a request body as UTF-8 text.

    Undecodable bytes are replaced rather than rejected, so reading
    a body never fails the request.
    """
    if not body:
        return ""
    return body.decode("utf-8", errors="replace")


def validate_process_payload(payload: Any) -> Tuple[bool, str, Optional[str]]:
    """
    Validate a decoded /api/process body.

    Args:
        payload: Decoded JSON value

    Returns:
        Tuple of (is_valid, station, error_message)
    """
    if not isinstance(payload, dict):
        logger.debug(f"Process payload is a {type(payload).__name__}, not an object")
        return False, "", "Request body must be a JSON object"

    station = payload.get("Station")
    if not isinstance(station, str):
        return False, "", "Station must be a string"

    return True, station, None
