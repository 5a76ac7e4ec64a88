"""
METAR Routes - Stub weather report API.

Endpoints:
- GET /api                  : Error, no report type given
- GET /api/metar            : Error, no station given
- GET /api/metar/{station}  : Stub report for a known station
- POST /api/process         : Acknowledge a JSON {"Station": ...} payload
"""
import json
from typing import Any, Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse

from meetup_demo.core.exceptions import (
    MalformedBodyError,
    MissingBodyError,
    ReportNotFoundError,
    UnsupportedMediaTypeError,
)
from meetup_demo.core.logging_config import get_logger
from meetup_demo.models.demo import ErrorResponse
from meetup_demo.models.metar import MetarReport
from meetup_demo.services.metar_service import get_metar_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["METAR"],
    responses={
        404: {"model": ErrorResponse, "description": "Report type or station missing"},
    }
)


def _is_json(content_type: str) -> bool:
    """Check whether a Content-Type header names a JSON media type."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def _read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    Raises:
        MissingBodyError: If the request has no body
        UnsupportedMediaTypeError: If the body is not sent as JSON
        MalformedBodyError: If the body is not valid JSON
    """
    body = await request.body()
    if not body:
        raise MissingBodyError()

    content_type = request.headers.get("content-type", "")
    if not _is_json(content_type):
        raise UnsupportedMediaTypeError(content_type)

    # Deeply nested arrays/objects exhaust the decoder's recursion limit
    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        raise MalformedBodyError() from None


@router.get("", include_in_schema=False)
async def no_report_type():
    raise ReportNotFoundError("No report type given")


@router.get("/metar", include_in_schema=False)
async def no_station():
    raise ReportNotFoundError("No station given")


@router.get(
    "/metar/{station}",
    response_model=MetarReport,
    response_model_exclude_none=True,
    summary="Get METAR report",
    responses={
        406: {"model": ErrorResponse, "description": "Station not on the allow-list"},
    },
)
async def get_metar(
    station: str,
    opts: Optional[str] = Query(default=None, description="Echoed back in the report"),
) -> MetarReport:
    """
    Return the stub report for a station.

    Known stations are KLEX, KMCO and KSFB; anything else is rejected
    with 406 Not Acceptable.
    """
    return get_metar_service().lookup(station, opts)


@router.post(
    "/process",
    response_class=PlainTextResponse,
    summary="Process a METAR request",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed body"},
        415: {"model": ErrorResponse, "description": "Body is not JSON"},
    },
)
async def post_process(request: Request) -> PlainTextResponse:
    """Acknowledge the station named in a JSON body."""
    payload = await _read_json_body(request)
    station = get_metar_service().process(payload)
    return PlainTextResponse(f"Processing {station}")
