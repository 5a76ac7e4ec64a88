"""
Demo Routes - Basic GET/POST and JSON examples.

Endpoints:
- GET /hello : Fixed plain-text greeting
- POST /hello: Greets the name sent as the request body
- GET /json  : Fixed JSON document about the meetup presentation
"""
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from meetup_demo.core.logging_config import get_logger
from meetup_demo.core.validators import decode_text
from meetup_demo.models.demo import DemoInfo

logger = get_logger(__name__)

router = APIRouter(tags=["Demo"])

HELLO_GREETING = "Hello from Kitura-Starter!"
POST_FALLBACK = "Kitura-Starter received a POST request!"


@router.get(
    "/hello",
    response_class=PlainTextResponse,
    summary="Basic GET request",
)
async def get_hello() -> PlainTextResponse:
    """Return the fixed greeting."""
    logger.debug("GET - /hello route handler...")
    return PlainTextResponse(HELLO_GREETING)


@router.post(
    "/hello",
    response_class=PlainTextResponse,
    summary="Basic POST request",
    description="""
    Send a name as the plain-text request body to be greeted by it.

    An empty body is not an error: it gets a generic acknowledgement.
    """
)
async def post_hello(request: Request) -> PlainTextResponse:
    """Greet the name in the request body."""
    logger.debug("POST - /hello route handler...")
    name = decode_text(await request.body())
    if name:
        return PlainTextResponse(f"Hello {name}, from Kitura-Starter!")
    return PlainTextResponse(POST_FALLBACK)


@router.get(
    "/json",
    response_model=DemoInfo,
    summary="JSON GET request",
)
async def get_json() -> DemoInfo:
    logger.debug("GET - /json route handler...")
    return DemoInfo()
