"""
Public Files Middleware - Serves the static website at "/".

Files in the public directory take precedence over API routes: a request
that names an existing file is answered from disk, anything else falls
through to the router. Only GET and HEAD requests are considered.
"""
from pathlib import Path
from typing import Callable

from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.staticfiles import StaticFiles

from meetup_demo.core.logging_config import get_logger

logger = get_logger(__name__)


class PublicFilesMiddleware(BaseHTTPMiddleware):
    """
    Middleware that answers requests from a directory of static files.

    Directory requests resolve to their index.html. Lookups are confined
    to the directory by StaticFiles, so "../" paths never escape it.
    Served requests carry the file path in request.state.static_file.
    """

    def __init__(self, app, directory: Path):
        super().__init__(app)
        self.directory = Path(directory)
        self.files = StaticFiles(directory=self.directory, html=True)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Serve a public file or hand the request to the router."""
        if request.method not in ("GET", "HEAD"):
            return await call_next(request)

        path = self.files.get_path(request.scope)
        try:
            response = await self.files.get_response(path, request.scope)
        except HTTPException:
            return await call_next(request)

        # A 404.html page in the public directory must not hide API routes
        if response.status_code == 404:
            return await call_next(request)

        request.state.static_file = path
        return response
