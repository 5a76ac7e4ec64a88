"""
Audit Middleware - Request/response logging for monitoring.

One log line per request, tagged by what answered it:
- STATIC: a file from the public directory (with the file served)
- API: a route handler, or a routing error

Logs are written to the application log file.
"""
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from meetup_demo.core.logging_config import get_logger

logger = get_logger(__name__)


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging all requests and responses.

    Must sit outside PublicFilesMiddleware so it can see which requests
    were answered from the public directory.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and log audit information."""
        start_time = time.time()

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"REQUEST FAILED: {method} {path} "
                f"client={client_ip} duration={duration:.3f}s error={str(e)}"
            )
            raise

        duration = time.time() - start_time
        self._log_request(
            method=method,
            path=path,
            status_code=response.status_code,
            duration=duration,
            client_ip=client_ip,
            static_file=getattr(request.state, "static_file", None),
        )

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response

    def _log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration: float,
        client_ip: str,
        static_file: Optional[str] = None,
    ) -> None:
        """Log request details."""
        # Static assets are noise next to API traffic
        if static_file is not None:
            logger.debug(
                f"STATIC: {method} {path} file={static_file} "
                f"status={status_code} duration={duration:.3f}s client={client_ip}"
            )
            return

        if status_code >= 500:
            log_fn = logger.error
        elif status_code >= 400:
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(
            f"API: {method} {path} "
            f"status={status_code} duration={duration:.3f}s "
            f"client={client_ip}"
        )
