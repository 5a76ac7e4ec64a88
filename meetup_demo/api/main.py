"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Middleware configuration (public files, audit, CORS)
3. Exception handlers (uniform {"Error": ...} bodies)
4. Router registration
5. Startup/shutdown events

Run with: python -m meetup_demo
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meetup_demo.core.audit import AuditMiddleware
from meetup_demo.core.config import Settings, get_settings
from meetup_demo.core.exceptions import DemoException
from meetup_demo.core.logging_config import get_logger, setup_logging
from meetup_demo.core.static import PublicFilesMiddleware
from meetup_demo.api.routes import demo_router, metar_router

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Routes are registered once here and never change afterwards.

    Args:
        settings: Settings to use. Defaults to get_settings().

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_dir, log_to_file=settings.log_to_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log startup and shutdown."""
        logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
        logger.info(f"Public URL: {settings.url}")
        yield
        logger.info(f"Shutting down {settings.app_name}")

    app = FastAPI(
        title="iOS Meetup Demo API",
        description="""
        Demonstration web service from the Kitura-Starter template.

        ## Features

        - **Static website** served from the public directory
        - **Routing demos**: GET/POST /hello and a fixed JSON document
        - **METAR API**: stub weather reports for a few airport stations
        """,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ============================================================
    # Middleware Configuration (last added runs first)
    # ============================================================

    # Public files are tried before any route
    if settings.public_dir.is_dir():
        app.add_middleware(PublicFilesMiddleware, directory=settings.public_dir)
        logger.info(f"Serving static content from {settings.public_dir}")
    else:
        logger.warning(f"Public directory not found, static content disabled: {settings.public_dir}")

    if settings.enable_audit_logging:
        app.add_middleware(AuditMiddleware)
        logger.debug("Audit logging middleware enabled")

    if settings.is_development():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.debug("CORS configured for development (all origins allowed)")

    # ============================================================
    # Exception Handlers
    # ============================================================

    @app.exception_handler(DemoException)
    async def demo_exception_handler(request: Request, exc: DemoException):
        """Handle all application exceptions."""
        logger.debug(f"{request.method} {request.url.path}: {exc.message} ({exc.details})")
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict()
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Give framework errors (unknown route, wrong method) the same shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"Error": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions globally.

        Detailed error information is only included in development mode.
        """
        logger.exception(f"Unhandled exception: {exc}")

        content = {"Error": "An unexpected error occurred"}
        if settings.is_development():
            content["details"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(demo_router)
    app.include_router(metar_router)

    return app


app = create_app()


def main() -> None:
    """Run the application under uvicorn."""
    import uvicorn

    settings = get_settings()
    logger.info(f"Server will be started on '{settings.url}'")

    uvicorn.run(
        "meetup_demo.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development()
    )


if __name__ == "__main__":
    main()
