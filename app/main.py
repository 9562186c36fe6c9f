"""Application entry point and FastAPI app factory."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .config.settings import settings
from .controllers import meetings
from .middleware import StructuredLoggingMiddleware, TelemetryMiddleware
from .pipelines.meeting import MeetingProcessingError, get_locale_strings
from .services import get_llm_client, get_notion_publisher, get_transcribe_service
from .views import ProcessingResponse, ServiceStatus

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _rotating_handler(path: str, max_bytes: int, fmt: str) -> RotatingFileHandler:
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _configure_logging() -> None:
    """Stream logs to stdout and rotate them on disk."""

    logging.getLogger().handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(_rotating_handler(settings.log_file, 1_000_000, LOG_FORMAT))
    root_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    middleware_logger = logging.getLogger("app.middleware.structured")
    middleware_logger.handlers.clear()
    middleware_stdout = logging.StreamHandler(sys.stdout)
    middleware_stdout.setFormatter(logging.Formatter("%(message)s"))
    middleware_logger.addHandler(middleware_stdout)
    middleware_logger.setLevel(logging.INFO)
    middleware_logger.propagate = False

    pipeline_logger = logging.getLogger("app.services.meeting_pipeline")
    pipeline_logger.handlers.clear()
    pipeline_logger.addHandler(
        _rotating_handler(
            settings.pipeline_log_file,
            500_000,
            "%(asctime)s | %(levelname)s | %(message)s",
        )
    )
    pipeline_logger.setLevel(logging.INFO)

    # Transcripts stay out of stdout and the main app log.
    transcript_logger = logging.getLogger("app.logs.transcript")
    transcript_logger.handlers.clear()
    transcript_logger.addHandler(
        _rotating_handler(
            settings.transcript_log_file,
            500_000,
            "%(asctime)s | %(levelname)s | %(message)s",
        )
    )
    transcript_logger.setLevel(logging.INFO)
    transcript_logger.propagate = False

    noisy_loggers = [
        "httpx",
        "httpcore",
        "multipart",
        "python_multipart",
    ]
    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        description="Turns meeting recordings into Notion notes.",
    )

    app.add_middleware(TelemetryMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(meetings.router)

    strings = get_locale_strings(settings.pipeline.locale)

    @app.get("/", include_in_schema=False)
    async def root() -> ServiceStatus:
        """Root endpoint."""

        return ServiceStatus(
            status="operational",
            service=settings.app_name,
            version=settings.app_version,
            message=f"Welcome to {settings.app_name}",
        )

    @app.get("/health", include_in_schema=False)
    async def health_check() -> ServiceStatus:
        """Health check endpoint."""

        return ServiceStatus(
            status="healthy",
            service=settings.app_name,
            version=settings.app_version,
        )

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Expose application metrics for Prometheus scraping."""

        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.exception_handler(MeetingProcessingError)
    async def meeting_error_handler(request: Request, exc: MeetingProcessingError):
        message = exc.message or strings.processing_failed
        return JSONResponse(
            status_code=exc.status_code,
            content=ProcessingResponse.failure(message).to_payload(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Only the upload field is validated by FastAPI; a non-file value is a bad upload.
        return JSONResponse(
            status_code=400,
            content=ProcessingResponse.failure(strings.invalid_file_type).to_payload(),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request, exc):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc):
        logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ProcessingResponse.failure(strings.processing_failed).to_payload(),
        )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await get_transcribe_service().aclose()
        await get_llm_client().aclose()
        await get_notion_publisher().aclose()

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
