from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request

from textdetect.api.routes import router
from textdetect.core.config import Settings, settings
from textdetect.core.logging import configure_logging
from textdetect.errors import DetectTextError, error_response

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title="Text Detection", version="0.1.0")
    app.include_router(router)

    @app.exception_handler(DetectTextError)
    async def _detect_text_error(request: Request, exc: DetectTextError):
        logger.error(
            "request_failed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "error_kind": type(exc).__name__,
                "error": exc.message,
                "status_code": exc.status_code,
            },
        )
        return error_response(exc)

    @app.on_event("startup")
    async def _startup() -> None:
        logger.info("startup", extra={"ocr_provider": settings.ocr_provider})

    return app


def run() -> None:
    """Serve the application on HOST:PORT; PORT defaults to 8080."""
    config = Settings()
    configure_logging(config.log_level)
    if "port" not in config.model_fields_set:
        logger.info("defaulting_port", extra={"port": config.port})
    logger.info("listening", extra={"host": config.host, "port": config.port})
    uvicorn.run(create_app(), host=config.host, port=config.port, log_level=config.log_level.lower())


app = create_app()


if __name__ == "__main__":
    run()
