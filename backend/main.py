# backend/main.py

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routers import health_router, properties_router
from utils.data_store import PropertyStore
from utils.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API with its own PropertyStore.
    Handlers reach the store and settings through app.state.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Japanese Properties API", version="0.1.0")
    app.state.settings = settings
    app.state.store = PropertyStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------------------------------------------------
    # ROUTERS
    # ---------------------------------------------------------

    app.include_router(health_router)
    app.include_router(properties_router)

    @app.exception_handler(StarletteHTTPException)
    async def not_found(request: Request, exc: StarletteHTTPException):
        # Unmatched paths get a plain-text 404; everything else keeps FastAPI's JSON shape.
        if exc.status_code == 404 and exc.detail == "Not Found":
            return PlainTextResponse(
                "The page you're looking for doesn't exist",
                status_code=404,
            )
        return await http_exception_handler(request, exc)

    logger.info(
        "App created (address_format=%s, row_failure_policy=%s, cors=%s)",
        settings.address_format,
        settings.row_failure_policy,
        settings.cors_allowed_origins,
    )
    return app


app = create_app()


if __name__ == "__main__":
    settings = app.state.settings
    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
