"""Entry point for the phone control relay service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.pages import router as pages_router
from api.relay_routes import router as relay_router
from api.twilio_routes import router as twilio_router
from config.settings import get_settings
from integrations.errors import RelayServiceError

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    LOGGER.info("App is listening on port %s", get_settings().port)
    yield


async def _service_error_handler(request: Request, exc: RelayServiceError) -> JSONResponse:
    LOGGER.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Phone Control Relay",
        description="Signaling relay and Twilio Voice helper for the overlay and admin panel.",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RelayServiceError, _service_error_handler)

    app.include_router(pages_router)
    app.include_router(twilio_router)
    app.include_router(relay_router)
    return app


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
