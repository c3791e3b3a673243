from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from packet_ack.api.v1.routers import health, ws
from packet_ack.config import Settings, settings as default_settings
from packet_ack.domain.value_objects.enums import ServiceState

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    app.state.service_state = ServiceState.RUNNING
    logger.info("Packet ack service starting (env=%s)", app.state.settings.APP_ENV)

    yield

    app.state.service_state = ServiceState.STOPPED
    logger.info("WebSocket server closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Packet Ack Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service_state = ServiceState.STOPPED

    app.include_router(health.router)
    app.include_router(ws.build_router(settings.WS_PATH))

    return app
