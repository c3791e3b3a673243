from __future__ import annotations

from fastapi import APIRouter, WebSocket

from packet_ack.api.deps import ClockDep
from packet_ack.infrastructure.ws.connection import ConnectionHandler


async def ws_ack(websocket: WebSocket, clock: ClockDep) -> None:
    await ConnectionHandler(websocket, clock).run()


def build_router(path: str) -> APIRouter:
    router = APIRouter(tags=["websocket"])
    router.add_api_websocket_route(path, ws_ack, name="ws_ack")
    return router
