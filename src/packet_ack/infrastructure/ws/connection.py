"""Per-connection WebSocket handler."""
from __future__ import annotations

import logging
import uuid

from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from packet_ack.application.exceptions import ValidationError
from packet_ack.application.ports.clock import Clock
from packet_ack.domain.value_objects.enums import ConnectionState
from packet_ack.infrastructure.ws.protocol import ErrorMessage, OutboundMessage
from packet_ack.services import packet_service

logger = logging.getLogger(__name__)

# Sent when the handler fails for a reason other than the peer going away.
INTERNAL_ERROR_CLOSE_CODE = 1011


class ConnectionHandler:
    """Owns one WebSocket from accept to close.

    Frames are read and answered one at a time, so replies on a connection
    always go out in the order their frames arrived.
    """

    def __init__(self, ws: WebSocket, clock: Clock) -> None:
        self._ws = ws
        self._clock = clock
        self.connection_id = uuid.uuid4().hex[:12]
        self.state = ConnectionState.CONNECTING
        self.frames_handled = 0

    async def run(self) -> None:
        await self._ws.accept()
        self.state = ConnectionState.OPEN
        logger.info("Client connected: %s (peer=%s)", self.connection_id, self._peer())
        try:
            await self._send(packet_service.welcome(self._clock))
            await self._read_loop()
        except WebSocketDisconnect as exc:
            logger.info(
                "Client disconnected: %s (code=%s, frames=%d)",
                self.connection_id,
                exc.code,
                self.frames_handled,
            )
        except Exception:
            logger.exception("WS error for %s", self.connection_id)
            await self._abort()
        finally:
            self.state = ConnectionState.CLOSED

    async def _read_loop(self) -> None:
        while True:
            message = await self._ws.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(
                    code=message.get("code", 1000),
                    reason=message.get("reason"),
                )
            payload = message.get("text")
            if payload is None:
                payload = message.get("bytes") or b""
            logger.debug("Received frame on %s (len=%d)", self.connection_id, len(payload))
            reply = self.handle_frame(payload)
            await self._send(reply)
            self.frames_handled += 1

    def handle_frame(self, payload: str | bytes) -> OutboundMessage:
        """Map one inbound frame to exactly one reply."""
        try:
            ack = packet_service.acknowledge(payload)
        except ValidationError as exc:
            logger.debug("Rejected frame on %s: %s", self.connection_id, exc.detail)
            return ErrorMessage(error=exc.detail)
        logger.debug("Acknowledged packet %r on %s", ack.packet_id, self.connection_id)
        return ack

    async def _send(self, message: OutboundMessage) -> None:
        await self._ws.send_text(message.model_dump_json())

    async def _abort(self) -> None:
        if (
            self._ws.client_state != WebSocketState.CONNECTED
            or self._ws.application_state != WebSocketState.CONNECTED
        ):
            return
        try:
            await self._ws.close(code=INTERNAL_ERROR_CLOSE_CODE)
        except RuntimeError:
            logger.debug("Close after error failed for %s", self.connection_id, exc_info=True)

    def _peer(self) -> str:
        client = self._ws.client
        if client is None:
            return "unknown"
        return f"{client.host}:{client.port}"
