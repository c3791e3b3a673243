"""Shared test fixtures."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest
from starlette.datastructures import Address
from starlette.websockets import WebSocketState

from packet_ack.config import Settings

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2024-05-01T12:30:45.123Z"


@dataclass
class FixedClock:
    at: datetime = FIXED_NOW

    def now(self) -> datetime:
        return self.at


def text_frame(data: str) -> dict[str, Any]:
    return {"type": "websocket.receive", "text": data}


def bytes_frame(data: bytes) -> dict[str, Any]:
    return {"type": "websocket.receive", "bytes": data}


def disconnect_frame(code: int = 1000) -> dict[str, Any]:
    return {"type": "websocket.disconnect", "code": code}


@dataclass
class FakeWebSocket:
    """In-memory stand-in for a Starlette WebSocket.

    ``inbound`` items are ASGI receive events, or exceptions to raise from
    ``receive``. Once drained, the peer is reported as gone.
    """

    inbound: list[Any] = field(default_factory=list)
    sent: list[str] = field(default_factory=list)
    client: Address | None = field(default_factory=lambda: Address("127.0.0.1", 50000))
    client_state: WebSocketState = WebSocketState.CONNECTING
    application_state: WebSocketState = WebSocketState.CONNECTING
    close_code: int | None = None

    async def accept(self) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED

    async def receive(self) -> dict[str, Any]:
        if not self.inbound:
            self.client_state = WebSocketState.DISCONNECTED
            return disconnect_frame()
        item = self.inbound.pop(0)
        if isinstance(item, Exception):
            raise item
        if item["type"] == "websocket.disconnect":
            self.client_state = WebSocketState.DISCONNECTED
        return item

    async def send_text(self, data: str) -> None:
        self.sent.append(data)

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        self.close_code = code
        self.application_state = WebSocketState.DISCONNECTED

    def sent_json(self) -> list[dict[str, Any]]:
        return [json.loads(raw) for raw in self.sent]


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)
