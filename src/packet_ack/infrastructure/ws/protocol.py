"""WebSocket message envelope models."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, JsonValue

from packet_ack.domain.value_objects.enums import ResponseStatus

WELCOME_TEXT = "Connected to WebSocket server"


class InboundMessage(BaseModel):
    """Client → Server. Only ``packet_id`` is read; other keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    packet_id: JsonValue = None


class WelcomeMessage(BaseModel):
    """Server → Client, once per connection."""

    status: ResponseStatus = ResponseStatus.OK
    message: str = WELCOME_TEXT
    timestamp: str


class AckMessage(BaseModel):
    status: ResponseStatus = ResponseStatus.OK
    packet_id: JsonValue


class ErrorMessage(BaseModel):
    status: ResponseStatus = ResponseStatus.ERROR
    error: str


OutboundMessage = WelcomeMessage | AckMessage | ErrorMessage
