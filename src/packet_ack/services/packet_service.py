from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import from_json

from packet_ack.application.exceptions import InvalidPayloadError, MissingFieldError
from packet_ack.application.ports.clock import Clock, isoformat_utc
from packet_ack.infrastructure.ws.protocol import AckMessage, InboundMessage, WelcomeMessage


def welcome(clock: Clock) -> WelcomeMessage:
    return WelcomeMessage(timestamp=isoformat_utc(clock.now()))


def parse_inbound(raw: str | bytes) -> InboundMessage:
    """Parse a frame payload into an :class:`InboundMessage`.

    Anything that is not a strict JSON object (bad syntax, ``NaN`` or
    ``Infinity`` tokens, invalid UTF-8, arrays, scalars) raises
    :class:`InvalidPayloadError`.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidPayloadError() from exc
    try:
        data = from_json(raw, allow_inf_nan=False)
    except ValueError as exc:
        raise InvalidPayloadError() from exc
    try:
        return InboundMessage.model_validate(data)
    except PydanticValidationError as exc:
        raise InvalidPayloadError() from exc


def acknowledge(raw: str | bytes) -> AckMessage:
    msg = parse_inbound(raw)
    if msg.packet_id is None:
        raise MissingFieldError("packet_id")
    return AckMessage(packet_id=msg.packet_id)
