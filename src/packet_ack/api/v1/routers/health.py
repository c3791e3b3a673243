from __future__ import annotations

from fastapi import APIRouter, Request

from packet_ack.domain.value_objects.enums import ServiceState

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz(request: Request) -> dict[str, str]:
    state = getattr(request.app.state, "service_state", ServiceState.STOPPED)
    return {"status": "ok", "state": str(state)}
