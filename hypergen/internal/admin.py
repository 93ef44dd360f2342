from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(prefix="/internal", tags=["internal"])


@router.get("/healthz")
async def healthz(request: Request) -> dict[str, str | bool]:
    trigger = getattr(request.app.state, "trigger", None)
    return {
        "status": "ok",
        "startup_generation_fired": bool(trigger is not None and trigger.fired),
    }
