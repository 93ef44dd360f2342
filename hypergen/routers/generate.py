from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from hypergen.core.controller import RequestController
from hypergen.dependencies import get_controller
from hypergen.view import render_view

from .schemas import GenerateRequest

router = APIRouter(prefix="/api", tags=["generate"])


@router.post("/generate", status_code=202)
async def generate(
    payload: GenerateRequest,
    controller: RequestController = Depends(get_controller),
) -> dict[str, Any]:
    controller.generate(payload.prompt)
    return render_view(controller.state, controller.store)


@router.get("/state")
async def state(controller: RequestController = Depends(get_controller)) -> dict[str, Any]:
    return render_view(controller.state, controller.store)
