from __future__ import annotations

from fastapi import APIRouter, Request

from hypergen.share.action import ShareAction, select_share_strategy

from .schemas import ShareRequest, ShareResponse

router = APIRouter(prefix="/api", tags=["share"])


@router.post("/share")
async def share(payload: ShareRequest, request: Request) -> ShareResponse:
    notices: list[str] = []
    strategy = select_share_strategy(
        request.app.state.native_share,
        request.app.state.clipboard,
        notices.append,
    )

    page_url = payload.page_url or str(request.base_url)
    await ShareAction(strategy).share(payload.prompt, page_url)

    return ShareResponse(strategy=strategy.name, notices=notices)
