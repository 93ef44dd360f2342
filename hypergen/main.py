from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from hypergen.backend.client import HyperGenerateClient
from hypergen.config import BackendSettings
from hypergen.core.controller import RequestController
from hypergen.core.trigger import LifecycleTrigger
from hypergen.dependencies import register_exception_handlers
from hypergen.internal import admin
from hypergen.routers import generate, share
from hypergen.share.capabilities import Clipboard, NativeShare, UnavailableClipboard


def create_app(
    settings: BackendSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    native_share: NativeShare | None = None,
    clipboard: Clipboard | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        resolved_settings = settings or BackendSettings.from_env()
        app.state.settings = resolved_settings

        client = HyperGenerateClient(resolved_settings, transport=transport)
        controller = RequestController(client)
        trigger = LifecycleTrigger(controller)

        app.state.controller = controller
        app.state.trigger = trigger
        trigger.start()

        try:
            yield
        finally:
            await controller.aclose()
            await client.aclose()

    app = FastAPI(
        title="hypergen",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.native_share = native_share
    app.state.clipboard = clipboard if clipboard is not None else UnavailableClipboard()

    register_exception_handlers(app)

    app.include_router(generate.router)
    app.include_router(share.router)
    app.include_router(admin.router)

    return app


app = create_app()
