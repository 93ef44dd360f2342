"""Async client for the hyper-generate backend built on HTTPX.

One call per prompt, no retries. `timeout_seconds` bounds the whole call, not
just each network phase. Transport and status failures are turned into
the generation error taxonomy so the controller only ever sees `GenerationError`.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time

import httpx
from pydantic import ValidationError

from hypergen.config import BackendSettings
from hypergen.core.errors import (
    GENERIC_FAILURE_MESSAGE,
    DecodeError,
    NetworkError,
    ProtocolError,
    RequestTimeoutError,
)
from hypergen.core.types import GenerationResult

from .schemas import HyperGenerateRequestBody, HyperGenerateResponse

logger = logging.getLogger(__name__)


class HyperGenerateClient:
    """Posts prompts to `<base_url>/api/hyper-generate`.

    Args:
        settings: Backend location and timeout
        transport: Optional custom transport (useful for testing)
    """

    def __init__(
        self,
        settings: BackendSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.timeout_seconds),
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HyperGenerateClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def hyper_generate(self, prompt: str) -> GenerationResult:
        url = self.settings.endpoint_url
        body = HyperGenerateRequestBody(prompt=prompt)

        logger.debug("HTTP request", extra={"method": "POST", "url": url})
        start = time.perf_counter()

        try:
            async with asyncio.timeout(self.settings.timeout_seconds):
                response = await self._client.post(url, json=body.model_dump())
        except (httpx.TimeoutException, TimeoutError) as exc:
            raise RequestTimeoutError(message="Request timed out") from exc
        except httpx.RequestError as exc:
            raise NetworkError(
                message="Network error. Could not reach the generation backend."
            ) from exc

        logger.debug(
            "HTTP response",
            extra={
                "method": "POST",
                "url": url,
                "status_code": response.status_code,
                "elapsed_ms": int((time.perf_counter() - start) * 1000),
            },
        )

        if not response.is_success:
            raise ProtocolError(
                message=f"Request failed: {response.status_code}",
                status_code=response.status_code,
            )

        return _decode_result(response)


def _decode_result(response: httpx.Response) -> GenerationResult:
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(
            message=GENERIC_FAILURE_MESSAGE,
            status_code=response.status_code,
        ) from exc

    if not isinstance(payload, dict):
        raise DecodeError(
            message=GENERIC_FAILURE_MESSAGE,
            status_code=response.status_code,
        )

    try:
        return HyperGenerateResponse.model_validate(payload).to_result()
    except ValidationError as exc:
        raise DecodeError(
            message=GENERIC_FAILURE_MESSAGE,
            status_code=response.status_code,
        ) from exc
