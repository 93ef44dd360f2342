from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hypergen.core.types import DEFAULT_PROMPT


class GenerateRequest(BaseModel):
    prompt: str = DEFAULT_PROMPT

    model_config = ConfigDict(extra="ignore")


class ShareRequest(BaseModel):
    prompt: str
    page_url: str | None = None

    model_config = ConfigDict(extra="ignore")


class ShareResponse(BaseModel):
    strategy: str
    notices: list[str]
