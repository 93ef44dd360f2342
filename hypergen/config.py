from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

BACKEND_URL_ENV = "BACKEND_URL"
DEFAULT_BACKEND_URL = "http://localhost:8000"
HYPER_GENERATE_PATH = "/api/hyper-generate"


class BackendSettings(BaseModel):
    """Where the generation backend lives and how long to wait for it.

    Only the base URL comes from the environment (`BACKEND_URL`); everything else
    is fixed by the backend contract or set in code.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BACKEND_URL
    path: str = HYPER_GENERATE_PATH
    timeout_seconds: float = Field(default=60.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}{self.path}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BackendSettings:
        env = os.environ if environ is None else environ
        base_url = (env.get(BACKEND_URL_ENV) or "").strip()
        if not base_url:
            return cls()
        return cls(base_url=base_url)
