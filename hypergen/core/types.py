from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_PROMPT = (
    "A serene cyberpunk city at sunset, with flying cars and holographic advertisements."
)


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    prompt: str
    sequence: int


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Artifacts produced by one hyper-generate call. Missing means not produced."""

    chat_response: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    audio_url: str | None = None
    image_to_video_concept: str | None = None


class LifecyclePhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class LifecycleState:
    phase: LifecyclePhase
    reason: str | None = None

    @classmethod
    def idle(cls) -> LifecycleState:
        return cls(LifecyclePhase.IDLE)

    @classmethod
    def loading(cls) -> LifecycleState:
        return cls(LifecyclePhase.LOADING)

    @classmethod
    def succeeded(cls) -> LifecycleState:
        return cls(LifecyclePhase.SUCCEEDED)

    @classmethod
    def failed(cls, reason: str) -> LifecycleState:
        return cls(LifecyclePhase.FAILED, reason)

    @property
    def is_loading(self) -> bool:
        return self.phase is LifecyclePhase.LOADING

    @property
    def is_succeeded(self) -> bool:
        return self.phase is LifecyclePhase.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.phase is LifecyclePhase.FAILED
