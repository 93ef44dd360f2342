from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hypergen.core.types import GenerationResult


class HyperGenerateRequestBody(BaseModel):
    prompt: str


class HyperGenerateResponse(BaseModel):
    chat_response: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    audio_url: str | None = None
    image_to_video_concept: str | None = None

    model_config = ConfigDict(extra="ignore")

    def to_result(self) -> GenerationResult:
        return GenerationResult(
            chat_response=self.chat_response,
            image_url=self.image_url,
            video_url=self.video_url,
            audio_url=self.audio_url,
            image_to_video_concept=self.image_to_video_concept,
        )
