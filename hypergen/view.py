from __future__ import annotations

from typing import Any

from hypergen.core.store import ResultStore
from hypergen.core.types import DEFAULT_PROMPT, LifecycleState

EMPTY_TEXT = "—"
WAITING_TEXT = "Waiting…"
CHAT_PENDING_TEXT = "Generating description…"
CONCEPT_PENDING_TEXT = "Composing motion blueprint…"


def render_view(state: LifecycleState, store: ResultStore) -> dict[str, Any]:
    result, error = store.snapshot()
    loading = state.is_loading

    chat = result.chat_response if result else None
    concept = result.image_to_video_concept if result else None

    if loading and result is None:
        chat_display = CHAT_PENDING_TEXT
    else:
        chat_display = chat or EMPTY_TEXT

    if concept:
        concept_display = concept
    elif loading:
        concept_display = CONCEPT_PENDING_TEXT
    else:
        concept_display = EMPTY_TEXT

    return {
        "status": state.phase.value,
        "loading": loading,
        "failed": state.is_failed,
        "can_generate": not loading,
        "error": error,
        "default_prompt": DEFAULT_PROMPT,
        "slots": {
            "chat_response": _slot(chat, chat_display),
            "image_url": _media_slot(result.image_url if result else None),
            "video_url": _media_slot(result.video_url if result else None),
            "audio_url": _media_slot(result.audio_url if result else None),
            "image_to_video_concept": _slot(concept, concept_display),
        },
    }


def _media_slot(url: str | None) -> dict[str, Any]:
    return _slot(url, url or WAITING_TEXT)


def _slot(value: str | None, display: str) -> dict[str, Any]:
    return {"value": value, "display": display}
