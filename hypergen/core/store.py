from __future__ import annotations

from .types import GenerationResult


class ResultStore:
    """Latest successful result and latest error, as read by the display surface.

    `set_result` always replaces the whole result; fields are never merged across
    requests.
    """

    def __init__(self) -> None:
        self._last_result: GenerationResult | None = None
        self._last_error: str | None = None

    @property
    def last_result(self) -> GenerationResult | None:
        return self._last_result

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def set_result(self, result: GenerationResult) -> None:
        self._last_result = result

    def set_error(self, error: str) -> None:
        self._last_error = error

    def clear_error(self) -> None:
        self._last_error = None

    def snapshot(self) -> tuple[GenerationResult | None, str | None]:
        return self._last_result, self._last_error
