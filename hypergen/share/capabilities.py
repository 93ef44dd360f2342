from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ShareData:
    title: str
    text: str
    url: str


class ShareCancelled(Exception):
    """The user dismissed the platform share sheet."""


class ClipboardError(Exception):
    """Writing to the clipboard failed."""


class NativeShare(Protocol):
    async def share(self, data: ShareData) -> None: ...


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


class UnavailableClipboard:
    """Clipboard for hosts without one; every write fails."""

    async def write_text(self, text: str) -> None:
        raise ClipboardError("No clipboard is available on this host.")
