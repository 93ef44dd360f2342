from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from .capabilities import Clipboard, NativeShare, ShareCancelled, ShareData

logger = logging.getLogger(__name__)

SHARE_TITLE = "AI Power"
SHARE_LABEL = "AI Power • Hyper-Generate"
COPIED_NOTICE = "Share text copied to clipboard!"
COPY_FAILED_NOTICE = "Copy failed. You can share the page URL!"

Notify = Callable[[str], None]


def compose_share_data(prompt: str, page_url: str) -> ShareData:
    return ShareData(
        title=SHARE_TITLE,
        text=f"{SHARE_LABEL}\nPrompt: {prompt}",
        url=page_url,
    )


def clipboard_text(data: ShareData) -> str:
    return f"{data.text}\n{data.url}"


class ShareStrategy(Protocol):
    name: str

    async def share(self, data: ShareData) -> None: ...


class NativeShareStrategy:
    """Hands the message to the platform share sheet.

    Cancellation and platform failures both count as done.
    """

    name = "native"

    def __init__(self, native_share: NativeShare) -> None:
        self._native_share = native_share

    async def share(self, data: ShareData) -> None:
        try:
            await self._native_share.share(data)
        except ShareCancelled:
            logger.debug("Share sheet dismissed")
        except Exception as exc:
            logger.debug("Native share failed", extra={"error": str(exc)})


class ClipboardShareStrategy:
    name = "clipboard"

    def __init__(self, clipboard: Clipboard, notify: Notify) -> None:
        self._clipboard = clipboard
        self._notify = notify

    async def share(self, data: ShareData) -> None:
        try:
            await self._clipboard.write_text(clipboard_text(data))
        except Exception as exc:
            logger.warning("Clipboard write failed", extra={"error": str(exc)})
            self._notify(COPY_FAILED_NOTICE)
            return

        self._notify(COPIED_NOTICE)


def select_share_strategy(
    native_share: NativeShare | None,
    clipboard: Clipboard,
    notify: Notify,
) -> ShareStrategy:
    if native_share is not None:
        return NativeShareStrategy(native_share)
    return ClipboardShareStrategy(clipboard, notify)


class ShareAction:
    def __init__(self, strategy: ShareStrategy) -> None:
        self.strategy = strategy

    async def share(self, prompt: str, page_url: str) -> None:
        await self.strategy.share(compose_share_data(prompt, page_url))
