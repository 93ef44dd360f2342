from __future__ import annotations

import pytest

from hypergen.share.action import (
    COPIED_NOTICE,
    COPY_FAILED_NOTICE,
    ClipboardShareStrategy,
    NativeShareStrategy,
    ShareAction,
    compose_share_data,
    select_share_strategy,
)
from hypergen.share.capabilities import (
    ClipboardError,
    ShareCancelled,
    ShareData,
    UnavailableClipboard,
)


class FakeNativeShare:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[ShareData] = []

    async def share(self, data: ShareData) -> None:
        self.calls.append(data)
        if self.error is not None:
            raise self.error


class FakeClipboard:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.writes: list[str] = []

    async def write_text(self, text: str) -> None:
        self.writes.append(text)
        if self.error is not None:
            raise self.error


def test_compose_share_data():
    data = compose_share_data("neon rain", "https://app.test/")

    assert data.title == "AI Power"
    assert data.text == "AI Power • Hyper-Generate\nPrompt: neon rain"
    assert data.url == "https://app.test/"


def test_strategy_selection_probes_native_capability():
    clipboard = FakeClipboard()

    native = select_share_strategy(FakeNativeShare(), clipboard, lambda notice: None)
    fallback = select_share_strategy(None, clipboard, lambda notice: None)

    assert isinstance(native, NativeShareStrategy)
    assert isinstance(fallback, ClipboardShareStrategy)


@pytest.mark.anyio
async def test_native_share_receives_composed_message():
    native = FakeNativeShare()
    clipboard = FakeClipboard()
    notices: list[str] = []
    action = ShareAction(select_share_strategy(native, clipboard, notices.append))

    await action.share("neon rain", "https://app.test/")

    assert native.calls == [compose_share_data("neon rain", "https://app.test/")]
    assert clipboard.writes == []
    assert notices == []


@pytest.mark.anyio
@pytest.mark.parametrize("error", [ShareCancelled(), RuntimeError("share sheet crashed")])
async def test_native_share_never_raises(error):
    notices: list[str] = []
    clipboard = FakeClipboard()
    action = ShareAction(
        select_share_strategy(FakeNativeShare(error), clipboard, notices.append)
    )

    await action.share("p", "https://app.test/")

    assert notices == []
    assert clipboard.writes == []


@pytest.mark.anyio
async def test_clipboard_fallback_writes_once_and_confirms():
    clipboard = FakeClipboard()
    notices: list[str] = []
    action = ShareAction(select_share_strategy(None, clipboard, notices.append))

    await action.share("neon rain", "https://app.test/")

    assert clipboard.writes == [
        "AI Power • Hyper-Generate\nPrompt: neon rain\nhttps://app.test/"
    ]
    assert notices == [COPIED_NOTICE]


@pytest.mark.anyio
async def test_clipboard_failure_suggests_manual_share():
    clipboard = FakeClipboard(ClipboardError("denied"))
    notices: list[str] = []
    action = ShareAction(select_share_strategy(None, clipboard, notices.append))

    await action.share("p", "https://app.test/")

    assert len(clipboard.writes) == 1
    assert notices == [COPY_FAILED_NOTICE]


@pytest.mark.anyio
async def test_unavailable_clipboard_always_fails():
    with pytest.raises(ClipboardError):
        await UnavailableClipboard().write_text("anything")
