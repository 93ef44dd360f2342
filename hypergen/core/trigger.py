from __future__ import annotations

import asyncio
import logging

from .controller import RequestController
from .types import DEFAULT_PROMPT

logger = logging.getLogger(__name__)


class LifecycleTrigger:
    """Runs one generation with the default prompt when the component starts.

    Later calls to `start` are no-ops; everything after the first run is
    user-initiated through the controller.
    """

    def __init__(
        self,
        controller: RequestController,
        default_prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self._controller = controller
        self.default_prompt = default_prompt
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def start(self) -> asyncio.Task[None] | None:
        if self._fired:
            return None

        self._fired = True
        logger.info("Running startup generation with the default prompt")
        return self._controller.generate(self.default_prompt)
