from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from .errors import GenerationError, map_generation_error
from .store import ResultStore
from .types import GenerationRequest, GenerationResult, LifecycleState

logger = logging.getLogger(__name__)


class GenerationBackend(Protocol):
    async def hyper_generate(self, prompt: str) -> GenerationResult: ...


@dataclass(frozen=True, slots=True)
class Completion:
    sequence: int
    result: GenerationResult | None = None
    error: GenerationError | None = None


class RequestController:
    """Owns the lifecycle state and is the only writer of the result store.

    Every `generate` call gets a sequence number. When a call completes, its outcome
    is applied only if no newer call has been issued since; older outcomes are
    dropped.
    """

    def __init__(
        self,
        backend: GenerationBackend,
        store: ResultStore | None = None,
    ) -> None:
        self._backend = backend
        self.store = store if store is not None else ResultStore()
        self._state = LifecycleState.idle()
        self._sequence = 0
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def generate(self, prompt: str) -> asyncio.Task[None]:
        loop = asyncio.get_running_loop()

        self._sequence += 1
        request = GenerationRequest(prompt=prompt, sequence=self._sequence)

        self._state = LifecycleState.loading()
        self.store.clear_error()
        logger.info("Generation started", extra={"sequence": request.sequence})

        task = loop.create_task(self._run(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def aclose(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _run(self, request: GenerationRequest) -> None:
        try:
            result = await self._backend.hyper_generate(request.prompt)
        except GenerationError as exc:
            completion = Completion(sequence=request.sequence, error=exc)
        except Exception as exc:
            logger.exception(
                "Unexpected error during generation",
                extra={"sequence": request.sequence},
            )
            completion = Completion(
                sequence=request.sequence,
                error=map_generation_error(exc),
            )
        else:
            completion = Completion(sequence=request.sequence, result=result)

        self._apply(completion)

    def _apply(self, completion: Completion) -> None:
        if completion.sequence != self._sequence:
            logger.warning(
                "Discarding stale generation outcome",
                extra={"sequence": completion.sequence, "latest": self._sequence},
            )
            return

        if completion.error is not None:
            reason = completion.error.message
            self.store.set_error(reason)
            self._state = LifecycleState.failed(reason)
            logger.warning(
                "Generation failed",
                extra={"sequence": completion.sequence, "reason": reason},
            )
            return

        if completion.result is None:
            raise ValueError("Completion must carry a result or an error.")

        self.store.set_result(completion.result)
        self._state = LifecycleState.succeeded()
        logger.info("Generation succeeded", extra={"sequence": completion.sequence})
