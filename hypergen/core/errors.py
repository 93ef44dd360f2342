from __future__ import annotations

from dataclasses import dataclass

GENERIC_FAILURE_MESSAGE = "Something went wrong"


@dataclass
class GenerationError(Exception):
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message


class NetworkError(GenerationError):
    """The outbound call could not complete."""


class RequestTimeoutError(NetworkError):
    """The outbound call did not complete before the configured timeout."""


class ProtocolError(GenerationError):
    """The backend answered with a non-success status."""


class DecodeError(GenerationError):
    """The backend answered, but the body is not a hyper-generate payload."""


def map_generation_error(exc: Exception) -> GenerationError:
    if isinstance(exc, GenerationError):
        return exc

    return GenerationError(message=GENERIC_FAILURE_MESSAGE)
