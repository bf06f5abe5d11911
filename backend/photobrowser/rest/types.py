from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol, TypeAlias


class FailureKind(StrEnum):
    NETWORK = "network"
    HTTP = "http"
    CONVERSION = "conversion"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Photo:
    id: str
    owner: str
    secret: str
    server: str
    farm: int
    title: str
    is_public: bool = True


@dataclass(frozen=True, slots=True)
class PhotosInfo:
    page: int
    pages: int
    per_page: int
    total: int
    photos: tuple[Photo, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.photos


@dataclass(frozen=True, slots=True)
class FlickrResponse:
    photos_info: PhotosInfo
    stat: str = "ok"


@dataclass(frozen=True, slots=True)
class ResponseMeta:
    url: str
    status_code: int
    reason: str
    headers: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class NetworkFailure:
    cause: BaseException
    kind: FailureKind = field(default=FailureKind.NETWORK, init=False)


@dataclass(frozen=True, slots=True)
class HttpFailure:
    status_code: int
    message: str
    kind: FailureKind = field(default=FailureKind.HTTP, init=False)


@dataclass(frozen=True, slots=True)
class ConversionFailure:
    cause: BaseException
    kind: FailureKind = field(default=FailureKind.CONVERSION, init=False)


@dataclass(frozen=True, slots=True)
class UnexpectedFailure:
    cause: BaseException
    kind: FailureKind = field(default=FailureKind.UNEXPECTED, init=False)


FailureOutcome: TypeAlias = NetworkFailure | HttpFailure | ConversionFailure | UnexpectedFailure


class RestError(Exception):
    """Base class for failures raised by the REST layer."""


class IllegalStateError(RestError, RuntimeError):
    """Raised when the client is called from a disallowed execution context."""


class ConfigurationError(RestError):
    pass


class HttpStatusError(RestError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ConversionError(RestError):
    pass


class UnexpectedRestError(RestError):
    def __init__(self, outcome: UnexpectedFailure) -> None:
        super().__init__(str(outcome.cause))
        self.outcome = outcome


class Callback(Protocol):
    def success(self, response: FlickrResponse, meta: ResponseMeta) -> None:
        """Receive a page of photos and the transport metadata."""

    def failure(self, outcome: FailureOutcome) -> None:
        """Receive the classified reason the call did not succeed."""
