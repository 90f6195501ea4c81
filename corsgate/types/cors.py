"""CORS decision types.

Policy is resolved once per configured instance and shared read-only between
requests. RequestKind, Verdict and Decision are built per request and dropped
once the response is finalized.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final, Literal, Protocol

WILDCARD: Final = "*"

DEFAULT_METHODS: Final = ("GET", "HEAD", "PUT", "PATCH", "POST", "DELETE")
DEFAULT_MAX_AGE: Final = 5
CONTENT_TYPE: Final = "Content-Type"


class RequestView(Protocol):
    """Read-only view of an incoming request.

    Header lookup must be case-insensitive. Starlette's ``Request`` satisfies
    this protocol as-is.
    """

    @property
    def method(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...


@dataclass(frozen=True)
class Policy:
    """Resolved CORS policy for one protected route or application."""

    allowed_origins: Literal["*"] | tuple[str, ...]
    allowed_methods: tuple[str, ...]
    allowed_request_headers: tuple[str, ...]
    max_age_seconds: int
    allow_credentials: bool | None = None
    exposed_headers: tuple[str, ...] | None = None

    @property
    def is_wildcard(self) -> bool:
        """True when any origin is allowed."""
        return self.allowed_origins == WILDCARD


class RequestKind(StrEnum):
    """How a request takes part in the CORS protocol."""

    PREFLIGHT = "preflight"
    ACTUAL = "actual"


class Verdict(StrEnum):
    """Outcome of validating a request against a policy.

    HEADERS_REJECTED only arises for preflight requests.
    """

    ACCEPTED = "accepted"
    ORIGIN_REJECTED = "origin_rejected"
    METHOD_REJECTED = "method_rejected"
    HEADERS_REJECTED = "headers_rejected"


@dataclass(frozen=True)
class Decision:
    """Headers and status to write for one request.

    A ``status_code`` of None leaves the status to the downstream handler.
    ``proceed`` tells the host whether to continue to the next handler; when
    False the response is terminal with an empty body.
    """

    kind: RequestKind
    verdict: Verdict
    status_code: int | None
    headers: dict[str, str] = field(default_factory=dict)
    proceed: bool = False

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED
