"""Resolve user-supplied CORS options into an immutable Policy."""

from __future__ import annotations

from typing import Literal

from structlog import get_logger

from corsgate.models.cors import CorsOptions
from corsgate.types.cors import (
    CONTENT_TYPE,
    DEFAULT_MAX_AGE,
    DEFAULT_METHODS,
    WILDCARD,
    Policy,
)

logger = get_logger()


def _dedupe(items: list[str]) -> tuple[str, ...]:
    """Drop exact duplicates, keeping first occurrence order."""
    return tuple(dict.fromkeys(items))


def resolve_policy(options: CorsOptions | None = None) -> Policy:
    """
    Build the Policy for one configured instance.

    Absent fields take their documented defaults. Content-Type is always
    appended to the allowed request headers unless already listed. A single
    origin string other than "*" is treated as a one-element origin set; an
    empty origin or method list allows nothing.

    Args:
        options: Caller configuration, or None for all defaults

    Returns:
        Resolved, read-only Policy
    """
    if options is None:
        options = CorsOptions()

    origins = options.origins
    if origins is None or origins == "" or origins == WILDCARD:
        allowed_origins: Literal["*"] | tuple[str, ...] = WILDCARD
    elif isinstance(origins, str):
        allowed_origins = (origins,)
    else:
        allowed_origins = _dedupe(origins)

    methods = DEFAULT_METHODS if options.methods is None else _dedupe(options.methods)
    allowed_headers = _dedupe([*(options.allowed_headers or []), CONTENT_TYPE])

    policy = Policy(
        allowed_origins=allowed_origins,
        allowed_methods=methods,
        allowed_request_headers=allowed_headers,
        max_age_seconds=DEFAULT_MAX_AGE if options.max_age is None else options.max_age,
        allow_credentials=options.allow_credentials,
        exposed_headers=(
            None if options.exposed_headers is None else tuple(options.exposed_headers)
        ),
    )

    logger.debug(
        "cors_policy_resolved",
        origins=policy.allowed_origins,
        methods=policy.allowed_methods,
        allowed_headers=policy.allowed_request_headers,
        max_age=policy.max_age_seconds,
    )

    return policy
