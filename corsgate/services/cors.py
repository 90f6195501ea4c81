"""CORS decision engine: classify, validate, emit."""

from __future__ import annotations

from structlog import get_logger

from corsgate.services.classifier import classify
from corsgate.services.headers import emit
from corsgate.services.validator import (
    declared_origin,
    validate_actual,
    validate_preflight,
)
from corsgate.types.cors import Decision, Policy, RequestKind, RequestView

logger = get_logger()


def evaluate(policy: Policy, request: RequestView) -> Decision:
    """
    Decide how to answer one request under a policy.

    Pure apart from logging; never raises for any request shape. Callers
    write the returned headers and status, then continue to the next handler
    only if ``decision.proceed`` is set.

    Args:
        policy: Resolved policy for the route or application
        request: Incoming request view

    Returns:
        Decision with headers, status code and continuation flag
    """
    kind = classify(request)
    origin = declared_origin(request, kind)

    if kind is RequestKind.PREFLIGHT:
        verdict = validate_preflight(policy, request)
    else:
        verdict = validate_actual(policy, request)

    decision = emit(policy, kind, verdict, origin)

    if not decision.accepted:
        logger.info(
            "cors_preflight_rejected"
            if kind is RequestKind.PREFLIGHT
            else "cors_request_rejected",
            verdict=verdict.value,
            method=request.method,
            origin=origin,
            status_code=decision.status_code,
        )

    return decision
