"""Validate a request's origin, method and headers against a CORS policy."""

from __future__ import annotations

from corsgate.types.cors import WILDCARD, Policy, RequestKind, RequestView, Verdict

ORIGIN = "Origin"
HOST = "Host"
REQUEST_METHOD = "Access-Control-Request-Method"
REQUEST_HEADERS = "Access-Control-Request-Headers"


def origin_allowed(policy: Policy, origin: str | None) -> bool:
    """Wildcard policies allow anything; otherwise the match is exact and case-sensitive."""
    if policy.is_wildcard:
        return True
    return origin is not None and origin in policy.allowed_origins


def method_allowed(policy: Policy, method: str | None) -> bool:
    return method is not None and method in policy.allowed_methods


def headers_allowed(policy: Policy, requested: str | None) -> bool:
    """
    Check a comma-separated Access-Control-Request-Headers value.

    Names are compared case-insensitively after trimming whitespace. Empty
    tokens are ignored, and a missing or empty value always passes.
    """
    if not requested:
        return True

    allowed = {name.strip().lower() for name in policy.allowed_request_headers}
    tokens = (token.strip().lower() for token in requested.split(","))
    return all(token in allowed for token in tokens if token)


def declared_origin(request: RequestView, kind: RequestKind) -> str | None:
    """
    Origin string the request is checked against.

    Preflights use the Origin header, falling back to "*" when absent.
    Actual requests use the Host header; see DESIGN.md for why Origin is
    not consulted there.
    """
    if kind is RequestKind.PREFLIGHT:
        return request.headers.get(ORIGIN, WILDCARD)
    return request.headers.get(HOST)


def validate_preflight(policy: Policy, request: RequestView) -> Verdict:
    """
    Validate an OPTIONS preflight.

    Checks run origin, then method, then headers; the first failure wins.
    """
    if not origin_allowed(policy, declared_origin(request, RequestKind.PREFLIGHT)):
        return Verdict.ORIGIN_REJECTED

    method = request.headers.get(REQUEST_METHOD, request.method)
    if not method_allowed(policy, method):
        return Verdict.METHOD_REJECTED

    if not headers_allowed(policy, request.headers.get(REQUEST_HEADERS)):
        return Verdict.HEADERS_REJECTED

    return Verdict.ACCEPTED


def validate_actual(policy: Policy, request: RequestView) -> Verdict:
    """
    Validate a non-preflight request. Request headers are not inspected.

    Unlike preflights, a disallowed method is reported ahead of a disallowed
    origin, so a request failing both gets 405.
    """
    if not method_allowed(policy, request.method):
        return Verdict.METHOD_REJECTED

    if not origin_allowed(policy, declared_origin(request, RequestKind.ACTUAL)):
        return Verdict.ORIGIN_REJECTED

    return Verdict.ACCEPTED
