"""Compute CORS response headers and status codes for a verdict."""

from __future__ import annotations

from collections.abc import MutableMapping

from fastapi import status

from corsgate.types.cors import WILDCARD, Decision, Policy, RequestKind, Verdict

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
EXPOSE_HEADERS = "Access-Control-Expose-Headers"
MAX_AGE = "Access-Control-Max-Age"
VARY = "Vary"
VARY_ORIGIN = "Accept-Encoding, Origin"

# Status per rejected verdict. Actual requests only distinguish 405 from 400.
PREFLIGHT_REJECTION_STATUS = {
    Verdict.ORIGIN_REJECTED: status.HTTP_400_BAD_REQUEST,
    Verdict.METHOD_REJECTED: status.HTTP_405_METHOD_NOT_ALLOWED,
    Verdict.HEADERS_REJECTED: status.HTTP_406_NOT_ACCEPTABLE,
}


def shared_headers(policy: Policy, origin: str | None) -> dict[str, str]:
    """
    Header block written for every accepted request.

    Explicit origin policies echo the matched origin and add Vary so caches
    key on it; wildcard policies send "*" without Vary.

    Args:
        policy: Resolved policy
        origin: Origin that passed validation

    Returns:
        Ordered header mapping
    """
    headers: dict[str, str] = {}

    if policy.is_wildcard:
        headers[ALLOW_ORIGIN] = WILDCARD
    else:
        headers[ALLOW_ORIGIN] = origin or ""
        headers[VARY] = VARY_ORIGIN

    headers[ALLOW_HEADERS] = ",".join(policy.allowed_request_headers)
    headers[MAX_AGE] = str(policy.max_age_seconds)

    if policy.allow_credentials:
        headers[ALLOW_CREDENTIALS] = "true"

    if policy.exposed_headers is not None:
        headers[EXPOSE_HEADERS] = ",".join(policy.exposed_headers)

    return headers


def emit(
    policy: Policy, kind: RequestKind, verdict: Verdict, origin: str | None
) -> Decision:
    """
    Turn a verdict into the headers, status and continuation for a response.

    Accepted preflights get the shared block plus Allow-Methods and a 204.
    Accepted actual requests get the shared block and continue downstream.
    Every rejection is terminal with an empty body and no CORS headers.
    """
    if verdict is Verdict.ACCEPTED:
        headers = shared_headers(policy, origin)
        if kind is RequestKind.PREFLIGHT:
            headers[ALLOW_METHODS] = ",".join(policy.allowed_methods)
            return Decision(kind, verdict, status.HTTP_204_NO_CONTENT, headers)
        return Decision(kind, verdict, None, headers, proceed=True)

    if kind is RequestKind.PREFLIGHT:
        return Decision(kind, verdict, PREFLIGHT_REJECTION_STATUS[verdict])

    if verdict is Verdict.METHOD_REJECTED:
        return Decision(kind, verdict, status.HTTP_405_METHOD_NOT_ALLOWED)
    return Decision(kind, verdict, status.HTTP_400_BAD_REQUEST)


def merge_vary(existing: str | None, value: str) -> str:
    """Add the tokens of ``value`` missing from an existing Vary header."""
    if not existing:
        return value

    present = {token.strip().lower() for token in existing.split(",")}
    missing = [
        token.strip()
        for token in value.split(",")
        if token.strip() and token.strip().lower() not in present
    ]
    return ", ".join([existing, *missing])


def apply_headers(decision: Decision, target: MutableMapping[str, str]) -> None:
    """
    Write a decision's headers into a response header sink.

    Vary is merged with any value already on the response; every other
    header is replaced.
    """
    for name, value in decision.headers.items():
        if name == VARY:
            target[name] = merge_vary(target.get(name), value)
        else:
            target[name] = value
