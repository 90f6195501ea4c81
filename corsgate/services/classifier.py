"""Preflight vs. actual request classification."""

from corsgate.types.cors import RequestKind, RequestView

PREFLIGHT_METHOD = "OPTIONS"


def is_preflight(method: str) -> bool:
    """OPTIONS is the only preflight method; CORS request headers are not consulted."""
    return method == PREFLIGHT_METHOD


def classify(request: RequestView) -> RequestKind:
    return RequestKind.PREFLIGHT if is_preflight(request.method) else RequestKind.ACTUAL
