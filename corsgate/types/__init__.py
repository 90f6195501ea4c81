"""Type definitions for CORS decisions."""

from corsgate.types.cors import (
    CONTENT_TYPE,
    DEFAULT_MAX_AGE,
    DEFAULT_METHODS,
    WILDCARD,
    Decision,
    Policy,
    RequestKind,
    RequestView,
    Verdict,
)

__all__ = [
    "CONTENT_TYPE",
    "DEFAULT_MAX_AGE",
    "DEFAULT_METHODS",
    "WILDCARD",
    "Decision",
    "Policy",
    "RequestKind",
    "RequestView",
    "Verdict",
]
