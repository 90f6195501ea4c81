"""CORS negotiation for FastAPI and Starlette applications."""

from corsgate.api.cors import RouteCors
from corsgate.middleware.cors import CorsMiddleware, setup_cors
from corsgate.models.cors import CorsOptions
from corsgate.services.cors import evaluate
from corsgate.services.policy import resolve_policy
from corsgate.types.cors import Decision, Policy, RequestKind, Verdict

__all__ = [
    "CorsMiddleware",
    "CorsOptions",
    "Decision",
    "Policy",
    "RequestKind",
    "RouteCors",
    "Verdict",
    "evaluate",
    "resolve_policy",
    "setup_cors",
]
