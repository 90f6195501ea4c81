"""HTTP middleware for cross-cutting concerns."""

from corsgate.middleware.cors import CorsMiddleware, render_decision, setup_cors

__all__ = [
    "CorsMiddleware",
    "render_decision",
    "setup_cors",
]
