"""Application-wide CORS middleware."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from corsgate.core.config import settings
from corsgate.models.cors import CorsOptions
from corsgate.services.cors import evaluate
from corsgate.services.headers import apply_headers
from corsgate.services.policy import resolve_policy
from corsgate.types.cors import Decision


def render_decision(decision: Decision) -> Response:
    """Empty-body response carrying a terminal decision's status and headers."""
    return Response(status_code=decision.status_code or 200, headers=decision.headers)


class CorsMiddleware(BaseHTTPMiddleware):
    """
    Apply one CORS policy to every request.

    - Preflights are answered here and never reach a route
    - Rejected requests get 400/405 with an empty body
    - Accepted requests continue and get the CORS headers on their response
    """

    def __init__(self, app: ASGIApp, options: CorsOptions | None = None) -> None:
        super().__init__(app)
        self.policy = resolve_policy(options)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Evaluate the request and either answer it or pass it on."""
        decision = evaluate(self.policy, request)
        if not decision.proceed:
            return render_decision(decision)

        response = await call_next(request)
        apply_headers(decision, response.headers)
        return response


def setup_cors(app: FastAPI, options: CorsOptions | None = None) -> None:
    """
    Install CorsMiddleware on the app.

    Uses the CORS_* settings when no options are given.
    """
    app.add_middleware(
        CorsMiddleware,
        options=options if options is not None else settings.cors_options,
    )
