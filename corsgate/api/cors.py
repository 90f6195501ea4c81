"""Per-route CORS policies for FastAPI routes."""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.routing import APIRoute

from corsgate.middleware.cors import render_decision
from corsgate.models.cors import CorsOptions
from corsgate.services.cors import evaluate
from corsgate.services.headers import apply_headers
from corsgate.services.policy import resolve_policy
from corsgate.types.cors import Policy


def cors_route_class(policy: Policy) -> type[APIRoute]:
    """
    Build an APIRoute subclass that applies ``policy`` around its handler.

    The CORS headers are written onto whatever response the handler
    produces, including Response objects returned directly by the endpoint.
    """

    class CorsRoute(APIRoute):
        def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
            handler = super().get_route_handler()

            async def cors_handler(request: Request) -> Response:
                decision = evaluate(policy, request)
                if not decision.proceed:
                    return render_decision(decision)

                response = await handler(request)
                apply_headers(decision, response.headers)
                return response

            return cors_handler

    return CorsRoute


class RouteCors:
    """
    CORS policy bound to individual routes.

    Routes registered on ``router()`` are evaluated against the policy before
    their handler runs. Register ``preflight`` as the OPTIONS handler of each
    path so preflights reach the policy:

        auth_cors = RouteCors(CorsOptions(
            origins=["https://www.cerebrus.dev"],
            methods=["POST"],
            allowed_headers=["X-TOKEN"],
        ))
        router = auth_cors.router()

        @router.post("/auth")
        async def auth(): ...

        router.add_api_route("/auth", auth_cors.preflight, methods=["OPTIONS"])
        app.include_router(router)
    """

    def __init__(self, options: CorsOptions | None = None) -> None:
        self.policy = resolve_policy(options)

    def route_class(self) -> type[APIRoute]:
        return cors_route_class(self.policy)

    def router(self, **kwargs: Any) -> APIRouter:
        """APIRouter whose routes all use this policy."""
        return APIRouter(route_class=self.route_class(), **kwargs)

    async def preflight(self, request: Request) -> Response:
        """OPTIONS endpoint answering preflights for the route."""
        return render_decision(evaluate(self.policy, request))
