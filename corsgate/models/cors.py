"""Pydantic models for CORS configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CorsOptions(BaseModel):
    """
    User-supplied CORS options.

    Every field is optional; absent fields fall back to the documented
    defaults when the options are resolved into a Policy:

        Access-Control-Allow-Origin: *
        Access-Control-Allow-Methods: GET,HEAD,PUT,PATCH,POST,DELETE
        Access-Control-Allow-Headers: Content-Type
        Access-Control-Max-Age: 5

    Content-Type is always appended to the allowed headers, so there is no
    need to list it. The credentials and expose headers are NOT SET unless
    given a value.
    """

    model_config = ConfigDict(frozen=True)

    origins: str | list[str] | None = None
    methods: list[str] | None = None
    allowed_headers: list[str] | None = None
    max_age: int | None = Field(default=None, ge=0)  # seconds
    allow_credentials: bool | None = None
    exposed_headers: list[str] | None = None
