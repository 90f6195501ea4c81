"""Application configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from corsgate.models.cors import CorsOptions


def _split(value: str) -> list[str]:
    """Split a comma-separated env value, dropping empty entries."""
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Application
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    # CORS (comma-separated lists)
    cors_origins: str = "*"
    cors_methods: str = "GET,HEAD,PUT,PATCH,POST,DELETE"
    cors_allowed_headers: str = ""
    cors_max_age: int = 5
    cors_allow_credentials: bool | None = None
    cors_exposed_headers: str | None = None

    @field_validator("cors_max_age")
    @classmethod
    def validate_max_age(cls, v: int) -> int:
        """Max age is advertised to browsers and cannot be negative."""
        if v < 0:
            raise ValueError("CORS_MAX_AGE must be a non-negative number of seconds")
        return v

    @property
    def cors_options(self) -> CorsOptions:
        """Build CorsOptions from the CORS_* env vars."""
        origins = _split(self.cors_origins)
        return CorsOptions(
            origins=None if not origins or origins == ["*"] else origins,
            methods=_split(self.cors_methods) or None,
            allowed_headers=_split(self.cors_allowed_headers),
            max_age=self.cors_max_age,
            allow_credentials=self.cors_allow_credentials,
            exposed_headers=(
                _split(self.cors_exposed_headers)
                if self.cors_exposed_headers is not None
                else None
            ),
        )


settings = Settings()
