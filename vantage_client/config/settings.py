"""Client configuration and environment helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_RAPID_API_BASE_URL = "https://alpha-vantage.p.rapidapi.com/query"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ClientSettings(BaseSettings):
    """Configuration options read by :func:`vantage_client.get_api_client` and the CLI."""

    alphavantage_api_key: str | None = Field(default=None, description="Alpha Vantage or RapidAPI key")
    alphavantage_provider: Literal["alpha_vantage", "rapid_api"] = Field(default="alpha_vantage")
    alphavantage_base_url: str = Field(default=DEFAULT_BASE_URL)
    rapidapi_base_url: str = Field(default=DEFAULT_RAPID_API_BASE_URL)

    http_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Timeout applied to clients built here")
    log_level: str = Field(default="INFO")

    telemetry_enabled: bool = Field(default=False)
    telemetry_service_name: str = Field(default="vantage-client")
    telemetry_otlp_endpoint: str | None = Field(default=None)
    telemetry_otlp_insecure: bool = Field(default=True)
    telemetry_sample_ratio: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a sanitized dict for logging purposes."""

        hidden = {"alphavantage_api_key"}
        return {k: ("***" if k in hidden and v else v) for k, v in self.model_dump().items()}


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> ClientSettings:
    """Return cached client settings with optional overrides."""

    if overrides:
        return ClientSettings(**overrides)
    return ClientSettings()


__all__ = [
    "ClientSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_RAPID_API_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "get_settings",
]
