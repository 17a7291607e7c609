"""Service configuration loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ProxyConfig(BaseSettings):
    """Outbound HTTP proxy settings."""

    model_config = {"env_prefix": "PROXY_", "coerce_numbers_to_str": True}

    status: Literal["active", "inactive"] = Field(
        default="inactive",
        description="Route outbound requests through the proxy when 'active'",
    )
    host: str = Field(default="127.0.0.1", description="Proxy host name or IP")
    port: str = Field(default="10800", description="Proxy port")
    username: str = Field(default="", description="Proxy username (optional)")
    password: str = Field(
        default="",
        repr=False,
        description="Proxy password (optional, never logged)",
    )


class AppConfig(BaseSettings):
    """Top-level service configuration."""

    model_config = {"env_prefix": "APP_"}

    port: int = Field(default=1331, description="HTTP port the service listens on")
    log_level: Literal["silent", "error", "warn", "info", "debug", "verbose"] = Field(
        default="info",
        description="Minimum log level ('silent' disables logging)",
    )
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines (False for a human-friendly console)",
    )
    proxy: ProxyConfig = Field(default_factory=ProxyConfig)
