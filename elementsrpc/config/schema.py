"""Configuration schema using Pydantic.

Connection settings for one node, fixed at construction and shared read-only
by every call issued through a client.
"""

from typing import Any, Mapping

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from elementsrpc.utils.exceptions import InvalidArgumentError

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8332
DEFAULT_TIMEOUT_MS = 30000


class RpcConfig(BaseSettings):
    """Connection configuration for an Elements/Bitcoin node."""
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    ssl: bool = False
    ssl_strict: bool = True  # False disables certificate verification
    ssl_ca: str | None = None  # PEM text or path to a CA bundle
    user: str | None = None
    password: str | None = None
    method: str = "POST"  # HTTP verb
    timeout: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)  # milliseconds

    model_config = SettingsConfigDict(
        env_prefix="ELEMENTS_RPC_",
        frozen=True,
        extra="ignore",
    )

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        value = value.strip()
        return value or DEFAULT_HOST

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("HTTP method must not be empty")
        return value

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None, **overrides: Any) -> "RpcConfig":
        """
        Build a config from an options mapping.

        Accepts snake_case or camelCase keys (``sslStrict``, ``sslCa``); keys
        set to None fall back to defaults.
        """
        from elementsrpc.config.loader import convert_keys

        data: dict[str, Any] = {}
        if options:
            data.update(convert_keys(dict(options)))
        data.update(convert_keys(overrides))
        data = {k: v for k, v in data.items() if v is not None}
        try:
            return cls(**data)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid client configuration: {e}") from e

    @property
    def scheme(self) -> str:
        return "https" if self.ssl else "http"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0

    @property
    def has_credentials(self) -> bool:
        return bool(self.user) and bool(self.password)
