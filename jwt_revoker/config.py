"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_host: str = "0.0.0.0"
    jwt_revoker_port: int = 8080

    # Logout token
    jwt_claim: str = Field(default="sid", min_length=1)
    notification_encoding: Literal["form", "json", "auto"] = "auto"

    # Signature verification (off: trust is established upstream)
    jwt_verify_signature: bool = False
    jwt_verification_key: str | None = None
    jwt_algorithms: list[str] = Field(default_factory=lambda: ["RS256"])
    jwt_audience: str | None = None
    jwt_issuer: str | None = None

    # Membership backend
    backend: Literal["grpc", "redis"] = "grpc"
    krakend_host: str = "krakend"
    krakend_port: int = 1234
    rpc_timeout_seconds: float = Field(default=2.0, gt=0)
    redis_url: str = Field(default="redis://localhost:6379/0")

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("jwt_claim", mode="before")
    @classmethod
    def strip_claim_name(cls, v: str) -> str:
        """Tolerate stray whitespace around the claim name."""
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def require_key_when_verifying(self) -> "Settings":
        """Signature verification is meaningless without a key."""
        if self.jwt_verify_signature and not self.jwt_verification_key:
            raise ValueError(
                "jwt_verification_key must be set when jwt_verify_signature is enabled"
            )
        return self

    @property
    def backend_address(self) -> str:
        """``host:port`` of the shared membership service."""
        return f"{self.krakend_host}:{self.krakend_port}"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
