from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    allowed_domains: Annotated[list[str], NoDecode] = ["example.com"]  # Comma separated in ALLOWED_DOMAINS
    rag_api_url: str = "http://localhost:8080"  # Base URL of the Headless RAG API
    rag_api_key: str = ""  # Sent upstream as X-API-Key
    session_secret: str = "dev-secret-change-in-production"  # Loaded but not used for signing
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    frontend_url: str = "http://localhost:5173"  # Only origin allowed by CORS
    environment: str = "development"
    debug: bool = False
    session_ttl_seconds: int = 7 * 24 * 60 * 60
    session_sweep_interval_seconds: float = 60 * 60
    upstream_timeout: float = 300.0  # Read/write/pool timeout for upstream calls
    upstream_connect_timeout: float = 10.0
    stream_buffer_chunks: int = 1  # Chunks in flight between upstream reader and client writer

    model_config = {
        "env_file": [".env"],
        "extra": "ignore",
    }

    @field_validator("allowed_domains", mode="before")
    @classmethod
    def split_domains(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [domain.strip() for domain in value.split(",") if domain.strip()]
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"
