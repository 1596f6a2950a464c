"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Trip data ===
    data_root: str = Field(
        default="../data",
        description="Base URL or directory holding {trip_id}/meta.json"
    )
    serve_data: bool = Field(
        default=True,
        description="Mount a local data root at /data"
    )

    # === Fetching ===
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout in seconds"
    )
    trip_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Give up on days still loading after this many seconds"
    )
    max_concurrent_fetches: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on simultaneous day fetches (unset = all at once)"
    )

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    @field_validator('data_root')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """'https://host/data/' -> 'https://host/data'"""
        stripped = v.rstrip("/")
        return stripped or v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
