"""Configuration constants and settings using Pydantic Settings."""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Token length bounds (inclusive)
MIN_LENGTH = 1
MAX_LENGTH = 1000
DEFAULT_LENGTH = 6

TokenLength = Annotated[int, Field(ge=MIN_LENGTH, le=MAX_LENGTH)]


class Settings(BaseSettings):
    """Harness settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OTPGEN_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Benchmark Configuration
    benchmark_iterations: int = Field(default=10000, gt=0, description="Tokens generated per benchmarked length")
    benchmark_lengths: list[TokenLength] = Field(
        default_factory=lambda: [6, 100], description="Token lengths to benchmark"
    )


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
