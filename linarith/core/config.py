"""
Library configuration.

Centralized configuration management with environment variables
(prefix ``LINARITH_``) and an optional ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="LINARITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_FILE: Optional[str] = None

    # Decimal arithmetic (defaults match IEEE 754 decimal64)
    DECIMAL_PRECISION: int = Field(default=16, gt=0)
    DECIMAL_ROUNDING: str = "ROUND_HALF_EVEN"

    # Arithmetic returned by get_arithmetic() without a name
    DEFAULT_ARITHMETIC: str = "float"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
