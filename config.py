"""
Configuration for the Thumbor URL builder service.

Settings are pydantic models populated from environment variables and
cached by get_settings().
"""

import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from core.constants import (
    APIConstants,
    ErrorMessages,
    SystemConstants,
    ThumborConstants,
)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


class ThumborConfig(BaseModel):
    """Image service connection settings"""

    server_url: str = ThumborConstants.DEFAULT_SERVER_URL
    security_key: Optional[str] = Field(None, description="Signing secret; unset for unsafe URLs")


class APIConfig(BaseModel):
    """HTTP API settings"""

    host: str = APIConstants.DEFAULT_HOST
    port: int = Field(APIConstants.DEFAULT_PORT, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class SystemConfig(BaseModel):
    """Logging and debug settings"""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in SystemConstants.VALID_LOG_LEVELS:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(
                    level=v, levels=", ".join(SystemConstants.VALID_LOG_LEVELS)
                )
            )
        return level


class Settings(BaseModel):
    """Application settings"""

    environment: str = "development"
    thumbor: ThumborConfig = Field(default_factory=ThumborConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables"""
        return cls(
            environment=os.getenv("ENVIRONMENT", "development"),
            thumbor=ThumborConfig(
                server_url=os.getenv("THUMBOR_SERVER_URL", ThumborConstants.DEFAULT_SERVER_URL),
                security_key=os.getenv("THUMBOR_SECURITY_KEY"),
            ),
            api=APIConfig(
                host=os.getenv("API_HOST", APIConstants.DEFAULT_HOST),
                port=int(os.getenv("API_PORT", str(APIConstants.DEFAULT_PORT))),
                cors_enabled=_env_bool("API_CORS_ENABLED", True),
                cors_origins=_env_list("API_CORS_ORIGINS", ["*"]),
            ),
            system=SystemConfig(
                log_level=os.getenv("LOG_LEVEL", SystemConstants.LOG_LEVEL_DEFAULT),
                debug=_env_bool("DEBUG", False),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with the security key redacted"""
        data = self.model_dump()
        if data["thumbor"]["security_key"] is not None:
            data["thumbor"]["security_key"] = SystemConstants.REDACTED
        return data


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings"""
    return Settings.from_env()
