"""
Configuration for the Raster Workbench service.

Settings are pydantic models filled from ``RASTER_``-prefixed environment
variables, e.g. ``RASTER_LOG_LEVEL=DEBUG`` or ``RASTER_ALLOW_UPSCALE=true``.
"""

import os
from functools import lru_cache
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import APIConstants, ImageConstants

ENV_PREFIX = "RASTER_"


def _env(key: str, default: Any) -> Any:
    return os.getenv(f"{ENV_PREFIX}{key}", default)


def _env_list(key: str, default: List[str]) -> List[str]:
    raw = os.getenv(f"{ENV_PREFIX}{key}")
    if raw is None:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


class _EnvModel(BaseModel):
    # defaults come from env strings and need coercion
    model_config = ConfigDict(validate_default=True)


class SystemSettings(_EnvModel):
    log_level: str = Field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    debug: bool = Field(default_factory=lambda: _env("DEBUG", "false"))

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class APISettings(_EnvModel):
    host: str = Field(default_factory=lambda: _env("HOST", APIConstants.DEFAULT_HOST))
    port: int = Field(default_factory=lambda: _env("PORT", APIConstants.DEFAULT_PORT))
    cors_enabled: bool = Field(default_factory=lambda: _env("CORS_ENABLED", "true"))
    cors_origins: List[str] = Field(default_factory=lambda: _env_list("CORS_ORIGINS", ["*"]))


class ImageSettings(_EnvModel):
    thumbnail_width: int = Field(
        default_factory=lambda: _env("THUMBNAIL_WIDTH", ImageConstants.DEFAULT_THUMBNAIL_WIDTH),
        ge=ImageConstants.MIN_THUMBNAIL_WIDTH,
        le=ImageConstants.MAX_THUMBNAIL_WIDTH,
    )
    preview_format: str = Field(default_factory=lambda: _env("PREVIEW_FORMAT", "JPEG"))
    allow_upscale: bool = Field(default_factory=lambda: _env("ALLOW_UPSCALE", "false"))
    workspace_dir: str = Field(default_factory=lambda: _env("WORKSPACE_DIR", os.getcwd()))

    @field_validator("preview_format")
    @classmethod
    def check_preview_format(cls, v: str) -> str:
        fmt = v.upper()
        if fmt not in ("JPEG", "PNG"):
            raise ValueError(f"Preview format must be JPEG or PNG, got {v}")
        return fmt


class Settings(BaseModel):
    """Top-level settings"""

    environment: str = Field(default_factory=lambda: _env("ENVIRONMENT", "development"))
    system: SystemSettings = Field(default_factory=SystemSettings)
    api: APISettings = Field(default_factory=APISettings)
    image: ImageSettings = Field(default_factory=ImageSettings)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process"""
    return Settings()
