"""Server configuration via environment variables."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


def _is_env_placeholder(value: str) -> bool:
    """Return True when *value* looks like an unresolved shell placeholder."""
    if value.startswith("${") and value.endswith("}"):
        inner = value[2:-1].strip()
        if ":-" in inner:
            inner = inner.split(":-", 1)[0].strip()
        return bool(inner) and all(ch.isalnum() or ch == "_" for ch in inner)
    if value.startswith("$"):
        inner = value[1:].strip()
        return bool(inner) and all(ch.isalnum() or ch == "_" for ch in inner)
    return False


def _env_str(name: str, default: str = "") -> str:
    """Read an env var, treating blanks and ``${NAME}`` placeholders as unset."""
    value = os.getenv(name, "").strip()
    if not value or _is_env_placeholder(value):
        return default
    return value


class ServerConfig(BaseModel):
    """Runtime configuration resolved from environment."""

    brand_bible_url: str = Field(default="")
    brand_bible_token: str = Field(default="")
    brand_color_timeout_seconds: float = Field(default=2.0)
    default_width: int = Field(default=1920)
    default_height: int = Field(default=1080)
    infra_mutations_enabled: bool = Field(default=False)
    infra_admin_token: str = Field(default="")

    @field_validator("brand_bible_url")
    @classmethod
    def validate_brand_bible_url(cls, value: str) -> str:
        url = value.strip()
        if url and not url.startswith(("http://", "https://")):
            raise ValueError(f"brand_bible_url must be an http(s) URL, got '{value}'")
        return url

    @field_validator("brand_color_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("brand_color_timeout_seconds must be > 0")
        return value

    @field_validator("default_width", "default_height")
    @classmethod
    def validate_canvas(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Canvas dimensions must be >= 1")
        return value

    @property
    def brand_provider_enabled(self) -> bool:
        return bool(self.brand_bible_url)

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build config from environment variables."""
        return cls(
            brand_bible_url=_env_str("BRAND_BIBLE_URL"),
            brand_bible_token=_env_str("BRAND_BIBLE_TOKEN"),
            brand_color_timeout_seconds=float(_env_str("BRAND_COLOR_TIMEOUT", "2.0")),
            default_width=int(_env_str("MOTION_DEFAULT_WIDTH", "1920")),
            default_height=int(_env_str("MOTION_DEFAULT_HEIGHT", "1080")),
            infra_mutations_enabled=_env_str("INFRA_MUTATIONS_ENABLED", "false").lower() in ("1", "true", "yes"),
            infra_admin_token=_env_str("INFRA_ADMIN_TOKEN"),
        )


_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Return the global config singleton, creating it on first access."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
        logger.info(
            "Loaded config (brand provider %s, timeout %.1fs, canvas %dx%d)",
            "enabled" if _config.brand_provider_enabled else "disabled",
            _config.brand_color_timeout_seconds,
            _config.default_width,
            _config.default_height,
        )
    return _config


def update_config(**overrides: object) -> ServerConfig:
    """Patch the live config (used by ``infra_configure`` tool)."""
    global _config
    cfg = get_config()
    data = cfg.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    _config = ServerConfig(**data)
    return _config
