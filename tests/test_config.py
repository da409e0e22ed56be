"""Tests for environment-driven server configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

import motion_graphics_mcp.config as cfg_mod
from motion_graphics_mcp.config import ServerConfig, get_config, update_config


class TestServerConfig:
    def test_defaults(self):
        cfg = ServerConfig.from_env()
        assert cfg.brand_bible_url == ""
        assert cfg.brand_provider_enabled is False
        assert cfg.brand_color_timeout_seconds == 2.0
        assert (cfg.default_width, cfg.default_height) == (1920, 1080)
        assert cfg.infra_mutations_enabled is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BRAND_BIBLE_URL", " https://brand.example.com/bible ")
        monkeypatch.setenv("BRAND_BIBLE_TOKEN", "secret")
        monkeypatch.setenv("BRAND_COLOR_TIMEOUT", "0.5")
        monkeypatch.setenv("MOTION_DEFAULT_WIDTH", "1280")
        monkeypatch.setenv("MOTION_DEFAULT_HEIGHT", "720")
        cfg = ServerConfig.from_env()
        assert cfg.brand_bible_url == "https://brand.example.com/bible"
        assert cfg.brand_provider_enabled is True
        assert cfg.brand_bible_token == "secret"
        assert cfg.brand_color_timeout_seconds == 0.5
        assert (cfg.default_width, cfg.default_height) == (1280, 720)

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("YES", True), ("false", False), ("", False)])
    def test_infra_mutation_flag(self, monkeypatch, raw, expected):
        monkeypatch.setenv("INFRA_MUTATIONS_ENABLED", raw)
        monkeypatch.setenv("INFRA_ADMIN_TOKEN", "admin")
        cfg = ServerConfig.from_env()
        assert cfg.infra_mutations_enabled is expected
        assert cfg.infra_admin_token == "admin"

    @pytest.mark.parametrize("placeholder", ["${BRAND_BIBLE_URL}", "$BRAND_BIBLE_URL", "${BRAND_BIBLE_URL:-}"])
    def test_unresolved_placeholder_treated_as_unset(self, monkeypatch, placeholder):
        monkeypatch.setenv("BRAND_BIBLE_URL", placeholder)
        assert ServerConfig.from_env().brand_bible_url == ""

    def test_rejects_non_http_url(self):
        with pytest.raises(ValidationError, match="http"):
            ServerConfig(brand_bible_url="ftp://brand.example.com")

    @pytest.mark.parametrize("field,value", [
        ("brand_color_timeout_seconds", 0),
        ("default_width", 0),
        ("default_height", -1),
    ])
    def test_rejects_non_positive(self, field, value):
        with pytest.raises(ValidationError):
            ServerConfig(**{field: value})


class TestSingleton:
    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_update_config_ignores_none(self):
        cfg = update_config(default_width=640, default_height=None)
        assert cfg.default_width == 640
        assert cfg.default_height == 1080
        assert get_config() is cfg

    def test_update_config_validates(self):
        before = get_config()
        with pytest.raises(ValidationError):
            update_config(brand_color_timeout_seconds=-2)
        assert cfg_mod._config is before
