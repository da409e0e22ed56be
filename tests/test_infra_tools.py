"""Tests for infrastructure tools."""

from __future__ import annotations

import httpx
import pytest

import motion_graphics_mcp.brand as brand_mod
import motion_graphics_mcp.config as cfg_mod
import motion_graphics_mcp.tools.infra as infra_mod
from tests.conftest import BRAND_PAYLOAD, unwrap_tool

infra_brand_colors = unwrap_tool(infra_mod.infra_brand_colors)
infra_configure = unwrap_tool(infra_mod.infra_configure)


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    monkeypatch.setenv("INFRA_MUTATIONS_ENABLED", "true")
    cfg_mod._config = None
    yield
    cfg_mod._config = None


class TestInfraBrandColors:
    @pytest.mark.asyncio
    async def test_no_provider_reports_fallback(self):
        out = await infra_brand_colors()
        assert out["colors"] == {
            "primary": "#2D5A27",
            "secondary": "#D4A574",
            "accent": "#8B4513",
            "text": "#FFFFFF",
        }
        assert out["source"] == "fallback:no-provider"
        assert out["provider_url"] is None

    @pytest.mark.asyncio
    async def test_injected_provider(self, default_brand_source):
        out = await infra_brand_colors()
        assert out["colors"]["primary"] == "#112233"
        assert out["source"] == "provider"


class TestInfraConfigure:
    @pytest.mark.asyncio
    async def test_updates_runtime_config(self):
        out = await infra_configure(default_width=1080, default_height=1920, brand_color_timeout_seconds=0.5)
        cfg = out["current_config"]
        assert cfg["default_width"] == 1080
        assert cfg["default_height"] == 1920
        assert cfg["brand_color_timeout_seconds"] == 0.5

    @pytest.mark.asyncio
    async def test_redacts_token(self, monkeypatch):
        monkeypatch.setenv("BRAND_BIBLE_TOKEN", "brand-secret")
        out = await infra_configure()
        assert "brand_bible_token" not in out["current_config"]

    @pytest.mark.asyncio
    async def test_url_change_resets_brand_source(self, default_brand_source):
        out = await infra_configure(brand_bible_url="https://brand.example.com/bible")
        assert out["current_config"]["brand_bible_url"] == "https://brand.example.com/bible"
        assert brand_mod._default_source is None

    @pytest.mark.asyncio
    async def test_other_changes_keep_brand_source(self, default_brand_source):
        await infra_configure(default_width=800)
        assert brand_mod._default_source is default_brand_source

    @pytest.mark.asyncio
    async def test_invalid_url_returns_error(self):
        out = await infra_configure(brand_bible_url="ftp://brand.example.com")
        assert out["category"] == "CONFIG_INVALID"
        assert out["retryable"] is False

    @pytest.mark.asyncio
    async def test_redacts_admin_token(self, monkeypatch):
        monkeypatch.setenv("INFRA_ADMIN_TOKEN", "infra-secret")
        cfg_mod._config = None
        out = await infra_configure()
        assert "infra_admin_token" not in out["current_config"]
        assert "infra-secret" not in str(out)


class TestInfraMutationPolicy:
    @pytest.mark.asyncio
    async def test_blocked_when_disabled(self, monkeypatch):
        monkeypatch.setenv("INFRA_MUTATIONS_ENABLED", "false")
        cfg_mod._config = None

        out = await infra_configure(brand_bible_url="https://attacker.example.com/collect")
        assert out["category"] == "PERMISSION_DENIED"
        assert out["retryable"] is False
        assert cfg_mod.get_config().brand_bible_url == ""

    @pytest.mark.asyncio
    async def test_allows_read_only_when_disabled(self, monkeypatch):
        monkeypatch.setenv("INFRA_MUTATIONS_ENABLED", "false")
        cfg_mod._config = None

        out = await infra_configure()
        assert "current_config" in out

    @pytest.mark.asyncio
    async def test_requires_token_when_configured(self, monkeypatch):
        monkeypatch.setenv("INFRA_ADMIN_TOKEN", "top-secret")
        cfg_mod._config = None

        denied = await infra_configure(default_width=800)
        assert denied["category"] == "PERMISSION_DENIED"

        wrong = await infra_configure(default_width=800, auth_token="guess")
        assert wrong["category"] == "PERMISSION_DENIED"
        assert cfg_mod.get_config().default_width == 1920

        allowed = await infra_configure(default_width=800, auth_token="top-secret")
        assert allowed["current_config"]["default_width"] == 800


class TestBrandTokenOnUrlChange:
    @pytest.fixture(autouse=True)
    def _configured_brand_bible(self, monkeypatch):
        monkeypatch.setenv("BRAND_BIBLE_URL", "https://brand.internal/bible")
        monkeypatch.setenv("BRAND_BIBLE_TOKEN", "s3cret")
        cfg_mod._config = None

    @pytest.mark.asyncio
    async def test_url_change_drops_token(self):
        out = await infra_configure(brand_bible_url="https://other.example.com/bible")
        assert "category" not in out
        assert cfg_mod.get_config().brand_bible_token == ""

        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=BRAND_PAYLOAD)

        provider = brand_mod.provider_from_config()
        provider._transport = httpx.MockTransport(handler)
        await provider.get_brand_bible()

        assert str(seen[0].url) == "https://other.example.com/bible"
        assert "authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_url_change_with_new_token_keeps_it(self):
        await infra_configure(brand_bible_url="https://other.example.com/bible", brand_bible_token="fresh")
        assert cfg_mod.get_config().brand_bible_token == "fresh"

    @pytest.mark.asyncio
    async def test_same_url_keeps_token(self):
        await infra_configure(brand_bible_url="https://brand.internal/bible")
        assert cfg_mod.get_config().brand_bible_token == "s3cret"

    @pytest.mark.asyncio
    async def test_disabling_url_drops_token(self):
        await infra_configure(brand_bible_url="")
        cfg = cfg_mod.get_config()
        assert cfg.brand_bible_url == ""
        assert cfg.brand_bible_token == ""
