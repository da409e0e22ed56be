"""Shared test fixtures for motion-graphics-mcp."""

from __future__ import annotations

from typing import Any

import pytest

from motion_graphics_mcp.brand import BrandColorSource

BRAND_PAYLOAD = {
    "colors": {
        "primary": "#112233",
        "secondary": "#445566",
        "accent": "#778899",
        "text": "#000000",
    },
    "logos": {"main": "https://cdn.example.com/logo.svg"},
}


def unwrap_tool(tool: Any) -> Any:
    """Extract the raw coroutine from a FastMCP FunctionTool, if wrapped.

    FastMCP 2.x wraps @server.tool functions in FunctionTool (not callable).
    FastMCP 3.x preserves the original function. This helper works with both.
    """
    return getattr(tool, "fn", tool)


@pytest.fixture(autouse=True, scope="session")
def _unwrap_fastmcp_tools():
    """Patch tool modules so FunctionTool objects become directly callable."""
    import importlib
    import pkgutil

    import motion_graphics_mcp.tools as tools_pkg

    modules = [
        importlib.import_module(info.name)
        for info in pkgutil.walk_packages(tools_pkg.__path__, tools_pkg.__name__ + ".")
    ]
    for mod in modules:
        for name in list(vars(mod)):
            obj = getattr(mod, name, None)
            if obj is not None and hasattr(obj, "fn") and not callable(obj):
                setattr(mod, name, obj.fn)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep tests off any real brand bible and reset process-wide singletons."""
    import motion_graphics_mcp.brand as brand_mod
    import motion_graphics_mcp.config as cfg_mod

    for name in (
        "BRAND_BIBLE_URL",
        "BRAND_BIBLE_TOKEN",
        "BRAND_COLOR_TIMEOUT",
        "MOTION_DEFAULT_WIDTH",
        "MOTION_DEFAULT_HEIGHT",
        "INFRA_MUTATIONS_ENABLED",
        "INFRA_ADMIN_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    cfg_mod._config = None
    brand_mod._default_source = None
    yield
    cfg_mod._config = None
    brand_mod._default_source = None


class StaticProvider:
    """Brand bible provider returning a fixed payload and counting calls."""

    def __init__(self, payload: Any = None) -> None:
        self.payload = BRAND_PAYLOAD if payload is None else payload
        self.calls = 0

    def get_brand_bible(self) -> Any:
        self.calls += 1
        return self.payload


class FailingProvider:
    """Brand bible provider that raises on every call."""

    def __init__(self) -> None:
        self.calls = 0

    def get_brand_bible(self) -> Any:
        self.calls += 1
        raise RuntimeError("brand bible unavailable")


@pytest.fixture()
def static_provider():
    return StaticProvider()


@pytest.fixture()
def brand_source(static_provider):
    """Color source backed by :data:`BRAND_PAYLOAD`."""
    return BrandColorSource(static_provider)


@pytest.fixture()
def default_brand_source(monkeypatch, brand_source):
    """Install *brand_source* as the process-wide source used by the tools."""
    monkeypatch.setattr("motion_graphics_mcp.brand._default_source", brand_source)
    return brand_source
