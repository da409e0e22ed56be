"""Tests for compositor tools."""

from __future__ import annotations

import json

import pytest

import motion_graphics_mcp.tools.compositor as compositor_mod
from tests.conftest import unwrap_tool

compositor_from_direction = unwrap_tool(compositor_mod.compositor_from_direction)
compositor_detect = unwrap_tool(compositor_mod.compositor_detect)
split_screen_config = unwrap_tool(compositor_mod.split_screen_config)
before_after_config = unwrap_tool(compositor_mod.before_after_config)
picture_in_picture_config = unwrap_tool(compositor_mod.picture_in_picture_config)

URLS = ["https://cdn.example.com/a.mp4", "https://cdn.example.com/b.mp4",
        "https://cdn.example.com/c.mp4", "https://cdn.example.com/d.mp4"]

pytestmark = pytest.mark.usefixtures("default_brand_source")


class TestCompositorFromDirection:
    @pytest.mark.asyncio
    async def test_before_after(self):
        out = await compositor_from_direction(
            direction="before and after: 'Messy Desk' vs 'Clean Desk', fade transition",
            media_urls=URLS[:2],
            duration=5,
        )
        config = out["config"]
        assert config["type"] == "before-after"
        assert config["transitionStyle"] == "fade"
        assert config["beforeMedia"]["label"] == "Messy Desk"
        assert config["afterMedia"]["label"] == "Clean Desk"

    @pytest.mark.asyncio
    async def test_grid(self):
        out = await compositor_from_direction(direction="4 panel grid comparison", media_urls=URLS, duration=6)
        config = out["config"]
        assert config["layout"] == "4-grid"
        assert len(config["panels"]) == 4
        assert config["panels"][0]["mediaUrl"] == URLS[0]

    @pytest.mark.asyncio
    async def test_json_string_media_urls(self):
        out = await compositor_from_direction(
            direction="side by side", media_urls=json.dumps(URLS[:2]), duration=6,
        )
        assert out["config"]["type"] == "split-screen"

    @pytest.mark.asyncio
    async def test_one_media_url(self):
        out = await compositor_from_direction(direction="4 panel grid comparison", media_urls=URLS[:1], duration=6)
        assert out["config"] is None
        assert "2 media" in out["reason"]

    @pytest.mark.asyncio
    async def test_unknown_direction(self):
        out = await compositor_from_direction(direction="slow zoom", media_urls=URLS[:2], duration=6)
        assert out["config"] is None
        assert "keywords" in out["reason"]

    @pytest.mark.asyncio
    async def test_mismatched_media_types(self):
        out = await compositor_from_direction(
            direction="split screen", media_urls=URLS[:3], media_types=["image", "video"], duration=6,
        )
        assert out["category"] == "INVALID_INPUT"
        assert out["retryable"] is False


class TestCompositorDetect:
    @pytest.mark.asyncio
    async def test_pip(self):
        out = await compositor_detect(direction="picture in picture, top right")
        assert out == {"type": "pip", "panelCount": 2, "labels": [], "pipPosition": "top-right"}

    @pytest.mark.asyncio
    async def test_unknown(self):
        out = await compositor_detect(direction="slow zoom")
        assert out == {"type": "unknown", "panelCount": 0, "labels": []}


class TestSplitScreenConfig:
    @pytest.mark.asyncio
    async def test_builds(self):
        out = await split_screen_config(
            panels=[{"mediaUrl": URLS[0], "label": "Left"}, {"mediaUrl": URLS[1], "mediaType": "video"}],
            duration=6,
        )
        config = out["config"]
        assert config["layout"] == "2-horizontal"
        assert config["panels"][0]["label"] == "Left"
        assert config["panels"][1]["mediaType"] == "video"
        assert config["labelStyle"]["backgroundOpacity"] == 0.8

    @pytest.mark.asyncio
    async def test_single_panel_rejected(self):
        out = await split_screen_config(panels=[{"mediaUrl": URLS[0]}], duration=6)
        assert out["category"] == "INVALID_INPUT"


class TestBeforeAfterConfig:
    @pytest.mark.asyncio
    async def test_builds(self):
        out = await before_after_config(
            before={"url": URLS[0], "label": "Old"}, after={"url": URLS[1]}, duration=5, transition_style="flip",
        )
        config = out["config"]
        assert config["beforeMedia"]["label"] == "Old"
        assert config["afterMedia"]["label"] == "After"
        assert config["sliderConfig"] == {
            "startPosition": 100, "endPosition": 0, "handleColor": "#FFFFFF", "handleWidth": 6,
        }

    @pytest.mark.asyncio
    async def test_missing_url(self):
        out = await before_after_config(before={"label": "Old"}, after={"url": URLS[1]}, duration=5)
        assert out["category"] == "INVALID_INPUT"
        assert "before" in out["error"]


class TestPictureInPictureConfig:
    @pytest.mark.asyncio
    async def test_builds(self):
        out = await picture_in_picture_config(
            main={"url": URLS[0], "type": "video"},
            pip={"url": URLS[1], "label": "Host"},
            duration=8,
            pip_position="top-left",
            pip_size=25,
        )
        config = out["config"]
        assert config["pipPosition"] == "top-left"
        assert config["pipSize"] == 25
        assert config["labelStyle"]["fontSize"] == 14

    @pytest.mark.asyncio
    async def test_no_label_omits_label_style(self):
        out = await picture_in_picture_config(main={"url": URLS[0]}, pip={"url": URLS[1]}, duration=8)
        assert "labelStyle" not in out["config"]

    @pytest.mark.asyncio
    async def test_oversized_pip_rejected(self):
        out = await picture_in_picture_config(
            main={"url": URLS[0]}, pip={"url": URLS[1]}, duration=8, pip_size=150,
        )
        assert out["category"] == "INVALID_INPUT"
