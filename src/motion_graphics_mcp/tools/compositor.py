"""Compositor tools: 5 tools on a FastMCP sub-server."""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from ..direction import parse_direction
from ..errors import make_tool_error
from ..generator import compositors
from ..models.entities import MediaItem, PanelDescriptor
from ..types import (
    BeforeAfterTransition,
    CanvasHeight,
    CanvasWidth,
    DirectionParam,
    DurationParam,
    MediaType,
    PipEntrance,
    PipPosition,
    SplitLayout,
    SplitTransition,
    coerce_json_param,
)
from .helpers import load_entities, load_entity

compositor_server = FastMCP("compositor")

_GENERATE = ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True)
_MEDIA_DESCRIPTION = "Media object: {url, type: 'image'|'video', label?}"


@compositor_server.tool(annotations=_GENERATE)
async def compositor_from_direction(
    direction: DirectionParam,
    media_urls: Annotated[list[str], Field(description="Media URLs in order (at least 2)")],
    duration: DurationParam,
    media_types: Annotated[list[MediaType] | None, Field(
        description="Type for each URL; omit to use per-role defaults",
    )] = None,
) -> dict:
    """Build a split-screen, before/after or picture-in-picture config from a visual direction.

    Args:
        direction: Free-text visual direction.
        media_urls: Media URLs; fewer than 2 yields no config.
        duration: Clip length in seconds.
        media_types: ``media_types[i]`` describes ``media_urls[i]``.

    Returns:
        Dict with ``config`` (renderer JSON), or ``config: None`` plus a
        ``reason`` when no compositor applies.
    """
    media_urls = coerce_json_param(media_urls, list)
    media_types = coerce_json_param(media_types, list)
    try:
        config = await compositors().generate_config_from_direction(
            direction, media_urls, media_types, duration,
        )
    except Exception as exc:
        return make_tool_error(exc)
    if config is None:
        reason = (
            "At least 2 media items are required"
            if len(media_urls) < 2
            else "No before/after, picture-in-picture or split-screen keywords in direction"
        )
        return {"config": None, "reason": reason}
    return {"config": config.to_renderer()}


@compositor_server.tool(annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=False))
async def compositor_detect(direction: DirectionParam) -> dict:
    """Show the compositor intent parsed from a visual direction.

    Args:
        direction: Free-text visual direction.

    Returns:
        Dict with ``type`` ("split-screen", "before-after", "pip" or
        "unknown"), ``panelCount``, ``labels`` and any layout, transition
        style or PiP position found.
    """
    return parse_direction(direction).to_renderer()


@compositor_server.tool(annotations=_GENERATE)
async def split_screen_config(
    panels: Annotated[list[dict], Field(
        description="2-4 panels: {mediaUrl, mediaType?, label?, labelPosition?}",
    )],
    duration: DurationParam,
    layout: SplitLayout | None = None,
    transition_type: SplitTransition | None = None,
    width: CanvasWidth = None,
    height: CanvasHeight = None,
) -> dict:
    """Build a split-screen config from explicit panels.

    Args:
        panels: Panel objects.
        duration: Clip length in seconds.
        layout: Override; defaults by panel count.
        transition_type: Panel reveal; defaults to "simultaneous".
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Dict with ``config`` (renderer JSON) or a ToolError dict.
    """
    try:
        entities = load_entities(PanelDescriptor, panels, "panels")
        config = await compositors().generate_split_screen_config(
            entities, duration, layout=layout, transition_type=transition_type, width=width, height=height,
        )
    except Exception as exc:
        return make_tool_error(exc)
    return {"config": config.to_renderer()}


@compositor_server.tool(annotations=_GENERATE)
async def before_after_config(
    before: Annotated[dict, Field(description=_MEDIA_DESCRIPTION)],
    after: Annotated[dict, Field(description=_MEDIA_DESCRIPTION)],
    duration: DurationParam,
    transition_style: BeforeAfterTransition | None = None,
    width: CanvasWidth = None,
    height: CanvasHeight = None,
) -> dict:
    """Build a before/after reveal config.

    Args:
        before: Media shown first.
        after: Media revealed by the transition.
        duration: Clip length in seconds.
        transition_style: "slider" (default), "fade", "wipe" or "flip".
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Dict with ``config`` (renderer JSON) or a ToolError dict.
    """
    try:
        config = await compositors().generate_before_after_config(
            load_entity(MediaItem, before, "before"),
            load_entity(MediaItem, after, "after"),
            duration,
            transition_style=transition_style,
            width=width,
            height=height,
        )
    except Exception as exc:
        return make_tool_error(exc)
    return {"config": config.to_renderer()}


@compositor_server.tool(annotations=_GENERATE)
async def picture_in_picture_config(
    main: Annotated[dict, Field(description=_MEDIA_DESCRIPTION)],
    pip: Annotated[dict, Field(description=_MEDIA_DESCRIPTION)],
    duration: DurationParam,
    pip_position: PipPosition | None = None,
    pip_size: Annotated[float | None, Field(gt=0, le=100, description="Inset width as % of canvas")] = None,
    pip_entrance_style: PipEntrance | None = None,
    width: CanvasWidth = None,
    height: CanvasHeight = None,
) -> dict:
    """Build a picture-in-picture config.

    Args:
        main: Full-frame media.
        pip: Inset media; a label adds a label style.
        duration: Clip length in seconds.
        pip_position: Corner; defaults to "bottom-right".
        pip_size: Inset size in percent; defaults to 30.
        pip_entrance_style: "scale" (default), "fade" or "slide".
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Dict with ``config`` (renderer JSON) or a ToolError dict.
    """
    try:
        config = await compositors().generate_picture_in_picture_config(
            load_entity(MediaItem, main, "main"),
            load_entity(MediaItem, pip, "pip"),
            duration,
            pip_position=pip_position,
            pip_size=pip_size,
            pip_entrance_style=pip_entrance_style,
            width=width,
            height=height,
        )
    except Exception as exc:
        return make_tool_error(exc)
    return {"config": config.to_renderer()}
