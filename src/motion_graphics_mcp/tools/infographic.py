"""Infographic tools: 5 tools on a FastMCP sub-server."""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from ..errors import make_tool_error
from ..generator import infographics
from ..models.entities import ProcessStepEntity, ProgressEntity, StatEntity
from ..parsers import analyze_narration
from ..types import (
    BarLayout,
    CanvasHeight,
    CanvasWidth,
    DurationParam,
    FlowAnimation,
    FlowLayout,
    NarrationParam,
    StatLayout,
)
from .helpers import load_entities

infographic_server = FastMCP("infographic")

_GENERATE = ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True)


@infographic_server.tool(annotations=_GENERATE)
async def infographic_from_narration(
    narration: NarrationParam,
    duration: DurationParam,
) -> dict:
    """Detect a stat counter, progress bar or process flow in narration and build its config.

    Args:
        narration: Spoken narration text.
        duration: Clip length in seconds.

    Returns:
        Dict with ``config`` (renderer JSON), or ``config: None`` plus a
        ``reason`` when the narration holds no infographic.
    """
    try:
        config = await infographics().generate_config_from_narration(narration, duration)
    except Exception as exc:
        return make_tool_error(exc)
    if config is None:
        return {"config": None, "reason": "No stats, progress items or steps found in narration"}
    return {"config": config.to_renderer()}


@infographic_server.tool(annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=False))
async def infographic_detect(narration: NarrationParam) -> dict:
    """Show what the narration parsers extract and which template would win.

    Args:
        narration: Spoken narration text.

    Returns:
        Dict with ``type`` (or None) and the parsed ``stats``, ``progress``
        and ``steps``.
    """
    analysis = analyze_narration(narration)
    return {
        "type": analysis.type,
        "stats": [s.to_renderer() for s in analysis.stats],
        "progress": [p.to_renderer() for p in analysis.progress],
        "steps": [s.to_renderer() for s in analysis.steps],
    }


@infographic_server.tool(annotations=_GENERATE)
async def stat_counter_config(
    stats: Annotated[list[dict], Field(
        description="1-4 stats: {value, label, prefix?, suffix?, displayValue?}",
    )],
    duration: DurationParam,
    layout: StatLayout | None = None,
    width: CanvasWidth = None,
    height: CanvasHeight = None,
) -> dict:
    """Build an animated stat counter config from explicit stats.

    Args:
        stats: Stat objects.
        duration: Clip length in seconds.
        layout: Override; defaults to horizontal for ≤3 stats, grid otherwise.
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Dict with ``config`` (renderer JSON) or a ToolError dict.
    """
    try:
        entities = load_entities(StatEntity, stats, "stats")
        config = await infographics().generate_stat_counter_config(
            entities, duration, layout=layout, width=width, height=height,
        )
    except Exception as exc:
        return make_tool_error(exc)
    return {"config": config.to_renderer()}


@infographic_server.tool(annotations=_GENERATE)
async def progress_bar_config(
    items: Annotated[list[dict], Field(description="1-5 items: {label, value (0-100)}")],
    duration: DurationParam,
    layout: BarLayout | None = None,
    bar_height: Annotated[int | None, Field(ge=1, description="Bar thickness in pixels")] = None,
    width: CanvasWidth = None,
    height: CanvasHeight = None,
) -> dict:
    """Build a progress bar config from explicit items.

    Args:
        items: Progress items.
        duration: Clip length in seconds.
        layout: Override; defaults to vertical.
        bar_height: Override; defaults to 40 for ≤3 items, 30 otherwise.
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Dict with ``config`` (renderer JSON) or a ToolError dict.
    """
    try:
        entities = load_entities(ProgressEntity, items, "items")
        config = await infographics().generate_progress_bar_config(
            entities, duration, layout=layout, width=width, height=height, bar_height=bar_height,
        )
    except Exception as exc:
        return make_tool_error(exc)
    return {"config": config.to_renderer()}


@infographic_server.tool(annotations=_GENERATE)
async def process_flow_config(
    steps: Annotated[list[dict], Field(description="1-6 steps: {title, description?}")],
    duration: DurationParam,
    layout: FlowLayout | None = None,
    animation_type: FlowAnimation | None = None,
    width: CanvasWidth = None,
    height: CanvasHeight = None,
) -> dict:
    """Build a process flow config from explicit steps.

    Args:
        steps: Process steps.
        duration: Clip length in seconds.
        layout: Override; defaults to horizontal for ≤4 steps, vertical otherwise.
        animation_type: "sequential" (default) or "simultaneous".
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Dict with ``config`` (renderer JSON) or a ToolError dict.
    """
    try:
        entities = load_entities(ProcessStepEntity, steps, "steps")
        config = await infographics().generate_process_flow_config(
            entities, duration, layout=layout, width=width, height=height, animation_type=animation_type,
        )
    except Exception as exc:
        return make_tool_error(exc)
    return {"config": config.to_renderer()}
