"""Shared type aliases and helpers for tool parameters."""

from __future__ import annotations

import json
from typing import Annotated, Literal

from pydantic import Field


def coerce_json_param(value: str | dict | list | None, expected_type: type) -> dict | list | None:
    """Parse MCP JSON-RPC string params back to dict/list.

    MCP JSON-RPC transport may serialize dict/list params as JSON strings.
    Pydantic v2 rejects these, so this helper coerces them back.

    Args:
        value: The parameter value (possibly a JSON string).
        expected_type: Expected Python type (``dict`` or ``list``).

    Returns:
        Parsed value if coercion succeeded, original value otherwise.
    """
    if not isinstance(value, str):
        return value
    try:
        parsed = json.loads(value)
        if isinstance(parsed, expected_type):
            return parsed
    except (json.JSONDecodeError, TypeError):
        pass
    return value

# ── Literal enums ────────────────────────────────────────────────────────────

TemplateType = Literal[
    "stat-counter", "progress-bar", "process-flow",
    "split-screen", "before-after", "picture-in-picture",
]
NarrationType = Literal["stat-counter", "progress-bar", "process-flow"]
DirectionType = Literal["split-screen", "before-after", "pip", "unknown"]

MediaType = Literal["image", "video"]
LabelPosition = Literal["top", "bottom", "overlay"]

StatLayout = Literal["horizontal", "vertical", "grid"]
BarLayout = Literal["horizontal", "vertical"]
FlowLayout = Literal["horizontal", "vertical"]
SplitLayout = Literal["2-horizontal", "2-vertical", "3-horizontal", "3-vertical", "4-grid"]

FlowAnimation = Literal["sequential", "simultaneous"]
SplitTransition = Literal["simultaneous", "sequential", "wipe-left", "wipe-right", "wipe-down"]
BeforeAfterTransition = Literal["slider", "fade", "wipe", "flip"]
PipPosition = Literal["top-left", "top-right", "bottom-left", "bottom-right"]
PipEntrance = Literal["fade", "scale", "slide"]

# ── Annotated aliases ────────────────────────────────────────────────────────

DurationParam = Annotated[float, Field(gt=0, description="Requested clip duration in seconds")]
NarrationParam = Annotated[str, Field(description="Spoken narration text to mine for stats, progress items or steps")]
DirectionParam = Annotated[str, Field(
    description="Free-text visual direction, e.g. \"4 panel grid comparison\" or "
    "\"before and after: 'Messy Desk' vs 'Clean Desk', fade transition\"",
)]
CanvasWidth = Annotated[int | None, Field(ge=1, description="Canvas width in pixels (default from config)")]
CanvasHeight = Annotated[int | None, Field(ge=1, description="Canvas height in pixels (default from config)")]
