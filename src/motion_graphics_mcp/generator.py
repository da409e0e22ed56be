"""Module-level entry points wired to the process-wide brand color source.

Thin wrappers for callers that do not need to inject their own
:class:`~motion_graphics_mcp.brand.BrandColorSource`; construct
:class:`InfographicBuilder` / :class:`CompositorBuilder` directly for that.
"""

from __future__ import annotations

from collections.abc import Sequence

from .brand import get_default_source
from .builders.compositor import CompositorBuilder
from .builders.infographic import InfographicBuilder
from .models.entities import MediaItem, PanelDescriptor, ProcessStepEntity, ProgressEntity, StatEntity
from .models.templates import (
    BeforeAfterConfig,
    CompositorConfig,
    InfographicConfig,
    PictureInPictureConfig,
    ProcessFlowConfig,
    ProgressBarConfig,
    SplitScreenConfig,
    StatCounterConfig,
)
from .types import MediaType


def infographics() -> InfographicBuilder:
    return InfographicBuilder(get_default_source())


def compositors() -> CompositorBuilder:
    return CompositorBuilder(get_default_source())


async def generate_config_from_narration(narration: str, duration: float) -> InfographicConfig | None:
    return await infographics().generate_config_from_narration(narration, duration)


async def generate_config_from_direction(
    visual_direction: str,
    media_urls: Sequence[str],
    media_types: Sequence[MediaType] | None,
    duration: float,
) -> CompositorConfig | None:
    return await compositors().generate_config_from_direction(
        visual_direction, media_urls, media_types, duration,
    )


async def generate_stat_counter_config(
    stats: Sequence[StatEntity], duration: float, **options,
) -> StatCounterConfig:
    return await infographics().generate_stat_counter_config(stats, duration, **options)


async def generate_progress_bar_config(
    items: Sequence[ProgressEntity], duration: float, **options,
) -> ProgressBarConfig:
    return await infographics().generate_progress_bar_config(items, duration, **options)


async def generate_process_flow_config(
    steps: Sequence[ProcessStepEntity], duration: float, **options,
) -> ProcessFlowConfig:
    return await infographics().generate_process_flow_config(steps, duration, **options)


async def generate_split_screen_config(
    panels: Sequence[PanelDescriptor], duration: float, **options,
) -> SplitScreenConfig:
    return await compositors().generate_split_screen_config(panels, duration, **options)


async def generate_before_after_config(
    before: MediaItem, after: MediaItem, duration: float, **options,
) -> BeforeAfterConfig:
    return await compositors().generate_before_after_config(before, after, duration, **options)


async def generate_picture_in_picture_config(
    main: MediaItem, pip: MediaItem, duration: float, **options,
) -> PictureInPictureConfig:
    return await compositors().generate_picture_in_picture_config(main, pip, duration, **options)
