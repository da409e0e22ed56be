"""Infographic builders: stat counter, progress bar and process flow.

Each builder fetches brand colors once, allocates frames with
:func:`~motion_graphics_mcp.timing.allocate_timing` and returns a frozen
config model. :meth:`InfographicBuilder.generate_config_from_narration`
chains parsing, type detection and the matching builder.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..brand import BrandColorSource, get_default_source
from ..models.entities import ProcessStepEntity, ProgressEntity, StatEntity
from ..models.templates import (
    FPS,
    ConnectorStyle,
    InfographicConfig,
    ProcessFlowConfig,
    ProgressBarConfig,
    ProgressItem,
    StatCounterConfig,
    StatItem,
    StepStyle,
    TextStyle,
)
from ..parsers import MAX_PROGRESS_ITEMS, MAX_STATS, MAX_STEPS, analyze_narration
from ..timing import allocate_timing, to_frames
from ..types import BarLayout, FlowAnimation, FlowLayout, StatLayout
from .common import check_count, check_duration, resolve_canvas

logger = logging.getLogger(__name__)

BACKGROUND = "#FFFFFF"

STAT_ENTRANCE, STAT_STAGGER, STAT_EXIT = 2.0, 0.3, 0.5
BAR_ENTRANCE, BAR_STAGGER, BAR_EXIT = 1.5, 0.4, 0.5
STEP_ENTRANCE, STEP_EXIT = 1.5, 0.5


class InfographicBuilder:
    """Build narration-driven infographic configs.

    Args:
        colors: Brand color source; defaults to the process-wide source.
    """

    def __init__(self, colors: BrandColorSource | None = None) -> None:
        self.colors = colors or get_default_source()

    async def generate_stat_counter_config(
        self,
        stats: Sequence[StatEntity],
        duration: float,
        *,
        layout: StatLayout | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> StatCounterConfig:
        """Animated counters, one per stat, colored with the brand primary."""
        check_duration(duration)
        n = check_count("stat-counter", stats, 1, MAX_STATS)
        width, height = resolve_canvas(width, height)
        brand = await self.colors.get_colors()
        timing = allocate_timing(
            duration, n, entrance_base=STAT_ENTRANCE, stagger_base=STAT_STAGGER, exit_base=STAT_EXIT,
        )

        logger.info(
            "Generating stat counter config: %d stat(s), %.2fs, hold %d frames",
            n, duration, timing.hold_frames,
        )
        return StatCounterConfig(
            duration=duration,
            width=width,
            height=height,
            background_color=BACKGROUND,
            brand_colors=brand,
            stats=tuple(StatItem(**s.model_dump(), color=brand.primary) for s in stats),
            layout=layout or ("horizontal" if n <= 3 else "grid"),
            animation_duration=timing.entrance_frames,
            stagger_delay=timing.stagger_frames,
            hold_duration=timing.hold_frames,
            number_style=TextStyle(
                font_size=120 if n <= 2 else 96 if n <= 3 else 72,
                font_weight="800",
                color=brand.primary,
            ),
            label_style=TextStyle(
                font_size=28 if n <= 2 else 24,
                font_weight="500",
                color=brand.accent,
            ),
        )

    async def generate_progress_bar_config(
        self,
        items: Sequence[ProgressEntity],
        duration: float,
        *,
        layout: BarLayout | None = None,
        width: int | None = None,
        height: int | None = None,
        bar_height: int | None = None,
    ) -> ProgressBarConfig:
        """Filling bars; colors alternate primary/secondary by index."""
        check_duration(duration)
        n = check_count("progress-bar", items, 1, MAX_PROGRESS_ITEMS)
        width, height = resolve_canvas(width, height)
        brand = await self.colors.get_colors()
        timing = allocate_timing(
            duration, n, entrance_base=BAR_ENTRANCE, stagger_base=BAR_STAGGER, exit_base=BAR_EXIT,
        )

        logger.info(
            "Generating progress bar config: %d item(s), %.2fs, hold %d frames",
            n, duration, timing.hold_frames,
        )
        return ProgressBarConfig(
            duration=duration,
            width=width,
            height=height,
            background_color=BACKGROUND,
            brand_colors=brand,
            items=tuple(
                ProgressItem(
                    label=item.label,
                    value=item.value,
                    color=brand.primary if i % 2 == 0 else brand.secondary,
                )
                for i, item in enumerate(items)
            ),
            layout=layout or "vertical",
            bar_height=bar_height or (40 if n <= 3 else 30),
            fill_color=brand.primary,
            animation_duration=timing.entrance_frames,
            stagger_delay=timing.stagger_frames,
            hold_duration=timing.hold_frames,
        )

    async def generate_process_flow_config(
        self,
        steps: Sequence[ProcessStepEntity],
        duration: float,
        *,
        layout: FlowLayout | None = None,
        width: int | None = None,
        height: int | None = None,
        animation_type: FlowAnimation | None = None,
    ) -> ProcessFlowConfig:
        """Numbered steps joined by arrows.

        Sequential flows reveal each step for a full entrance in turn, so
        the entrance span is ``steps * entrance`` rather than staggered.
        """
        check_duration(duration)
        n = check_count("process-flow", steps, 1, MAX_STEPS)
        width, height = resolve_canvas(width, height)
        brand = await self.colors.get_colors()
        animation_type = animation_type or "sequential"
        timing = allocate_timing(
            duration,
            n,
            entrance_base=STEP_ENTRANCE,
            exit_base=STEP_EXIT,
            sequential=animation_type == "sequential",
            simultaneous=animation_type == "simultaneous",
        )
        compact = n > 3

        logger.info(
            "Generating process flow config: %d step(s), %s, %.2fs, hold %d frames",
            n, animation_type, duration, timing.hold_frames,
        )
        return ProcessFlowConfig(
            duration=duration,
            width=width,
            height=height,
            background_color=BACKGROUND,
            brand_colors=brand,
            steps=tuple(steps),
            layout=layout or ("horizontal" if n <= 4 else "vertical"),
            connector_style=ConnectorStyle(color=brand.secondary),
            step_style=StepStyle(
                size=90 if n <= 3 else 80 if n <= 5 else 70,
                background_color=brand.primary,
                border_color=brand.secondary,
            ),
            title_style=TextStyle(font_size=18 if compact else 22, font_weight="600", color=brand.primary),
            description_style=TextStyle(font_size=12 if compact else 14, font_weight="400", color=brand.accent),
            animation_type=animation_type,
            step_duration=to_frames(FPS, STEP_ENTRANCE),
            step_spacing=40 if compact else 60,
            hold_duration=timing.hold_frames,
        )

    async def generate_config_from_narration(
        self, narration: str, duration: float,
    ) -> InfographicConfig | None:
        """Detect an infographic in *narration* and build it.

        Returns:
            The config, or None when no type is detected or the detected
            type's entity list is empty. None is a normal outcome.
        """
        check_duration(duration)
        analysis = analyze_narration(narration)

        if analysis.type == "process-flow" and analysis.steps:
            return await self.generate_process_flow_config(analysis.steps, duration)
        if analysis.type == "progress-bar" and analysis.progress:
            return await self.generate_progress_bar_config(analysis.progress, duration)
        if analysis.type == "stat-counter" and analysis.stats:
            return await self.generate_stat_counter_config(analysis.stats, duration)

        logger.info("No infographic type detected for narration")
        return None
