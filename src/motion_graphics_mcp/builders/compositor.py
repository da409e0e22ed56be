"""Compositor builders: split screen, before/after and picture-in-picture.

These arrange caller-supplied media rather than drawn graphics, so their
timing is a handful of fixed transition lengths instead of a per-item
stagger. :meth:`CompositorBuilder.generate_config_from_direction` maps a
visual-direction string onto one of them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..brand import BrandColorSource, get_default_source
from ..direction import MAX_PANELS, MIN_PANELS, infer_split_layout, parse_direction
from ..errors import InvalidInputError
from ..models.entities import MediaItem, PanelDescriptor
from ..models.templates import (
    FPS,
    BeforeAfterConfig,
    BoxedLabelStyle,
    CompositorConfig,
    DividerStyle,
    LabelledMedia,
    MainMedia,
    PictureInPictureConfig,
    PipMedia,
    PipStyle,
    SplitScreenConfig,
)
from ..timing import MIN_HOLD_SECONDS, to_frames
from ..types import BeforeAfterTransition, MediaType, PipEntrance, PipPosition, SplitLayout, SplitTransition
from .common import check_count, check_duration, resolve_canvas

logger = logging.getLogger(__name__)

BACKGROUND = "#000000"

_LAYOUT_BY_COUNT: dict[int, SplitLayout] = {
    2: "2-horizontal",
    3: "3-horizontal",
    4: "4-grid",
}


def _boxed_label(primary: str, font_size: int = 24, font_weight: str = "600", **extra) -> BoxedLabelStyle:
    return BoxedLabelStyle(
        font_size=font_size,
        font_weight=font_weight,
        color="#FFFFFF",
        background_color=primary,
        **extra,
    )


class CompositorBuilder:
    """Build media compositor configs.

    Args:
        colors: Brand color source; defaults to the process-wide source.
    """

    def __init__(self, colors: BrandColorSource | None = None) -> None:
        self.colors = colors or get_default_source()

    async def generate_split_screen_config(
        self,
        panels: Sequence[PanelDescriptor],
        duration: float,
        *,
        layout: SplitLayout | None = None,
        transition_type: SplitTransition | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> SplitScreenConfig:
        """Two to four panels separated by an animated divider."""
        check_duration(duration)
        n = check_count("split-screen", panels, MIN_PANELS, MAX_PANELS)
        width, height = resolve_canvas(width, height)
        brand = await self.colors.get_colors()
        layout = layout or _LAYOUT_BY_COUNT[n]
        transition_type = transition_type or "simultaneous"

        logger.info(
            "Generating split screen config: %d panel(s), layout %s, %s, %.2fs",
            n, layout, transition_type, duration,
        )
        return SplitScreenConfig(
            duration=duration,
            width=width,
            height=height,
            background_color=BACKGROUND,
            brand_colors=brand,
            layout=layout,
            panels=tuple(panels),
            divider_style=DividerStyle(color=brand.secondary),
            label_style=_boxed_label(brand.primary, background_opacity=0.8, padding=12),
            transition_type=transition_type,
            transition_duration=to_frames(FPS, 0.5),
            stagger_delay=to_frames(FPS, 0.2),
        )

    async def generate_before_after_config(
        self,
        before: MediaItem,
        after: MediaItem,
        duration: float,
        *,
        transition_style: BeforeAfterTransition | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> BeforeAfterConfig:
        """Hold the before media, transition, then hold the after media.

        ``hold_after_frames`` keeps a 15-frame floor, so very short clips
        run past the requested duration.
        """
        check_duration(duration)
        width, height = resolve_canvas(width, height)
        brand = await self.colors.get_colors()
        transition_style = transition_style or "slider"

        total_frames = to_frames(FPS, duration)
        hold_before = to_frames(FPS, 1.0)
        transition = to_frames(FPS, 1.5)
        hold_after = max(
            to_frames(FPS, MIN_HOLD_SECONDS),
            total_frames - hold_before - transition - to_frames(FPS, 0.5),
        )

        logger.info(
            "Generating before/after config: %s, %.2fs, hold %d/%d frames",
            transition_style, duration, hold_before, hold_after,
        )
        return BeforeAfterConfig(
            duration=duration,
            width=width,
            height=height,
            background_color=BACKGROUND,
            brand_colors=brand,
            before_media=LabelledMedia(url=before.url, type=before.type, label=before.label or "Before"),
            after_media=LabelledMedia(url=after.url, type=after.type, label=after.label or "After"),
            transition_style=transition_style,
            label_style=_boxed_label(brand.primary, background_opacity=0.8),
            transition_start_frame=hold_before,
            transition_duration=transition,
            hold_before_frames=hold_before,
            hold_after_frames=hold_after,
        )

    async def generate_picture_in_picture_config(
        self,
        main: MediaItem,
        pip: MediaItem,
        duration: float,
        *,
        pip_position: PipPosition | None = None,
        pip_size: float | None = None,
        pip_entrance_style: PipEntrance | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> PictureInPictureConfig:
        """Main media full-frame with an inset that enters after half a second.

        The label style is left out entirely when the inset has no label.
        """
        check_duration(duration)
        width, height = resolve_canvas(width, height)
        pip_size = 30 if pip_size is None else pip_size
        if not 0 < pip_size <= 100:
            raise InvalidInputError(f"pip_size must be a percentage in (0, 100], got {pip_size}")
        brand = await self.colors.get_colors()
        pip_position = pip_position or "bottom-right"
        pip_entrance_style = pip_entrance_style or "scale"

        logger.info(
            "Generating PiP config: %s, %s%%, %s, %.2fs",
            pip_position, pip_size, pip_entrance_style, duration,
        )
        return PictureInPictureConfig(
            duration=duration,
            width=width,
            height=height,
            background_color=BACKGROUND,
            brand_colors=brand,
            main_media=MainMedia(url=main.url, type=main.type),
            pip_media=PipMedia(url=pip.url, type=pip.type, label=pip.label),
            pip_position=pip_position,
            pip_size=pip_size,
            pip_style=PipStyle(border_color=brand.accent),
            label_style=_boxed_label(brand.primary, font_size=14, font_weight="500") if pip.label else None,
            pip_entrance_frame=to_frames(FPS, 0.5),
            pip_entrance_duration=to_frames(FPS, 0.5),
            pip_entrance_style=pip_entrance_style,
        )

    async def generate_config_from_direction(
        self,
        direction: str,
        media_urls: Sequence[str],
        media_types: Sequence[MediaType] | None,
        duration: float,
    ) -> CompositorConfig | None:
        """Turn a visual direction plus media into a compositor config.

        Args:
            direction: Free-text visual direction.
            media_urls: Media in order (before/after, main/inset, or panels).
            media_types: ``media_types[i]`` describes ``media_urls[i]``. Empty
                or None applies per-role defaults (``video`` for the PiP main
                media, ``image`` otherwise).
            duration: Clip length in seconds.

        Returns:
            The config, or None when fewer than two media are supplied or no
            compositor intent is found.

        Raises:
            InvalidInputError: ``media_types`` is non-empty but its length
                differs from ``media_urls``, or ``duration`` is not positive.
        """
        if len(media_urls) < 2:
            logger.info("Compositor needs at least 2 media items, got %d", len(media_urls))
            return None

        intent = parse_direction(direction)
        if intent.type == "unknown":
            logger.info("No compositor type detected for direction")
            return None

        kinds = list(media_types or [])
        if kinds and len(kinds) != len(media_urls):
            raise InvalidInputError(
                f"media_types has {len(kinds)} entries but media_urls has {len(media_urls)}"
            )

        def media_type(i: int, default: MediaType = "image") -> MediaType:
            return kinds[i] if kinds else default

        def label(i: int) -> str | None:
            return intent.labels[i] if i < len(intent.labels) else None

        if intent.type == "before-after":
            return await self.generate_before_after_config(
                MediaItem(url=media_urls[0], type=media_type(0), label=label(0) or "Before"),
                MediaItem(url=media_urls[1], type=media_type(1), label=label(1) or "After"),
                duration,
                transition_style=intent.transition_style,
            )

        if intent.type == "pip":
            return await self.generate_picture_in_picture_config(
                MediaItem(url=media_urls[0], type=media_type(0, "video")),
                MediaItem(url=media_urls[1], type=media_type(1), label=label(0)),
                duration,
                pip_position=intent.pip_position,
            )

        panels = tuple(
            PanelDescriptor(media_url=url, media_type=media_type(i), label=label(i))
            for i, url in enumerate(media_urls[: intent.panel_count])
        )
        layout = intent.layout
        if len(panels) != intent.panel_count:
            layout = infer_split_layout(len(panels), direction.lower())
        return await self.generate_split_screen_config(panels, duration, layout=layout)
