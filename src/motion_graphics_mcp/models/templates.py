"""Template configuration models: the renderer contract.

Six frozen variants tagged by ``type``. All frame-valued fields are whole
frames at ``fps``; ``duration`` stays in seconds. ``TemplateConfig`` is the
discriminated union used when a caller needs to validate any variant.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from ..types import (
    BarLayout,
    BeforeAfterTransition,
    FlowAnimation,
    FlowLayout,
    MediaType,
    PipEntrance,
    PipPosition,
    SplitLayout,
    SplitTransition,
    StatLayout,
)
from .base import FrozenModel
from .brand import BrandColors
from .entities import PanelDescriptor, ProcessStepEntity

FPS = 30
FONT_FAMILY = "Inter, sans-serif"


# ── Shared style blocks ──────────────────────────────────────────────────────


class TextStyle(FrozenModel):
    font_size: int
    font_weight: str
    font_family: str = FONT_FAMILY
    color: str


class BoxedLabelStyle(TextStyle):
    """Label drawn on a tinted box."""

    background_color: str
    background_opacity: float | None = None
    padding: int | None = None


class _BaseConfig(FrozenModel):
    duration: float
    fps: int = FPS
    width: int = 1920
    height: int = 1080
    background_color: str
    brand_colors: BrandColors


# ── Infographics ─────────────────────────────────────────────────────────────


class StatItem(FrozenModel):
    value: float
    label: str
    prefix: str = ""
    suffix: str = ""
    display_value: str | None = None
    color: str


class StatCounterConfig(_BaseConfig):
    type: Literal["stat-counter"] = "stat-counter"
    stats: tuple[StatItem, ...]
    layout: StatLayout
    animation_duration: int
    stagger_delay: int
    hold_duration: int = Field(description="Hold phase length in frames")
    number_style: TextStyle
    label_style: TextStyle
    count_easing: Literal["linear", "ease-out", "ease-in-out", "spring"] = "ease-out"
    entrance_animation: Literal["fade", "slide-up", "scale", "none"] = "scale"


class ProgressItem(FrozenModel):
    label: str
    value: int = Field(ge=0, le=100)
    color: str


class ProgressBarConfig(_BaseConfig):
    type: Literal["progress-bar"] = "progress-bar"
    items: tuple[ProgressItem, ...]
    layout: BarLayout
    bar_height: int
    bar_radius: int = 8
    fill_color: str
    animation_duration: int
    stagger_delay: int
    hold_duration: int = Field(description="Hold phase length in frames")
    animation_style: Literal["linear", "spring", "ease-out"] = "ease-out"


class ConnectorStyle(FrozenModel):
    type: Literal["line", "arrow", "dotted"] = "arrow"
    color: str
    width: int = 3


class StepStyle(FrozenModel):
    shape: Literal["circle", "square", "rounded"] = "circle"
    size: int
    background_color: str
    border_color: str
    border_width: int = 3
    text_color: str = "#FFFFFF"


class ProcessFlowConfig(_BaseConfig):
    type: Literal["process-flow"] = "process-flow"
    steps: tuple[ProcessStepEntity, ...]
    layout: FlowLayout
    connector_style: ConnectorStyle
    step_style: StepStyle
    title_style: TextStyle
    description_style: TextStyle
    animation_type: FlowAnimation
    step_duration: int
    step_spacing: int
    show_numbers: bool = True
    hold_duration: int = Field(description="Hold phase length in frames")


# ── Compositors ──────────────────────────────────────────────────────────────


class DividerStyle(FrozenModel):
    width: int = 4
    color: str
    animated: bool = True


class SplitScreenConfig(_BaseConfig):
    type: Literal["split-screen"] = "split-screen"
    layout: SplitLayout
    panels: tuple[PanelDescriptor, ...] = Field(min_length=2, max_length=4)
    divider_style: DividerStyle
    label_style: BoxedLabelStyle
    transition_type: SplitTransition
    transition_duration: int
    stagger_delay: int


class LabelledMedia(FrozenModel):
    url: str
    type: MediaType
    label: str


class SliderConfig(FrozenModel):
    start_position: int = 100
    end_position: int = 0
    handle_color: str = "#FFFFFF"
    handle_width: int = 6


class BeforeAfterConfig(_BaseConfig):
    type: Literal["before-after"] = "before-after"
    before_media: LabelledMedia
    after_media: LabelledMedia
    transition_style: BeforeAfterTransition
    slider_config: SliderConfig = Field(default_factory=SliderConfig)
    label_style: BoxedLabelStyle
    transition_start_frame: int
    transition_duration: int
    hold_before_frames: int
    hold_after_frames: int


class MainMedia(FrozenModel):
    url: str
    type: MediaType


class PipMedia(MainMedia):
    label: str | None = None


class PipStyle(FrozenModel):
    border_width: int = 3
    border_color: str
    border_radius: int = 8
    shadow: bool = True


class PictureInPictureConfig(_BaseConfig):
    type: Literal["picture-in-picture"] = "picture-in-picture"
    main_media: MainMedia
    pip_media: PipMedia
    pip_position: PipPosition
    pip_size: float = Field(description="PiP width as a percentage of the canvas")
    pip_margin: int = 30
    pip_style: PipStyle
    label_style: BoxedLabelStyle | None = None
    pip_entrance_frame: int
    pip_entrance_duration: int
    pip_entrance_style: PipEntrance


InfographicConfig = Union[StatCounterConfig, ProgressBarConfig, ProcessFlowConfig]
CompositorConfig = Union[SplitScreenConfig, BeforeAfterConfig, PictureInPictureConfig]

TemplateConfig = Annotated[
    Union[
        StatCounterConfig,
        ProgressBarConfig,
        ProcessFlowConfig,
        SplitScreenConfig,
        BeforeAfterConfig,
        PictureInPictureConfig,
    ],
    Field(discriminator="type"),
]
