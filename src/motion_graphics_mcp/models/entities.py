"""Entity models: typed values mined from narration and visual direction.

Created fresh on every parse call. Frozen so a parsed entity handed to a
builder cannot be altered afterwards. Serialized with camelCase aliases to
match the renderer's wire format.
"""

from __future__ import annotations

from pydantic import Field

from ..types import BeforeAfterTransition, DirectionType, LabelPosition, MediaType, PipPosition, SplitLayout
from .base import FrozenModel


class StatEntity(FrozenModel):
    """A headline number, e.g. ``$2M revenue`` or ``45% growth``."""

    value: float
    label: str
    prefix: str = ""
    suffix: str = ""
    display_value: str | None = None


class ProgressEntity(FrozenModel):
    """A labelled percentage rendered as one bar."""

    label: str
    value: int = Field(ge=0, le=100)


class ProcessStepEntity(FrozenModel):
    """One step of a process flow."""

    title: str
    description: str | None = None


class MediaItem(FrozenModel):
    """Caller-supplied media for before/after and picture-in-picture."""

    url: str
    type: MediaType = "image"
    label: str | None = None


class PanelDescriptor(FrozenModel):
    """One split-screen panel."""

    media_url: str
    media_type: MediaType = "image"
    label: str | None = None
    label_position: LabelPosition = "bottom"


class DirectionIntent(FrozenModel):
    """Panel/transition intent extracted from a visual-direction string.

    ``type == "unknown"`` (with ``panel_count == 0``) means no compositor
    keyword was found.
    """

    type: DirectionType
    panel_count: int = 0
    labels: tuple[str, ...] = ()
    layout: SplitLayout | None = None
    transition_style: BeforeAfterTransition | None = None
    pip_position: PipPosition | None = None
