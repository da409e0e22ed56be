"""Frame-budget allocation shared by every template builder.

Splits a requested duration into entrance / stagger / hold / exit phases in
whole frames. The hold phase never drops below ``round(fps * min_hold)``,
which means the timeline can run past the requested duration when many
items (or long entrances) do not fit. That overrun is reported on
:class:`PhaseTiming` but never clipped here.

:func:`clip_exit_to_total` is a renderer-side helper: the emitted configs
carry no exit phase, so builders never call it. A renderer (or any caller
that plays an exit animation) applies it to get an exact length.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

DEFAULT_FPS = 30
MIN_HOLD_SECONDS = 0.5


def to_frames(fps: int, seconds: float) -> int:
    """Convert seconds to frames, rounding halves up like the renderer does."""
    return int(math.floor(fps * seconds + 0.5))


@dataclass(frozen=True)
class PhaseTiming:
    """Discrete frame counts for one animated template."""

    fps: int
    total_frames: int
    entrance_frames: int
    stagger_frames: int
    exit_frames: int
    min_hold_frames: int
    entrance_span: int
    hold_frames: int

    @property
    def timeline_frames(self) -> int:
        return self.entrance_span + self.hold_frames + self.exit_frames

    @property
    def overrun_frames(self) -> int:
        """Frames the timeline runs past ``total_frames`` (0 when it fits)."""
        return max(0, self.timeline_frames - self.total_frames)


def allocate_timing(
    duration: float,
    item_count: int,
    *,
    entrance_base: float,
    stagger_base: float = 0.0,
    exit_base: float,
    sequential: bool = False,
    simultaneous: bool = False,
    fps: int = DEFAULT_FPS,
    min_hold: float = MIN_HOLD_SECONDS,
) -> PhaseTiming:
    """Allocate entrance, stagger, hold and exit frames for *item_count* items.

    Args:
        duration: Requested clip length in seconds.
        item_count: Number of animated items (stats, bars, steps).
        entrance_base: Entrance phase length in seconds.
        stagger_base: Per-item reveal offset in seconds.
        exit_base: Exit phase length in seconds.
        sequential: Each item plays its full entrance in turn
            (``item_count * entrance_base``); stagger is ignored.
        simultaneous: All items enter together (``entrance_base`` alone).
        fps: Frames per second.
        min_hold: Hold floor in seconds.

    Returns:
        Frozen PhaseTiming. ``hold_frames >= min_hold_frames`` always.
    """
    total_frames = to_frames(fps, duration)
    entrance_frames = to_frames(fps, entrance_base)
    stagger_frames = to_frames(fps, stagger_base)
    exit_frames = to_frames(fps, exit_base)
    min_hold_frames = to_frames(fps, min_hold)

    if simultaneous:
        entrance_span = entrance_frames
    elif sequential:
        entrance_span = item_count * entrance_frames
    else:
        entrance_span = entrance_frames + (item_count - 1) * stagger_frames

    hold_frames = max(min_hold_frames, total_frames - entrance_span - exit_frames)
    return PhaseTiming(
        fps=fps,
        total_frames=total_frames,
        entrance_frames=entrance_frames,
        stagger_frames=stagger_frames,
        exit_frames=exit_frames,
        min_hold_frames=min_hold_frames,
        entrance_span=entrance_span,
        hold_frames=hold_frames,
    )


def clip_exit_to_total(timing: PhaseTiming) -> PhaseTiming:
    """Shorten the exit phase (never below 0) so the timeline fits ``total_frames``.

    Hold keeps its floor; when even a zero-length exit cannot absorb the
    overrun the remainder is left in place.
    """
    overrun = timing.overrun_frames
    if not overrun:
        return timing
    return replace(timing, exit_frames=max(0, timing.exit_frames - overrun))
