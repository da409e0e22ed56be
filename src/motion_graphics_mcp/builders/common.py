"""Request validation shared by the infographic and compositor builders."""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..config import get_config
from ..errors import InvalidInputError


def check_duration(duration: float) -> None:
    if not (math.isfinite(duration) and duration > 0):
        raise InvalidInputError(f"duration must be a finite number > 0 seconds, got {duration}")


def resolve_canvas(width: int | None, height: int | None) -> tuple[int, int]:
    """Apply config defaults to an optional canvas size and reject non-positive values."""
    cfg = get_config()
    w = cfg.default_width if width is None else width
    h = cfg.default_height if height is None else height
    if w < 1 or h < 1:
        raise InvalidInputError(f"canvas size must be positive, got {w}x{h}")
    return w, h


def check_count(kind: str, items: Sequence, minimum: int, maximum: int) -> int:
    """Return ``len(items)`` or raise when it falls outside ``[minimum, maximum]``."""
    n = len(items)
    if n < minimum or n > maximum:
        raise InvalidInputError(f"{kind} requires {minimum}-{maximum} entries, got {n}")
    return n
