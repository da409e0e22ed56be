"""Visual-direction parser: before/after, picture-in-picture and split-screen intent.

Keywords are matched on word boundaries so ``pipeline`` or ``afternoon``
do not trigger a compositor. The first family that matches wins:
before/after, then PiP, then split screen.
"""

from __future__ import annotations

import logging
import re

from .models.entities import DirectionIntent
from .types import BeforeAfterTransition, PipPosition, SplitLayout

logger = logging.getLogger(__name__)

MIN_PANELS = 2
MAX_PANELS = 4

_BEFORE_RE = re.compile(r"\bbefore\b")
_AFTER_RE = re.compile(r"\bafter\b")
_PIP_RE = re.compile(r"\bpicture[\s-]in[\s-]picture\b|\bpip\b|\boverlay")
_SPLIT_RE = re.compile(r"\bsplit|\bside[\s-]by[\s-]side\b|\bcomparison\b|\bgrid\b")

_QUOTED_RE = re.compile(r"(?<![A-Za-z0-9])[\"']([^\"'\n]{1,60})[\"'](?![A-Za-z0-9])")
_CLAUSE_RE = re.compile(r"\b(before|after)\s*:\s*([^\"'\n,.;]+)", re.IGNORECASE)

_PANEL_COUNT_RE = re.compile(r"(\d+)[\s-]*(?:panel|way|screen|part|column|row)")
_SPLIT_LABELS_RE = re.compile(r"(?:showing|comparing|displaying|with)[:\s]+([^.!?]+)", re.IGNORECASE)
_LABEL_SEPARATOR_RE = re.compile(r",|\b(?:and|vs\.?|versus)\b", re.IGNORECASE)

_TRANSITION_KEYWORDS: tuple[tuple[str, BeforeAfterTransition], ...] = (
    ("fade", "fade"),
    ("wipe", "wipe"),
    ("flip", "flip"),
)


def _has_word(text: str, word: str) -> bool:
    return re.search(rf"\b{word}\b", text) is not None


# ── Before / after ───────────────────────────────────────────────────────────


def _before_after_labels(direction: str) -> tuple[str, ...]:
    """Quoted labels first, then ``before: X`` / ``after: Y`` clauses."""
    quoted = [q.strip() for q in _QUOTED_RE.findall(direction) if q.strip()]
    if quoted:
        return tuple(quoted[:2])

    clauses: dict[str, str] = {}
    for keyword, label in _CLAUSE_RE.findall(direction):
        label = label.strip()
        if label:
            clauses.setdefault(keyword.lower(), label)
    if clauses:
        return (clauses.get("before", "Before"), clauses.get("after", "After"))

    return ("Before", "After")


def _parse_before_after(direction: str, lower: str) -> DirectionIntent:
    transition: BeforeAfterTransition = "slider"
    for keyword, style in _TRANSITION_KEYWORDS:
        if keyword in lower:
            transition = style
            break
    return DirectionIntent(
        type="before-after",
        panel_count=2,
        labels=_before_after_labels(direction),
        transition_style=transition,
    )


# ── Picture in picture ───────────────────────────────────────────────────────


def _pip_position(lower: str) -> PipPosition:
    top = _has_word(lower, "top")
    bottom = _has_word(lower, "bottom")
    left = _has_word(lower, "left")
    right = _has_word(lower, "right")
    if top and left:
        return "top-left"
    if top and right:
        return "top-right"
    if bottom and left:
        return "bottom-left"
    return "bottom-right"


# ── Split screen ─────────────────────────────────────────────────────────────


def infer_split_layout(panel_count: int, lower: str = "") -> SplitLayout:
    """Pick a split layout from the panel count and ``vertical``/``grid`` keywords."""
    if "vertical" in lower:
        if panel_count == 2:
            return "2-vertical"
        if panel_count == 3:
            return "3-vertical"
        return "4-grid"
    if "grid" in lower or panel_count >= 4:
        return "4-grid"
    if panel_count == 3:
        return "3-horizontal"
    return "2-horizontal"


def _split_labels(direction: str) -> tuple[str, ...]:
    m = _SPLIT_LABELS_RE.search(direction)
    if not m:
        return ()
    parts = (p.strip() for p in _LABEL_SEPARATOR_RE.split(m.group(1)))
    return tuple(p for p in parts if 0 < len(p) < 40)


def _parse_split(direction: str, lower: str) -> DirectionIntent:
    m = _PANEL_COUNT_RE.search(lower)
    panel_count = int(m.group(1)) if m else MIN_PANELS
    panel_count = min(max(panel_count, MIN_PANELS), MAX_PANELS)
    layout = infer_split_layout(panel_count, lower)
    labels = _split_labels(direction)
    logger.debug(
        "Parsed split screen from direction: %d panel(s), layout %s, %d label(s)",
        panel_count, layout, len(labels),
    )
    return DirectionIntent(type="split-screen", panel_count=panel_count, labels=labels, layout=layout)


def parse_direction(direction: str) -> DirectionIntent:
    """Extract compositor intent from a visual-direction string.

    Returns:
        DirectionIntent; ``type == "unknown"`` when no family keyword is present.
    """
    lower = direction.lower()

    if _BEFORE_RE.search(lower) and _AFTER_RE.search(lower):
        return _parse_before_after(direction, lower)

    if _PIP_RE.search(lower):
        return DirectionIntent(type="pip", panel_count=2, pip_position=_pip_position(lower))

    if _SPLIT_RE.search(lower):
        return _parse_split(direction, lower)

    return DirectionIntent(type="unknown")
