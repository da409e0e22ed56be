"""Narration parsers: stats, progress items and process steps.

Deterministic regex extraction only. Every parser returns an empty tuple
when nothing matches; none of them raise on arbitrary text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .models.entities import ProcessStepEntity, ProgressEntity, StatEntity
from .types import NarrationType

logger = logging.getLogger(__name__)

MAX_STATS = 4
MAX_PROGRESS_ITEMS = 5
MAX_STEPS = 6

_NUMBER = r"(\d+(?:,\d{3})*(?:\.\d+)?)"
_LABEL = r"([a-zA-Z][a-zA-Z\s]{2,30})"

_MONETARY_RE = re.compile(
    r"\$\s*" + _NUMBER + r"\s*(million|billion|thousand|k|m|b)?\s+" + _LABEL,
    re.IGNORECASE,
)
_NUMERIC_RE = re.compile(
    _NUMBER + r"\s*(%|percent|\+|million|billion|thousand|k|m|b)?\s+" + _LABEL,
    re.IGNORECASE,
)
_TENS = "twenty|thirty|forty|fifty|sixty|seventy|eighty|ninety"
_UNITS = "one|two|three|four|five|six|seven|eight|nine"
_UNIT_PERCENT_RE = re.compile(
    rf"\b({_UNITS}|ten)(\s+hundred)?\s+(?:percent|%)\s+" + _LABEL,
    re.IGNORECASE,
)
_TENS_PERCENT_RE = re.compile(
    rf"\b({_TENS})(?:[\s-]?({_UNITS}))?\s+(?:percent|%)\s+" + _LABEL,
    re.IGNORECASE,
)
# A unit directly after a tens word belongs to the compound ("twenty one").
_TENS_TAIL_RE = re.compile(rf"\b(?:{_TENS})[\s-]?$", re.IGNORECASE)

_WORD_VALUES = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

_MULTIPLIER_SUFFIX = {
    "k": "K", "thousand": "K",
    "m": "M", "million": "M",
    "b": "B", "billion": "B",
}

_STEP_KEYWORDS_RE = re.compile(r"step|first|second|third|fourth|process|procedure|how to", re.IGNORECASE)
_PERCENT_KEYWORDS_RE = re.compile(r"percent|%|progress|completion|rate", re.IGNORECASE)
_NUMBER_KEYWORDS_RE = re.compile(
    r"million|billion|thousand|\d+\s*(?:users|customers|sales|revenue|growth)",
    re.IGNORECASE,
)


def _format_number(value: float) -> str:
    """Render 2.0 as ``2`` and 2.5 as ``2.5``."""
    return str(int(value)) if value.is_integer() else str(value)


def _to_number(raw: str) -> float:
    return float(raw.replace(",", ""))


# ── Stats ────────────────────────────────────────────────────────────────────


def _monetary_stats(text: str, seen: set[str]) -> list[StatEntity]:
    """``$2 million revenue`` → ``$``-prefixed stat with a K/M/B suffix.

    Labels are recorded in *seen* but not checked against it.
    """
    found: list[StatEntity] = []
    for m in _MONETARY_RE.finditer(text):
        value = _to_number(m.group(1))
        suffix = _MULTIPLIER_SUFFIX.get((m.group(2) or "").lower(), "")
        label = m.group(3).strip()
        if not label:
            continue
        seen.add(label.lower())
        found.append(StatEntity(
            value=value,
            label=label,
            prefix="$",
            suffix=suffix,
            display_value=f"${_format_number(value)}{suffix}",
        ))
    return found


def _numeric_stats(text: str, seen: set[str]) -> list[StatEntity]:
    """``45% growth``, ``10,000+ users``, ``3 million downloads``."""
    found: list[StatEntity] = []
    for m in _NUMERIC_RE.finditer(text):
        value = _to_number(m.group(1))
        raw_suffix = (m.group(2) or "").lower()
        label = m.group(3).strip()
        if not label or len(label) >= 50 or label.lower() in seen:
            continue

        display_value = None
        if raw_suffix in _MULTIPLIER_SUFFIX:
            suffix = _MULTIPLIER_SUFFIX[raw_suffix]
            display_value = f"{_format_number(value)}{suffix}"
        elif raw_suffix == "percent":
            suffix = "%"
        else:
            suffix = raw_suffix

        seen.add(label.lower())
        found.append(StatEntity(value=value, label=label, suffix=suffix, display_value=display_value))
    return found


def _word_percent_stats(text: str, seen: set[str]) -> list[StatEntity]:
    """``seventy five percent retention``, ``one hundred percent uptime``.

    Two scans share ``seen``: single words (and ``hundred``) first, then
    tens with an optional unit. Labels may swallow a later stat, so
    ``fifty percent growth and five percent churn`` yields both 5 and 50.
    """
    found: list[StatEntity] = []

    def add(value: int, label: str) -> None:
        label = label.strip()
        if value <= 0 or not label or label.lower() in seen:
            return
        seen.add(label.lower())
        found.append(StatEntity(value=value, label=label, suffix="%"))

    for m in _UNIT_PERCENT_RE.finditer(text):
        if _TENS_TAIL_RE.search(text, 0, m.start()):
            continue
        small, hundred, label = m.groups()
        add(_WORD_VALUES[small.lower()] * (100 if hundred else 1), label)

    for m in _TENS_PERCENT_RE.finditer(text):
        tens, units, label = m.groups()
        add(_WORD_VALUES[tens.lower()] + (_WORD_VALUES[units.lower()] if units else 0), label)
    return found


def parse_stats(text: str) -> tuple[StatEntity, ...]:
    """Extract up to four stats: monetary, then numeric, then spelled-out percents.

    Results keep pass order. One lower-cased label set is shared by all
    passes; the monetary pass only registers into it, so a label repeated in
    monetary form can appear twice.
    """
    seen: set[str] = set()
    stats = _monetary_stats(text, seen)
    stats += _numeric_stats(text, seen)
    stats += _word_percent_stats(text, seen)
    logger.debug("Parsed %d stat(s) from narration", len(stats))
    return tuple(stats[:MAX_STATS])


# ── Progress ─────────────────────────────────────────────────────────────────

_PROGRESS_STRATEGIES: tuple[tuple[re.Pattern[str], int, int], ...] = (
    # (pattern, label group, value group)
    (re.compile(r"([a-zA-Z][a-zA-Z\s]{2,25}):\s*(\d+)\s*%", re.IGNORECASE), 1, 2),
    (re.compile(r"(\d+)\s*%\s+(?:of\s+)?([a-zA-Z][a-zA-Z\s]{2,25})", re.IGNORECASE), 2, 1),
)


def parse_progress(text: str) -> tuple[ProgressEntity, ...]:
    """Extract up to five ``label: NN%`` items, falling back to ``NN% of label``.

    The first form that yields anything is used exclusively. Values over 100
    are dropped.
    """
    items: list[ProgressEntity] = []
    for pattern, label_group, value_group in _PROGRESS_STRATEGIES:
        for m in pattern.finditer(text):
            label = m.group(label_group).strip()
            value = int(m.group(value_group))
            if label and value <= 100:
                items.append(ProgressEntity(label=label, value=value))
        if items:
            break
    logger.debug("Parsed %d progress item(s) from narration", len(items))
    return tuple(items[:MAX_PROGRESS_ITEMS])


# ── Steps ────────────────────────────────────────────────────────────────────

_STEP_STRATEGIES: tuple[tuple[re.Pattern[str], int], ...] = (
    # (pattern, title group)
    (re.compile(r"step\s*\d+[:\s]+([^.!?\n]+)", re.IGNORECASE), 1),
    (re.compile(r"(?:^|\n)\s*\d+[.):]\s*([^.!?\n]+)", re.MULTILINE), 1),
    (re.compile(r"\b(?:first|second|third|fourth|fifth|sixth|finally)[,:\s]+([^.!?\n]+)", re.IGNORECASE), 1),
    (re.compile(r"[•\-*]\s*([^•\-*\n]+)"), 1),
)


def parse_steps(text: str) -> tuple[ProcessStepEntity, ...]:
    """Extract up to six steps.

    Forms are tried in order (``step N:``, numbered list, ordinal lead-ins,
    bullets) and accumulate until at least two steps are known. Titles are
    deduplicated case-insensitively.
    """
    steps: list[ProcessStepEntity] = []
    seen: set[str] = set()
    for pattern, title_group in _STEP_STRATEGIES:
        for m in pattern.finditer(text):
            title = m.group(title_group).strip()
            if not title or len(title) >= 100 or title.lower() in seen:
                continue
            seen.add(title.lower())
            steps.append(ProcessStepEntity(title=title))
        if len(steps) >= 2:
            break
    logger.debug("Parsed %d step(s) from narration", len(steps))
    return tuple(steps[:MAX_STEPS])


# ── Type detection ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NarrationAnalysis:
    """Everything the narration parsers found, plus the winning template type."""

    stats: tuple[StatEntity, ...]
    progress: tuple[ProgressEntity, ...]
    steps: tuple[ProcessStepEntity, ...]
    type: NarrationType | None


def analyze_narration(text: str) -> NarrationAnalysis:
    """Run all three parsers once and pick a template type.

    Priority: process-flow (≥3 steps, or ≥2 with a step keyword), then
    progress-bar (≥2 items, or ≥1 with a percent keyword), then stat-counter
    (≥2 stats, or ≥1 with a number keyword).
    """
    stats = parse_stats(text)
    progress = parse_progress(text)
    steps = parse_steps(text)

    chosen: NarrationType | None = None
    if len(steps) >= 3 or (len(steps) >= 2 and _STEP_KEYWORDS_RE.search(text)):
        chosen = "process-flow"
    elif len(progress) >= 2 or (progress and _PERCENT_KEYWORDS_RE.search(text)):
        chosen = "progress-bar"
    elif len(stats) >= 2 or (stats and _NUMBER_KEYWORDS_RE.search(text)):
        chosen = "stat-counter"

    return NarrationAnalysis(stats=stats, progress=progress, steps=steps, type=chosen)


def detect_type(text: str) -> NarrationType | None:
    """Return the narration-based template type, or None when nothing fits."""
    return analyze_narration(text).type
