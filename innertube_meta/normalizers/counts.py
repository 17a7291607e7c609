"""Parse human-formatted counts ("1,234", "9.91M", "358,745 videos")."""

from __future__ import annotations

import math
import re

_COMPACT_RE = re.compile(r"^([0-9]+(?:\.[0-9]+)?)\s*([kmb])\b", re.IGNORECASE)
_NON_DIGIT_RE = re.compile(r"[^0-9]")

_UNIT_SCALE = {
    "k": 1_000,
    "m": 1_000_000,
    "b": 1_000_000_000,
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_count(value: object) -> int:
    """Convert an upstream count into a non-negative integer.

    Compact notations are scaled only when a unit follows the number, so
    comma-grouped values like ``"6,403,179,271"`` are not read as ``6``.
    Anything else has its non-digit characters stripped.  Unparseable input
    gives ``0``; this function never raises.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if not math.isfinite(value) or value < 0:
            return 0
        return _round_half_up(value)
    if not isinstance(value, str):
        return 0

    text = value.strip()

    compact = _COMPACT_RE.match(text)
    if compact:
        scaled = float(compact.group(1)) * _UNIT_SCALE[compact.group(2).lower()]
        if not math.isfinite(scaled):
            return 0
        return _round_half_up(scaled)

    digits = _NON_DIGIT_RE.sub("", text)
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        # beyond sys.get_int_max_str_digits()
        return 0
