"""Reject rendered copy that contains placeholder or filler phrasing.

Every template fill goes through ``assert_clean_copy``. A hit is an authoring
bug, so it raises instead of rewriting the text.
"""

import re
from typing import Optional

from insights.exceptions import BannedCopyError

# Matched case-insensitively
BANNED_PHRASES = (
    "consider",
    "could",
    "might",
    "seems",
    "challenge",
    "needs more focus",
    "significant impact",
    "crucial",
    "moving forward",
    "opportunity for success",
    "enhance scoring",
    "decision-making on the greens",
    "improve your efficiency",
    "keep a close eye on",
    "round context",
    "tracked data",
    "the data shows",
    "based on your data",
    "this area",
    "that area",
    "short game",
    "—",
    "–",
    "&mdash;",
)

# Matched as written: leaked keys, unfilled slots, null renders
BANNED_LITERALS = (
    "off_tee",
    "sg_",
    "_",
    "{",
    "}",
    "None",
    "null",
    "undefined",
    "NaN",
    "nan strokes",
    "..",
)

_AREA_LABELS = r"(Off The Tee|Approach|Putting|Penalties)"
_DUPLICATED_AREA = re.compile(rf"\b{_AREA_LABELS}\b[^.]*\band\s+\1\b", re.IGNORECASE)


def find_banned_fragment(text: str) -> Optional[str]:
    """Return the first banned fragment found in ``text``, else None."""
    lower = text.lower()
    for phrase in BANNED_PHRASES:
        if phrase in lower:
            return phrase
    for literal in BANNED_LITERALS:
        if literal in text:
            return literal
    match = _DUPLICATED_AREA.search(text)
    if match:
        return match.group(0)
    return None


def assert_clean_copy(
    text: str, *, message_key: str, outcome: str, variant_index: int = 0
) -> str:
    """Raise BannedCopyError if ``text`` is not acceptable prose, else return it."""
    token = find_banned_fragment(text)
    if token is not None:
        raise BannedCopyError(
            token,
            text,
            message_key=message_key,
            outcome=outcome,
            variant_index=variant_index,
        )
    return text
