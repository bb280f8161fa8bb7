"""Number formatting and template filling shared by every message."""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Optional

from models.facts import MeasuredComponent, RoundEvidence

_SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,!?;:])")
_REPEATED_PERIODS = re.compile(r"\.{2,}")
_WHITESPACE = re.compile(r"\s+")
_SLOT = re.compile(r"\{(\w+)\}")


def round_one(value: float) -> float:
    """Round half away from zero to one decimal (2.25 -> 2.3, -2.25 -> -2.3)."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def sanitize_whitespace(text: str) -> str:
    text = _SPACE_BEFORE_PUNCT.sub(r"\1", text)
    text = _REPEATED_PERIODS.sub(".", text)
    return _WHITESPACE.sub(" ", text).strip()


def fill_template(template: str, replacements: Mapping[str, str]) -> str:
    """Fill ``{slot}`` markers. Unknown slots are left in place for the guard to catch."""
    filled = _SLOT.sub(lambda m: replacements.get(m.group(1), m.group(0)), template)
    return sanitize_whitespace(filled)


def format_number(value: float) -> str:
    """75 -> "75", 74.04 -> "74.04"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_to_par(to_par: float) -> str:
    if to_par == 0:
        return "E"
    text = format_number(to_par)
    return f"+{text}" if to_par > 0 else text


def format_score_line(score: float, to_par: float) -> str:
    """"75 (+3)"."""
    return f"{format_number(score)} ({format_to_par(to_par)})"


def format_one_decimal(value: float) -> str:
    return f"{round_one(value):.1f}"


def format_abs_one_decimal(value: float) -> str:
    return f"{round_one(abs(value)):.1f}"


def format_signed_one_decimal(value: float) -> str:
    rounded = round_one(value)
    if rounded == 0:
        return "0.0"
    return f"+{rounded:.1f}" if rounded > 0 else f"{rounded:.1f}"


def format_whole_or_one_decimal(value: float) -> str:
    """Absolute delta as "3" or "2.5"."""
    rounded = round_one(abs(value))
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.1f}"


def stroke_word(value: float) -> str:
    return "stroke" if abs(abs(value) - 1) < 0.001 else "strokes"


def _pluralize(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def evidence_detail(component: MeasuredComponent, evidence: Optional[RoundEvidence]) -> str:
    """Raw counts backing a component, e.g. "8/14 fairways" or "" if unknown."""
    if evidence is None:
        return ""
    if component.name == "off_tee" and evidence.fairways_hit is not None:
        hit = evidence.fairways_hit
        possible = evidence.fairways_possible
        if possible:
            return f"{hit}/{possible} {_pluralize(possible, 'fairway', 'fairways')}"
        return f"{hit} {_pluralize(hit, 'fairway', 'fairways')}"
    if component.name == "approach" and evidence.greens_hit is not None:
        if evidence.greens_possible:
            return f"{evidence.greens_hit}/{evidence.greens_possible} greens in regulation"
        return f"{evidence.greens_hit} greens in regulation"
    if component.name == "putting" and evidence.putts_total is not None:
        return f"{evidence.putts_total} total putts"
    if component.name == "penalties" and evidence.penalties_total is not None:
        count = evidence.penalties_total
        return f"{count} {_pluralize(count, 'penalty', 'penalties')}"
    return ""


def evidence_token(component: MeasuredComponent, evidence: Optional[RoundEvidence]) -> str:
    detail = evidence_detail(component, evidence)
    return f" ({detail})" if detail else ""


def is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)
