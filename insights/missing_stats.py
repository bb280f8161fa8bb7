"""Which of FIR, GIR, putts and penalties were recorded for a round."""

from typing import List, Optional

from models.facts import MissingStats

STAT_ORDER = ["fir", "gir", "putts", "penalties"]

STAT_LABELS = {
    "fir": "FIR",
    "gir": "GIR",
    "putts": "putts",
    "penalties": "penalties",
}


def get_missing_stats(
    fir_hit: Optional[float] = None,
    gir_hit: Optional[float] = None,
    putts: Optional[float] = None,
    penalties: Optional[float] = None,
) -> MissingStats:
    """Flag each advanced stat that was not recorded."""
    return MissingStats(
        fir=fir_hit is None,
        gir=gir_hit is None,
        putts=putts is None,
        penalties=penalties is None,
    )


def missing_stat_keys(missing: MissingStats) -> List[str]:
    """Missing stat keys in canonical order (FIR, GIR, putts, penalties)."""
    return [key for key in STAT_ORDER if getattr(missing, key)]


def missing_count(missing: MissingStats) -> int:
    return len(missing_stat_keys(missing))


def format_missing_list(missing: MissingStats) -> str:
    """Human list used verbatim in copy, e.g. "FIR, GIR, and putts"."""
    labels = [STAT_LABELS[key] for key in missing_stat_keys(missing)]
    if not labels:
        return ""
    if len(labels) == 1:
        return labels[0]
    if len(labels) == 2:
        return f"{labels[0]} and {labels[1]}"
    return f"{', '.join(labels[:-1])}, and {labels[-1]}"
