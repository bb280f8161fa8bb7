import math
from typing import Any, Mapping, Optional


def resolve_variant_offset(
    existing: Optional[Mapping[str, Any]],
    *,
    force_regenerate: bool = False,
    bump_variant: bool = False,
) -> int:
    """Offset to render with, given the persisted payload for the round.

    Invalid or negative stored values fall back to 0. The offset only moves
    on an explicit regenerate that also asks for new phrasing.
    """
    raw = existing.get("variant_offset") if existing else None
    previous = 0
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if math.isfinite(raw) and raw >= 0:
            previous = int(math.floor(raw))

    if force_regenerate and bump_variant:
        return previous + 1
    return previous
