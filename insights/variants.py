"""Deterministic phrasing rotation.

``index = (sha256(seed|outcome)[:8] + offset) mod pool size``. Hashing picks
where a round starts in the pool, the offset walks from there, so a full
cycle of offsets visits every variant exactly once.
"""

import hashlib
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class VariantOptions:
    """Seed, offset and optional forced index for one render."""
    seed: Optional[str] = None
    offset: int = 0
    fixed_index: Optional[int] = None

    def child(self, suffix: str) -> "VariantOptions":
        """Options for a sibling slot so slots never share a seed."""
        return VariantOptions(
            seed=f"{self.seed}|{suffix}" if self.seed else None,
            offset=self.offset,
            fixed_index=self.fixed_index,
        )


@dataclass(frozen=True)
class VariantPick:
    text: str
    index: int
    count: int


def build_variant_seed(round_id: Optional[str]) -> Optional[str]:
    """Seed string for a persisted round, None when the round has no id."""
    if not round_id:
        return None
    return f"post-round:{round_id}"


def seed_hash(seed: str, outcome: str) -> int:
    digest = hashlib.sha256(f"{seed}|{outcome}".encode("utf-8")).hexdigest()
    return int(digest[:8], 16)


def resolve_variant_index(outcome: str, pool_size: int, options: VariantOptions) -> int:
    if pool_size <= 0:
        return 0
    if options.fixed_index is not None:
        return int(options.fixed_index) % pool_size
    if not options.seed:
        return int(options.offset) % pool_size
    return (seed_hash(options.seed, outcome) + int(options.offset)) % pool_size


def pick_variant(outcome: str, variants: Sequence[str], options: VariantOptions) -> VariantPick:
    """Pick one phrasing for ``outcome``. Pure: same inputs, same text."""
    if not variants:
        return VariantPick(text="", index=0, count=0)
    index = resolve_variant_index(outcome, len(variants), options)
    return VariantPick(text=variants[index], index=index, count=len(variants))
