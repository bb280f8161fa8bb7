from insights.engine import generate_post_round_insights
from insights.exceptions import BannedCopyError, InsightError, OnboardingRoundError, UnknownBandError
from insights.facts import build_round_facts, classify_band
from insights.onboarding import build_onboarding_insights, order_rounds, round_ordinal
from insights.outcomes import OutcomeCode
from insights.variant_offset import resolve_variant_offset
from insights.variants import VariantOptions, build_variant_seed

__all__ = [
    "generate_post_round_insights",
    "BannedCopyError",
    "InsightError",
    "OnboardingRoundError",
    "UnknownBandError",
    "build_round_facts",
    "classify_band",
    "build_onboarding_insights",
    "order_rounds",
    "round_ordinal",
    "OutcomeCode",
    "resolve_variant_offset",
    "VariantOptions",
    "build_variant_seed",
]
