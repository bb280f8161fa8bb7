class InsightError(Exception):
    """Base for all insight engine defects."""


class UnknownBandError(InsightError, ValueError):
    """Performance band outside the closed enum."""


class OnboardingRoundError(InsightError, ValueError):
    """Onboarding policy asked to score a round outside 1..3."""


class BannedCopyError(InsightError, AssertionError):
    """Rendered copy contains a banned fragment."""

    def __init__(self, token: str, text: str, *, message_key: str, outcome: str, variant_index: int):
        self.token = token
        self.text = text
        self.message_key = message_key
        self.outcome = outcome
        self.variant_index = variant_index
        super().__init__(
            f'Banned copy token "{token}" in {message_key} ({outcome}) '
            f"variant {variant_index}: {text}"
        )
