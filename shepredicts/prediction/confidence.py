import random

MIN_CONFIDENCE = 5.0
MAX_CONFIDENCE = 95.0
JITTER_SPAN = 10.0


class ConfidenceEstimator:
    """Display-only confidence: the risk score plus bounded uniform jitter.

    The jitter lies in (-5, +5) and the result is clamped to [5, 95]. It is
    never fed back into classification or explanation.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def estimate(self, risk_score: float) -> float:
        jitter = (self._rng.random() - 0.5) * JITTER_SPAN
        return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, risk_score + jitter))
