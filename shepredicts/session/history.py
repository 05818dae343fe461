"""Read-only views over a session's assessment history (newest first)."""

from collections.abc import Sequence
from dataclasses import dataclass

from shepredicts.assessment.models import AssessmentResult

HIGH_RISK_CONFIDENCE = 70.0
MODERATE_RISK_CONFIDENCE = 40.0


def risk_level(confidence: float) -> str:
    """Bucket a displayed confidence into High, Moderate or Low."""
    if confidence >= HIGH_RISK_CONFIDENCE:
        return "High"
    if confidence >= MODERATE_RISK_CONFIDENCE:
        return "Moderate"
    return "Low"


@dataclass(frozen=True)
class HistorySummary:
    total: int
    latest_confidence: float | None
    high_risk_count: int
    low_risk_count: int


@dataclass(frozen=True)
class TrendComparison:
    previous_confidence: float
    current_confidence: float

    @property
    def increased(self) -> bool:
        return self.current_confidence > self.previous_confidence


def summarize(history: Sequence[AssessmentResult]) -> HistorySummary:
    confidences = [result.prediction.confidence for result in history]
    return HistorySummary(
        total=len(history),
        latest_confidence=confidences[0] if confidences else None,
        high_risk_count=sum(1 for c in confidences if c >= HIGH_RISK_CONFIDENCE),
        low_risk_count=sum(1 for c in confidences if c < MODERATE_RISK_CONFIDENCE),
    )


def compare_with_previous(history: Sequence[AssessmentResult]) -> TrendComparison | None:
    """Latest vs. the one before it; None until there are two results."""
    if len(history) < 2:
        return None
    return TrendComparison(
        previous_confidence=history[1].prediction.confidence,
        current_confidence=history[0].prediction.confidence,
    )
