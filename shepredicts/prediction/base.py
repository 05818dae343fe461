from abc import ABC, abstractmethod

from shepredicts.prediction.models import HealthRecord, PredictionResult


class BasePredictor(ABC):
    """Contract for all prediction engines."""

    @abstractmethod
    def predict(self, record: HealthRecord) -> PredictionResult:
        """Score a health record and explain the outcome.

        Args:
            record: Raw numeric model input; values may be out of range.

        Returns:
            PredictionResult with classification, confidence, risk score,
            risk factors and recommendations.

        Must not raise for out-of-range input.
        """
