"""Rule-based PCOS predictor."""

import random

from shepredicts.logging.logger import Log
from shepredicts.prediction.base import BasePredictor
from shepredicts.prediction.confidence import ConfidenceEstimator
from shepredicts.prediction.models import HealthRecord, PredictionResult
from shepredicts.prediction.pipeline import PredictionContext, PredictionStep
from shepredicts.prediction.steps import (
    ClassifyStep,
    EstimateConfidenceStep,
    ExplainStep,
    NormalizeStep,
    ScoreStep,
)


class RuleBasedPredictor(BasePredictor):
    """Runs normalize -> score -> classify -> confidence -> explain."""

    def __init__(self, estimator: ConfidenceEstimator | None = None) -> None:
        self._steps: list[PredictionStep] = [
            NormalizeStep(),
            ScoreStep(),
            ClassifyStep(),
            EstimateConfidenceStep(estimator or ConfidenceEstimator()),
            ExplainStep(),
        ]

    def predict(self, record: HealthRecord) -> PredictionResult:
        context = PredictionContext(record=record)
        for step in self._steps:
            context = step.run(context)
        result = self._build_result(context)
        Log.info(
            f"Prediction complete: risk score {result.risk_score}, "
            f"{'elevated' if result.has_pcos else 'low'} risk, "
            f"{len(result.risk_factors)} risk factors"
        )
        return result

    @staticmethod
    def _build_result(context: PredictionContext) -> PredictionResult:
        if (
            context.risk_score is None
            or context.has_pcos is None
            or context.confidence is None
        ):
            raise ValueError("Prediction pipeline finished with missing fields")
        return PredictionResult(
            has_pcos=context.has_pcos,
            confidence=round(context.confidence, 2),
            risk_score=round(context.risk_score, 2),
            risk_factors=tuple(context.risk_factors),
            recommendations=tuple(context.recommendations),
        )


def build_predictor(seed: int | None = None) -> RuleBasedPredictor:
    """Rule-based predictor whose confidence jitter uses an optional seed."""
    return RuleBasedPredictor(ConfidenceEstimator(random.Random(seed)))


_default_predictor = RuleBasedPredictor()


def predict(record: HealthRecord) -> PredictionResult:
    """Score a record with the default stateless rule-based predictor."""
    return _default_predictor.predict(record)
