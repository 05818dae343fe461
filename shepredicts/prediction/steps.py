from shepredicts.logging.logger import Log
from shepredicts.prediction.classifier import classify
from shepredicts.prediction.confidence import ConfidenceEstimator
from shepredicts.prediction.explainer import generate_recommendations, generate_risk_factors
from shepredicts.prediction.normalizer import normalize_record
from shepredicts.prediction.pipeline import PredictionContext, PredictionStep
from shepredicts.prediction.scoring import calculate_sub_scores, combine


class NormalizeStep(PredictionStep):
    def run(self, context: PredictionContext) -> PredictionContext:
        context.normalized = normalize_record(context.record)
        if context.normalized != context.record:
            Log.debug("Clamped out-of-range input fields")
        return context


class ScoreStep(PredictionStep):
    def run(self, context: PredictionContext) -> PredictionContext:
        if context.normalized is None:
            raise ValueError("PredictionContext.normalized must be set before scoring")
        context.sub_scores = calculate_sub_scores(context.normalized)
        context.risk_score = combine(context.sub_scores)
        Log.debug(
            "Computed sub-scores",
            physical=context.sub_scores.physical,
            menstrual=context.sub_scores.menstrual,
            hormonal=context.sub_scores.hormonal,
        )
        return context


class ClassifyStep(PredictionStep):
    def run(self, context: PredictionContext) -> PredictionContext:
        if context.risk_score is None:
            raise ValueError("PredictionContext.risk_score must be set before classification")
        context.has_pcos = classify(context.risk_score)
        return context


class EstimateConfidenceStep(PredictionStep):
    def __init__(self, estimator: ConfidenceEstimator) -> None:
        self._estimator = estimator

    def run(self, context: PredictionContext) -> PredictionContext:
        if context.risk_score is None:
            raise ValueError(
                "PredictionContext.risk_score must be set before confidence estimation"
            )
        context.confidence = self._estimator.estimate(context.risk_score)
        return context


class ExplainStep(PredictionStep):
    def run(self, context: PredictionContext) -> PredictionContext:
        if context.normalized is None or context.has_pcos is None:
            raise ValueError(
                "PredictionContext.normalized and has_pcos must be set before explanation"
            )
        context.risk_factors = generate_risk_factors(context.normalized)
        context.recommendations = generate_recommendations(
            context.normalized, context.has_pcos
        )
        return context
