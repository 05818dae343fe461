from shepredicts.prediction.base import BasePredictor
from shepredicts.prediction.factory import PredictorFactory
from shepredicts.prediction.models import HealthRecord, PredictionResult, SubScores
from shepredicts.prediction.predictor import RuleBasedPredictor, predict

__all__ = [
    "BasePredictor",
    "HealthRecord",
    "PredictionResult",
    "PredictorFactory",
    "RuleBasedPredictor",
    "SubScores",
    "predict",
]
