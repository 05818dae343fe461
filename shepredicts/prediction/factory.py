from collections.abc import Callable

from shepredicts.config.settings import Settings
from shepredicts.prediction.base import BasePredictor
from shepredicts.prediction.predictor import build_predictor


class PredictorFactory:
    """Creates the configured prediction engine."""

    ENGINES: dict[str, Callable[[int | None], BasePredictor]] = {
        "rule_based": build_predictor,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePredictor:
        engine = settings.prediction_engine.lower()
        builder = cls.ENGINES.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown prediction engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return builder(settings.confidence_seed)
