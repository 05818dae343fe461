from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from shepredicts.prediction.models import HealthRecord, SubScores


@dataclass(slots=True)
class PredictionContext:
    record: HealthRecord
    normalized: HealthRecord | None = None
    sub_scores: SubScores | None = None
    risk_score: float | None = None
    has_pcos: bool | None = None
    confidence: float | None = None
    risk_factors: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


class PredictionStep(ABC):
    @abstractmethod
    def run(self, context: PredictionContext) -> PredictionContext:
        raise NotImplementedError
