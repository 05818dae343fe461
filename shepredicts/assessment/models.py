import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from shepredicts.prediction.models import PredictionResult

CycleRegularity = Literal["regular", "irregular"]

_BASE36 = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class UserProfile:
    """The person taking the assessment."""

    name: str
    email: str
    age: int
    gender: str


@dataclass(frozen=True)
class PhysicalSymptoms:
    hair_growth: bool = False
    hair_loss: bool = False
    skin_darkening: bool = False
    pimples: bool = False
    weight_gain: bool = False

    @property
    def present_count(self) -> int:
        return sum(
            (
                self.hair_growth,
                self.hair_loss,
                self.skin_darkening,
                self.pimples,
                self.weight_gain,
            )
        )


@dataclass(frozen=True)
class MenstrualHealth:
    cycle_regularity: CycleRegularity = "regular"
    cycle_length: float = 28.0
    follicle_left: float = 0.0
    follicle_right: float = 0.0
    avg_follicle_size_left: float = 0.0
    avg_follicle_size_right: float = 0.0
    endometrium_thickness: float = 0.0


@dataclass(frozen=True)
class HormonalIndicators:
    bmi: float
    waist_hip_ratio: float
    fsh_lh_ratio: float
    amh: float
    prg: float
    rbs: float


@dataclass(frozen=True)
class AssessmentData:
    """Answers from all three questionnaire steps."""

    physical_symptoms: PhysicalSymptoms
    menstrual_health: MenstrualHealth
    hormonal_indicators: HormonalIndicators


@dataclass(frozen=True)
class PredictionSummary:
    """Prediction fields kept in history (recommendations are not stored)."""

    has_pcos: bool
    confidence: float
    risk_score: float
    risk_factors: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_result(cls, result: PredictionResult) -> "PredictionSummary":
        return cls(
            has_pcos=result.has_pcos,
            confidence=result.confidence,
            risk_score=result.risk_score,
            risk_factors=result.risk_factors,
        )


def new_assessment_id() -> str:
    """Build an id like ``assessment_<epoch ms>_<9 base36 chars>``."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"assessment_{time.time_ns() // 1_000_000}_{suffix}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class AssessmentResult:
    """One completed assessment as shown in the history list."""

    user: UserProfile
    assessment_data: AssessmentData
    prediction: PredictionSummary
    id: str = field(default_factory=new_assessment_id)
    date: str = field(default_factory=utc_now_iso)
