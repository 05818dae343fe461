from dataclasses import dataclass, field


@dataclass(frozen=True)
class HealthRecord:
    """Numeric model input: one row of self-reported indicators.

    Binary fields use 1 for present/irregular and 0 otherwise.
    """

    # Physical symptoms
    hair_growth: int = 0
    hair_loss: int = 0
    skin_darkening: int = 0
    pimples: int = 0
    weight_gain: int = 0

    # Menstrual health
    cycle_regularity: int = 0  # 0 regular, 1 irregular
    cycle_length: float = 28.0
    follicle_left: float = 0.0
    follicle_right: float = 0.0
    avg_follicle_size_left: float = 0.0
    avg_follicle_size_right: float = 0.0
    endometrium_thickness: float = 0.0

    # Hormonal indicators
    bmi: float = 22.0
    waist_hip_ratio: float = 0.8
    fsh_lh_ratio: float = 1.5
    amh: float = 2.0
    prg: float = 1.0
    rbs: float = 90.0

    @property
    def follicle_total(self) -> float:
        return self.follicle_left + self.follicle_right


@dataclass(frozen=True)
class SubScores:
    """Per-domain points before weighting, each in [0, 100]."""

    physical: float = 0.0
    menstrual: float = 0.0
    hormonal: float = 0.0


@dataclass(frozen=True)
class PredictionResult:
    """Output of a single prediction."""

    has_pcos: bool
    confidence: float
    risk_score: float
    risk_factors: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)
