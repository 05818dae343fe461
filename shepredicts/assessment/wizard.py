"""Multi-step questionnaire flow.

PHYSICAL_SYMPTOMS -> MENSTRUAL_HEALTH -> HORMONAL_INDICATORS -> RESULTS.
Each submit advances one step; retreat goes back one step and keeps the
answers; restart returns to the first step and clears them.
"""

from enum import IntEnum

from shepredicts.assessment.converter import to_health_record
from shepredicts.assessment.exceptions import WizardStateError
from shepredicts.assessment.models import (
    AssessmentData,
    AssessmentResult,
    HormonalIndicators,
    MenstrualHealth,
    PhysicalSymptoms,
    PredictionSummary,
)
from shepredicts.logging.logger import Log
from shepredicts.prediction.base import BasePredictor
from shepredicts.prediction.models import PredictionResult
from shepredicts.session.context import SessionContext


class WizardStep(IntEnum):
    PHYSICAL_SYMPTOMS = 1
    MENSTRUAL_HEALTH = 2
    HORMONAL_INDICATORS = 3
    RESULTS = 4


STEP_TITLES: dict[WizardStep, str] = {
    WizardStep.PHYSICAL_SYMPTOMS: "Physical Symptoms",
    WizardStep.MENSTRUAL_HEALTH: "Menstrual Health",
    WizardStep.HORMONAL_INDICATORS: "Hormonal Indicators",
    WizardStep.RESULTS: "Results",
}


class AssessmentWizard:
    """Drives one user through the questionnaire and records the outcome."""

    def __init__(self, session: SessionContext, predictor: BasePredictor) -> None:
        self._session = session
        self._predictor = predictor
        self._step = WizardStep.PHYSICAL_SYMPTOMS
        self._physical: PhysicalSymptoms | None = None
        self._menstrual: MenstrualHealth | None = None
        self._hormonal: HormonalIndicators | None = None
        self._prediction: PredictionResult | None = None
        self._result: AssessmentResult | None = None

    @property
    def step(self) -> WizardStep:
        return self._step

    @property
    def progress(self) -> tuple[int, int]:
        return int(self._step), len(WizardStep)

    @property
    def prediction(self) -> PredictionResult | None:
        return self._prediction

    @property
    def result(self) -> AssessmentResult | None:
        return self._result

    @property
    def physical_symptoms(self) -> PhysicalSymptoms | None:
        return self._physical

    @property
    def menstrual_health(self) -> MenstrualHealth | None:
        return self._menstrual

    @property
    def hormonal_indicators(self) -> HormonalIndicators | None:
        return self._hormonal

    def submit_physical_symptoms(self, data: PhysicalSymptoms) -> None:
        self._expect(WizardStep.PHYSICAL_SYMPTOMS)
        self._physical = data
        self._advance()

    def submit_menstrual_health(self, data: MenstrualHealth) -> None:
        self._expect(WizardStep.MENSTRUAL_HEALTH)
        self._menstrual = data
        self._advance()

    def submit_hormonal_indicators(self, data: HormonalIndicators) -> AssessmentResult:
        """Complete the questionnaire, predict, and store the result in history."""
        self._expect(WizardStep.HORMONAL_INDICATORS)
        user = self._session.require_user()
        if self._physical is None or self._menstrual is None:
            raise WizardStateError("Earlier steps must be completed before step 3")
        self._hormonal = data

        assessment_data = AssessmentData(
            physical_symptoms=self._physical,
            menstrual_health=self._menstrual,
            hormonal_indicators=data,
        )
        prediction = self._predictor.predict(to_health_record(assessment_data))
        result = AssessmentResult(
            user=user,
            assessment_data=assessment_data,
            prediction=PredictionSummary.from_result(prediction),
        )
        self._session.add_assessment_result(result)
        self._prediction = prediction
        self._result = result
        self._advance()
        return result

    def retreat(self) -> None:
        if self._step > WizardStep.PHYSICAL_SYMPTOMS:
            self._step = WizardStep(self._step - 1)
            Log.debug(f"Wizard moved back to {STEP_TITLES[self._step]}")

    def restart(self) -> None:
        self._step = WizardStep.PHYSICAL_SYMPTOMS
        self._physical = None
        self._menstrual = None
        self._hormonal = None
        self._prediction = None
        self._result = None
        Log.debug("Wizard restarted")

    def _expect(self, step: WizardStep) -> None:
        if self._step is not step:
            raise WizardStateError(
                f"Cannot submit {STEP_TITLES[step]} while on {STEP_TITLES[self._step]}"
            )

    def _advance(self) -> None:
        self._step = WizardStep(self._step + 1)
        Log.debug(f"Wizard advanced to {STEP_TITLES[self._step]}")
