from unittest.mock import MagicMock

import pytest

from shepredicts.assessment.exceptions import WizardStateError
from shepredicts.assessment.models import (
    HormonalIndicators,
    MenstrualHealth,
    PhysicalSymptoms,
    UserProfile,
)
from shepredicts.assessment.wizard import AssessmentWizard, WizardStep
from shepredicts.prediction.base import BasePredictor
from shepredicts.prediction.models import HealthRecord, PredictionResult
from shepredicts.session.context import SessionContext
from shepredicts.session.exceptions import SessionError

_PREDICTION = PredictionResult(
    has_pcos=True,
    confidence=81.4,
    risk_score=79.5,
    risk_factors=("Irregular menstrual cycles",),
    recommendations=("Regular follow-up appointments to monitor treatment progress",),
)


def _make_hormonal() -> HormonalIndicators:
    return HormonalIndicators(
        bmi=31, waist_hip_ratio=0.9, fsh_lh_ratio=0.8, amh=5.0, prg=1.5, rbs=150
    )


def _make_wizard(logged_in: bool = True) -> tuple[AssessmentWizard, SessionContext, MagicMock]:
    session = SessionContext()
    if logged_in:
        session.login(
            UserProfile(name="Jane Doe", email="jane@example.com", age=27, gender="female")
        )
    predictor = MagicMock(spec=BasePredictor)
    predictor.predict.return_value = _PREDICTION
    return AssessmentWizard(session, predictor), session, predictor


def _complete_first_two_steps(wizard: AssessmentWizard) -> None:
    wizard.submit_physical_symptoms(PhysicalSymptoms(hair_growth=True))
    wizard.submit_menstrual_health(MenstrualHealth(cycle_regularity="irregular"))


class TestWizardTransitions:
    def test_starts_on_physical_symptoms(self) -> None:
        wizard, _session, _predictor = _make_wizard()
        assert wizard.step is WizardStep.PHYSICAL_SYMPTOMS
        assert wizard.progress == (1, 4)

    def test_advances_through_steps(self) -> None:
        wizard, _session, _predictor = _make_wizard()
        wizard.submit_physical_symptoms(PhysicalSymptoms())
        assert wizard.step is WizardStep.MENSTRUAL_HEALTH
        wizard.submit_menstrual_health(MenstrualHealth())
        assert wizard.step is WizardStep.HORMONAL_INDICATORS
        wizard.submit_hormonal_indicators(_make_hormonal())
        assert wizard.step is WizardStep.RESULTS
        assert wizard.progress == (4, 4)

    def test_out_of_order_submit_raises(self) -> None:
        wizard, _session, _predictor = _make_wizard()
        with pytest.raises(WizardStateError, match="Cannot submit Menstrual Health"):
            wizard.submit_menstrual_health(MenstrualHealth())

    def test_retreat_keeps_answers(self) -> None:
        wizard, _session, _predictor = _make_wizard()
        _complete_first_two_steps(wizard)
        wizard.retreat()
        assert wizard.step is WizardStep.MENSTRUAL_HEALTH
        assert wizard.menstrual_health == MenstrualHealth(cycle_regularity="irregular")

    def test_retreat_on_first_step_is_noop(self) -> None:
        wizard, _session, _predictor = _make_wizard()
        wizard.retreat()
        assert wizard.step is WizardStep.PHYSICAL_SYMPTOMS

    def test_restart_clears_answers(self) -> None:
        wizard, _session, _predictor = _make_wizard()
        _complete_first_two_steps(wizard)
        wizard.submit_hormonal_indicators(_make_hormonal())
        wizard.restart()
        assert wizard.step is WizardStep.PHYSICAL_SYMPTOMS
        assert wizard.physical_symptoms is None
        assert wizard.prediction is None
        assert wizard.result is None


class TestWizardCompletion:
    def test_predicts_from_encoded_record(self) -> None:
        wizard, _session, predictor = _make_wizard()
        _complete_first_two_steps(wizard)
        wizard.submit_hormonal_indicators(_make_hormonal())
        record = predictor.predict.call_args.args[0]
        assert isinstance(record, HealthRecord)
        assert record.hair_growth == 1
        assert record.cycle_regularity == 1
        assert record.bmi == 31

    def test_stores_result_in_session_history(self) -> None:
        wizard, session, _predictor = _make_wizard()
        _complete_first_two_steps(wizard)
        result = wizard.submit_hormonal_indicators(_make_hormonal())
        assert session.history == (result,)
        assert result.prediction.risk_score == 79.5
        assert result.user.email == "jane@example.com"
        assert wizard.prediction == _PREDICTION

    def test_resubmitting_after_retreat_adds_second_result(self) -> None:
        wizard, session, _predictor = _make_wizard()
        _complete_first_two_steps(wizard)
        wizard.submit_hormonal_indicators(_make_hormonal())
        wizard.retreat()
        wizard.submit_hormonal_indicators(_make_hormonal())
        assert len(session.history) == 2

    def test_requires_signed_in_user(self) -> None:
        wizard, session, predictor = _make_wizard(logged_in=False)
        _complete_first_two_steps(wizard)
        with pytest.raises(SessionError):
            wizard.submit_hormonal_indicators(_make_hormonal())
        predictor.predict.assert_not_called()
        assert wizard.step is WizardStep.HORMONAL_INDICATORS
        assert session.history == ()
