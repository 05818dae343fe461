import pytest

from shepredicts.prediction.models import HealthRecord


@pytest.fixture()
def healthy_record() -> HealthRecord:
    """No symptoms, regular 28-day cycle, unremarkable labs."""
    return HealthRecord(
        cycle_regularity=0,
        cycle_length=28,
        follicle_left=5,
        follicle_right=5,
        bmi=22,
        waist_hip_ratio=0.75,
        fsh_lh_ratio=1.5,
        amh=2.0,
        rbs=90,
    )


@pytest.fixture()
def high_risk_record() -> HealthRecord:
    """Hirsutism and weight gain, irregular long cycles, every hormonal flag set."""
    return HealthRecord(
        hair_growth=1,
        weight_gain=1,
        cycle_regularity=1,
        cycle_length=40,
        follicle_left=12,
        follicle_right=12,
        bmi=32,
        waist_hip_ratio=0.9,
        fsh_lh_ratio=0.8,
        amh=5.0,
        rbs=150,
    )


@pytest.fixture()
def form_answers() -> dict[str, object]:
    """Answers as posted by the browser form (camelCase keys)."""
    return {
        "user": {"name": "Jane Doe", "email": "jane@example.com", "age": 27, "gender": "female"},
        "physicalSymptoms": {
            "hairGrowth": True,
            "hairLoss": False,
            "skinDarkening": False,
            "pimples": False,
            "weightGain": True,
        },
        "menstrualHealth": {
            "cycleRegularity": "irregular",
            "cycleLength": 40,
            "follicleLeft": 12,
            "follicleRight": 12,
            "avgFollicleSizeLeft": 5.2,
            "avgFollicleSizeRight": 4.8,
            "endometriumThickness": 8.5,
        },
        "hormonalIndicators": {
            "bmi": 32,
            "waistHipRatio": 0.9,
            "fshLhRatio": 0.8,
            "amh": 5.0,
            "prg": 1.5,
            "rbs": 150,
        },
    }
