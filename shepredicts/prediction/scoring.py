"""Rule-based PCOS risk score.

Each domain earns fixed points per triggered condition; the three domain
scores are then weighted into a single 0-100 risk score. The condition
predicates below are shared with the explainer so both stay in lockstep.
"""

from shepredicts.prediction.models import HealthRecord, SubScores

PHYSICAL_WEIGHT = 0.25
MENSTRUAL_WEIGHT = 0.35
HORMONAL_WEIGHT = 0.40
MAX_RISK_SCORE = 100.0

LONG_CYCLE_DAYS = 35
SHORT_CYCLE_DAYS = 21
POLYCYSTIC_FOLLICLE_COUNT = 20
OVERWEIGHT_BMI = 25
OBESE_BMI = 30
HIGH_WAIST_HIP_RATIO = 0.85
LOW_FSH_LH_RATIO = 1
HIGH_AMH = 4.5
HIGH_BLOOD_SUGAR = 140


def is_irregular_cycle(record: HealthRecord) -> bool:
    return record.cycle_regularity == 1


def is_long_cycle(record: HealthRecord) -> bool:
    return record.cycle_length > LONG_CYCLE_DAYS


def is_short_cycle(record: HealthRecord) -> bool:
    return record.cycle_length < SHORT_CYCLE_DAYS


def has_polycystic_follicles(record: HealthRecord) -> bool:
    return record.follicle_total >= POLYCYSTIC_FOLLICLE_COUNT


def is_overweight(record: HealthRecord) -> bool:
    return record.bmi >= OVERWEIGHT_BMI


def is_obese(record: HealthRecord) -> bool:
    return record.bmi >= OBESE_BMI


def has_high_waist_hip_ratio(record: HealthRecord) -> bool:
    return record.waist_hip_ratio >= HIGH_WAIST_HIP_RATIO


def has_low_fsh_lh_ratio(record: HealthRecord) -> bool:
    return record.fsh_lh_ratio < LOW_FSH_LH_RATIO


def has_elevated_amh(record: HealthRecord) -> bool:
    return record.amh > HIGH_AMH


def has_elevated_blood_sugar(record: HealthRecord) -> bool:
    return record.rbs > HIGH_BLOOD_SUGAR


def physical_score(record: HealthRecord) -> float:
    score = 0.0
    if record.hair_growth:
        score += 25
    if record.hair_loss:
        score += 15
    if record.skin_darkening:
        score += 20
    if record.pimples:
        score += 15
    if record.weight_gain:
        score += 25
    return score


def menstrual_score(record: HealthRecord) -> float:
    score = 0.0
    if is_irregular_cycle(record):
        score += 40
    if is_long_cycle(record) or is_short_cycle(record):
        score += 30
    if has_polycystic_follicles(record):
        score += 30
    return score


def hormonal_score(record: HealthRecord) -> float:
    score = 0.0
    if is_overweight(record):
        score += 20
    if is_obese(record):
        score += 10
    if has_high_waist_hip_ratio(record):
        score += 15
    if has_low_fsh_lh_ratio(record):
        score += 20
    if has_elevated_amh(record):
        score += 25
    if has_elevated_blood_sugar(record):
        score += 10
    return score


def calculate_sub_scores(record: HealthRecord) -> SubScores:
    return SubScores(
        physical=physical_score(record),
        menstrual=menstrual_score(record),
        hormonal=hormonal_score(record),
    )


def combine(sub_scores: SubScores) -> float:
    """Weight the domain scores into a risk score capped at 100."""
    score = (
        sub_scores.physical * PHYSICAL_WEIGHT
        + sub_scores.menstrual * MENSTRUAL_WEIGHT
        + sub_scores.hormonal * HORMONAL_WEIGHT
    )
    return min(MAX_RISK_SCORE, score)


def calculate_risk_score(record: HealthRecord) -> float:
    """Full-precision risk score for an already normalized record."""
    return combine(calculate_sub_scores(record))
