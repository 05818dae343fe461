"""Human-readable explanation of a prediction.

Risk factors are re-derived from the normalized record with the same
predicates the score uses. Recommendations depend only on the
classification plus a few record conditions.
"""

from collections.abc import Callable

from shepredicts.prediction.models import HealthRecord
from shepredicts.prediction.scoring import (
    has_elevated_amh,
    has_elevated_blood_sugar,
    has_high_waist_hip_ratio,
    has_low_fsh_lh_ratio,
    has_polycystic_follicles,
    is_irregular_cycle,
    is_long_cycle,
    is_obese,
    is_overweight,
    is_short_cycle,
)

# Order matters: it is the display order.
RISK_FACTOR_RULES: tuple[tuple[Callable[[HealthRecord], bool], str], ...] = (
    (lambda r: bool(r.hair_growth), "Excessive hair growth (hirsutism)"),
    (lambda r: bool(r.hair_loss), "Hair loss/thinning"),
    (lambda r: bool(r.skin_darkening), "Skin darkening (acanthosis nigricans)"),
    (lambda r: bool(r.pimples), "Persistent acne"),
    (lambda r: bool(r.weight_gain), "Weight gain"),
    (is_irregular_cycle, "Irregular menstrual cycles"),
    (is_long_cycle, "Long menstrual cycles"),
    (is_short_cycle, "Short menstrual cycles"),
    (has_polycystic_follicles, "High follicle count (polycystic ovaries)"),
    (is_overweight, "Elevated BMI"),
    (is_obese, "Obesity"),
    (has_high_waist_hip_ratio, "High waist-hip ratio"),
    (has_low_fsh_lh_ratio, "Low FSH/LH ratio"),
    (has_elevated_amh, "Elevated AMH levels"),
    (has_elevated_blood_sugar, "Elevated blood sugar"),
)

ELEVATED_RISK_CORE = (
    "Consult with a gynecologist or endocrinologist for comprehensive evaluation",
    "Consider pelvic ultrasound to assess ovarian morphology",
    "Request comprehensive hormonal panel including testosterone, insulin, "
    "and glucose tolerance test",
)
WEIGHT_MANAGEMENT = (
    "Focus on weight management through balanced diet and regular exercise",
    "Consider consultation with a nutritionist for personalized meal planning",
)
GLUCOSE_MANAGEMENT = (
    "Monitor blood sugar levels and consider diabetes screening",
    "Adopt low glycemic index diet to manage insulin resistance",
)
CYCLE_MANAGEMENT = (
    "Track menstrual cycles and ovulation patterns",
    "Discuss hormonal contraceptives or metformin with your doctor",
)
ELEVATED_RISK_FOLLOW_UP = (
    "Consider stress management techniques like yoga or meditation",
    "Regular follow-up appointments to monitor treatment progress",
)
GENERAL_WELLNESS = (
    "Continue regular health check-ups with your healthcare provider",
    "Maintain healthy lifestyle with balanced diet and regular exercise",
    "Monitor menstrual cycle regularity and any symptom changes",
    "Consider annual hormonal health screening",
)
WEIGHT_MAINTENANCE = "Focus on maintaining healthy weight to prevent future complications"


def generate_risk_factors(record: HealthRecord) -> list[str]:
    return [description for rule, description in RISK_FACTOR_RULES if rule(record)]


def generate_recommendations(record: HealthRecord, has_pcos: bool) -> list[str]:
    """Build the ordered recommendation list; never empty."""
    if not has_pcos:
        recommendations = list(GENERAL_WELLNESS)
        if is_overweight(record):
            recommendations.append(WEIGHT_MAINTENANCE)
        return recommendations

    recommendations = list(ELEVATED_RISK_CORE)
    if is_overweight(record):
        recommendations.extend(WEIGHT_MANAGEMENT)
    if has_elevated_blood_sugar(record):
        recommendations.extend(GLUCOSE_MANAGEMENT)
    if is_irregular_cycle(record):
        recommendations.extend(CYCLE_MANAGEMENT)
    recommendations.extend(ELEVATED_RISK_FOLLOW_UP)
    return recommendations
