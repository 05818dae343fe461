from shepredicts.assessment.models import AssessmentData
from shepredicts.prediction.models import HealthRecord


def to_health_record(data: AssessmentData) -> HealthRecord:
    """Encode questionnaire answers as numeric model input."""
    symptoms = data.physical_symptoms
    menstrual = data.menstrual_health
    hormonal = data.hormonal_indicators
    return HealthRecord(
        hair_growth=int(symptoms.hair_growth),
        hair_loss=int(symptoms.hair_loss),
        skin_darkening=int(symptoms.skin_darkening),
        pimples=int(symptoms.pimples),
        weight_gain=int(symptoms.weight_gain),
        cycle_regularity=1 if menstrual.cycle_regularity == "irregular" else 0,
        cycle_length=menstrual.cycle_length,
        follicle_left=menstrual.follicle_left,
        follicle_right=menstrual.follicle_right,
        avg_follicle_size_left=menstrual.avg_follicle_size_left,
        avg_follicle_size_right=menstrual.avg_follicle_size_right,
        endometrium_thickness=menstrual.endometrium_thickness,
        bmi=hormonal.bmi,
        waist_hip_ratio=hormonal.waist_hip_ratio,
        fsh_lh_ratio=hormonal.fsh_lh_ratio,
        amh=hormonal.amh,
        prg=hormonal.prg,
        rbs=hormonal.rbs,
    )
