PCOS_THRESHOLD = 60.0


def classify(risk_score: float) -> bool:
    """Elevated risk when the unrounded score reaches the threshold."""
    return risk_score >= PCOS_THRESHOLD
