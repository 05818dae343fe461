class AssessmentError(Exception):
    """Base exception for questionnaire-related errors."""


class AssessmentValidationError(AssessmentError):
    """Raised when submitted answers fail form validation."""


class WizardStateError(AssessmentError):
    """Raised when a wizard step is submitted out of order."""
