import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path
from typing import Any

from shepredicts.assessment.exceptions import AssessmentValidationError
from shepredicts.assessment.validator import (
    build_hormonal_indicators,
    build_menstrual_health,
    build_physical_symptoms,
    build_user,
)
from shepredicts.assessment.wizard import AssessmentWizard
from shepredicts.config.settings import Settings
from shepredicts.logging.logger import Log
from shepredicts.prediction.factory import PredictorFactory
from shepredicts.session.context import open_session
from shepredicts.session.history import risk_level

EXIT_INVALID_INPUT = 2


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shepredicts",
        description="Run a PCOS risk assessment from a JSON answers file.",
    )
    parser.add_argument(
        "answers",
        type=Path,
        help="JSON file with 'user', 'physicalSymptoms', 'menstrualHealth' "
        "and 'hormonalIndicators' objects",
    )
    return parser.parse_args(argv)


def run_assessment(answers: dict[str, Any], settings: Settings) -> dict[str, Any]:
    """Sign in, walk the wizard through all steps and return the outcome."""
    predictor = PredictorFactory.create(settings)
    with open_session() as session:
        session.login(
            build_user(
                answers.get("user", {}),
                min_age=settings.min_user_age,
                max_age=settings.max_user_age,
                supported_gender=settings.supported_gender,
            )
        )
        wizard = AssessmentWizard(session, predictor)
        wizard.submit_physical_symptoms(
            build_physical_symptoms(answers.get("physicalSymptoms", {}))
        )
        wizard.submit_menstrual_health(
            build_menstrual_health(answers.get("menstrualHealth", {}))
        )
        result = wizard.submit_hormonal_indicators(
            build_hormonal_indicators(answers.get("hormonalIndicators", {}))
        )
        prediction = wizard.prediction
        if prediction is None:
            raise RuntimeError("Wizard finished without a prediction")
        output = {"id": result.id, "date": result.date, **asdict(prediction)}
        output["risk_level"] = risk_level(prediction.confidence)
        return output


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> session -> wizard -> JSON on stdout."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        answers = json.loads(args.answers.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        Log.error(f"Cannot read answers file {args.answers}: {exc}")
        return EXIT_INVALID_INPUT
    if not isinstance(answers, dict):
        Log.error("Answers file must contain a JSON object")
        return EXIT_INVALID_INPUT

    try:
        output = run_assessment(answers, settings)
    except AssessmentValidationError as exc:
        Log.error(f"Invalid answers: {exc}")
        return EXIT_INVALID_INPUT

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
