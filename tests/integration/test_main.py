import json
from pathlib import Path

import pytest

from shepredicts.main import EXIT_INVALID_INPUT, main


def _write_answers(tmp_path: Path, answers: object) -> Path:
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(answers), encoding="utf-8")
    return path


@pytest.mark.integration
class TestMain:
    def test_prints_prediction_json(
        self,
        tmp_path: Path,
        form_answers: dict[str, object],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("CONFIDENCE_SEED", "5")
        exit_code = main([str(_write_answers(tmp_path, form_answers))])
        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["has_pcos"] is True
        assert output["risk_score"] == 87.5
        assert output["risk_level"] in {"High", "Moderate"}
        assert len(output["risk_factors"]) == 11
        assert output["id"].startswith("assessment_")

    def test_invalid_answers_exit_code(
        self, tmp_path: Path, form_answers: dict[str, dict[str, object]]
    ) -> None:
        form_answers["hormonalIndicators"]["bmi"] = 75
        assert main([str(_write_answers(tmp_path, form_answers))]) == EXIT_INVALID_INPUT

    def test_unsupported_gender_exit_code(
        self, tmp_path: Path, form_answers: dict[str, dict[str, object]]
    ) -> None:
        form_answers["user"]["gender"] = "male"
        assert main([str(_write_answers(tmp_path, form_answers))]) == EXIT_INVALID_INPUT

    def test_missing_file_exit_code(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.json")]) == EXIT_INVALID_INPUT

    def test_non_object_json_exit_code(self, tmp_path: Path) -> None:
        assert main([str(_write_answers(tmp_path, [1, 2, 3]))]) == EXIT_INVALID_INPUT

    def test_unhashable_cycle_regularity_exit_code(
        self, tmp_path: Path, form_answers: dict[str, dict[str, object]]
    ) -> None:
        form_answers["menstrualHealth"]["cycleRegularity"] = {"x": 1}
        assert main([str(_write_answers(tmp_path, form_answers))]) == EXIT_INVALID_INPUT

    def test_integral_float_age_accepted(
        self,
        tmp_path: Path,
        form_answers: dict[str, dict[str, object]],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        form_answers["user"]["age"] = 27.0
        assert main([str(_write_answers(tmp_path, form_answers))]) == 0
        assert json.loads(capsys.readouterr().out)["risk_score"] == 87.5
