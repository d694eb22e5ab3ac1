from typing import Any

import pytest

from docintake.analysis.exceptions import AnalysisValidationError
from docintake.analysis.validator import validate_and_build


def _payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "atsScore": 64.5,
        "breakdown": {
            "skills": 60,
            "keywords": 55,
            "experience": 70,
            "format": 80,
            "grammar": 90,
        },
        "summary": "Partial fit",
    }
    data.update(overrides)
    return data


class TestValidateAndBuild:
    def test_minimal_payload(self) -> None:
        result = validate_and_build(_payload())
        assert result.ats_score == 64.5
        assert result.breakdown.skills == 60
        assert result.recommendations == []
        assert result.radar_metrics == []

    def test_keyword_and_radar_entries(self) -> None:
        result = validate_and_build(
            _payload(
                keywordAnalysis=[{"keyword": "Go", "relevance": 90}],
                radarMetrics=[{"subject": "Leadership", "A": 40}],
            )
        )
        assert result.keyword_analysis[0].keyword == "Go"
        assert result.keyword_analysis[0].relevance == 90
        assert result.radar_metrics[0].value == 40
        assert result.radar_metrics[0].full_mark == 100

    @pytest.mark.parametrize("missing", ["atsScore", "breakdown", "summary"])
    def test_missing_required_field(self, missing: str) -> None:
        data = _payload()
        del data[missing]
        with pytest.raises(AnalysisValidationError, match=missing):
            validate_and_build(data)

    def test_score_out_of_range(self) -> None:
        with pytest.raises(AnalysisValidationError, match="between 0 and 100"):
            validate_and_build(_payload(atsScore=101))

    def test_boolean_is_not_a_score(self) -> None:
        with pytest.raises(AnalysisValidationError, match="must be a number"):
            validate_and_build(_payload(atsScore=True))

    def test_missing_breakdown_field(self) -> None:
        with pytest.raises(AnalysisValidationError, match="grammar"):
            validate_and_build(
                _payload(breakdown={"skills": 1, "keywords": 1, "experience": 1, "format": 1})
            )

    def test_list_items_must_be_strings(self) -> None:
        with pytest.raises(AnalysisValidationError, match=r"matchingSkills\[1\]"):
            validate_and_build(_payload(matchingSkills=["Python", 3]))
