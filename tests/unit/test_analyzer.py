"""Tests for the Analyzer (AI-powered resume analysis)."""

import json
from unittest.mock import MagicMock

import pytest

from docintake.analysis.analyzer import Analyzer
from docintake.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    AnalysisValidationError,
)


def _make_analyzer(client: MagicMock | None = None, temperature: float = 0.0) -> Analyzer:
    if client is None:
        client = MagicMock()
    return Analyzer(client=client, model="test-model", temperature=temperature)


def _valid_json_response(**overrides: object) -> str:
    payload: dict[str, object] = {
        "atsScore": 81,
        "breakdown": {
            "skills": 85,
            "keywords": 78,
            "experience": 80,
            "format": 75,
            "grammar": 95,
        },
        "summary": "Strong platform background.",
        "matchingSkills": ["Python", "Kubernetes"],
        "missingSkills": ["Terraform"],
    }
    payload.update(overrides)
    return json.dumps(payload)


class TestAnalyzeSuccess:
    def test_returns_analysis_result(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        result = _make_analyzer(client).analyze("resume", "job")
        assert result.ats_score == 81
        assert result.breakdown.grammar == 95
        assert result.matching_skills == ["Python", "Kubernetes"]
        assert result.missing_skills == ["Terraform"]

    def test_prompt_contains_both_texts_and_schema(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        _make_analyzer(client).analyze("RESUME BODY", "JOB BODY")
        kwargs = client.create_chat_completion.call_args.kwargs
        assert "RESUME BODY" in kwargs["user_prompt"]
        assert "JOB BODY" in kwargs["user_prompt"]
        assert "atsScore" in kwargs["user_prompt"]
        assert kwargs["model"] == "test-model"
        assert kwargs["json_schema"]["type"] == "object"

    def test_strips_markdown_code_fence(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = (
            "```json\n" + _valid_json_response() + "\n```"
        )
        result = _make_analyzer(client).analyze("resume", "job")
        assert result.summary == "Strong platform background."

    def test_temperature_is_clamped(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        _make_analyzer(client, temperature=3.5).analyze("resume", "job")
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 1.0


class TestAnalyzeFailures:
    def test_invalid_json_raises(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "not json"
        with pytest.raises(AnalysisError, match="Invalid JSON response"):
            _make_analyzer(client).analyze("resume", "job")

    def test_non_object_json_raises(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[1, 2]"
        with pytest.raises(AnalysisError, match="must be an object"):
            _make_analyzer(client).analyze("resume", "job")

    def test_missing_field_raises_validation_error(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = json.dumps({"atsScore": 50})
        with pytest.raises(AnalysisValidationError, match="breakdown"):
            _make_analyzer(client).analyze("resume", "job")

    def test_client_errors_propagate(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = AnalysisNetworkError("down")
        with pytest.raises(AnalysisNetworkError):
            _make_analyzer(client).analyze("resume", "job")
