"""Validates the raw analysis JSON and builds an AnalysisResult."""

from typing import Any

from docintake.analysis.exceptions import AnalysisValidationError
from docintake.analysis.models import (
    AnalysisResult,
    KeywordRelevance,
    RadarMetric,
    ScoreBreakdown,
)

_REQUIRED_FIELDS = ("atsScore", "breakdown", "summary")
_BREAKDOWN_FIELDS = ("skills", "keywords", "experience", "format", "grammar")


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate parsed JSON and build an AnalysisResult.

    Only the shape is checked; the report's content is the collaborator's concern.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    for name in _REQUIRED_FIELDS:
        if name not in data:
            raise AnalysisValidationError(f"Missing required field: {name}")
    return AnalysisResult(
        ats_score=_score(data["atsScore"], "atsScore"),
        breakdown=_build_breakdown(data["breakdown"]),
        summary=_string(data["summary"], "summary"),
        matching_skills=_string_list(data.get("matchingSkills", []), "matchingSkills"),
        missing_skills=_string_list(data.get("missingSkills", []), "missingSkills"),
        recommendations=_string_list(data.get("recommendations", []), "recommendations"),
        keyword_analysis=_build_keywords(data.get("keywordAnalysis", [])),
        suggested_job_roles=_string_list(
            data.get("suggestedJobRoles", []), "suggestedJobRoles"
        ),
        radar_metrics=_build_radar(data.get("radarMetrics", [])),
    )


def _score(raw: Any, path: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise AnalysisValidationError(f"'{path}' must be a number")
    if not 0 <= raw <= 100:
        raise AnalysisValidationError(f"'{path}' must be between 0 and 100, got {raw}")
    return float(raw)


def _string(raw: Any, path: str) -> str:
    if not isinstance(raw, str):
        raise AnalysisValidationError(f"'{path}' must be a string")
    return raw


def _string_list(raw: Any, path: str) -> list[str]:
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{path}' must be a list")
    return [_string(item, f"{path}[{i}]") for i, item in enumerate(raw)]


def _build_breakdown(raw: Any) -> ScoreBreakdown:
    if not isinstance(raw, dict):
        raise AnalysisValidationError("'breakdown' must be an object")
    scores = {}
    for name in _BREAKDOWN_FIELDS:
        if name not in raw:
            raise AnalysisValidationError(f"Missing breakdown field: {name}")
        scores[name] = _score(raw[name], f"breakdown.{name}")
    return ScoreBreakdown(**scores)


def _build_keywords(raw: Any) -> list[KeywordRelevance]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'keywordAnalysis' must be a list")
    keywords = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise AnalysisValidationError(f"keywordAnalysis[{i}] must be an object")
        keywords.append(
            KeywordRelevance(
                keyword=_string(item.get("keyword"), f"keywordAnalysis[{i}].keyword"),
                relevance=_score(item.get("relevance"), f"keywordAnalysis[{i}].relevance"),
            )
        )
    return keywords


def _build_radar(raw: Any) -> list[RadarMetric]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'radarMetrics' must be a list")
    metrics = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise AnalysisValidationError(f"radarMetrics[{i}] must be an object")
        full_mark = item.get("fullMark", 100)
        if isinstance(full_mark, bool) or not isinstance(full_mark, (int, float)):
            raise AnalysisValidationError(f"radarMetrics[{i}].fullMark must be a number")
        metrics.append(
            RadarMetric(
                subject=_string(item.get("subject"), f"radarMetrics[{i}].subject"),
                value=_score(item.get("A"), f"radarMetrics[{i}].A"),
                full_mark=float(full_mark),
            )
        )
    return metrics
