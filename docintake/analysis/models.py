from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoreBreakdown:
    """Weighted sub-scores (skills 40%, keywords 25%, experience 20%, format 10%, grammar 5%)."""

    skills: float
    keywords: float
    experience: float
    format: float
    grammar: float


@dataclass(frozen=True)
class KeywordRelevance:
    keyword: str
    relevance: float


@dataclass(frozen=True)
class RadarMetric:
    subject: str
    value: float
    full_mark: float = 100.0


@dataclass(frozen=True)
class AnalysisResult:
    """Structured report returned by the analysis collaborator."""

    ats_score: float
    breakdown: ScoreBreakdown
    summary: str
    matching_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    keyword_analysis: list[KeywordRelevance] = field(default_factory=list)
    suggested_job_roles: list[str] = field(default_factory=list)
    radar_metrics: list[RadarMetric] = field(default_factory=list)
