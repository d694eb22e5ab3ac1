"""Tests for AnalyzerFactory."""

from unittest.mock import patch

import pytest

from docintake.analysis.analyzer import Analyzer
from docintake.analysis.factory import AnalyzerFactory
from docintake.config.settings import Settings


class TestAnalyzerFactory:
    def test_creates_example_analyzer(self) -> None:
        analyzer = AnalyzerFactory.create(Settings(analysis_provider="example"))
        assert isinstance(analyzer, Analyzer)
        result = analyzer.analyze("resume", "job")
        assert result.ats_score == 72

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            analysis_provider="openai",
            analysis_openai_api_key="openai-key",
            analysis_openai_model_name="gpt-4o",
            analysis_openai_timeout_seconds=42,
        )
        with patch("docintake.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            analyzer = AnalyzerFactory.create(settings)
        assert isinstance(analyzer, Analyzer)
        mock_adapter.assert_called_once_with(api_key="openai-key", timeout_seconds=42)

    def test_uses_compatible_base_url(self) -> None:
        settings = Settings(
            analysis_provider="openai_compatible",
            analysis_openai_compatible_base_url="http://localhost:11434/v1",
            analysis_openai_compatible_api_key="local",
            analysis_openai_compatible_model_name="llama3",
        )
        with patch("docintake.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="local",
            timeout_seconds=30,
            base_url="http://localhost:11434/v1",
        )

    def test_compatible_requires_base_url(self) -> None:
        settings = Settings(analysis_provider="openai_compatible")
        with pytest.raises(ValueError, match="base_url is required"):
            AnalyzerFactory.create(settings)

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown analysis provider"):
            AnalyzerFactory.create(Settings(analysis_provider="nonexistent"))
