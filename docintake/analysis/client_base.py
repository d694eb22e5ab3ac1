from abc import ABC, abstractmethod
from typing import ClassVar


class BaseAnalysisClient(ABC):
    """One AI provider able to score a resume against a job description.

    Implementations send a single request and return the provider's raw
    text; parsing and validation belong to ``Analyzer``. Failures surface as
    ``AnalysisError`` subclasses so the session reports them as ANALYSIS.
    """

    provider: ClassVar[str] = "unknown"

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return the provider's answer, expected to be JSON matching ``json_schema``."""
