"""Offline analysis client.

Returns a fixed, schema-valid report without any network call. Used for local
development, tests, and as a template for new provider adapters.
"""

import json
from typing import ClassVar

from docintake.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed valid analysis JSON."""

    provider = "example"

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "atsScore": 72,
        "breakdown": {
            "skills": 75,
            "keywords": 68,
            "experience": 70,
            "format": 80,
            "grammar": 90,
        },
        "matchingSkills": [],
        "missingSkills": [],
        "recommendations": ["Quantify outcomes for the most recent role."],
        "keywordAnalysis": [],
        "summary": "Example analysis generated without an AI provider.",
        "suggestedJobRoles": [],
        "radarMetrics": [
            {"subject": "Strategic Impact", "A": 70, "fullMark": 100},
            {"subject": "Technical Depth", "A": 75, "fullMark": 100},
            {"subject": "Leadership", "A": 60, "fullMark": 100},
            {"subject": "Role Alignment", "A": 72, "fullMark": 100},
            {"subject": "Cultural/Soft Skills", "A": 80, "fullMark": 100},
        ],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
