"""AI-powered resume/job-description analyzer."""

import json
from pathlib import Path

from docintake.analysis.client_base import BaseAnalysisClient
from docintake.analysis.exceptions import AnalysisError
from docintake.analysis.models import AnalysisResult
from docintake.analysis.prompt_loader import load_json_schema, load_prompt_template
from docintake.analysis.validator import validate_and_build
from docintake.logging.logger import Log

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert technical recruiter and ATS specialist. "
    "Answer strictly with the requested JSON."
)


class Analyzer:
    """Submits normalized resume text and a job description to an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)
        self._json_schema_dict = json.loads(self._json_schema)

    def analyze(self, resume_text: str, job_description: str) -> AnalysisResult:
        prompt = self._prompt_template.format(
            resume_text=resume_text,
            job_description=job_description,
            json_schema=self._json_schema,
        )
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(self._parse_json(raw_response))
        Log.info(f"Analysis complete via {self._client.provider}: ATS score {result.ats_score:g}")
        return result

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AnalysisError("JSON response must be an object")
        return parsed
