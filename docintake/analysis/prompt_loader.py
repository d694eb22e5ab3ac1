import json
from pathlib import Path

from docintake.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

REQUIRED_PLACEHOLDERS = ("{resume_text}", "{job_description}", "{json_schema}")


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load {what}: {exc}") from exc


def load_prompt_template(path: Path | None = None) -> str:
    """Load the analysis prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled analysis_prompt.txt.

    Returns:
        The raw template string with ``{resume_text}``, ``{job_description}``
        and ``{json_schema}`` placeholders.

    Raises:
        AnalysisError: if the file cannot be read or lacks a placeholder.
    """
    template = _read(path or _DEFAULT_PROMPT_DIR / "analysis_prompt.txt", "prompt template")
    missing = [name for name in REQUIRED_PLACEHOLDERS if name not in template]
    if missing:
        raise AnalysisError(f"Prompt template is missing placeholders: {', '.join(missing)}")
    return template


def load_json_schema(path: Path | None = None) -> str:
    """Load the JSON schema the analysis provider must answer with.

    Args:
        path: Path to the JSON schema file.
              Defaults to the bundled analysis_schema.json.

    Returns:
        The raw JSON schema string, verified to hold a JSON object.

    Raises:
        AnalysisError: if the file cannot be read or is not a JSON object.
    """
    raw = _read(path or _DEFAULT_PROMPT_DIR / "analysis_schema.json", "JSON schema")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AnalysisError(f"JSON schema is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise AnalysisError("JSON schema must be an object")
    return raw
