import httpx
import openai

from docintake.analysis.client_base import BaseAnalysisClient
from docintake.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    AnalysisRateLimitError,
)

RATE_LIMIT_MESSAGE = "Rate limit reached. Please wait a moment before trying again."
SCHEMA_NAME = "resume_analysis"


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client for OpenAI and OpenAI-compatible chat completion APIs.

    The SDK's own retries are disabled: a failed analysis is reported once
    and the user decides whether to submit again.
    """

    provider = "openai"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        response_format = {
            "type": "json_schema",
            "json_schema": {"name": SCHEMA_NAME, "strict": True, "schema": json_schema},
        }
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,
                response_format=response_format,
            )
        except openai.RateLimitError as exc:
            raise AnalysisRateLimitError(RATE_LIMIT_MESSAGE) from exc
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: request timed out ({exc})") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise AnalysisNetworkError(
                f"AI provider API error (HTTP {exc.status_code}): {exc.message}"
            ) from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc
        return _first_message(response)


def _first_message(response: object) -> str:
    choices = getattr(response, "choices", None)
    if not choices:
        raise AnalysisError("Analysis engine failed to produce a report.")
    content = choices[0].message.content
    if content is None:
        raise AnalysisError("AI returned empty response")
    return content
