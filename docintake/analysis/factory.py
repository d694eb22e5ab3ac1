from docintake.analysis.analyzer import Analyzer
from docintake.analysis.example_client_adapter import ExampleClientAdapter
from docintake.analysis.openai_client_adapter import OpenAIClientAdapter
from docintake.config.settings import Settings


class AnalyzerFactory:
    """Creates the analyzer for the configured provider."""

    PROVIDERS = ("example", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> Analyzer:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return Analyzer(client=ExampleClientAdapter(), model="example")
        if provider == "openai":
            client = OpenAIClientAdapter(
                api_key=settings.analysis_openai_api_key,
                timeout_seconds=settings.analysis_openai_timeout_seconds,
            )
            return Analyzer(
                client=client,
                model=settings.analysis_openai_model_name,
                temperature=settings.analysis_openai_temperature,
            )
        if provider == "openai_compatible":
            base_url = settings.analysis_openai_compatible_base_url.strip()
            if not base_url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            client = OpenAIClientAdapter(
                api_key=settings.analysis_openai_compatible_api_key,
                timeout_seconds=settings.analysis_openai_timeout_seconds,
                base_url=base_url,
            )
            return Analyzer(
                client=client,
                model=settings.analysis_openai_compatible_model_name,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
