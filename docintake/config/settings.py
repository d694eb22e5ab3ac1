from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    analysis_provider: str = "example"
    analysis_tick_seconds: float = 3.0

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = ""
    analysis_openai_timeout_seconds: int = 30
    analysis_openai_temperature: float = 0.0

    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
