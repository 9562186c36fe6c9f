from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GroqConfig(BaseSettings):
    """Groq configuration for transcription and meeting analysis."""

    api_key: Optional[SecretStr] = None
    base_url: str = "https://api.groq.com/openai/v1"
    transcription_model: str = "whisper-large-v3"
    analysis_model: str = "llama-3.3-70b-versatile"
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, ge=1, le=8192)

    model_config = SettingsConfigDict(
        env_prefix="GROQ_",
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )


class NotionConfig(BaseSettings):
    """Notion configuration."""

    api_key: Optional[SecretStr] = None
    database_id: Optional[str] = Field(
        default=None,
        description="Fallback database used outside production when callers send none.",
    )
    base_url: str = "https://api.notion.com/v1"
    version: str = "2022-06-28"
    page_url_base: str = "https://notion.so"

    model_config = SettingsConfigDict(
        env_prefix="NOTION_",
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )


class PipelineConfig(BaseSettings):
    """Meeting pipeline behaviour."""

    locale: Literal["en", "de"] = "en"
    transcript_excerpt_chars: int = Field(default=2000, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="PIPELINE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class UploaderConfig(BaseSettings):
    """Defaults for the upload client."""

    api_base_url: str = "http://localhost:8000"
    max_duration_seconds: Optional[float] = Field(default=60.0, gt=0)
    request_timeout_seconds: float = Field(default=300.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="UPLOADER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Meeting Intelligence"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    app_env: str = "development"
    log_file: str = "logs/app.log"
    pipeline_log_file: str = "logs/meeting_pipeline.log"
    transcript_log_file: str = "logs/transcripts.log"

    # Groq
    groq: GroqConfig = Field(default_factory=GroqConfig)

    # Notion
    notion: NotionConfig = Field(default_factory=NotionConfig)

    # Pipeline
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)

    # Upload client
    uploader: UploaderConfig = Field(default_factory=UploaderConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Production posture requires callers to name their own destination."""
        return self.app_env.strip().lower() == "production"


# Global settings instance
settings = Settings()
