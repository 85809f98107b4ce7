from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = Field(default="INFO", description="Application log level")
    BIND: str = Field(default="0.0.0.0:8080", description="API bind address")

    # CORS
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: str = Field(default="*", description="Allowed CORS methods")
    CORS_ALLOW_HEADERS: str = Field(default="*", description="Allowed CORS headers")

    # LLM
    GOOGLE_GENERATIVE_AI_API_KEY: str = Field(default="", description="Google Generative AI API key")
    GEMINI_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/",
        description="Generative Language API base URL",
    )
    GEMINI_MODEL: str = Field(default="models/gemini-1.5-pro", description="Generation model ID")
    GENERATION_TEMPERATURE: float = Field(default=0.75, description="Sampling temperature for recipe generation")
    LLM_REQUEST_TIMEOUT: int = Field(default=60, description="LLM HTTP timeout (seconds)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
