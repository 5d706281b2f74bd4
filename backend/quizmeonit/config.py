"""Application configuration settings."""

from pydantic_settings import BaseSettings

DEFAULT_GEMINI_MODEL = "gemini-1.5-pro"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "QuizMeOnIt.AI"
    debug: bool = False
    log_level: str = "INFO"

    # Gemini
    google_api_key: str | None = None
    google_gemini_model: str | None = None

    # Generation
    topic_temperature: float = 1.1  # higher favours more varied topics
    strict_quiz_validation: bool = False

    # HTTP
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8501"]
    api_base_url: str = "http://localhost:8000"

    @property
    def gemini_model(self) -> str:
        """Configured model name, or the default when unset or blank."""
        if self.google_gemini_model and self.google_gemini_model.strip():
            return self.google_gemini_model.strip()
        return DEFAULT_GEMINI_MODEL

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
