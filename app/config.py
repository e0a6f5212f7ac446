from typing import List, Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- Environment ----
    ENV: str = Field(default="development")

    # ---- LLM ----
    LLM_PROVIDER: Literal["gemini", "groq"] = Field(default="gemini")
    GEMINI_API_KEY: Optional[str] = Field(default=None)
    GEMINI_MODEL_NAME: str = Field(default="gemini-1.5-flash")
    GROQ_API_KEY: Optional[str] = Field(default=None)
    GROQ_MODEL_NAME: str = Field(default="llama-3.1-8b-instant")

    # ---- LLM Generation ----
    LLM_MAX_OUTPUT_TOKENS: int = Field(default=300)
    LLM_TEMPERATURE: float = Field(default=0.7)

    # ---- Meetings ----
    MEETING_BASE_URL: str = Field(default="https://meet.leadmate.com/join")
    CALENDAR_EVENT_TITLE: str = Field(default="LeadMate CRM Demo")
    CALENDAR_EVENT_HOST: str = Field(default="Martin from LeadMate CRM")

    # ---- App / Deployment ----
    APP_HOST: str = Field(default="0.0.0.0")
    APP_PORT: int = Field(default=3000)
    CORS_ALLOW_ORIGINS: List[str] = Field(default=["*"])
    DEBUG: bool = Field(default=False)

    # ---- Logging ----
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_PATH: str = Field(default="app.log")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_provider_key(self) -> "Settings":
        """Refuse to build settings without a key for the selected provider."""
        key_name = f"{self.LLM_PROVIDER.upper()}_API_KEY"
        if not getattr(self, key_name):
            raise ValueError(f"{key_name} is not defined in the environment or .env file")
        return self

    @property
    def llm_api_key(self) -> str:
        return getattr(self, f"{self.LLM_PROVIDER.upper()}_API_KEY")


settings = Settings()
