# smartnotes/shared/config.py
from pydantic import BaseModel
import os

class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DB_URL: str | None = os.getenv("DB_URL")

    # demo auth controls (off unless explicitly enabled)
    AUTH_DEMO: bool = os.getenv("AUTH_DEMO", "false").lower() == "true"
    DEMO_TOKEN: str = os.getenv("DEMO_TOKEN", "demo")
    PASSWORD_MIN_LENGTH: int = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))

    # JWT settings
    JWT_KEY: str = os.getenv("JWT_KEY", "dev-secret")
    JWT_ALG: str = os.getenv("JWT_ALG", "HS256")
    JWT_ISS: str | None = os.getenv("JWT_ISS")
    JWT_AUD: str | None = os.getenv("JWT_AUD")
    JWT_EXPIRE_MIN: int = int(os.getenv("JWT_EXPIRE_MIN", "60"))

    # summarize-note function -> OpenAI-compatible chat completions
    LLM_API_URL: str = os.getenv("LLM_API_URL", "https://openrouter.ai/api/v1/chat/completions")
    LLM_API_KEY_ENV: str = os.getenv("LLM_API_KEY_ENV", "OPENROUTER_API_KEY")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "openai/gpt-4o-mini")
    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.3"))
    LLM_MAX_TOKENS: int = int(os.getenv("LLM_MAX_TOKENS", "300"))
    LLM_REFERER: str = os.getenv("LLM_REFERER", "https://smartnotepro.app")
    LLM_TIMEOUT_S: float = float(os.getenv("LLM_TIMEOUT_S", "60"))

settings = Settings()
