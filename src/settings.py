# src/settings.py
import logging
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Talkio")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # model provider: gemini | openai | ollama | echo
    MODEL_PROVIDER: str = Field(default="gemini")
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = Field(default="gemini-2.5-flash")
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")
    REQUEST_TIMEOUT: float = Field(default=60.0)

    # generation
    TEMPERATURE: float = Field(default=0.7)
    MAX_TOKENS: int | None = None
    HISTORY_WINDOW: int = Field(default=10, ge=1)

    # safety
    CRISIS_REGION: str = Field(default="PH")

    # read root-level .env.dev
    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Attach one stream handler to the `talkio` logger tree."""
    root = logging.getLogger("talkio")
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        root.addHandler(h)
    root.setLevel((level or settings.LOG_LEVEL).upper())
