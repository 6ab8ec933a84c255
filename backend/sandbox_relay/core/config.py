from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[2] / "public"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseSettings):
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_ENDPOINT: str = os.getenv("OPENAI_ENDPOINT") or "https://api.openai.com/v1/chat/completions"
    # None leaves the outbound call without a timeout
    UPSTREAM_TIMEOUT: Optional[float] = None

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = 3000
    # Comma separated, e.g. "http://localhost:5173,http://localhost:3000"
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "*")
    STATIC_DIR: str = os.getenv("STATIC_DIR", str(DEFAULT_STATIC_DIR))
    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True
        frozen = True

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = (value or "INFO").strip().upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
