"""Environment configuration, read once from ``.env`` and the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_ALERT_MODEL_ID = "us.anthropic.claude-sonnet-4-20250514-v1:0"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)
    max_batch_size: int = 1000
    default_horizon_hours: float = 168.0
    default_data_age_hours: float = 1.0
    alert_llm_enabled: bool = False
    alert_model_id: str = DEFAULT_ALERT_MODEL_ID
    aws_region: str = "us-east-1"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    @property
    def bedrock_configured(self) -> bool:
        return bool(self.aws_access_key_id and self.aws_secret_access_key)


def load_settings() -> Settings:
    """Build settings from the environment. Malformed numbers raise ValueError."""
    load_dotenv()
    return Settings(
        log_level=os.getenv("SKYWATCH_LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("SKYWATCH_CORS_ORIGINS", "*"),
        max_batch_size=int(os.getenv("SKYWATCH_MAX_BATCH_SIZE", "1000")),
        default_horizon_hours=float(os.getenv("SKYWATCH_DEFAULT_HORIZON_HOURS", "168")),
        default_data_age_hours=float(os.getenv("SKYWATCH_DEFAULT_DATA_AGE_HOURS", "1")),
        alert_llm_enabled=_env_bool("SKYWATCH_ALERT_LLM_ENABLED", False),
        alert_model_id=os.getenv("SKYWATCH_ALERT_MODEL_ID", DEFAULT_ALERT_MODEL_ID),
        aws_region=os.getenv("AWS_REGION", "us-east-1"),
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
