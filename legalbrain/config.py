"""
Runtime settings read from environment variables.

A `.env` file in the working directory is loaded first. Values are read at
call time so tests and deployments can change the environment before the app
is created.
"""
from dataclasses import dataclass
from typing import Tuple
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    cors_allowed_origins: Tuple[str, ...] = ("http://localhost:3000",)
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    default_language: str = "english"
    log_queries: bool = False


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_settings() -> Settings:
    load_dotenv()
    origins = os.environ.get("CORS_ALLOWED_ORIGINS", "http://localhost:3000")
    return Settings(
        cors_allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        host=os.environ.get("LEGALBRAIN_HOST", "0.0.0.0"),
        port=int(os.environ.get("LEGALBRAIN_PORT", 8000)),
        log_level=os.environ.get("LEGALBRAIN_LOG_LEVEL", "INFO").upper(),
        default_language=os.environ.get("LEGALBRAIN_DEFAULT_LANGUAGE", "english").lower(),
        log_queries=_env_flag("LEGALBRAIN_LOG_QUERIES"),
    )
