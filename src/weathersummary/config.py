# runtime settings read from the environment
# load_dotenv lets a local .env file stand in for variables injected by docker or airflow

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "WEATHERSUMMARY_"

@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    skip_warning_limit: int = 5   # logging only, never changes results
    max_workers: int = 4
    data_dir: str = "data"

def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer (got {raw!r})") from exc
    if value < minimum:
        raise ValueError(f"{ENV_PREFIX}{name} must be >= {minimum} (got {value})")
    return value

def _env_log_level(default: str) -> str:
    raw = (os.getenv(ENV_PREFIX + "LOG_LEVEL") or default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level (got {raw!r})")
    return raw

def load_settings() -> Settings:
    # search from the working directory, where docker and airflow drop the .env file
    load_dotenv(find_dotenv(usecwd=True))
    defaults = Settings()
    return Settings(
        log_level=_env_log_level(defaults.log_level),
        skip_warning_limit=_env_int("SKIP_WARNING_LIMIT", defaults.skip_warning_limit, 0),
        max_workers=_env_int("MAX_WORKERS", defaults.max_workers, 1),
        data_dir=os.getenv(ENV_PREFIX + "DATA_DIR") or defaults.data_dir,
    )

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
