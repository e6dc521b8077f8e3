from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TASK_ID_PREFIX: prefix of issued task ids. Default 'TASK-'
    - TASK_ID_WIDTH: zero-padding width of the numeric part. Default 4
    - LOG_LEVEL: logging level name used by the demo. Default 'INFO'
    - DEMO_WORKERS: thread pool size for the concurrent demo. Default 5
    - DEMO_MAX_DELAY_MS: upper bound of the random delay between demo calls. Default 500
    """

    task_id_prefix: str
    task_id_width: int
    log_level: str
    demo_workers: int
    demo_max_delay_ms: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_int(value: str, default: int, minimum: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    prefix = _get_env("TASK_ID_PREFIX", "TASK-")
    width = _parse_int(_get_env("TASK_ID_WIDTH", "4"), 4, minimum=1)

    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        log_level = "INFO"

    workers = _parse_int(_get_env("DEMO_WORKERS", "5"), 5, minimum=1)
    max_delay = _parse_int(_get_env("DEMO_MAX_DELAY_MS", "500"), 500, minimum=0)

    return Settings(
        task_id_prefix=prefix,
        task_id_width=width,
        log_level=log_level,
        demo_workers=workers,
        demo_max_delay_ms=max_delay,
    )
