from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


LIMITS_PATH_ENV = "CONTENT_VALIDATION_LIMITS"
RUN_LOG_PATH_ENV = "CONTENT_VALIDATION_LOG"


def load_env() -> None:
    """
    Load .env into process environment.
    Safe no-op if .env is missing. Existing variables win.
    """
    # Prefer repo-root .env
    dotenv_file = Path(".env")
    if dotenv_file.is_file():
        load_dotenv(dotenv_path=dotenv_file)
        return

    # Fallback: common pattern ".env/.env"
    alt = Path(".env") / ".env"
    if alt.exists():
        load_dotenv(dotenv_path=alt)


def env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name, "").strip()
    return Path(value) if value else None
