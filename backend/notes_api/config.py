from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def data_dir() -> Path:
    return Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR)))


def notes_file() -> Path:
    return data_dir() / os.getenv("NOTES_FILE", "notes.json")


def enforce_ownership() -> bool:
    # "0"/"false" restores the open by-id access of the original service
    return os.getenv("NOTES_ENFORCE_OWNERSHIP", "1").strip().lower() not in ("0", "false", "no", "off")


def log_level() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def server_host() -> str:
    return os.getenv("NOTES_HOST", "127.0.0.1")


def server_port() -> int:
    try:
        return int(os.getenv("NOTES_PORT", "8000"))
    except ValueError:
        return 8000
