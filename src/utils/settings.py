"""Environment-backed settings for the SQL workspace."""

import os
from pathlib import Path

ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
ENV_LOADED = False


def load_env_once():
    """
    Carrega variáveis do .env apenas uma vez sem sobrescrever as existentes.
    """
    global ENV_LOADED
    if ENV_LOADED:
        return
    if ENV_PATH.exists():
        for line in ENV_PATH.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))
    ENV_LOADED = True


def get_setting(name: str, default=None):
    """Read a setting from the environment after loading .env."""
    load_env_once()
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


__all__ = ["ENV_PATH", "load_env_once", "get_setting"]
