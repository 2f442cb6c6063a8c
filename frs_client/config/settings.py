"""Client configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class FrsSettings:
    """Settings needed to reach the face recognition service."""

    endpoint: str = "https://face.cn-north-4.myhuaweicloud.com"
    project_id: str = ""
    api_version: str = "v1"
    request_timeout: float = 30.0
    log_level: str = "INFO"


def _build_settings() -> FrsSettings:
    _load_env_file()

    return FrsSettings(
        endpoint=os.getenv("FRS_ENDPOINT", "https://face.cn-north-4.myhuaweicloud.com"),
        project_id=os.getenv("FRS_PROJECT_ID", ""),
        api_version=os.getenv("FRS_API_VERSION", "v1").lower(),
        request_timeout=float(os.getenv("FRS_REQUEST_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache
def get_settings() -> FrsSettings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
