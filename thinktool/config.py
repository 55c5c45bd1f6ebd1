# thinktool/config.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- server identity ----
    THINKTOOL_SERVER_NAME: str = "think-tool"
    THINKTOOL_SERVER_VERSION: str = "v0.0.1"

    # ---- logging ----
    THINKTOOL_LOG_LEVEL: str = Field("INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
    THINKTOOL_LOG_FILE: str = ""  # empty: stderr only

    # ---- notebook ----
    # Acknowledgements echo at most this many characters before "..."
    THINKTOOL_ECHO_LIMIT: int = Field(50, ge=1)

    # Pydantic v2 settings config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---- derived helpers ----
    @property
    def log_file(self) -> Optional[Path]:
        raw = (self.THINKTOOL_LOG_FILE or "").strip()
        return Path(raw).resolve() if raw else None
