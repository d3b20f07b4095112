from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime settings, read from TERMINDEX_* environment variables."""

    data_dir: Path = Path("data")
    log_level: str = "INFO"
    basic_user: str = ""
    basic_pass: str = Field(default="", repr=False)

    @property
    def auth_enabled(self) -> bool:
        return bool(self.basic_user and self.basic_pass)


def get_settings() -> Settings:
    return Settings(
        data_dir=os.getenv("TERMINDEX_DATA_DIR") or "data",
        log_level=(os.getenv("TERMINDEX_LOG_LEVEL") or "INFO").upper(),
        basic_user=os.getenv("TERMINDEX_BASIC_USER") or "",
        basic_pass=os.getenv("TERMINDEX_BASIC_PASS") or "",
    )
