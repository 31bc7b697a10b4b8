"""Service settings, read from MOXON_* environment variables."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

BASE_DIR = Path(__file__).parent.parent


class Settings(BaseModel):
    outputs_dir: Path = Field(
        default=BASE_DIR / "outputs",
        description="Directory generated files are written to"
    )
    cleanup_delay: int = Field(
        default=3600,
        ge=0,
        description="Seconds before a job's files are deleted, 0 keeps them"
    )
    log_level: str = Field(
        default="INFO",
        description="Level for the moxon_frame logger"
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file in addition to the console"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"MOXON_{name.upper()}")
            if raw:
                values[name] = raw
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
