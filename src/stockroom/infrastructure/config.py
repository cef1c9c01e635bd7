"""Runtime settings.

BaseSettings reads each field from the environment with the
``STOCKROOM_`` prefix:
  data_dir  -> STOCKROOM_DATA_DIR
  log_level -> STOCKROOM_LOG_LEVEL

The CLI root group passes its options as keyword arguments, which win
over the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_",
        extra="ignore",
        frozen=True,
    )

    data_dir: Path = DEFAULT_DATA_DIR
    log_level: LogLevel = "WARNING"

    @field_validator("data_dir", mode="after")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def items_file(self) -> Path:
        return self.data_dir / "items.json"
