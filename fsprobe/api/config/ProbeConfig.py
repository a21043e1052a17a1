"""Probe harness configuration."""

import json
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import (
    DEFAULT_LOG_NAME,
    DEFAULT_QUEUE_SIZE,
    DEFAULT_ROOT_NAME,
    DEFAULT_SOURCE_NAME,
    PAUSE_SECS,
    POLL_INTERVAL_SECS,
    SETTLE_SECS,
)
from .get_home_dir import get_home_dir


class ProbeConfig(BaseModel):
    """Scratch layout and timing for one probe run."""

    model_config = ConfigDict(extra="forbid")

    root_name: str = Field(DEFAULT_ROOT_NAME, min_length=1, description="Scratch root, recreated on every run")
    source_name: str = Field(DEFAULT_SOURCE_NAME, min_length=1, description="Watched directory under the scratch root")
    log_name: str = Field(DEFAULT_LOG_NAME, min_length=1, description="Report file under the scratch root")
    pause_secs: float = Field(PAUSE_SECS, ge=0, description="Pause after installing the watch and inside 1and1M")
    settle_secs: float = Field(SETTLE_SECS, ge=0, description="Wait for trailing notifications after the last action")
    queue_size: int = Field(DEFAULT_QUEUE_SIZE, gt=0, description="Capacity of the notification queue")
    poll_interval_secs: float = Field(POLL_INTERVAL_SECS, gt=0, description="Foreground wait on the notification queue")
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on FSPROBE_CONFIG or default to ~/.fsprobe/config.json."""
        env_path = os.environ.get("FSPROBE_CONFIG")
        if env_path:
            return Path(env_path).expanduser()
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "ProbeConfig":
        """Load and validate config from file.

        A missing file is not an error: every field has a default.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        if path is None:
            path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def root_path(self, base: Path) -> Path:
        """Scratch root under ``base``."""
        return (base / self.root_name).resolve()

    def source_path(self, base: Path) -> Path:
        """Watched directory under ``base``."""
        return self.root_path(base) / self.source_name

    def log_path(self, base: Path) -> Path:
        """Default report destination under ``base``."""
        return self.root_path(base) / self.log_name
