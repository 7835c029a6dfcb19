"""Host configuration: where services live and which platform they run on."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .detect_os import detect_os
from .get_config_path import get_config_path
from .get_home_dir import get_user_home
from .get_prefix import get_prefix

SUPPORTED_PLATFORMS = ("darwin", "linux")


class HostConfig(BaseModel):
    """Paths and platform a service definition is resolved against."""

    model_config = ConfigDict(extra="forbid")

    prefix: Path = Field(..., description="Installation prefix (replaces the prefix placeholder)")
    home: Path = Field(..., description="Invoking user's home directory (replaces the home placeholder)")
    platform: str = Field(..., description="Host OS identifier (darwin, linux, ...)")

    @field_validator("platform")
    @classmethod
    def validate_platform(cls, v: str) -> str:
        if not v:
            raise ValueError("platform is required")
        return v.lower()

    @property
    def is_macos(self) -> bool:
        return self.platform == "darwin"

    @property
    def is_linux(self) -> bool:
        return self.platform == "linux"

    @classmethod
    def load(cls) -> "HostConfig":
        """Load host config from the optional config file, then apply environment overrides.

        SVCGEN_PREFIX and HOME take precedence over values in config.json.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = get_config_path()
        values: dict[str, Any] = {}
        if path.exists():
            try:
                values = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
            if not isinstance(values, dict):
                raise ValueError(f"Config file {path} must hold a JSON object, got {type(values).__name__}")

        if os.environ.get("SVCGEN_PREFIX") or "prefix" not in values:
            values["prefix"] = get_prefix()
        if os.environ.get("HOME") or "home" not in values:
            values["home"] = get_user_home()
        values.setdefault("platform", detect_os())

        try:
            return cls(**values)
        except ValidationError as e:
            raise ValueError(f"Invalid host configuration in {path}: {e}") from e
