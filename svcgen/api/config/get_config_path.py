"""Get path to the svcgen config file."""

from pathlib import Path

from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to config file based on SVCGEN_HOME or default to ~/.svcgen."""
    return get_home_dir("config.json")
