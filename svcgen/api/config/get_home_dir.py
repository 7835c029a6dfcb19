"""Get svcgen home directory path or path under it."""

import os
from pathlib import Path

from ...constants import SVCGEN_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get svcgen home directory path or path under it.

    Checks SVCGEN_HOME environment variable first, defaults to ~/.svcgen if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "svcgen.log")

    Returns:
        Absolute path to svcgen home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.svcgen")
        >>> get_home_dir("config.json")
        Path("/Users/user/.svcgen/config.json")
    """
    svcgen_home_env = os.environ.get("SVCGEN_HOME")
    if svcgen_home_env:
        svcgen_home = Path(svcgen_home_env).expanduser().resolve()
    else:
        svcgen_home = get_user_home() / SVCGEN_HOME_EXT

    return svcgen_home / Path(*parts) if parts else svcgen_home


def get_user_home() -> Path:
    """Home directory of the invoking user (HOME wins over the passwd entry)."""
    home_env = os.environ.get("HOME")
    if home_env:
        return Path(home_env)
    return Path.home()
