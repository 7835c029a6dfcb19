"""Get the installation prefix services are installed under."""

import os
from pathlib import Path

from ...constants import DEFAULT_PREFIX


def get_prefix() -> Path:
    """Installation prefix from SVCGEN_PREFIX, defaulting to /usr/local."""
    prefix_env = os.environ.get("SVCGEN_PREFIX")
    if prefix_env:
        return Path(prefix_env).expanduser()
    return Path(DEFAULT_PREFIX)
