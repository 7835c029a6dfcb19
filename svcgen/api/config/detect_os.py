"""Detect the host operating system."""

import platform


def detect_os() -> str:
    """Return the OS identifier matching platform.system().lower() (e.g. "darwin", "linux")."""
    return platform.system().lower()
