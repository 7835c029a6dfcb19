"""Config module - host paths and platform the definitions resolve against."""

from .HostConfig import HostConfig

__all__ = ["HostConfig"]
