"""launchd process type (scheduling priority class)."""

from enum import Enum


class ProcessType(str, Enum):
    BACKGROUND = "background"
    STANDARD = "standard"
    INTERACTIVE = "interactive"
    ADAPTIVE = "adaptive"
