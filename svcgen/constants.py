"""Shared constants for svcgen paths, placeholders and launchd defaults."""

SVCGEN_HOME_EXT = ".svcgen"  # user-level state/config directory suffix

DEFAULT_PREFIX = "/usr/local"

# Placeholders stored in serialized definitions, resolved on the consuming machine
PREFIX_PLACEHOLDER = "$SVCGEN_PREFIX"
HOME_PLACEHOLDER = "$HOME"

# Session types a launchd agent is allowed to load into
LIMIT_LOAD_TO_SESSION_TYPES = ["Aqua", "Background", "LoginWindow", "StandardIO", "System"]

SOCK_FAMILY = "IPv4v6"

SYSTEM_PATH = "/usr/bin:/bin:/usr/sbin:/sbin"
