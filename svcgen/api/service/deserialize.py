"""Turn a serialized service mapping back into accessor arguments."""

from collections.abc import Mapping
from typing import Any

from ...logging_config import get_logger
from ..config.HostConfig import HostConfig
from .ProcessType import ProcessType
from .RunType import RunType
from .ServiceTypeError import ServiceTypeError
from .replace_placeholders import replace_placeholders

logger = get_logger(__name__)

PATH_KEYS = ("working_dir", "root_dir", "input_path", "log_path", "error_log_path")
PASSTHROUGH_KEYS = (
    "interval",
    "cron",
    "launch_only_once",
    "require_root",
    "restart_delay",
    "macos_legacy_timers",
    "sockets",
)


def deserialize(data: Mapping[str, Any], host: HostConfig) -> dict[str, Any]:
    """Map serialized keys to the values the accessors expect.

    Placeholders in the command, environment values and path fields are
    replaced with ``host`` paths. Keys absent from ``data`` are absent from
    the result.
    """
    fields: dict[str, Any] = {}

    run = data.get("run")
    if isinstance(run, Mapping):
        fields["run"] = {
            str(key): [replace_placeholders(part, host) for part in parts] for key, parts in run.items()
        }
    elif isinstance(run, list):
        fields["run"] = [replace_placeholders(part, host) for part in run]

    if "keep_alive" in data:
        fields["keep_alive"] = {str(key): value for key, value in data["keep_alive"].items()}

    if "environment_variables" in data:
        fields["environment_variables"] = {
            str(key): replace_placeholders(value, host) for key, value in data["environment_variables"].items()
        }

    for key, enum_cls in (("run_type", RunType), ("process_type", ProcessType)):
        value = data.get(key)
        if value is None:
            continue
        try:
            fields[key] = enum_cls(value)
        except ValueError as e:
            allowed = "/".join(f"'{member.value}'" for member in enum_cls)
            raise ServiceTypeError(f"serialized {key} allows: {allowed}, got: {value!r}") from e

    for key in PATH_KEYS:
        value = data.get(key)
        if value is not None:
            fields[key] = replace_placeholders(value, host)

    for key in PASSTHROUGH_KEYS:
        value = data.get(key)
        if value is not None:
            fields[key] = value

    logger.debug("Deserialized service fields: %s", sorted(fields))
    return fields
