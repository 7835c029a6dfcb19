"""Serialize a service definition into a cacheable mapping."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .ServiceDefinition import ServiceDefinition


def serialize(definition: "ServiceDefinition") -> dict[str, Any]:
    """Mapping of the fields that are set; unset fields are omitted, never null.

    The command is emitted as originally given (list or per-platform mapping),
    not as resolved for this host.
    """
    definition.ensure_evaluated()

    cron = definition.cron()
    sockets = definition.sockets()
    keep_alive = definition.keep_alive()
    run_type = definition.run_type()
    process_type = definition.process_type()
    run_params = definition.run_params

    data: dict[str, Any] = {
        "run": _copy_run(run_params) if run_params is not None else None,
        "run_type": run_type.value if run_type is not None else None,
        "interval": definition.interval(),
        "cron": cron.to_cron_string() if cron is not None else None,
        "keep_alive": keep_alive.to_dict() if keep_alive is not None else None,
        "launch_only_once": definition.launch_only_once(),
        "require_root": definition.require_root(),
        "environment_variables": dict(definition.environment_variables()) or None,
        "working_dir": definition.working_dir(),
        "root_dir": definition.root_dir(),
        "input_path": definition.input_path(),
        "log_path": definition.log_path(),
        "error_log_path": definition.error_log_path(),
        "restart_delay": definition.restart_delay(),
        "process_type": process_type.value if process_type is not None else None,
        "macos_legacy_timers": definition.macos_legacy_timers(),
        "sockets": str(sockets) if sockets is not None else None,
    }
    return {key: value for key, value in data.items() if value is not None}


def _copy_run(run_params: list[str] | dict[str, list[str]]) -> list[str] | dict[str, list[str]]:
    if isinstance(run_params, dict):
        return {key: list(value) for key, value in run_params.items()}
    return list(run_params)
