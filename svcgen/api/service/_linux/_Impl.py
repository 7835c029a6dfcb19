"""Linux (systemd) rendering - builds unit and timer files for a service definition."""

from typing import TYPE_CHECKING

from ....logging_config import get_logger
from ..RunType import RunType

if TYPE_CHECKING:
    from ..ServiceDefinition import ServiceDefinition

logger = get_logger(__name__)


class _Impl:
    """systemd unit and timer rendering."""

    @staticmethod
    def create_unit_content(definition: "ServiceDefinition") -> str:
        """Create systemd service unit content.

        Args:
            definition: Service definition to render; evaluated if it has not been yet
        """
        unit = f"""[Unit]
Description=svcgen generated unit for {definition.owner.name}

[Install]
WantedBy=default.target

[Service]
"""
        # command() evaluates the block, so it must run before any field is read
        command = definition.command()
        exec_start = " ".join(command) if command else ""

        options = [
            f"Type={'oneshot' if definition.launch_only_once() is True else 'simple'}",
            f"ExecStart={exec_start}",
        ]

        keep_alive = definition.keep_alive()
        if keep_alive is not None and keep_alive.always:
            options.append("Restart=always")
        if definition.restart_delay() is not None:
            options.append(f"RestartSec={definition.restart_delay()}")
        if definition.working_dir():
            options.append(f"WorkingDirectory={definition.working_dir()}")
        if definition.root_dir():
            options.append(f"RootDirectory={definition.root_dir()}")
        if definition.input_path():
            options.append(f"StandardInput=file:{definition.input_path()}")
        if definition.log_path():
            options.append(f"StandardOutput=append:{definition.log_path()}")
        if definition.error_log_path():
            options.append(f"StandardError=append:{definition.error_log_path()}")
        for key, value in definition.environment_variables().items():
            options.append(f'Environment="{key}={value}"')

        logger.debug("Rendered systemd unit for %s", definition.owner.name)
        return unit + "\n".join(options)

    @staticmethod
    def _on_calendar(definition: "ServiceDefinition") -> str:
        """OnCalendar value; the field order (Weekday-*-Month-Day) is what existing timers expect."""
        cron = definition.cron()
        minutes = "*" if cron.Minute == "*" else f"{cron.Minute:02d}"
        hours = "*" if cron.Hour == "*" else f"{cron.Hour:02d}"
        return f"{cron.Weekday}-*-{cron.Month}-{cron.Day} {hours}:{minutes}:00"

    @staticmethod
    def create_timer_content(definition: "ServiceDefinition") -> str:
        """Create systemd timer unit content for timed (interval or cron) services."""
        timer = f"""[Unit]
Description=svcgen generated timer for {definition.owner.name}

[Install]
WantedBy=timers.target

[Timer]
Unit={definition.owner.service_name}
"""
        definition.ensure_evaluated()
        run_type = definition.run_type()

        options = []
        if run_type == RunType.CRON:
            options.append("Persistent=true")
        if run_type == RunType.INTERVAL and definition.interval() is not None:
            options.append(f"OnUnitActiveSec={definition.interval()}")
        if run_type == RunType.CRON and definition.cron() is not None:
            options.append(f"OnCalendar={_Impl._on_calendar(definition)}")

        logger.debug("Rendered systemd timer for %s", definition.owner.name)
        return timer + "\n".join(options)
