"""macOS (launchd) rendering - builds the property list for a service definition."""

import plistlib
from typing import TYPE_CHECKING, Any

from ....constants import LIMIT_LOAD_TO_SESSION_TYPES, SOCK_FAMILY
from ....logging_config import get_logger
from ..RunType import RunType

if TYPE_CHECKING:
    from ..ServiceDefinition import ServiceDefinition

logger = get_logger(__name__)


class _Impl:
    """launchd property list rendering."""

    @staticmethod
    def _keep_alive_value(definition: "ServiceDefinition") -> Any:
        """First matching shape wins: always, successful_exit, crashed, path."""
        keep_alive = definition.keep_alive()
        if keep_alive is None:
            return None
        if keep_alive.always:
            return keep_alive.always
        if keep_alive.has("successful_exit"):
            return {"SuccessfulExit": keep_alive.successful_exit}
        if keep_alive.has("crashed"):
            return {"Crashed": keep_alive.crashed}
        if keep_alive.has("path") and keep_alive.path:
            return {"PathState": keep_alive.path}
        return None

    @staticmethod
    def create_plist(definition: "ServiceDefinition") -> dict[str, Any]:
        """Create the launchd property list as an ordered dict.

        Args:
            definition: Service definition to render; evaluated if it has not been yet
        """
        # command() evaluates the block, so it must run before any field is read
        program_arguments = definition.command()
        plist: dict[str, Any] = {
            "Label": definition.owner.plist_name,
            "ProgramArguments": program_arguments,
            "RunAtLoad": definition.run_at_load() is True,
        }

        if definition.launch_only_once() is True:
            plist["LaunchOnlyOnce"] = True
        if definition.macos_legacy_timers() is True:
            plist["LegacyTimers"] = True
        if definition.restart_delay() is not None:
            plist["TimeOut"] = definition.restart_delay()
        if definition.process_type() is not None:
            plist["ProcessType"] = definition.process_type().value.capitalize()
        if definition.interval() is not None and definition.run_type() == RunType.INTERVAL:
            plist["StartInterval"] = definition.interval()
        if definition.working_dir():
            plist["WorkingDirectory"] = definition.working_dir()
        if definition.root_dir():
            plist["RootDirectory"] = definition.root_dir()
        if definition.input_path():
            plist["StandardInPath"] = definition.input_path()
        if definition.log_path():
            plist["StandardOutPath"] = definition.log_path()
        if definition.error_log_path():
            plist["StandardErrorPath"] = definition.error_log_path()
        if definition.environment_variables():
            plist["EnvironmentVariables"] = dict(definition.environment_variables())

        if definition.is_keep_alive():
            keep_alive = _Impl._keep_alive_value(definition)
            if keep_alive is not None:
                plist["KeepAlive"] = keep_alive

        sockets = definition.sockets()
        if sockets is not None:
            plist["Sockets"] = {
                "Listeners": {
                    "SockNodeName": sockets.host,
                    "SockServiceName": sockets.port,
                    "SockProtocol": sockets.type.upper(),
                    "SockFamily": SOCK_FAMILY,
                }
            }

        cron = definition.cron()
        if cron is not None and definition.run_type() == RunType.CRON:
            plist["StartCalendarInterval"] = cron.calendar_interval()

        # Loading into every session type keeps the agent valid when the session changes later
        plist["LimitLoadToSessionType"] = list(LIMIT_LOAD_TO_SESSION_TYPES)

        logger.debug("Rendered launchd plist for %s", definition.owner.plist_name)
        return plist

    @staticmethod
    def create_plist_xml(definition: "ServiceDefinition") -> bytes:
        """Encode the property list as XML, keeping key order."""
        plist = _Impl.create_plist(definition)
        if plist["ProgramArguments"] is None:
            # plistlib cannot encode None
            del plist["ProgramArguments"]
        return plistlib.dumps(plist, fmt=plistlib.FMT_XML, sort_keys=False)
