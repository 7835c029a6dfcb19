"""Service definition - the DSL a package uses to describe its background service."""

import os
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ...constants import SYSTEM_PATH
from ...logging_config import get_logger
from ..config.HostConfig import HostConfig
from .CronSchedule import CronSchedule
from .KeepAlive import KEEP_ALIVE_KEYS, KeepAlive
from .ProcessType import ProcessType
from .RunType import RunType
from .ServiceOwner import ServiceOwner
from .ServiceTypeError import ServiceTypeError
from .Sockets import Sockets
from .parse_cron import parse_cron

logger = get_logger(__name__)

ServiceBlock = Callable[["ServiceDefinition"], Any]


def _is_pathlike(value: Any) -> bool:
    return isinstance(value, (str, os.PathLike))


def _command_list(value: Any, accessor: str) -> list[str]:
    """Normalize a command (single path or sequence of paths) to a list of strings."""
    if _is_pathlike(value):
        return [os.fspath(value)]
    if isinstance(value, (list, tuple)) and all(_is_pathlike(part) for part in value):
        return [os.fspath(part) for part in value]
    raise ServiceTypeError(f"ServiceDefinition.{accessor} expects a list of strings, a string or a path")


class ServiceDefinition:
    """How to run and supervise one package's background process.

    The block is evaluated once, on the first derived read (``command()``, the
    renderers, ``serialize()``...). Inside the block each accessor called with
    an argument validates and stores it; called without one it returns the
    current value.
    """

    def __init__(
        self,
        owner: ServiceOwner,
        block: Optional[ServiceBlock] = None,
        host: Optional[HostConfig] = None,
    ):
        self.owner = owner
        self.host = host if host is not None else HostConfig.load()
        self._block = block
        self._lock = threading.RLock()
        self._evaluated = False
        self._evaluating = False

        self._run: Optional[list[str]] = None
        self._run_params: Optional[list[str] | dict[str, list[str]]] = None
        self._run_type = RunType.IMMEDIATE
        self._process_type: Optional[ProcessType] = None
        self._keep_alive: Optional[KeepAlive] = None
        self._sockets: Optional[Sockets] = None
        self._cron: Optional[CronSchedule] = None
        self._interval: Optional[int] = None
        self._environment_variables: dict[str, str] = {}
        self._working_dir: Optional[str] = None
        self._root_dir: Optional[str] = None
        self._input_path: Optional[str] = None
        self._log_path: Optional[str] = None
        self._error_log_path: Optional[str] = None
        self._run_at_load: Optional[bool] = True
        self._launch_only_once: Optional[bool] = None
        self._require_root: Optional[bool] = None
        self._macos_legacy_timers: Optional[bool] = None
        self._restart_delay: Optional[int] = None

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def ensure_evaluated(self) -> None:
        """Run the block exactly once.

        Concurrent callers wait for the evaluating thread; a call made from
        inside the block itself returns immediately.
        """
        if self._evaluated:
            return
        with self._lock:
            if self._evaluated or self._evaluating:
                return
            self._evaluating = True
            try:
                if self._block is not None:
                    logger.debug("Evaluating service block for %s", self.owner.name)
                    self._block(self)
                self._evaluated = True
            finally:
                self._evaluating = False

    # ------------------------------------------------------------------
    # DSL accessors
    # ------------------------------------------------------------------

    def run(
        self,
        command: Any = None,
        *,
        macos: Any = None,
        linux: Any = None,
    ) -> Optional[list[str]]:
        """Command to run, either for every platform or per platform (``macos=``/``linux=``)."""
        if command is None and macos is None and linux is None:
            return self._run

        resolved: Optional[list[str]]
        if command is not None:
            resolved = _command_list(command, "run")
            original: list[str] | dict[str, list[str]] = list(resolved)
        else:
            per_platform = {
                key: _command_list(value, "run")
                for key, value in (("macos", macos), ("linux", linux))
                if value is not None
            }
            original = per_platform
            if self.host.is_macos:
                resolved = per_platform.get("macos")
            elif self.host.is_linux:
                resolved = per_platform.get("linux")
            else:
                resolved = None

        if self._run_params is None and original:
            self._run_params = original
        if resolved is not None:
            self._run = list(resolved)
        return self._run

    def _path_accessor(self, attr: str, path: Any) -> Optional[str]:
        if path is None:
            return getattr(self, attr)
        if not _is_pathlike(path):
            raise ServiceTypeError(f"ServiceDefinition.{attr[1:]} expects a String or a path")
        setattr(self, attr, os.fspath(path))
        return getattr(self, attr)

    def working_dir(self, path: Any = None) -> Optional[str]:
        return self._path_accessor("_working_dir", path)

    def root_dir(self, path: Any = None) -> Optional[str]:
        return self._path_accessor("_root_dir", path)

    def input_path(self, path: Any = None) -> Optional[str]:
        return self._path_accessor("_input_path", path)

    def log_path(self, path: Any = None) -> Optional[str]:
        return self._path_accessor("_log_path", path)

    def error_log_path(self, path: Any = None) -> Optional[str]:
        return self._path_accessor("_error_log_path", path)

    def _bool_accessor(self, attr: str, value: Any) -> Optional[bool]:
        if value is None:
            return getattr(self, attr)
        if not isinstance(value, bool):
            raise ServiceTypeError(f"ServiceDefinition.{attr[1:]} expects a Boolean")
        setattr(self, attr, value)
        return value

    def run_at_load(self, value: Optional[bool] = None) -> Optional[bool]:
        return self._bool_accessor("_run_at_load", value)

    def launch_only_once(self, value: Optional[bool] = None) -> Optional[bool]:
        return self._bool_accessor("_launch_only_once", value)

    def require_root(self, value: Optional[bool] = None) -> Optional[bool]:
        return self._bool_accessor("_require_root", value)

    def macos_legacy_timers(self, value: Optional[bool] = None) -> Optional[bool]:
        return self._bool_accessor("_macos_legacy_timers", value)

    def _int_accessor(self, attr: str, value: Any, minimum: Optional[int] = None) -> Optional[int]:
        if value is None:
            return getattr(self, attr)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ServiceTypeError(f"ServiceDefinition.{attr[1:]} expects an Integer")
        if minimum is not None and value < minimum:
            raise ServiceTypeError(f"ServiceDefinition.{attr[1:]} expects an Integer >= {minimum}, got {value}")
        setattr(self, attr, value)
        return value

    def interval(self, value: Optional[int] = None) -> Optional[int]:
        """Seconds between runs when ``run_type`` is interval."""
        return self._int_accessor("_interval", value, minimum=0)

    def restart_delay(self, value: Optional[int] = None) -> Optional[int]:
        return self._int_accessor("_restart_delay", value)

    def keep_alive(self, value: Any = None) -> Optional[KeepAlive]:
        """Keep-alive policy: a Boolean, or a mapping with keys from KEEP_ALIVE_KEYS."""
        if value is None:
            return self._keep_alive
        if isinstance(value, bool):
            self._keep_alive = KeepAlive(always=value)
        elif isinstance(value, KeepAlive):
            self._keep_alive = value
        elif isinstance(value, Mapping):
            unknown = [key for key in value if key not in KEEP_ALIVE_KEYS]
            if unknown:
                raise ServiceTypeError(
                    f"ServiceDefinition.keep_alive allows only {list(KEEP_ALIVE_KEYS)}, got: {unknown}"
                )
            data = {key: os.fspath(val) if isinstance(val, os.PathLike) else val for key, val in value.items()}
            try:
                self._keep_alive = KeepAlive(**data)
            except ValidationError as e:
                raise ServiceTypeError(f"ServiceDefinition.keep_alive got invalid values: {e}") from e
        else:
            raise ServiceTypeError("ServiceDefinition.keep_alive expects a Boolean or a mapping")
        return self._keep_alive

    def sockets(self, value: Optional[str] = None) -> Optional[Sockets]:
        """Socket to listen on, as ``<type>://<host>:<port>``."""
        if value is None:
            return self._sockets
        if not isinstance(value, str):
            raise ServiceTypeError("ServiceDefinition.sockets expects a String")
        try:
            self._sockets = Sockets.parse(value)
        except ValueError as e:
            raise ServiceTypeError(
                f"ServiceDefinition.sockets expects a socket definition formatted as <type>://<host>:<port>, "
                f"got: {value!r}"
            ) from e
        return self._sockets

    def process_type(self, value: Any = None) -> Optional[ProcessType]:
        if value is None:
            return self._process_type
        self._process_type = self._enum_value(ProcessType, value, "process_type")
        return self._process_type

    def run_type(self, value: Any = None) -> RunType:
        if value is None:
            return self._run_type
        self._run_type = self._enum_value(RunType, value, "run_type")
        return self._run_type

    @staticmethod
    def _enum_value(enum_cls: Any, value: Any, accessor: str) -> Any:
        allowed = "/".join(f"'{member.value}'" for member in enum_cls)
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise ServiceTypeError(f"ServiceDefinition.{accessor} expects a String")
        try:
            return enum_cls(value)
        except ValueError as e:
            raise ServiceTypeError(f"ServiceDefinition.{accessor} allows: {allowed}") from e

    def cron(self, value: Optional[str] = None) -> Optional[CronSchedule]:
        """Calendar schedule used when ``run_type`` is cron."""
        if value is None:
            return self._cron
        if not isinstance(value, str):
            raise ServiceTypeError("ServiceDefinition.cron expects a String")
        self._cron = parse_cron(value)
        return self._cron

    def environment_variables(self, variables: Optional[Mapping[str, Any]] = None) -> dict[str, str]:
        if variables is None:
            return self._environment_variables
        if not isinstance(variables, Mapping):
            raise ServiceTypeError("ServiceDefinition.environment_variables expects a mapping")
        self._environment_variables = {
            str(key): os.fspath(value) if isinstance(value, os.PathLike) else str(value)
            for key, value in variables.items()
        }
        return self._environment_variables

    # ------------------------------------------------------------------
    # Owner paths usable inside the block
    # ------------------------------------------------------------------

    @property
    def bin(self) -> Path:
        return self.owner.bin

    @property
    def etc(self) -> Path:
        return self.owner.etc

    @property
    def libexec(self) -> Path:
        return self.owner.libexec

    @property
    def opt_bin(self) -> Path:
        return self.owner.opt_bin

    @property
    def opt_libexec(self) -> Path:
        return self.owner.opt_libexec

    @property
    def opt_pkgshare(self) -> Path:
        return self.owner.opt_pkgshare

    @property
    def opt_prefix(self) -> Path:
        return self.owner.opt_prefix

    @property
    def opt_sbin(self) -> Path:
        return self.owner.opt_sbin

    @property
    def var(self) -> Path:
        return self.owner.var

    def std_service_path_env(self) -> str:
        """PATH value with the prefix bin/sbin ahead of the system directories."""
        prefix = self.host.prefix
        return f"{prefix}/bin:{prefix}/sbin:{SYSTEM_PATH}"

    # ------------------------------------------------------------------
    # Derived reads (evaluate the block first)
    # ------------------------------------------------------------------

    def command(self) -> Optional[list[str]]:
        self.ensure_evaluated()
        return list(self._run) if self._run is not None else None

    def manual_command(self) -> str:
        """Command line to run the service in the foreground instead."""
        self.ensure_evaluated()
        parts = [f'{key}="{value}"' for key, value in self._environment_variables.items() if key != "PATH"]
        cmd = self.command()
        if cmd:
            parts.extend(cmd)
        return " ".join(parts)

    def requires_root(self) -> bool:
        self.ensure_evaluated()
        return self._require_root is True

    def is_keep_alive(self) -> bool:
        self.ensure_evaluated()
        if self._keep_alive is None or self._keep_alive.is_empty():
            return False
        return self._keep_alive.always is not False

    def is_timed(self) -> bool:
        self.ensure_evaluated()
        return self._run_type in (RunType.CRON, RunType.INTERVAL)

    @property
    def run_params(self) -> Optional[list[str] | dict[str, list[str]]]:
        """Command as originally given (before platform selection), used for serialization."""
        return self._run_params

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_plist(self) -> dict[str, Any]:
        from ._darwin._Impl import _Impl

        return _Impl.create_plist(self)

    def to_plist_xml(self) -> bytes:
        from ._darwin._Impl import _Impl

        return _Impl.create_plist_xml(self)

    def to_systemd_unit(self) -> str:
        from ._linux._Impl import _Impl

        return _Impl.create_unit_content(self)

    def to_systemd_timer(self) -> str:
        from ._linux._Impl import _Impl

        return _Impl.create_timer_content(self)

    def serialize(self) -> dict[str, Any]:
        from .serialize import serialize

        return serialize(self)

    @classmethod
    def from_serialized(
        cls,
        owner: ServiceOwner,
        data: Mapping[str, Any],
        host: Optional[HostConfig] = None,
    ) -> "ServiceDefinition":
        """Rebuild a definition from a serialized mapping.

        Placeholders are resolved against ``host``; the values are replayed
        through the accessors when the definition is first evaluated.
        """
        from .deserialize import deserialize

        host = host if host is not None else HostConfig.load()
        fields = deserialize(data, host)

        def block(service: "ServiceDefinition") -> None:
            values = dict(fields)
            run = values.pop("run", None)
            if isinstance(run, dict):
                service.run(**run)
            elif run is not None:
                service.run(run)
            for key, value in values.items():
                getattr(service, key)(value)

        return cls(owner, block, host=host)
