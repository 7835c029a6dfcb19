"""Service module - service definitions and their launchd/systemd renderings."""

from .CronSchedule import CronSchedule
from .CronSyntaxError import CronSyntaxError
from .KeepAlive import KeepAlive
from .ProcessType import ProcessType
from .RunType import RunType
from .ServiceDefinition import ServiceDefinition
from .ServiceOwner import ServiceOwner
from .ServiceTypeError import ServiceTypeError
from .Sockets import Sockets
from .deserialize import deserialize
from .parse_cron import parse_cron
from .replace_placeholders import replace_placeholders
from .serialize import serialize

__all__ = [
    "CronSchedule",
    "CronSyntaxError",
    "KeepAlive",
    "ProcessType",
    "RunType",
    "ServiceDefinition",
    "ServiceOwner",
    "ServiceTypeError",
    "Sockets",
    "deserialize",
    "parse_cron",
    "replace_placeholders",
    "serialize",
]
