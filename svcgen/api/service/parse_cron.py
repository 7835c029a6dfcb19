"""Parse a cron statement into a CronSchedule."""

import re
from typing import Any

from .CronSchedule import CRON_FIELDS, CronSchedule
from .CronSyntaxError import CronSyntaxError

# Plain ASCII integers, optionally negative
INTEGER_FIELD = re.compile(r"-?[0-9]+")

# Overrides applied on top of an all-wildcard schedule
CRON_SHORTCUTS: dict[str, dict[str, int]] = {
    "@hourly": {"Minute": 0},
    "@daily": {"Minute": 0, "Hour": 0},
    "@weekly": {"Minute": 0, "Hour": 0, "Weekday": 0},
    "@monthly": {"Minute": 0, "Hour": 0, "Day": 1},
    "@yearly": {"Minute": 0, "Hour": 0, "Day": 1, "Month": 1},
    "@annually": {"Minute": 0, "Hour": 0, "Day": 1, "Month": 1},
}


def parse_cron(cron_statement: str) -> CronSchedule:
    """Parse a named shortcut or a five-field statement (Minute Hour Day Month Weekday).

    Only "*" and plain integers are understood; ranges, lists and steps are not.

    Raises:
        CronSyntaxError: If the statement does not have five fields or a field is not an integer
    """
    shortcut = CRON_SHORTCUTS.get(cron_statement)
    if shortcut is not None:
        return CronSchedule(**shortcut)

    parts = cron_statement.split()
    if len(parts) != len(CRON_FIELDS):
        raise CronSyntaxError(
            f"ServiceDefinition.cron expects a valid cron syntax with {len(CRON_FIELDS)} fields, "
            f"got {len(parts)}: {cron_statement!r}"
        )

    parsed: dict[str, Any] = {}
    for key, part in zip(CRON_FIELDS, parts):
        if part == "*":
            continue
        if INTEGER_FIELD.fullmatch(part) is None:
            raise CronSyntaxError(f"ServiceDefinition.cron expects '*' or an integer for {key}, got: {part!r}")
        parsed[key] = int(part)
    return CronSchedule(**parsed)
