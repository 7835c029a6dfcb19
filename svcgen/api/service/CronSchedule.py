"""Five-field calendar schedule."""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, StrictInt

CronField = Union[Literal["*"], StrictInt]

CRON_FIELDS = ("Minute", "Hour", "Day", "Month", "Weekday")


class CronSchedule(BaseModel):
    """Schedule keyed the way launchd names calendar fields; "*" is a wildcard."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    Minute: CronField = "*"
    Hour: CronField = "*"
    Day: CronField = "*"
    Month: CronField = "*"
    Weekday: CronField = "*"

    def to_dict(self) -> dict[str, Any]:
        return {key: getattr(self, key) for key in CRON_FIELDS}

    def calendar_interval(self) -> dict[str, int]:
        """Non-wildcard fields only (launchd StartCalendarInterval)."""
        return {key: value for key, value in self.to_dict().items() if value != "*"}

    def to_cron_string(self) -> str:
        return " ".join(str(getattr(self, key)) for key in CRON_FIELDS)
