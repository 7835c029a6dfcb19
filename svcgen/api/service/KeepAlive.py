"""Keep-alive policy of a service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

KEEP_ALIVE_KEYS = ("always", "successful_exit", "crashed", "path")


class KeepAlive(BaseModel):
    """Conditions under which the service manager restarts the process.

    Which keys were supplied matters for rendering, so presence is read from
    ``model_fields_set`` rather than from the values.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    always: StrictBool | None = Field(None, description="Restart unconditionally")
    successful_exit: StrictBool | None = Field(None, description="Restart depending on exit status")
    crashed: StrictBool | None = Field(None, description="Restart depending on whether the process crashed")
    path: StrictStr | None = Field(None, description="Restart while this path exists")

    def has(self, key: str) -> bool:
        return key in self.model_fields_set

    def is_empty(self) -> bool:
        """True when no key was supplied (e.g. built from an empty mapping)."""
        return not self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        """Only the keys that were supplied, in declaration order."""
        return self.model_dump(exclude_unset=True)
