"""Listening socket of a socket-activated service."""

import re

from pydantic import BaseModel, ConfigDict, Field

SOCKET_PATTERN = re.compile(r"([a-z]+)://([a-z0-9.]+):([0-9]+)", re.IGNORECASE)


class Sockets(BaseModel):
    """Socket parsed from a ``<type>://<host>:<port>`` string."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: str = Field(..., description="Protocol, e.g. tcp or udp")
    host: str = Field(..., description="Node name to listen on")
    port: str = Field(..., description="Service name or port number")

    @classmethod
    def parse(cls, value: str) -> "Sockets":
        """Parse a socket definition, all or nothing.

        Raises:
            ValueError: If ``value`` is not formatted as ``<type>://<host>:<port>``
        """
        match = SOCKET_PATTERN.fullmatch(value)
        if match is None:
            raise ValueError(f"socket definition must be formatted as <type>://<host>:<port>, got: {value!r}")
        type_, host, port = match.groups()
        return cls(type=type_, host=host, port=port)

    def __str__(self) -> str:
        return f"{self.type}://{self.host}:{self.port}"
