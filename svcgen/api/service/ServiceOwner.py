"""What a service definition needs from the package that owns it."""

from pathlib import Path
from typing import Protocol


class ServiceOwner(Protocol):
    """Owning package: names used in rendered files and paths usable in commands."""

    name: str
    plist_name: str
    service_name: str

    @property
    def bin(self) -> Path: ...

    @property
    def etc(self) -> Path: ...

    @property
    def libexec(self) -> Path: ...

    @property
    def opt_bin(self) -> Path: ...

    @property
    def opt_libexec(self) -> Path: ...

    @property
    def opt_pkgshare(self) -> Path: ...

    @property
    def opt_prefix(self) -> Path: ...

    @property
    def opt_sbin(self) -> Path: ...

    @property
    def var(self) -> Path: ...
