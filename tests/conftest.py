"""Shared pytest configuration and fixtures for all tests."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from svcgen.api.config.HostConfig import HostConfig


def pytest_configure(config):
    for marker in ("unit", "service", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Owner and host helpers
# =============================================================================


@dataclass
class FakeOwner:
    """Minimal package owning a service definition."""

    name: str = "testball"
    prefix: Path = Path("/usr/local")

    @property
    def plist_name(self) -> str:
        return f"com.svcgen.{self.name}"

    @property
    def service_name(self) -> str:
        return f"svcgen.{self.name}"

    @property
    def opt_prefix(self) -> Path:
        return self.prefix / "opt" / self.name

    @property
    def opt_bin(self) -> Path:
        return self.opt_prefix / "bin"

    @property
    def opt_sbin(self) -> Path:
        return self.opt_prefix / "sbin"

    @property
    def opt_libexec(self) -> Path:
        return self.opt_prefix / "libexec"

    @property
    def opt_pkgshare(self) -> Path:
        return self.opt_prefix / "share" / self.name

    @property
    def bin(self) -> Path:
        return self.prefix / "Cellar" / self.name / "1.0" / "bin"

    @property
    def libexec(self) -> Path:
        return self.prefix / "Cellar" / self.name / "1.0" / "libexec"

    @property
    def etc(self) -> Path:
        return self.prefix / "etc"

    @property
    def var(self) -> Path:
        return self.prefix / "var"


def make_host(platform: str = "linux") -> HostConfig:
    return HostConfig(prefix=Path("/usr/local"), home=Path("/home/tester"), platform=platform)


@pytest.fixture
def owner() -> FakeOwner:
    return FakeOwner()


@pytest.fixture
def linux_host() -> HostConfig:
    return make_host("linux")


@pytest.fixture
def macos_host() -> HostConfig:
    return make_host("darwin")


@pytest.fixture
def make_service(owner, linux_host):
    """Factory building a ServiceDefinition for the fake owner (Linux host by default)."""
    from svcgen.api.service.ServiceDefinition import ServiceDefinition

    def _make(block=None, host=None):
        return ServiceDefinition(owner, block, host=host if host is not None else linux_host)

    return _make
