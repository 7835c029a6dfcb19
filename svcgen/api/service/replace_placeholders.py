"""Replace serialized path placeholders with local paths."""

from ..config.HostConfig import HostConfig
from ...constants import HOME_PLACEHOLDER, PREFIX_PLACEHOLDER


def replace_placeholders(string: str, host: HostConfig) -> str:
    """Substitute the prefix placeholder, then the home placeholder."""
    return string.replace(PREFIX_PLACEHOLDER, str(host.prefix)).replace(HOME_PLACEHOLDER, str(host.home))
