"""
distroid package.

Keep this file minimal:
- No I/O at import time (resolution happens on call)
- No CLI parsing or logging setup
- Only version and explicit public exports
"""

# --- Version ---------------------------------------------------------------
__version__ = "0.1.0"


def get_version() -> str:
    return __version__


# --- Public API ------------------------------------------------------------
from .identity import (  # noqa: E402
    DistroIdentity,
    codename,
    id,
    info,
    like,
    name,
    resolve,
    version,
)
from .locator import find_distro_release_file  # noqa: E402
from .normalize import normalize_id  # noqa: E402
from .parsers import (  # noqa: E402
    parse_distro_release_content,
    parse_lsb_release,
    parse_os_release,
)
from .sources import HostIO, SourceConfig, SourceUnavailableError  # noqa: E402

__all__ = [
    "__version__",
    "get_version",
    "DistroIdentity",
    "HostIO",
    "SourceConfig",
    "SourceUnavailableError",
    "codename",
    "find_distro_release_file",
    "id",
    "info",
    "like",
    "name",
    "normalize_id",
    "parse_distro_release_content",
    "parse_lsb_release",
    "parse_os_release",
    "resolve",
    "version",
]


# --- Compatibility notes ---------------------------------------------------
# Do not configure logging here; the CLI entrypoint does it behind --debug.
