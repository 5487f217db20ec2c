# sources.py — host I/O collaborators and immutable source configuration.

"""
Thin I/O glue between the host and the parsers.

Every collaborator either returns text or raises SourceUnavailableError.
Callers decide what "unavailable" means; the resolver degrades the
affected source to an empty mapping.
"""

import logging
import os
import subprocess
from collections import namedtuple
from typing import Any, Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)


# ------------------------------ Defaults ------------------------------------

UNIX_CONF_DIR = "/etc"
OS_RELEASE_BASENAME = "os-release"
LSB_RELEASE_COMMAND = ("lsb_release", "-a")

# Present on many hosts but handled elsewhere or not distro-identifying.
IGNORED_BASENAMES = frozenset((
    "debian_version",
    "lsb-release",
    "oem-release",
    OS_RELEASE_BASENAME,
    "system-release",
))


# ------------------------------ Errors --------------------------------------

class SourceUnavailableError(RuntimeError):
    """A file, directory or command could not supply any content."""

    def __init__(self, source, reason, returncode=None):
        # type: (str, str, Optional[int]) -> None
        super().__init__("%s: %s" % (source, reason))
        self.source = source
        self.reason = reason
        self.returncode = returncode


# ------------------------------ Config model --------------------------------

SourceConfig = namedtuple("SourceConfig", [
    "etc_dir",
    "os_release_basename",
    "lsb_release_command",
    "ignored_basenames",
    "include_lsb",
    "distro_release_file",
])
SourceConfig.__new__.__defaults__ = (
    UNIX_CONF_DIR,
    OS_RELEASE_BASENAME,
    LSB_RELEASE_COMMAND,
    IGNORED_BASENAMES,
    True,
    None,
)


def os_release_path(config):  # type: (SourceConfig) -> str
    return os.path.join(config.etc_dir, config.os_release_basename)


# ------------------------------ Collaborators -------------------------------

def read_file(path):  # type: (str) -> str
    """Return the text of *path*, decoding best-effort as UTF-8."""
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror or str(exc)) from exc
    return raw.decode("utf-8", errors="replace")


def list_dir(path):  # type: (str) -> List[str]
    try:
        return os.listdir(path)
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror or str(exc)) from exc


def run_command(argv):  # type: (Sequence[str]) -> str
    """
    Run *argv* and return its decoded stdout.

    A missing executable or a non-zero exit status is reported as
    SourceUnavailableError; stderr is discarded.
    """
    cmd = list(argv)
    try:
        proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        stdout, _ = proc.communicate()
    except OSError as exc:
        raise SourceUnavailableError(cmd[0], exc.strerror or str(exc)) from exc
    if proc.returncode != 0:
        raise SourceUnavailableError(
            cmd[0], "exited with status %d" % proc.returncode, proc.returncode
        )
    return stdout.decode("utf-8", errors="replace")


HostIO = namedtuple("HostIO", ["read_file", "list_dir", "run_command"])
HostIO.__new__.__defaults__ = (read_file, list_dir, run_command)


def fetch_optional(fetch, target):
    # type: (Callable[[Any], Any], Any) -> Optional[Any]
    """Call *fetch* on *target*, mapping SourceUnavailableError to None."""
    try:
        return fetch(target)
    except SourceUnavailableError as exc:
        logger.debug("source unavailable: %s", exc)
        return None


__all__ = [
    "HostIO",
    "IGNORED_BASENAMES",
    "LSB_RELEASE_COMMAND",
    "OS_RELEASE_BASENAME",
    "SourceConfig",
    "SourceUnavailableError",
    "UNIX_CONF_DIR",
    "list_dir",
    "os_release_path",
    "read_file",
    "fetch_optional",
    "run_command",
]
