"""
locator.py — Pick the authoritative legacy release file from a directory.

Some hosts ship several legacy files at once (CentOS, Oracle Linux and
other enterprise derivatives keep ``redhat-release`` next to their own), so
candidates are scanned in sorted order and the first one that parses to a
name wins.
"""

import logging
import os
import re
from typing import Callable, Dict, Iterable, Optional, Tuple

from .parsers import parse_distro_release_content
from .sources import IGNORED_BASENAMES, SourceUnavailableError

logger = logging.getLogger(__name__)

_BASENAME_PATTERN = re.compile(r"(\w+)[-_](release|version)$")


def distro_id_from_basename(basename: str) -> Optional[str]:
    """Return the id token of a ``<id>-release``/``<id>_version`` name, if any."""
    match = _BASENAME_PATTERN.search(basename)
    if match is None:
        return None
    return match.group(1)


def release_file_candidates(
    basenames: Iterable[str],
    ignored: Iterable[str] = IGNORED_BASENAMES,
) -> Iterable[Tuple[str, str]]:
    """Yield ``(basename, distro_id)`` for candidate files in sorted order."""
    skip = frozenset(ignored)
    for basename in sorted(basenames):
        if basename in skip:
            continue
        distro_id = distro_id_from_basename(basename)
        if distro_id is not None:
            yield basename, distro_id


def parse_distro_release_file(
    path: str,
    read_file: Callable[[str], str],
) -> Dict[str, str]:
    """Read and parse one legacy release file; unreadable files yield ``{}``."""
    try:
        content = read_file(path)
    except SourceUnavailableError as exc:
        logger.debug("skipping %s: %s", path, exc)
        return {}
    return parse_distro_release_content(content)


def find_distro_release_file(
    etc_dir: str,
    basenames: Iterable[str],
    read_file: Callable[[str], str],
    ignored: Iterable[str] = IGNORED_BASENAMES,
) -> Tuple[Optional[str], Dict[str, str]]:
    """
    Return ``(path, info)`` for the first candidate that yields a name.

    The filename's id token is stored in ``info["id"]``. When no candidate
    yields a name the result is ``(None, {})``.
    """
    for basename, distro_id in release_file_candidates(basenames, ignored):
        path = os.path.join(etc_dir, basename)
        info = parse_distro_release_file(path, read_file)
        if "name" in info:
            info["id"] = distro_id
            logger.debug("using distro release file %s", path)
            return path, info
        logger.debug("no distro name in %s", path)
    return None, {}


def load_explicit_release_file(
    path: str,
    read_file: Callable[[str], str],
) -> Tuple[Optional[str], Dict[str, str]]:
    """
    Parse a caller-chosen legacy file.

    The ignore set does not apply and the basename need not match; the id is
    filled in only when it does.
    """
    info = parse_distro_release_file(path, read_file)
    if "name" not in info:
        return None, {}
    distro_id = distro_id_from_basename(os.path.basename(path))
    if distro_id is not None:
        info["id"] = distro_id
    return path, info


__all__ = [
    "distro_id_from_basename",
    "find_distro_release_file",
    "load_explicit_release_file",
    "parse_distro_release_file",
    "release_file_candidates",
]
