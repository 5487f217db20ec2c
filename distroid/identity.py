#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
identity.py — Resolve the running Linux distribution from three sources.

Data sources, in priority order
-------------------------------
1. os-release file (``/etc/os-release``)
2. ``lsb_release -a`` output
3. the first legacy ``*-release``/``*-version`` file in ``/etc`` that parses

Each attribute (name, version, id, codename) is the first non-empty value
along its own fallback chain. A missing source contributes an empty mapping;
resolution itself never fails.

Public API
----------
resolve(config=None, host_io=None) -> DistroIdentity
DistroIdentity.name(pretty=False) -> str
DistroIdentity.version(pretty=False, best=False) -> str
DistroIdentity.id() -> str
DistroIdentity.codename() -> str

Every call to ``resolve()`` (and to the module-level shortcuts) reads the
host again; nothing is cached between calls.
"""

import logging
import re
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from .locator import find_distro_release_file, load_explicit_release_file
from .normalize import DISTRO_RELEASE, LSB_RELEASE, OS_RELEASE, normalize_id
from .parsers import (
    parse_distro_release_content,
    parse_lsb_release,
    parse_os_release,
)
from .sources import HostIO, SourceConfig, fetch_optional, os_release_path

logger = logging.getLogger(__name__)

_VERSION_PARTS = re.compile(r"(\d+)\.?(\d+)?\.?(\d+)?")


# ------------------------------ Small helpers -------------------------------

def first_non_empty(candidates: Iterable[Callable[[], str]]) -> str:
    """Evaluate *candidates* in order and return the first non-empty result."""
    for candidate in candidates:
        value = candidate()
        if value:
            return value
    return ""


def most_precise(versions: Iterable[str]) -> str:
    """Return the version with the most ``.`` separators; earliest wins ties."""
    best = ""
    for version in versions:
        if version and (not best or version.count(".") > best.count(".")):
            best = version
    return best


def _frozen(info: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(info))


# ------------------------------ Identity ------------------------------------

class DistroIdentity:
    """
    One snapshot of the host's distro information sources.

    Build it with :meth:`resolve` for the running host, or directly from
    already-parsed mappings. The mappings are read-only.
    """

    def __init__(
        self,
        os_release_info: Optional[Mapping[str, str]] = None,
        lsb_release_info: Optional[Mapping[str, str]] = None,
        distro_release_info: Optional[Mapping[str, str]] = None,
        os_release_file: str = "",
        distro_release_file: Optional[str] = None,
    ) -> None:
        self.os_release_file = os_release_file
        self.distro_release_file = distro_release_file
        self._os_release_info = _frozen(os_release_info or {})
        self._lsb_release_info = _frozen(lsb_release_info or {})
        self._distro_release_info = _frozen(distro_release_info or {})

    @classmethod
    def resolve(
        cls,
        config: Optional[SourceConfig] = None,
        host_io: Optional[HostIO] = None,
    ) -> "DistroIdentity":
        """Read and parse all three sources of the current host."""
        config = config or SourceConfig()
        host_io = host_io or HostIO()

        os_release_file = os_release_path(config)
        content = fetch_optional(host_io.read_file, os_release_file)
        os_info = parse_os_release(content) if content is not None else {}

        lsb_info = {}  # type: Dict[str, str]
        if config.include_lsb:
            output = fetch_optional(host_io.run_command, config.lsb_release_command)
            if output is not None:
                lsb_info = parse_lsb_release(output)

        distro_file, distro_info = _locate_distro_release(config, host_io)
        logger.debug(
            "sources: os-release=%d keys, lsb_release=%d keys, distro release=%s",
            len(os_info), len(lsb_info), distro_file,
        )

        return cls(
            os_release_info=os_info,
            lsb_release_info=lsb_info,
            distro_release_info=distro_info,
            os_release_file=os_release_file,
            distro_release_file=distro_file,
        )

    def __repr__(self) -> str:
        return (
            "DistroIdentity("
            "os_release_file={0!r}, "
            "distro_release_file={1!r}, "
            "os_release_info={2!r}, "
            "lsb_release_info={3!r}, "
            "distro_release_info={4!r})".format(
                self.os_release_file,
                self.distro_release_file,
                dict(self._os_release_info),
                dict(self._lsb_release_info),
                dict(self._distro_release_info),
            )
        )

    # --- raw sources ---------------------------------------------------------

    def os_release_info(self) -> Mapping[str, str]:
        return self._os_release_info

    def lsb_release_info(self) -> Mapping[str, str]:
        return self._lsb_release_info

    def distro_release_info(self) -> Mapping[str, str]:
        return self._distro_release_info

    def os_release_attr(self, attribute: str) -> str:
        return self._os_release_info.get(attribute, "")

    def lsb_release_attr(self, attribute: str) -> str:
        return self._lsb_release_info.get(attribute, "")

    def distro_release_attr(self, attribute: str) -> str:
        return self._distro_release_info.get(attribute, "")

    # --- resolved attributes -------------------------------------------------

    def id(self) -> str:
        """
        Return the machine-readable distro id, normalized per source.

        The os-release ``ID`` wins over the lsb ``Distributor ID``, which wins
        over the id taken from the legacy release file's name.
        """
        def normalized(attr: Callable[[str], str], key: str, source: str):
            return lambda: _normalize_if_set(attr(key), source)

        return first_non_empty((
            normalized(self.os_release_attr, "id", OS_RELEASE),
            normalized(self.lsb_release_attr, "distributor_id", LSB_RELEASE),
            normalized(self.distro_release_attr, "id", DISTRO_RELEASE),
        ))

    def name(self, pretty: bool = False) -> str:
        """
        Return the distro name.

        With *pretty*, prefer the descriptive names (os-release
        ``PRETTY_NAME``, lsb ``Description``). When neither is set, the
        legacy file's name is used with the pretty version appended.
        """
        if not pretty:
            return first_non_empty((
                lambda: self.os_release_attr("name"),
                lambda: self.lsb_release_attr("distributor_id"),
                lambda: self.distro_release_attr("name"),
            ))

        name = first_non_empty((
            lambda: self.os_release_attr("pretty_name"),
            lambda: self.lsb_release_attr("description"),
        ))
        if name:
            return name
        name = self.distro_release_attr("name")
        if name:
            version = self.version(pretty=True)
            if version:
                name = name + " " + version
        return name

    def _version_candidates(self) -> Tuple[str, ...]:
        return (
            self.os_release_attr("version_id"),
            self.lsb_release_attr("release"),
            self.distro_release_attr("version_id"),
            parse_distro_release_content(
                self.os_release_attr("pretty_name")).get("version_id", ""),
            parse_distro_release_content(
                self.lsb_release_attr("description")).get("version_id", ""),
        )

    def version(self, pretty: bool = False, best: bool = False) -> str:
        """
        Return the distro version.

        By default the first non-empty candidate wins. With *best*, the
        candidate with the most dot-separated components wins instead (ties
        go to the earlier candidate). With *pretty*, a non-empty codename is
        appended in parentheses.
        """
        candidates = self._version_candidates()
        if best:
            version = most_precise(candidates)
        else:
            version = first_non_empty(lambda v=v: v for v in candidates)
        if pretty and version:
            codename = self.codename()
            if codename:
                version = "{0} ({1})".format(version, codename)
        return version

    def version_parts(self, best: bool = False) -> Tuple[str, str, str]:
        """Return ``(major, minor, build_number)``; missing parts are ``""``."""
        version_str = self.version(best=best)
        if version_str:
            match = _VERSION_PARTS.match(version_str)
            if match:
                major, minor, build_number = match.groups()
                return major, minor or "", build_number or ""
        return "", "", ""

    def major_version(self, best: bool = False) -> str:
        return self.version_parts(best)[0]

    def minor_version(self, best: bool = False) -> str:
        return self.version_parts(best)[1]

    def build_number(self, best: bool = False) -> str:
        return self.version_parts(best)[2]

    def like(self) -> str:
        """Space-separated ids of related distros (os-release ``ID_LIKE``)."""
        return self.os_release_attr("id_like")

    def codename(self) -> str:
        # An explicitly empty codename falls through like a missing one.
        return first_non_empty((
            lambda: self.os_release_attr("codename"),
            lambda: self.lsb_release_attr("codename"),
            lambda: self.distro_release_attr("codename"),
        ))

    def linux_distribution(self, full_distribution_name: bool = True) -> Tuple[str, str, str]:
        return (
            self.name() if full_distribution_name else self.id(),
            self.version(),
            self.codename(),
        )

    def info(self, pretty: bool = False, best: bool = False) -> Dict[str, Any]:
        """Return the machine-readable summary used by the CLI's structured output."""
        major, minor, build_number = self.version_parts(best)
        return dict(
            id=self.id(),
            version=self.version(pretty, best),
            version_parts=dict(
                major=major,
                minor=minor,
                build_number=build_number,
            ),
            like=self.like(),
            codename=self.codename(),
        )


def _normalize_if_set(distro_id: str, source: str) -> str:
    return normalize_id(distro_id, source) if distro_id else ""


def _locate_distro_release(
    config: SourceConfig,
    host_io: HostIO,
) -> Tuple[Optional[str], Dict[str, str]]:
    if config.distro_release_file:
        return load_explicit_release_file(config.distro_release_file, host_io.read_file)

    basenames = fetch_optional(host_io.list_dir, config.etc_dir)
    if basenames is None:
        return None, {}
    return find_distro_release_file(
        config.etc_dir, basenames, host_io.read_file, config.ignored_basenames
    )


# ------------------------------ Shortcuts -----------------------------------

def resolve(config=None, host_io=None):
    # type: (Optional[SourceConfig], Optional[HostIO]) -> DistroIdentity
    return DistroIdentity.resolve(config, host_io)


def name(pretty=False):  # type: (bool) -> str
    return resolve().name(pretty)


def version(pretty=False, best=False):  # type: (bool, bool) -> str
    return resolve().version(pretty, best)


def id():  # type: () -> str  # noqa: A001
    return resolve().id()


def codename():  # type: () -> str
    return resolve().codename()


def like():  # type: () -> str
    return resolve().like()


def info(pretty=False, best=False):  # type: (bool, bool) -> Dict[str, Any]
    return resolve().info(pretty, best)


__all__ = [
    "DistroIdentity",
    "codename",
    "first_non_empty",
    "id",
    "info",
    "like",
    "most_precise",
    "name",
    "resolve",
    "version",
]
