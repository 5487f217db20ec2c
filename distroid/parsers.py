"""
parsers.py — Text parsers for the three distro information sources.

Sources
-------
- os-release files (``KEY=VALUE`` lines, optional double quotes)
- ``lsb_release -a`` output (``Key Name:<tab>value`` lines)
- legacy ``*-release`` / ``*-version`` files (free text, first line only)

All parsers are pure and total: they never raise on malformed text and
return a plain dict whose keys are lower-case.
"""

import re
from typing import Dict


# ------------------------------ Patterns ------------------------------------

# Codename inside VERSION: "7 (Core)" or "14.04.3 LTS, Trusty Tahr".
_OS_RELEASE_CODENAME = re.compile(r"(\(\D+\))|,(\s+)?\D+")

# Matched against the *reversed* first line of a legacy release file, so the
# greedy groups anchor on the end of the line:
#   paren/comma: codename in a trailing "(...)", or after the last ","
#   version:     version token; ends (forward: starts) with a digit
#   name:        everything left of the version, minus an optional "release"
# "STL " is " LTS" reversed, as found in Ubuntu-style descriptions.
_DISTRO_RELEASE_REVERSED = re.compile(
    r"(?:[^)]*\)(?P<paren>.*)\(|(?P<comma>[^,()]*),)?"
    r" *(?:STL )?(?P<version>[\d.+\-a-z]*\d) *(?:esaeler *)?(?P<name>.+)"
)


# ------------------------------ Helpers -------------------------------------

def _unquote(value):  # type: (str) -> str
    """Strip exactly one pair of enclosing double quotes."""
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _codename_from_version(version):  # type: (str) -> str
    match = _OS_RELEASE_CODENAME.search(version)
    if not match:
        return ""
    codename = match.group().strip()
    codename = codename.strip("()")
    codename = codename.lstrip(",")
    return codename.strip()


# ------------------------------ Parsers -------------------------------------

def parse_os_release(content):  # type: (str) -> Dict[str, str]
    """
    Parse os-release content.

    Each ``KEY=VALUE`` line is split on the first ``=``; the key is
    lower-cased and one layer of enclosing double quotes is removed from the
    value. A ``VERSION`` line also yields ``codename``, which is the empty
    string when the version carries no parenthesized or comma-separated
    codename. Comment lines and lines without ``=`` are skipped.
    """
    props = {}  # type: Dict[str, str]
    for line in (content or "").splitlines():
        if "=" not in line or line.lstrip().startswith("#"):
            continue
        key, value = line.split("=", 1)
        value = _unquote(value)
        if key == "VERSION":
            props["codename"] = _codename_from_version(value)
        props[key.lower()] = value
    return props


def parse_lsb_release(content):  # type: (str) -> Dict[str, str]
    """
    Parse ``lsb_release -a`` output.

    ``Distributor ID:\\tUbuntu`` becomes ``{"distributor_id": "Ubuntu"}``.
    """
    props = {}  # type: Dict[str, str]
    for line in (content or "").splitlines():
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        props[key.strip().replace(" ", "_").lower()] = value.strip()
    return props


def parse_distro_release_content(content):  # type: (str) -> Dict[str, str]
    """
    Parse a legacy distro release file; only the first line is used.

    Returns ``name``, ``version_id`` and ``codename`` (possibly empty) when
    the line carries a version token, only ``name`` when it does not, and an
    empty dict for an empty line.
    """
    lines = (content or "").splitlines()
    line = lines[0].strip() if lines else ""
    if not line:
        return {}

    match = _DISTRO_RELEASE_REVERSED.match(line[::-1])
    if not match:
        return {"name": line}

    codename = match.group("paren") or match.group("comma") or ""
    return {
        "name": match.group("name")[::-1].strip(),
        "version_id": match.group("version")[::-1],
        "codename": codename[::-1].strip(),
    }


__all__ = [
    "parse_distro_release_content",
    "parse_lsb_release",
    "parse_os_release",
]
