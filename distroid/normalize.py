"""
normalize.py — Canonical distro ids, one lookup table per source.

Table keys are ids lower-cased with blanks turned into underscores. Ids
missing from a table pass through in that same lower/underscore form, so
normalization is best-effort rather than an allow-list.
"""

from types import MappingProxyType
from typing import Mapping


# ------------------------------ Sources -------------------------------------

OS_RELEASE = "os-release"
LSB_RELEASE = "lsb_release"
DISTRO_RELEASE = "distro-release"


# ------------------------------ Tables --------------------------------------

NORMALIZED_OS_ID = MappingProxyType({})  # type: Mapping[str, str]

NORMALIZED_LSB_ID = MappingProxyType({  # type: Mapping[str, str]
    "enterpriseenterprise": "oracle",  # Oracle Enterprise Linux
    "redhatenterpriseworkstation": "rhel",  # RHEL 6.7
})

NORMALIZED_DISTRO_ID = MappingProxyType({  # type: Mapping[str, str]
    "redhat": "rhel",  # RHEL 6.x, 7.x
})

_TABLES = MappingProxyType({  # type: Mapping[str, Mapping[str, str]]
    OS_RELEASE: NORMALIZED_OS_ID,
    LSB_RELEASE: NORMALIZED_LSB_ID,
    DISTRO_RELEASE: NORMALIZED_DISTRO_ID,
})


# ------------------------------ Lookup --------------------------------------

def normalize_id(distro_id, source):  # type: (str, str) -> str
    """
    Return the canonical form of *distro_id* as reported by *source*.

    Raises:
        ValueError: if *source* is not one of the known source names.
    """
    table = _TABLES.get(source)
    if table is None:
        supported = ", ".join(sorted(_TABLES.keys()))
        raise ValueError("Unknown id source. Supported: %s" % supported)
    key = distro_id.lower().replace(" ", "_")
    return table.get(key, key)


__all__ = [
    "DISTRO_RELEASE",
    "LSB_RELEASE",
    "NORMALIZED_DISTRO_ID",
    "NORMALIZED_LSB_ID",
    "NORMALIZED_OS_ID",
    "OS_RELEASE",
    "normalize_id",
]
