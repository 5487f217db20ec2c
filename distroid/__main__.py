#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
distroid CLI — print the identity of the running Linux distribution.

Behavior
--------
- Resolves name, version, id and codename from /etc/os-release,
  `lsb_release -a` and the legacy /etc/*-release files
- Text output (default):
    Name: <pretty name>
    Version: <pretty version>     (only when known)
    Codename: <codename>          (only when known)
- Machine-readable output with --json or --yaml
- Writes to stdout unless -o/--output is given

Exit codes: 0 success, 2 bad arguments, 5 output could not be written.
"""

import json
import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from typing import Any, Dict, List, Optional

import yaml

from . import get_version
from .identity import DistroIdentity, resolve
from .sources import SourceConfig


_DESCRIPTION = "Linux distribution identification"


# ------------------------------ CLI parsing ---------------------------------

def _parse_args(argv=None):  # type: (Optional[List[str]]) -> Namespace
    parser = ArgumentParser(prog="distroid", description=_DESCRIPTION)
    parser.add_argument("-V", "--version", action="store_true", help="Print version and exit")
    parser.add_argument("--debug", action="store_true", help="Log source resolution to stderr")
    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument(
        "-j", "--json",
        action="store_true",
        help="Output in machine readable format (JSON).",
    )
    fmt.add_argument(
        "-y", "--yaml",
        action="store_true",
        help="Output in machine readable format (YAML).",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Write output to PATH instead of stdout.",
    )
    parser.add_argument(
        "--root-dir",
        metavar="DIR",
        help="Read release files from DIR instead of /etc; skips lsb_release.",
    )
    return parser.parse_args(argv)


def _config_for(args):  # type: (Namespace) -> SourceConfig
    if not args.root_dir:
        return SourceConfig()
    return SourceConfig(etc_dir=os.path.abspath(args.root_dir), include_lsb=False)


# ------------------------------ Rendering -----------------------------------

def _render_text(identity):  # type: (DistroIdentity) -> str
    lines = ["Name: %s" % identity.name(pretty=True)]
    version = identity.version(pretty=True)
    if version:
        lines.append("Version: %s" % version)
    codename = identity.codename()
    if codename:
        lines.append("Codename: %s" % codename)
    return "\n".join(lines) + "\n"


def _render_json(data):  # type: (Dict[str, Any]) -> str
    return json.dumps(data, indent=4, sort_keys=True) + "\n"


def _render_yaml(data):  # type: (Dict[str, Any]) -> str
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def _render(identity, args):  # type: (DistroIdentity, Namespace) -> str
    if args.json:
        return _render_json(identity.info())
    if args.yaml:
        return _render_yaml(identity.info())
    return _render_text(identity)


# ------------------------------ Main logic ----------------------------------

def main(argv=None):  # type: (Optional[List[str]]) -> int
    args = _parse_args(argv)

    if args.version:
        sys.stdout.write(get_version() + "\n")
        return 0

    if args.debug:
        logging.basicConfig(
            stream=sys.stderr,
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
        )

    identity = resolve(_config_for(args))
    text = _render(identity, args)

    if not args.output:
        sys.stdout.write(text)
        return 0

    try:
        with open(args.output, "w") as fh:
            fh.write(text)
    except OSError as exc:
        sys.stderr.write("error: failed to write output: %s\n" % exc)
        return 5

    sys.stdout.write("wrote: %s\n" % args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
