"""In-memory stand-ins for the host collaborators."""

import posixpath

from distroid.sources import HostIO, SourceUnavailableError


class FakeHost:
    """
    A host made of a ``{path: text}`` file map and an optional lsb_release
    output. ``lsb_output=None`` behaves like a missing command.
    """

    def __init__(self, files=None, lsb_output=None, lsb_status=0, listable=True):
        self.files = dict(files or {})
        self.lsb_output = lsb_output
        self.lsb_status = lsb_status
        self.listable = listable
        self.reads = []
        self.commands = []

    def read_file(self, path):
        self.reads.append(path)
        if path not in self.files:
            raise SourceUnavailableError(path, "No such file or directory")
        return self.files[path]

    def list_dir(self, path):
        if not self.listable:
            raise SourceUnavailableError(path, "Permission denied")
        return [
            posixpath.basename(p) for p in self.files
            if posixpath.dirname(p) == path
        ]

    def run_command(self, argv):
        self.commands.append(tuple(argv))
        if self.lsb_output is None:
            raise SourceUnavailableError(argv[0], "No such file or directory")
        if self.lsb_status != 0:
            raise SourceUnavailableError(
                argv[0], "exited with status %d" % self.lsb_status, self.lsb_status
            )
        return self.lsb_output

    def host_io(self):
        return HostIO(self.read_file, self.list_dir, self.run_command)


CENTOS7_OS_RELEASE = """\
NAME="CentOS Linux"
VERSION="7 (Core)"
ID="centos"
ID_LIKE="rhel fedora"
VERSION_ID="7"
PRETTY_NAME="CentOS Linux 7 (Core)"
ANSI_COLOR="0;31"
HOME_URL="https://www.centos.org/"
"""

UBUNTU_LSB_OUTPUT = (
    "Distributor ID:\tUbuntu\n"
    "Description:\tUbuntu 14.04.3 LTS\n"
    "Release:\t14.04\n"
    "Codename:\ttrusty\n"
)
