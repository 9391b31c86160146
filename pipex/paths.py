"""Locate the executable for a command name using the PATH entry of an environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from pipex.strings import split

_PATH_PREFIX = "PATH"
# Length of "PATH=", skipped to reach the value of the matching entry.
_PATH_SKIP = 5


class NoSuchFileError(FileNotFoundError):
    """A command given with a slash names a file that does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"no such file or directory: {path}")
        self.path = path


def search_dirs(env: Mapping[str, str]) -> Optional[list[str]]:
    """Return the directories of the first environment entry starting with PATH.

    Entries are considered as ``NAME=VALUE`` text in the mapping's order.
    Empty directories are dropped. Returns None when no entry matches.
    """
    for name, value in env.items():
        entry = f"{name}={value}"
        if entry.startswith(_PATH_PREFIX):
            return split(entry[_PATH_SKIP:], ":")
    return None


def has_slash_path(cmd: str) -> bool:
    """True if ``cmd`` contains a slash and names an existing file.

    Raises NoSuchFileError if it contains a slash but the file is missing.
    """
    if "/" not in cmd:
        return False
    if os.access(cmd, os.F_OK):
        return True
    raise NoSuchFileError(cmd)


def resolve_command(cmd: str, env: Mapping[str, str]) -> str:
    """Return the path to run for ``cmd``.

    A command containing a slash is used as given. Otherwise the first
    executable ``dir/cmd`` among the PATH directories is returned; if there
    is none, ``cmd`` itself comes back unchanged.
    """
    if has_slash_path(cmd):
        return cmd
    dirs = search_dirs(env)
    if dirs is None:
        return cmd
    for directory in dirs:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return cmd