"""Run ``cmd1 < file1 | cmd2 > file2`` with two child processes joined by a pipe."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import Optional, Sequence

from pipex.output import putstr_fd
from pipex.paths import NoSuchFileError, resolve_command
from pipex.strings import split

USAGE = "usage: ./pipex [file1] [cmd1] [cmd2] [file2]\n"
EXIT_FAILURE = 1


class CommandNotFoundError(Exception):
    """A command could not be found or started."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: command not found")
        self.command = command


def build_argv(arg: str) -> list[str]:
    """Split a command string on spaces into an argument vector.

    An empty string raises PermissionError; a string of spaces only raises
    CommandNotFoundError.
    """
    if not arg:
        raise PermissionError(": permission denied:")
    argv = split(arg, " ")
    if not argv:
        raise CommandNotFoundError("")
    return argv


def _report(message: str) -> None:
    putstr_fd(message + "\n", sys.stderr)


def _report_os_error(name: str, error: OSError) -> None:
    reason = os.strerror(error.errno) if error.errno else str(error)
    _report(f"{name}: {reason}")


def _launch(
    cmd: str, stdin: int, stdout: int, env: Mapping[str, str]
) -> Optional[subprocess.Popen]:
    """Start one command with the given descriptors, or report why it cannot run."""
    try:
        argv = build_argv(cmd)
        program = resolve_command(argv[0], env)
    except (PermissionError, CommandNotFoundError, NoSuchFileError) as error:
        _report(str(error))
        return None
    # The resolved program is run as given, without another PATH search.
    executable = program if os.path.dirname(program) else os.path.join(".", program)
    try:
        return subprocess.Popen(
            argv,
            executable=executable,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError:
        _report(str(CommandNotFoundError(argv[0])))
        return None


def _wait(process: Optional[subprocess.Popen]) -> int:
    return EXIT_FAILURE if process is None else process.wait()


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> tuple[int, int]:
    """Run ``cmd1`` reading ``infile`` piped into ``cmd2`` writing ``outfile``.

    Errors are reported on standard error. Returns the exit status of each
    command; a stage that could not start counts as a failure.
    """
    environment: Mapping[str, str] = os.environ if env is None else env
    read_end, write_end = os.pipe()
    first = second = None
    try:
        try:
            in_fd = os.open(infile, os.O_RDONLY)
        except OSError as error:
            _report_os_error(infile, error)
        else:
            try:
                first = _launch(cmd1, in_fd, write_end, environment)
            finally:
                os.close(in_fd)

        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
        except OSError as error:
            _report_os_error(outfile, error)
        else:
            try:
                second = _launch(cmd2, read_end, out_fd, environment)
            finally:
                os.close(out_fd)
    finally:
        os.close(read_end)
        os.close(write_end)
    return _wait(first), _wait(second)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        putstr_fd(USAGE, sys.stderr)
        return 1
    infile, cmd1, cmd2, outfile = args
    run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    return 0