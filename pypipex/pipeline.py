"""Running a chain of commands between an input and an output file."""

from __future__ import annotations

import enum
import os
import subprocess
import sys
import tempfile
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import IO, TextIO, Union

from pypipex.heredoc import read_heredoc
from pypipex.libft.strings import split
from pypipex.paths import PipexError, check_commands, find_command

FAILURE_STATUS = 1
_FILE_PERMISSIONS = 0o777

_Stream = Union[int, IO[bytes], None]


class OpenMode(enum.Enum):
    """How an input or output file is opened."""

    APPEND = 0
    TRUNCATE = 1
    READ = 2


_FLAGS = {
    OpenMode.APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
    OpenMode.TRUNCATE: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    OpenMode.READ: os.O_RDONLY,
}


def open_file(path: str | os.PathLike[str], mode: OpenMode) -> int:
    """Open ``path`` in the given mode and return its file descriptor."""
    try:
        return os.open(path, _FLAGS[OpenMode(mode)], _FILE_PERMISSIONS)
    except OSError as exc:
        raise PipexError(f"{os.fspath(path)}: {exc.strerror}") from exc


@contextmanager
def _opened(path: str | os.PathLike[str], mode: OpenMode) -> Iterator[int]:
    fd = open_file(path, mode)
    try:
        yield fd
    finally:
        os.close(fd)


def _report(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _spawn(
    command: str,
    stdin: _Stream,
    stdout: _Stream,
    env: Mapping[str, str],
) -> subprocess.Popen[bytes] | None:
    words = split(command, " ")
    if not words:
        _report(f"empty command: {command!r}")
        return None
    path = find_command(words[0], env)
    if path is None:
        _report(f"command not found: {words[0]}")
        return None
    try:
        return subprocess.Popen(
            words, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report(f"{words[0]}: {exc.strerror}")
        return None


def _run_chain(
    source: int | IO[bytes],
    commands: Sequence[str],
    output_fd: int,
    env: Mapping[str, str] | None,
) -> list[int]:
    """Run ``commands`` piped together; return each one's exit status.

    A command that cannot be started counts as failed, and the command
    after it reads empty input.
    """
    environment = os.environ if env is None else env
    processes: list[subprocess.Popen[bytes] | None] = []
    stdin: _Stream = source
    last_index = len(commands) - 1
    try:
        for index, command in enumerate(commands):
            stdout: _Stream = output_fd if index == last_index else subprocess.PIPE
            process = _spawn(command, stdin, stdout, environment)
            if processes and processes[-1] is not None and processes[-1].stdout:
                processes[-1].stdout.close()
            processes.append(process)
            if process is None:
                stdin = subprocess.DEVNULL
            else:
                stdin = process.stdout
    finally:
        for process in processes:
            if process is not None and process.stdout is not None:
                process.stdout.close()
    return [FAILURE_STATUS if p is None else p.wait() for p in processes]


def run_pipeline(
    infile: str | os.PathLike[str],
    commands: Sequence[str],
    outfile: str | os.PathLike[str],
    env: Mapping[str, str] | None = None,
) -> list[int]:
    """Feed ``infile`` through ``commands`` into ``outfile``, truncating it.

    The output file is opened before the input file. Returns the exit
    status of each command in order.
    """
    with _opened(outfile, OpenMode.TRUNCATE) as out_fd:
        with _opened(infile, OpenMode.READ) as in_fd:
            checked = check_commands(commands)
            if not checked:
                raise PipexError("no commands given")
            return _run_chain(in_fd, checked, out_fd, env)


def run_here_doc(
    limiter: str,
    commands: Sequence[str],
    outfile: str | os.PathLike[str],
    env: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
    prompt_out: TextIO | None = None,
) -> list[int]:
    """Feed a here-document through ``commands``, appending to ``outfile``.

    At least two commands are required. Returns the exit status of each
    command in order.
    """
    with _opened(outfile, OpenMode.APPEND) as out_fd:
        if len(commands) < 2:
            raise PipexError("here_doc needs at least two commands")
        body = read_heredoc(limiter, stdin, prompt_out)
        checked = check_commands(commands)
        with tempfile.TemporaryFile() as source:
            source.write(body.encode("utf-8", errors="surrogateescape"))
            source.seek(0)
            return _run_chain(source, checked, out_fd, env)