"""Locating commands on the search path and validating command arguments."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pypipex.libft.strings import split, strchr


class PipexError(Exception):
    """Raised when a pipeline cannot be set up."""


def _environment(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def path_directories(env: Mapping[str, str] | None = None) -> list[str]:
    """Return the directories listed in ``PATH``.

    The value is read from its first slash onwards and split on colons,
    dropping empty entries. Without a ``PATH`` containing a slash the
    result is empty.
    """
    value = _environment(env).get("PATH")
    if value is None:
        return []
    start = strchr(value, "/")
    if start is None:
        return []
    return split(value[start:], ":")


def find_command(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """Return the path of the executable that runs ``name``, or None.

    Names starting with ``./`` or ``../`` are used as given; any other
    name is looked up in each ``PATH`` directory in order.
    """
    if name.startswith(("./", "../")):
        return name if _is_executable(name) else None
    for directory in path_directories(env):
        candidate = f"{directory}/{name}"
        if _is_executable(candidate):
            return candidate
    return None


def check_commands(commands: Iterable[str]) -> list[str]:
    """Reject empty commands, absolute paths and dot names other than ``./``.

    Returns the commands as a list when all of them are acceptable.
    """
    accepted = list(commands)
    for command in accepted:
        if not command:
            raise PipexError("empty command")
        if command.startswith("/"):
            raise PipexError(f"absolute command path not allowed: {command}")
        if command.startswith(".") and command[1:2] != "/":
            raise PipexError(f"invalid command: {command}")
    return accepted