"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import sys
from typing import TextIO

PROMPT = "heredoc> "


def read_heredoc(
    limiter: str,
    stdin: TextIO | None = None,
    prompt_out: TextIO | None = None,
) -> str:
    """Read lines until one equals ``limiter`` or input ends.

    A prompt is written before every line. Every collected line ends in a
    newline, and the limiter line itself is not included.
    """
    source = sys.stdin if stdin is None else stdin
    prompt = sys.stdout if prompt_out is None else prompt_out
    terminator = limiter + "\n"
    lines: list[str] = []
    while True:
        prompt.write(PROMPT)
        prompt.flush()
        line = source.readline()
        if not line:
            break
        if not line.endswith("\n"):
            line += "\n"
        if line == terminator:
            break
        lines.append(line)
    return "".join(lines)