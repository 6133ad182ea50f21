"""Command-line entry point: ``infile cmd1 ... cmdN outfile`` or here_doc mode."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pypipex.paths import PipexError
from pypipex.pipeline import run_here_doc, run_pipeline

HERE_DOC = "here_doc"
_MIN_ARGUMENTS = 4


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) < _MIN_ARGUMENTS:
            raise PipexError(
                "usage: infile cmd1 cmd2 ... outfile | here_doc LIMITER cmd1 cmd2 ... outfile"
            )
        if args[0].startswith(HERE_DOC):
            run_here_doc(args[1], args[2:-1], args[-1])
        else:
            run_pipeline(args[0], args[1:-1], args[-1])
    except PipexError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())