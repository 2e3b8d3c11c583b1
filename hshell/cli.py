"""The interactive read-execute loop and the command entry point."""

from __future__ import annotations

import sys
from typing import TextIO

from hshell.builtins import ShellExit
from hshell.executor import Executor
from hshell.tokenizer import split_line

PROMPT = "($) "


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty()) if isatty is not None else False


def run_shell(
    stream: TextIO | None = None,
    executor: Executor | None = None,
    interactive: bool | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Read lines from *stream* and execute them until end of input.

    Returns the status the shell ends with.
    """
    if stream is None:
        stream = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if interactive is None:
        interactive = _is_tty(stream)
    if executor is None:
        executor = Executor(interactive=interactive)

    try:
        while True:
            if interactive:
                stdout.write(PROMPT)
                stdout.flush()
            line = stream.readline()
            if not line:
                return 0
            args = split_line(line)
            if args:
                executor.execute(args)
    except ShellExit as request:
        return request.status


def main(argv: list[str] | None = None) -> int:
    """Start the shell on standard input."""
    return run_shell(sys.stdin)