"""Running commands: the exit built-in, PATH lookup and child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from hshell.builtins import ShellExit
from hshell.pathsearch import get_command_path, get_path_env

SHELL_NAME = "./hsh"
NOT_FOUND_STATUS = 127


class Executor:
    """Runs tokenized command lines and remembers the last exit status."""

    def __init__(
        self,
        interactive: bool | None = None,
        environ: Mapping[str, str] | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.interactive = sys.stdin.isatty() if interactive is None else interactive
        self.environ = os.environ if environ is None else environ
        self.stderr = sys.stderr if stderr is None else stderr
        self.last_status = 0

    def _error(self, message: str) -> None:
        self.stderr.write(message)
        self.stderr.flush()

    def execute(self, args: Sequence[str]) -> int:
        """Run *args* and return the last exit status.

        Raises ShellExit for ``exit`` in an interactive session, and for a
        command that cannot be found in a non-interactive one.
        """
        if not args or not args[0]:
            return self.last_status
        if args[0] == "exit":
            if self.interactive:
                raise ShellExit(0)
            return self.last_status

        path = get_command_path(args, get_path_env(self.environ) or "")
        if path is None:
            self._error(f"{SHELL_NAME}: 1: {args[0]}: not found\n")
            self.last_status = NOT_FOUND_STATUS
            if not self.interactive:
                raise ShellExit(self.last_status)
            return self.last_status

        self.last_status = self.run_program(path, args)
        return self.last_status

    def run_program(self, path: str, args: Sequence[str]) -> int:
        """Start the program at *path* with *args* and wait for its exit status.

        A program that cannot be started is reported on stderr with status 1.
        """
        try:
            completed = subprocess.run(
                list(args), executable=path, env=dict(self.environ), check=False
            )
        except OSError as error:
            self._error(f"{args[0]}: {error.strerror or error}\n")
            return 1
        return completed.returncode