"""The exit built-in."""

from __future__ import annotations

from collections.abc import Sequence

_DIGITS = frozenset("0123456789")


class ShellExit(Exception):
    """Raised to end the shell with the given status."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


class IllegalNumberError(ValueError):
    """Raised when the argument to exit is not a non-negative number."""

    def __init__(self, argument: str | None) -> None:
        super().__init__(f"exit: Illegal number: {argument}")
        self.argument = argument


def parse_exit_status(text: str | None) -> int:
    """Parse a string of ASCII digits; anything else raises IllegalNumberError."""
    if text is None or not set(text) <= _DIGITS:
        raise IllegalNumberError(text)
    return int(text) if text else 0


def handle_exit(args: Sequence[str]) -> None:
    """Handle ``exit [status]`` by raising ShellExit.

    Raises IllegalNumberError, without exiting, for a bad status argument.
    """
    status = parse_exit_status(args[1]) if len(args) > 1 else 0
    raise ShellExit(status)