"""Reading and changing environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping


def _target(environ):
    return os.environ if environ is None else environ


def getenv(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of *name*, or None if it is not set."""
    return _target(environ).get(name)


def setenv(
    name: str,
    value: str,
    overwrite: bool = True,
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Set *name* to *value*; an existing value is kept unless *overwrite*.

    Raises ValueError when *name* or *value* is None or *name* contains '='.
    """
    if name is None or value is None or "=" in name:
        raise ValueError(f"invalid environment variable name: {name!r}")
    env = _target(environ)
    if name in env and not overwrite:
        return
    env[name] = value


def unsetenv(name: str, environ: MutableMapping[str, str] | None = None) -> None:
    """Remove *name* if present.

    Raises ValueError when *name* is empty or contains '='.
    """
    if not name or "=" in name:
        raise ValueError(f"invalid environment variable name: {name!r}")
    _target(environ).pop(name, None)


def format_environment(environ: Mapping[str, str] | None = None) -> str:
    """Return the environment as ``NAME=VALUE`` lines, each ending in a newline."""
    return "".join(f"{key}={value}\n" for key, value in _target(environ).items())