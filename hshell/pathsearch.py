"""Lookup of commands and files through the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping, Sequence


def get_path_env(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of PATH in *environ* (default: the process environment)."""
    if environ is None:
        environ = os.environ
    return environ.get("PATH")


def path_directories(path: str | None) -> list[str]:
    """Return the non-empty directories listed in a colon-separated *path*."""
    if not path:
        return []
    return [directory for directory in path.split(":") if directory]


def _resolve_path(path: str | None) -> str | None:
    return get_path_env() if path is None else path


def _is_executable(candidate: str) -> bool:
    return os.access(candidate, os.X_OK)


def find_path(command: str | None, path: str | None = None) -> str | None:
    """Return the first ``dir/command`` in *path* that is executable, or None."""
    if not command:
        return None
    for directory in path_directories(_resolve_path(path)):
        candidate = f"{directory}/{command}"
        if _is_executable(candidate):
            return candidate
    return None


def search_in_path(command: str | None, path: str | None = None) -> str | None:
    """Find *command*, checking it directly when it contains a slash."""
    if command is None:
        return None
    if "/" in command:
        return command if _is_executable(command) else None
    return find_path(command, path)


def get_command_path(args: Sequence[str], path: str | None = None) -> str | None:
    """Return the program path for ``args[0]``; names with a slash are taken as is."""
    command = args[0]
    if "/" in command:
        return command
    return find_path(command, path)


def _locate(names: Iterable[str], directories: list[str]) -> Iterator[tuple[str, str | None]]:
    for name in names:
        found = None
        for directory in directories:
            candidate = f"{directory}/{name}"
            if os.path.lexists(candidate) and _stat_ok(candidate):
                found = candidate
                break
        yield name, found


def _stat_ok(candidate: str) -> bool:
    try:
        os.stat(candidate)
    except OSError:
        return False
    return True


def locate_files(names: Iterable[str], path: str | None = None) -> list[tuple[str, str | None]]:
    """Return ``(name, full_path)`` for each name, with None where nothing exists.

    Raises LookupError when no path is given and PATH is not set.
    """
    resolved = _resolve_path(path)
    if resolved is None:
        raise LookupError("PATH is not set")
    return list(_locate(names, path_directories(resolved)))