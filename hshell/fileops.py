"""Small file utilities: copying and existence reports."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

_CHUNK_SIZE = 1024


def copy_file(src: str | os.PathLike, dest: str | os.PathLike) -> None:
    """Copy the contents of *src* to *dest*, creating or truncating *dest*.

    A newly created destination gets mode 0755 (subject to the umask).
    Raises OSError if either file cannot be opened or written.
    """
    with open(src, "rb") as source:
        fd = os.open(dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o755)
        with os.fdopen(fd, "wb") as target:
            while chunk := source.read(_CHUNK_SIZE):
                target.write(chunk)


def stat_report(paths: Iterable[str]) -> Iterator[str]:
    """Yield ``"<path>: FOUND"`` or ``"<path>: NOT FOUND"`` for each path."""
    for path in paths:
        try:
            os.stat(path)
        except OSError:
            yield f"{path}: NOT FOUND"
        else:
            yield f"{path}: FOUND"