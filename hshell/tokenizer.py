"""Splitting of command lines into argument tokens."""

from __future__ import annotations

import re

_DELIMITERS = re.compile(r"[ \t\n]+")


def split_line(line: str) -> list[str]:
    """Split *line* on spaces, tabs and newlines, dropping empty tokens."""
    return [token for token in _DELIMITERS.split(line) if token]