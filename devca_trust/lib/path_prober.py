"""Existence checks for well-known trust anchor locations."""

import os
from typing import Protocol


class PathProber(Protocol):
    """Answers whether a path exists on the host."""

    def exists(self, path: str) -> bool: ...


def path_exists(path: str) -> bool:
    """Return True if path exists as a file or directory.

    Unreadable or otherwise inaccessible paths count as missing.
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


class FilesystemProber:
    """PathProber backed by the real filesystem."""

    def exists(self, path: str) -> bool:
        return path_exists(path)
