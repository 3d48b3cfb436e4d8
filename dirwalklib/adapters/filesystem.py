"""Filesystem adapter for DirWalkLib.

This adapter connects the walker to the operating system's filesystem
through the ``os`` module.
"""

import os
from typing import List

from ..core.adapter import FileSystemAdapter


class OSFileSystemAdapter(FileSystemAdapter):
    """Adapter for walking the real filesystem.

    Listings come from ``os.listdir`` and keep the order the operating
    system returns, which is usually not alphabetical.
    """

    def __init__(self, sort_entries: bool = False):
        """Initialize filesystem adapter.

        Args:
            sort_entries: Sort each listing by name for reproducible output
        """
        self.sort_entries = sort_entries

    def list_directory(self, path: str) -> List[str]:
        """List a directory, raising OSError if it cannot be read."""
        names = os.listdir(path)
        if self.sort_entries:
            names.sort()
        return names

    def is_directory(self, path: str) -> bool:
        """Check for a directory, following symlinks (broken links are files)."""
        return os.path.isdir(path)

    def is_symlink(self, path: str) -> bool:
        """Check whether path itself is a symbolic link."""
        return os.path.islink(path)

    def __repr__(self) -> str:
        return f"OSFileSystemAdapter(sort_entries={self.sort_entries!r})"
