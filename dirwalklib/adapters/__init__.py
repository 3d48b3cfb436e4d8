"""Filesystem adapters for DirWalkLib."""

from .filesystem import OSFileSystemAdapter

__all__ = [
    'OSFileSystemAdapter',
]
