"""Testing utilities for DirWalkLib consumers."""

from .fixtures import (
    CountingAdapter,
    MemoryFileSystemAdapter,
    Symlink,
    Unreadable,
    build_tree,
)

__all__ = [
    'CountingAdapter',
    'MemoryFileSystemAdapter',
    'Symlink',
    'Unreadable',
    'build_tree',
]
