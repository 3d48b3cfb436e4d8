"""Test fixtures for DirWalkLib consumers.

These fixtures make walks reproducible and observable in tests: an
in-memory filesystem whose listings keep insertion order, a wrapper that
records every filesystem call a walk makes, and a helper that materializes
the same tree description on disk.

Trees are described with nested dicts. A dict is a directory, a
``Symlink`` is a symbolic link, an ``Unreadable`` is a directory that
cannot be listed, and anything else (usually a string) is a file::

    {
        "dogs": {"wild": {"wolf.txt": "howl"}, "domestic": {}},
        "felines": Symlink("cats"),
        "locked": Unreadable(),
    }
"""

import errno
import os
import posixpath
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Union

from ..core.adapter import FileSystemAdapter

# Matches the kernel's limit on nested symlink resolution
MAX_SYMLINK_DEPTH = 40


class Symlink(NamedTuple):
    """Symbolic link in a tree description.

    Attributes:
        target: For MemoryFileSystemAdapter, a path in the adapter's own
            namespace; for build_tree, a path relative to the link's
            directory
    """

    target: str


class Unreadable(NamedTuple):
    """Directory whose listing fails with the given errno."""

    code: int = errno.EACCES


def _os_error(code: int, path: str) -> OSError:
    # OSError picks the matching subclass (FileNotFoundError, ...) from code
    return OSError(code, os.strerror(code), path)


class MemoryFileSystemAdapter(FileSystemAdapter):
    """Adapter over an in-memory tree.

    Paths use forward slashes and are resolved from the top of the tree,
    so with ``MemoryFileSystemAdapter({"root": {...}})`` the walk root is
    ``"root"``. Listings return names in dict insertion order.
    """

    def __init__(self, tree: Dict[str, Any]):
        """Initialize memory adapter.

        Args:
            tree: Tree description (see module docstring)
        """
        self.tree = tree

    def _lookup(self, path: str, follow_last: bool = True, hops: int = 0) -> Any:
        if hops > MAX_SYMLINK_DEPTH:
            raise _os_error(errno.ELOOP, path)

        parts = [part for part in path.split('/') if part not in ('', '.')]
        node: Any = self.tree
        for index, part in enumerate(parts):
            if isinstance(node, Unreadable):
                raise _os_error(node.code, path)
            if not isinstance(node, dict):
                raise _os_error(errno.ENOTDIR, path)
            if part not in node:
                raise _os_error(errno.ENOENT, path)

            node = node[part]
            is_last = index == len(parts) - 1
            if isinstance(node, Symlink) and (follow_last or not is_last):
                node = self._lookup(node.target, True, hops + 1)
        return node

    def list_directory(self, path: str) -> List[str]:
        node = self._lookup(path)
        if isinstance(node, Unreadable):
            raise _os_error(node.code, path)
        if not isinstance(node, dict):
            raise _os_error(errno.ENOTDIR, path)
        return list(node)

    def is_directory(self, path: str) -> bool:
        try:
            return isinstance(self._lookup(path), (dict, Unreadable))
        except OSError:
            return False

    def is_symlink(self, path: str) -> bool:
        try:
            return isinstance(self._lookup(path, follow_last=False), Symlink)
        except OSError:
            return False

    def join_path(self, base: str, name: str) -> str:
        return posixpath.join(base, name)


class CountingAdapter(FileSystemAdapter):
    """Wrapper recording every call a walk makes to another adapter.

    Example:
        adapter = CountingAdapter(MemoryFileSystemAdapter(tree))
        next(iter_walk("root", adapter=adapter))
        assert adapter.listed == ["root"]
    """

    def __init__(self, base_adapter: FileSystemAdapter):
        """Initialize the counting wrapper.

        Args:
            base_adapter: The adapter doing the real work
        """
        self._base_adapter = base_adapter
        self.calls: Counter = Counter()
        self.listed: List[str] = []

    @property
    def list_count(self) -> int:
        """Number of list_directory calls, including failed ones."""
        return self.calls['list_directory']

    def reset(self) -> None:
        self.calls.clear()
        self.listed.clear()

    def list_directory(self, path: str) -> List[str]:
        self.calls['list_directory'] += 1
        self.listed.append(path)
        return self._base_adapter.list_directory(path)

    def is_directory(self, path: str) -> bool:
        self.calls['is_directory'] += 1
        return self._base_adapter.is_directory(path)

    def is_symlink(self, path: str) -> bool:
        self.calls['is_symlink'] += 1
        return self._base_adapter.is_symlink(path)

    def join_path(self, base: str, name: str) -> str:
        return self._base_adapter.join_path(base, name)


def build_tree(base_dir: Union[str, Path], tree: Dict[str, Any]) -> Path:
    """Create a tree description on disk.

    ``Unreadable`` entries become directories with all permissions removed;
    restore them (for example with ``os.chmod(path, 0o755)``) before
    deleting the tree.

    Args:
        base_dir: Existing directory to populate
        tree: Tree description (see module docstring)

    Returns:
        base_dir as a Path
    """
    base = Path(base_dir)
    for name, node in tree.items():
        path = base / name
        if isinstance(node, dict):
            path.mkdir()
            build_tree(path, node)
        elif isinstance(node, Symlink):
            os.symlink(node.target, path, target_is_directory=True)
        elif isinstance(node, Unreadable):
            path.mkdir()
            path.chmod(0)
        else:
            path.write_text("" if node is None else str(node))
    return base
