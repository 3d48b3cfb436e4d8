"""High-level API for DirWalkLib.

This module provides simple, functional interfaces for walking a directory
tree. These functions wrap the walker classes for ease of use in simple
cases.
"""

import os
from typing import Any, Callable, Iterator, Optional, Union

from .adapters.filesystem import OSFileSystemAdapter
from .config import WalkConfig
from .core.adapter import FileSystemAdapter
from .core.entry import DirEntry
from .core.step import StepResult
from .core.walker import Walker, create_walker
from .cursor import Cursor


def _prepare(config: Optional[WalkConfig],
             adapter: Optional[FileSystemAdapter],
             **options: Any) -> Walker:
    if config is None:
        config = WalkConfig(**options)
    config.ensure_valid()
    return create_walker(config, adapter or OSFileSystemAdapter())


def walk(
    root: Union[str, os.PathLike],
    depth_first: bool = True,
    top_down: bool = True,
    follow_symlinks: bool = False,
    on_error: Optional[Callable[..., Any]] = None,
    adapter: Optional[FileSystemAdapter] = None,
    config: Optional[WalkConfig] = None,
) -> StepResult:
    """Start walking a directory tree and produce the first entry.

    This is the primary entry point. It lists only what is needed for the
    first entry; the returned continuation produces the next one.

    Args:
        root: Directory to walk
        depth_first: Finish a subtree before its next sibling
        top_down: Yield directories before their descendants
        follow_symlinks: Descend into symbolic links to directories
        on_error: Handler for directories that cannot be listed
        adapter: Filesystem collaborator (defaults to OSFileSystemAdapter)
        config: Complete configuration, used instead of the flags above

    Returns:
        Step of (entry, continuation), or DONE

    Raises:
        ConfigurationError: If the configuration is invalid

    Example:
        >>> step = walk("project")
        >>> while step:
        ...     (path, dirnames, filenames), resume = step
        ...     print(path, len(filenames))
        ...     step = resume()
    """
    walker = _prepare(
        config,
        adapter,
        depth_first=depth_first,
        top_down=top_down,
        follow_symlinks=follow_symlinks,
        on_error=on_error,
    )
    return walker.start(root)


def start(root: Union[str, os.PathLike],
          config: WalkConfig,
          adapter: Optional[FileSystemAdapter] = None) -> StepResult:
    """Start a walk from a ready-made configuration.

    Args:
        root: Directory to walk
        config: Walk configuration
        adapter: Filesystem collaborator (defaults to OSFileSystemAdapter)

    Returns:
        Step of (entry, continuation), or DONE
    """
    return _prepare(config, adapter).start(root)


def iter_walk(
    root: Union[str, os.PathLike],
    adapter: Optional[FileSystemAdapter] = None,
    config: Optional[WalkConfig] = None,
    **options: Any,
) -> Iterator[DirEntry]:
    """Iterate over a walk without keeping results.

    Nothing is listed until the first entry is requested, and each
    requested entry costs exactly one step.

    Args:
        root: Directory to walk
        adapter: Filesystem collaborator (defaults to OSFileSystemAdapter)
        config: Complete configuration, used instead of options
        **options: WalkConfig fields (depth_first, top_down, ...)

    Yields:
        DirEntry for each directory in walk order

    Raises:
        ConfigurationError: If the configuration is invalid (raised
            immediately, not on first iteration)
    """
    walker = _prepare(config, adapter, **options)
    return _iterate(walker.continuation(root))


def _iterate(resume: Callable[[], StepResult]) -> Iterator[DirEntry]:
    step = resume()
    while step:
        entry, resume = step
        yield entry
        step = resume()


def new(root: Union[str, os.PathLike], **kwargs: Any) -> Cursor:
    """Create a Cursor over a walk.

    Args:
        root: Directory to walk
        **kwargs: config, adapter, or WalkConfig fields

    Returns:
        Cursor that has not listed anything yet
    """
    return Cursor(root, **kwargs)
