"""Walk strategies for DirWalkLib.

Walkers implement the different orders in which a directory tree can be
produced. None of them recurse: each step runs a small loop over explicit,
immutable state and hands that state to a Continuation, so a walk can be
suspended after any entry and resumed later, or never.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple, Optional, Tuple, Union

from ..config import WalkConfig, WalkOrder
from ..error_policies import resolve_error_handler
from .adapter import FileSystemAdapter
from .entry import DirEntry, WalkError
from .pending import Link, PendingWork
from .step import DONE, Continuation, Step, StepResult

logger = logging.getLogger(__name__)


class Walker(ABC):
    """Abstract base class for walk strategies.

    A walker is immutable once built: it holds the configuration, the
    adapter and the resolved error handler, and every continuation of every
    walk it starts shares them.
    """

    def __init__(self, config: WalkConfig, adapter: FileSystemAdapter):
        """Initialize walker.

        Args:
            config: Validated walk configuration
            adapter: Filesystem collaborator used for all I/O
        """
        self.config = config
        self.adapter = adapter
        self._handle_error = resolve_error_handler(config.on_error)

    def start(self, root: Union[str, os.PathLike]) -> StepResult:
        """Begin a walk at root and produce its first entry.

        Args:
            root: Directory to walk

        Returns:
            Step with the first entry, or DONE if nothing could be listed
        """
        return self.continuation(root)()

    def continuation(self, root: Union[str, os.PathLike]) -> Continuation:
        """Return a continuation for a walk at root without doing any I/O."""
        return Continuation(self, self._initial_state(os.fspath(root)))

    @abstractmethod
    def _initial_state(self, root: str) -> Any:
        """Build the state a walk starts from."""
        pass

    @abstractmethod
    def _step(self, state: Any) -> StepResult:
        """Advance from state to the next entry.

        Must not mutate state.
        """
        pass

    def _read_directory(self, path: str) -> Optional[Tuple[DirEntry, List[str]]]:
        """List one directory and partition its children.

        Symbolic links are skipped without listing unless the walk follows
        them. A listing failure is reported to the error handler; the
        handler runs outside the exception handler, so anything it raises
        reaches the caller of the current step unchanged.

        Args:
            path: Directory to list

        Returns:
            Tuple of (entry, child directory paths), or None if the path
            was skipped or could not be listed
        """
        adapter = self.adapter

        if not self.config.follow_symlinks and adapter.is_symlink(path):
            logger.debug("Skipping symlink: %s", path)
            return None

        try:
            names = adapter.list_directory(path)
        except OSError as e:
            error = WalkError.from_exception(path, e)
        else:
            error = None

        if error is not None:
            logger.debug("Cannot list %s: %s", error.path, error.reason)
            self._handle_error(error)
            return None

        dirnames: List[str] = []
        filenames: List[str] = []
        child_paths: List[str] = []
        for name in names:
            child = adapter.join_path(path, name)
            if adapter.is_directory(child):
                dirnames.append(name)
                child_paths.append(child)
            else:
                filenames.append(name)

        return DirEntry(path, tuple(dirnames), tuple(filenames)), child_paths


class TopDownWalker(Walker):
    """Walk yielding every directory before its descendants.

    State is the PendingWork of directories still to list. Each step lists
    pending paths until one succeeds, schedules its subdirectories and
    yields it. Subclasses decide where subdirectories are scheduled.
    """

    def _initial_state(self, root: str) -> PendingWork:
        return PendingWork([root])

    @abstractmethod
    def _schedule(self, pending: PendingWork, children: List[str]) -> PendingWork:
        """Add a listed directory's children to the pending work."""
        pass

    def _step(self, pending: PendingWork) -> StepResult:
        while pending:
            path, pending = pending.pop()
            listing = self._read_directory(path)
            if listing is None:
                continue

            entry, children = listing
            if children:
                pending = self._schedule(pending, children)
            return Step(entry, Continuation(self, pending))

        return DONE


class DepthFirstWalker(TopDownWalker):
    """Top-down, depth-first walk.

    Children go to the front of the pending work, so a subtree is finished
    before the next sibling is listed.
    """

    def _schedule(self, pending: PendingWork, children: List[str]) -> PendingWork:
        return pending.push_front(children)


class BreadthFirstWalker(TopDownWalker):
    """Top-down, breadth-first walk.

    Children go to the back of the pending work, so every directory at one
    depth is yielded before any directory below it.
    """

    def _schedule(self, pending: PendingWork, children: List[str]) -> PendingWork:
        return pending.push_back(children)


class _Frame(NamedTuple):
    # entry is None only for the frame holding the root
    entry: Optional[DirEntry]
    pending: PendingWork


class BottomUpWalker(Walker):
    """Walk yielding every directory after all of its descendants.

    State is an immutable stack of frames. A frame pairs a listed directory
    whose entry is held back with the children it still has to walk. The
    walk always descends depth-first; ``depth_first`` has no effect here.
    """

    def _initial_state(self, root: str) -> Link:
        return Link(_Frame(None, PendingWork([root])), None)

    def _step(self, frames: Optional[Link]) -> StepResult:
        while frames is not None:
            frame = frames.head

            if frame.pending:
                path, rest = frame.pending.pop()
                frames = Link(_Frame(frame.entry, rest), frames.tail)
                listing = self._read_directory(path)
                if listing is not None:
                    entry, children = listing
                    frames = Link(_Frame(entry, PendingWork(children)), frames)
                continue

            # All children walked: the held-back entry is next
            frames = frames.tail
            if frame.entry is not None:
                return Step(frame.entry, Continuation(self, frames))

        return DONE


_WALKERS = {
    WalkOrder.TOP_DOWN_DEPTH_FIRST: DepthFirstWalker,
    WalkOrder.TOP_DOWN_BREADTH_FIRST: BreadthFirstWalker,
    WalkOrder.BOTTOM_UP: BottomUpWalker,
}


def create_walker(config: WalkConfig, adapter: FileSystemAdapter) -> Walker:
    """Create the walker implementing a configuration's order.

    Args:
        config: Validated walk configuration
        adapter: Filesystem collaborator

    Returns:
        Walker instance
    """
    if not config.top_down and not config.depth_first:
        logger.debug("Bottom-up walks are always depth-first; ignoring depth_first=False")
    return _WALKERS[config.order](config, adapter)
