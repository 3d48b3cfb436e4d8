"""Stateful cursor over a directory walk.

The Cursor wraps the step/continuation pair of a walk so callers don't have
to juggle continuations themselves. It keeps every entry produced so far
and is iterable, so it plugs into ``itertools`` and comprehensions.

A Cursor is mutable and not thread-safe; advance it from one thread.
"""

import os
from typing import Any, Callable, Iterator, List, Optional, Union

from .adapters.filesystem import OSFileSystemAdapter
from .config import WalkConfig
from .core.adapter import FileSystemAdapter
from .core.entry import DirEntry
from .core.step import DONE, StepResult
from .core.walker import create_walker


class Cursor:
    """Pull-based view of a walk that remembers its results.

    Example:
        >>> cursor = Cursor("some/dir", top_down=False)
        >>> cursor.advance().last()
        DirEntry(path='some/dir/deepest', dirnames=(), filenames=('a.txt',))
        >>> first_three = list(itertools.islice(cursor, 3))
    """

    def __init__(self,
                 root: Union[str, os.PathLike],
                 config: Optional[WalkConfig] = None,
                 adapter: Optional[FileSystemAdapter] = None,
                 **options):
        """Create a cursor. No directory is listed until it is advanced.

        Args:
            root: Directory to walk
            config: Walk configuration; built from options when omitted
            adapter: Filesystem collaborator (defaults to OSFileSystemAdapter)
            **options: WalkConfig fields, used only when config is omitted

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if config is None:
            config = WalkConfig(**options)
        config.ensure_valid()

        self.root = os.fspath(root)
        self.config = config
        walker = create_walker(config, adapter or OSFileSystemAdapter())
        self._resume: Optional[Callable[[], StepResult]] = walker.continuation(self.root)
        self._results: List[DirEntry] = []

    @classmethod
    def new(cls, root: Union[str, os.PathLike], **kwargs: Any) -> 'Cursor':
        """Create a cursor (alias of the constructor)."""
        return cls(root, **kwargs)

    def advance(self) -> 'Cursor':
        """Run the walk for one step.

        The produced entry is appended to the results; at the end of the
        walk the cursor is marked done. Advancing a finished cursor does
        nothing. Exceptions raised by the error handler propagate and
        leave the cursor where it was.

        Returns:
            self, to allow chaining
        """
        if self._resume is None:
            return self

        step = self._resume()
        if step is DONE:
            self._resume = None
        else:
            entry, self._resume = step
            self._results.append(entry)
        return self

    @property
    def done(self) -> bool:
        """True once the walk has been exhausted."""
        return self._resume is None

    def is_finished(self) -> bool:
        return self.done

    def last(self) -> Optional[DirEntry]:
        """Return the most recently produced entry, or None."""
        if self._results:
            return self._results[-1]
        return None

    @property
    def results(self) -> List[DirEntry]:
        """Entries produced so far, in walk order."""
        return list(self._results)

    def __iter__(self) -> Iterator[DirEntry]:
        """Iterate over the whole walk.

        Entries already produced are replayed first; after that the cursor
        is advanced one step per requested entry.
        """
        index = 0
        while True:
            if index == len(self._results):
                if self.done:
                    return
                self.advance()
                continue
            yield self._results[index]
            index += 1

    def __repr__(self) -> str:
        state = "done" if self.done else "running"
        return f"Cursor(root={self.root!r}, results={len(self._results)}, {state})"
