"""Persistent work collection for DirWalkLib.

A continuation must be safe to call more than once, so the work it captures
can never be mutated in place. PendingWork is therefore immutable: every
operation returns a new PendingWork that shares structure with the old one.
It is built from two singly linked lists, a front stack and a reversed back
list, which makes pushes at either end cost only the pushed items.
"""

from typing import Any, Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple


class Link(NamedTuple):
    """Cell of an immutable singly linked list."""

    head: Any
    tail: Optional['Link']


def iter_links(link: Optional[Link]) -> Iterator[Any]:
    """Iterate the values of a linked list from its head."""
    while link is not None:
        yield link.head
        link = link.tail


def _reverse(link: Optional[Link]) -> Optional[Link]:
    reversed_link = None
    for value in iter_links(link):
        reversed_link = Link(value, reversed_link)
    return reversed_link


class PendingWork:
    """Ordered, immutable collection of directory paths not yet listed.

    Depth-first walks use it as a stack (``push_front``), breadth-first
    walks as a queue (``push_back``); both take from the front with ``pop``.
    """

    __slots__ = ('_front', '_back', '_size')

    def __init__(self, paths: Iterable[str] = ()):
        """Create pending work holding paths in order.

        Args:
            paths: Initial paths, first to be popped first
        """
        items = list(paths)
        front = None
        for path in reversed(items):
            front = Link(path, front)
        self._front = front
        self._back: Optional[Link] = None
        self._size = len(items)

    @classmethod
    def _from_links(cls,
                    front: Optional[Link],
                    back: Optional[Link],
                    size: int) -> 'PendingWork':
        work = cls.__new__(cls)
        work._front = front
        work._back = back
        work._size = size
        return work

    def pop(self) -> Tuple[str, 'PendingWork']:
        """Take the first path.

        Returns:
            Tuple of (first path, pending work without it)

        Raises:
            IndexError: If there is no pending work
        """
        front, back = self._front, self._back
        if front is None:
            if back is None:
                raise IndexError("pop from empty PendingWork")
            front, back = _reverse(back), None
        return front.head, PendingWork._from_links(front.tail, back, self._size - 1)

    def push_front(self, paths: Sequence[str]) -> 'PendingWork':
        """Return pending work with paths placed before everything else.

        The paths keep their relative order.
        """
        front = self._front
        for path in reversed(paths):
            front = Link(path, front)
        return PendingWork._from_links(front, self._back, self._size + len(paths))

    def push_back(self, paths: Sequence[str]) -> 'PendingWork':
        """Return pending work with paths placed after everything else."""
        back = self._back
        for path in paths:
            back = Link(path, back)
        return PendingWork._from_links(self._front, back, self._size + len(paths))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[str]:
        yield from iter_links(self._front)
        yield from iter_links(_reverse(self._back))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PendingWork):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PendingWork({list(self)!r})"
