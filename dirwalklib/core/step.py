"""Step results and continuations for DirWalkLib.

A walk is driven one step at a time. Each step returns either a ``Step``
carrying the next DirEntry and the continuation that resumes the walk, or
the ``DONE`` sentinel once the walk is exhausted::

    step = walk("some/dir")
    while step:
        entry, resume = step
        process(entry)
        step = resume()
"""

from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Union

from .entry import DirEntry

if TYPE_CHECKING:
    from .walker import Walker


class Done:
    """Sentinel type marking the end of a walk.

    There is exactly one instance, ``DONE``. It is falsy.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "DONE"

    def __reduce__(self):
        return (Done, ())


DONE = Done()


class Step(NamedTuple):
    """A produced entry together with the rest of the walk.

    Attributes:
        entry: The DirEntry produced by this step
        resume: Zero-argument callable returning the next StepResult
    """

    entry: DirEntry
    resume: Callable[[], 'StepResult']


StepResult = Union[Step, Done]


class Continuation:
    """The rest of a walk, suspended between steps.

    A continuation holds its walker and an immutable snapshot of the walk
    state. Calling it performs exactly the filesystem work needed for the
    next entry. Because the snapshot is never mutated, calling the same
    continuation again repeats that step.
    """

    __slots__ = ('_walker', '_state')

    def __init__(self, walker: 'Walker', state: Any):
        self._walker = walker
        self._state = state

    @property
    def state(self) -> Any:
        """The suspended walk state (for introspection and testing)."""
        return self._state

    def __call__(self) -> StepResult:
        return self._walker._step(self._state)

    def __repr__(self) -> str:
        return f"Continuation({type(self._walker).__name__}, {self._state!r})"
