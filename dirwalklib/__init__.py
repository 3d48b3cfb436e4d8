"""DirWalkLib - Lazy, Resumable Directory Walking.

DirWalkLib walks a directory tree one directory at a time. Every step
returns the next ``(path, dirnames, filenames)`` entry together with a
continuation for the rest of the walk, so the caller decides when, and
whether, more of the tree is read.

Choose your interface:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Step by step:
    from dirwalklib import walk

Plain iteration:
    from dirwalklib import iter_walk

Iteration with remembered results:
    from dirwalklib import Cursor
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import ConfigurationError, WalkConfig, WalkOrder
from .core import (
    DONE,
    BottomUpWalker,
    BreadthFirstWalker,
    Continuation,
    DepthFirstWalker,
    DirEntry,
    Done,
    FileSystemAdapter,
    PendingWork,
    Step,
    StepResult,
    TopDownWalker,
    Walker,
    WalkError,
    create_walker,
)
from .adapters import OSFileSystemAdapter
from .error_policies import (
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    ErrorPolicy,
    ErrorThresholdExceeded,
    FailFastPolicy,
    IgnoreErrorsPolicy,
    ThresholdPolicy,
    UnreadableDirectoryError,
    binary,
    resolve_error_handler,
    unary,
)
from .cursor import Cursor
from .api import iter_walk, new, start, walk

__all__ = [
    "__version__",
    # Config
    "ConfigurationError",
    "WalkConfig",
    "WalkOrder",
    # Core
    "DONE",
    "Done",
    "Step",
    "StepResult",
    "Continuation",
    "DirEntry",
    "WalkError",
    "FileSystemAdapter",
    "PendingWork",
    "Walker",
    "TopDownWalker",
    "DepthFirstWalker",
    "BreadthFirstWalker",
    "BottomUpWalker",
    "create_walker",
    # Adapters
    "OSFileSystemAdapter",
    # Errors
    "ErrorPolicy",
    "IgnoreErrorsPolicy",
    "FailFastPolicy",
    "CollectErrorsPolicy",
    "ContinueOnErrorsPolicy",
    "ThresholdPolicy",
    "UnreadableDirectoryError",
    "ErrorThresholdExceeded",
    "resolve_error_handler",
    "unary",
    "binary",
    # API
    "Cursor",
    "walk",
    "start",
    "iter_walk",
    "new",
]
