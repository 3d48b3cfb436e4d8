"""Core abstractions for DirWalkLib.

This module contains the value types, the filesystem adapter interface and
the walk strategies that make up the traversal engine.
"""

from .entry import DirEntry, WalkError
from .adapter import FileSystemAdapter
from .pending import PendingWork
from .step import DONE, Continuation, Done, Step, StepResult
from .walker import (
    Walker,
    TopDownWalker,
    DepthFirstWalker,
    BreadthFirstWalker,
    BottomUpWalker,
    create_walker,
)

__all__ = [
    "DirEntry",
    "WalkError",
    "FileSystemAdapter",
    "PendingWork",
    "DONE",
    "Continuation",
    "Done",
    "Step",
    "StepResult",
    "Walker",
    "TopDownWalker",
    "DepthFirstWalker",
    "BreadthFirstWalker",
    "BottomUpWalker",
    "create_walker",
]
