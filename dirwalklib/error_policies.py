"""
Error handling policies for DirWalkLib.

A directory that cannot be listed never stops a walk. The walker reports it
as a WalkError to a single handler and moves on. This module turns whatever
the user configured as ``on_error`` into that handler, and provides
ready-made policies for the common cases.

Anything a handler raises is not caught: it propagates out of the step that
hit the error, which is how a policy such as FailFastPolicy stops a walk.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .core.entry import WalkError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[WalkError], None]


class UnreadableDirectoryError(Exception):
    """Raised by FailFastPolicy for the first directory that cannot be listed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot list directory '{path}': {reason}")
        self.path = path
        self.reason = reason


class ErrorThresholdExceeded(Exception):
    """Raised by ThresholdPolicy once too many directories failed to list."""
    pass


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for directories that
    cannot be listed. Policies are callable, so an instance can be passed
    directly as ``on_error``.
    """

    @abstractmethod
    def handle(self, error: WalkError) -> None:
        """
        Handle a directory that could not be listed.

        Args:
            error: The failing path and the reason it failed

        Raises:
            Any exception, to abort the current step.
        """
        pass

    def __call__(self, error: WalkError) -> None:
        self.handle(error)


class IgnoreErrorsPolicy(ErrorPolicy):
    """Policy that drops every error. This is what happens with no handler."""

    def handle(self, error: WalkError) -> None:
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that raises on the first error, stopping the walk.

    Entries yielded before the failure remain valid; the step that hit the
    unreadable directory raises UnreadableDirectoryError instead of
    returning.
    """

    def handle(self, error: WalkError) -> None:
        raise UnreadableDirectoryError(error.path, error.reason)


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that quietly collects every error for later inspection.
    """

    def __init__(self):
        self.errors: List[WalkError] = []
        self.skipped_paths: List[str] = []

    def handle(self, error: WalkError) -> None:
        self.errors.append(error)
        self.skipped_paths.append(error.path)


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that collects errors and logs a warning for each one.

    Useful when a walk should cover as much as possible while still telling
    the operator what it had to leave out.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning when an error occurs
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, error: WalkError) -> None:
        super().handle(error)
        if self.verbose:
            if error.reason in ('EACCES', 'EPERM'):
                logger.warning("Skipping inaccessible directory '%s': %s", error.path, error.reason)
            else:
                logger.warning("Cannot list directory '%s': %s", error.path, error.reason)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_reason: Dict[str, int] = {}
        for error in self.errors:
            by_reason[error.reason] = by_reason.get(error.reason, 0) + 1
        return {
            'total_errors': len(self.errors),
            'permission_errors': by_reason.get('EACCES', 0) + by_reason.get('EPERM', 0),
            'not_found_errors': by_reason.get('ENOENT', 0),
            'skipped_paths': len(self.skipped_paths),
            'by_reason': by_reason,
            'errors': list(self.errors),
        }


class ThresholdPolicy(CollectErrorsPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails.

    Useful when a few unreadable directories are expected but many of them
    point at a problem that should halt the walk.
    """

    def __init__(self, max_errors: int = 10):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
        """
        super().__init__()
        self.max_errors = max_errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def handle(self, error: WalkError) -> None:
        super().handle(error)
        if self.error_count > self.max_errors:
            raise ErrorThresholdExceeded(
                f"Error threshold exceeded ({self.max_errors} errors), last: "
                f"'{error.path}': {error.reason}"
            )


def unary(fn: Callable[[WalkError], Any]) -> ErrorHandler:
    """Adapt a callable taking the ``(path, reason)`` pair as one argument."""
    def handler(error: WalkError) -> None:
        fn(error)
    return handler


def binary(fn: Callable[[str, str], Any]) -> ErrorHandler:
    """Adapt a callable taking ``path`` and ``reason`` as two arguments."""
    def handler(error: WalkError) -> None:
        fn(error.path, error.reason)
    return handler


def _ignore(error: WalkError) -> None:
    pass


def _takes_two_arguments(fn: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False

    required = [
        p for p in signature.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    ]
    return len(required) == 2


def resolve_error_handler(on_error: Optional[Callable[..., Any]]) -> ErrorHandler:
    """
    Turn a configured ``on_error`` value into a one-argument handler.

    The shape of the callable is inspected once, here, so the walker always
    invokes a handler the same way.

    Args:
        on_error: None, an ErrorPolicy, a callable taking a WalkError, or a
            callable taking ``(path, reason)`` as two arguments

    Returns:
        Handler called with a WalkError for each unreadable directory
    """
    if on_error is None:
        return _ignore
    if isinstance(on_error, ErrorPolicy):
        return on_error.handle
    if _takes_two_arguments(on_error):
        return binary(on_error)
    return unary(on_error)
