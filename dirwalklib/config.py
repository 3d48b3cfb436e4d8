"""Configuration system for DirWalkLib.

This module defines how users specify a walk: which ordering policy to use,
whether symbolic links to directories are followed, and what happens when a
directory cannot be listed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class ConfigurationError(Exception):
    """Raised when a WalkConfig cannot be used to start a walk."""
    pass


class WalkOrder(Enum):
    """The order in which directory entries are produced.

    Bottom-up walks always descend depth-first, so there is no
    breadth-first bottom-up order.
    """
    TOP_DOWN_DEPTH_FIRST = "dfs"      # Parent, then each subtree in turn
    TOP_DOWN_BREADTH_FIRST = "bfs"    # Level by level
    BOTTOM_UP = "bottom_up"           # Subtrees first, parent last


_STRATEGY_ALIASES = {
    'dfs': (True, True),
    'depth_first': (True, True),
    'top_down': (True, True),
    'bfs': (False, True),
    'breadth_first': (False, True),
    'bottom_up': (True, False),
    'post_order': (True, False),
}


@dataclass(frozen=True)
class WalkConfig:
    """Complete configuration for a directory walk.

    The configuration is resolved once when a walk starts and is shared,
    unchanged, by every continuation of that walk.

    Attributes:
        depth_first: Descend into a directory's children before its
            siblings. Ignored when ``top_down`` is False.
        top_down: Yield a directory before its descendants.
        follow_symlinks: List and descend into symbolic links to
            directories. There is no cycle detection.
        on_error: Handler for directories that cannot be listed. May be
            None, an ErrorPolicy, a callable taking one ``WalkError``
            argument, or a callable taking ``(path, reason)``.
    """

    depth_first: bool = True
    top_down: bool = True
    follow_symlinks: bool = False
    on_error: Optional[Callable[..., Any]] = None

    @property
    def order(self) -> WalkOrder:
        """Resolve the flags to a single ordering policy."""
        if not self.top_down:
            return WalkOrder.BOTTOM_UP
        if self.depth_first:
            return WalkOrder.TOP_DOWN_DEPTH_FIRST
        return WalkOrder.TOP_DOWN_BREADTH_FIRST

    # Convenience constructors for common configurations

    @classmethod
    def breadth_first(cls, **kwargs) -> 'WalkConfig':
        """Create config for a top-down, level-by-level walk."""
        return cls(depth_first=False, top_down=True, **kwargs)

    @classmethod
    def bottom_up(cls, **kwargs) -> 'WalkConfig':
        """Create config for a walk yielding children before parents."""
        return cls(top_down=False, **kwargs)

    @classmethod
    def from_strategy(cls, strategy: str, **kwargs) -> 'WalkConfig':
        """Create config from a strategy name.

        Args:
            strategy: One of dfs, depth_first, top_down, bfs,
                breadth_first, bottom_up, post_order
            **kwargs: Remaining WalkConfig fields

        Returns:
            WalkConfig for the named strategy

        Raises:
            ConfigurationError: If the strategy name is not recognized
        """
        key = strategy.lower()
        if key not in _STRATEGY_ALIASES:
            raise ConfigurationError(
                f"Unknown walk strategy: {strategy}. "
                f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
            )
        depth_first, top_down = _STRATEGY_ALIASES[key]
        return cls(depth_first=depth_first, top_down=top_down, **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for name in ('depth_first', 'top_down', 'follow_symlinks'):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"{name} must be a bool")

        if self.on_error is not None and not callable(self.on_error):
            errors.append("on_error must be callable or None")

        return errors

    def ensure_valid(self) -> 'WalkConfig':
        """Return self, or raise ConfigurationError listing every problem."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}"
            )
        return self
