"""FileSystemAdapter abstraction for DirWalkLib.

The walker never touches the filesystem directly. Every listing, type check
and path join goes through an adapter, so the same traversal logic runs over
the real filesystem, an in-memory tree, or an instrumented wrapper.
"""

import os
from abc import ABC, abstractmethod
from typing import List


class FileSystemAdapter(ABC):
    """Abstract collaborator providing the filesystem operations a walk needs.

    Implementations must be synchronous. A walk calls them only from inside
    a step, so no adapter method runs before the caller asks for an entry.
    """

    @abstractmethod
    def list_directory(self, path: str) -> List[str]:
        """List the names of a directory's direct children.

        Args:
            path: Directory to list

        Returns:
            Entry names in the order the underlying store returns them

        Raises:
            OSError: If the directory cannot be listed (missing, not a
                directory, permission denied, I/O error)
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check whether a path is a directory, following symbolic links.

        Must not raise; a path that cannot be inspected is not a directory.
        """
        pass

    @abstractmethod
    def is_symlink(self, path: str) -> bool:
        """Check whether a path is itself a symbolic link.

        Must not follow the link and must not raise.
        """
        pass

    def join_path(self, base: str, name: str) -> str:
        """Join a directory path and a child name."""
        return os.path.join(base, name)
