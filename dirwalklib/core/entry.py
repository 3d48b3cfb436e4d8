"""Value types produced by a directory walk.

Both types are plain named tuples, so they unpack and compare like the
``(path, dirnames, filenames)`` and ``(path, reason)`` tuples they stand for.
"""

import errno
from typing import NamedTuple, Tuple


class DirEntry(NamedTuple):
    """One directory's direct children, partitioned by kind.

    Names (not full paths) are kept in the order the listing returned them.

    Attributes:
        path: The directory that was listed
        dirnames: Names of entries that are directories
        filenames: Names of all other entries
    """

    path: str
    dirnames: Tuple[str, ...]
    filenames: Tuple[str, ...]


class WalkError(NamedTuple):
    """A directory that could not be listed.

    Attributes:
        path: The directory that failed to list
        reason: Symbolic errno name such as ``"ENOENT"`` or ``"EACCES"``
    """

    path: str
    reason: str

    @classmethod
    def from_exception(cls, path: str, error: OSError) -> 'WalkError':
        """Build a WalkError from the exception raised by a listing."""
        return cls(path, error_reason(error))


def error_reason(error: BaseException) -> str:
    """Return the symbolic name for an error.

    Falls back to the exception class name when the error carries no
    recognizable errno.
    """
    code = getattr(error, 'errno', None)
    if code is not None and code in errno.errorcode:
        return errno.errorcode[code]
    return type(error).__name__
