#!/usr/bin/env python3
"""
Basic DirWalkLib usage.

This example demonstrates:
- Driving a walk step by step with continuations
- Stopping early without reading the rest of the tree
- Summing sizes bottom-up with a Cursor
"""

import itertools
import os
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dirwalklib import ContinueOnErrorsPolicy, Cursor, walk


def show_first(root: str, count: int) -> None:
    """Print the first few directories, reading only what they need."""
    step = walk(root, on_error=ContinueOnErrorsPolicy())
    for _ in range(count):
        if not step:
            break
        (path, dirnames, filenames), resume = step
        print(f"{path}: {len(dirnames)} dirs, {len(filenames)} files")
        step = resume()


def directory_sizes(root: str) -> dict:
    """Total size of every directory, children computed before parents."""
    sizes = {}
    for path, dirnames, filenames in Cursor(root, top_down=False):
        total = 0
        for name in filenames:
            try:
                total += os.path.getsize(os.path.join(path, name))
            except OSError:
                pass
        for name in dirnames:
            total += sizes.get(os.path.join(path, name), 0)
        sizes[path] = total
    return sizes


def main() -> int:
    root = sys.argv[1] if len(sys.argv) > 1 else "."

    print("First five directories:")
    show_first(root, 5)

    print("\nLargest directories:")
    sizes = directory_sizes(root)
    for path, size in itertools.islice(sorted(sizes.items(), key=lambda item: -item[1]), 5):
        print(f"{size:>12,}  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
