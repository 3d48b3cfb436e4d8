"""Shared fixtures for the DirWalkLib test suite."""

import pytest

from dirwalklib.testing import MemoryFileSystemAdapter, Symlink


ROOT = "testdirs"


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running test, skipped by run_tests.py")


def animal_tree():
    """The reference tree used throughout the suite.

    testdirs/
    ├── dogs/
    │   ├── wild/      coyote.txt, wolf.txt
    │   └── domestic/  dog.txt
    ├── cats/
    │   ├── wild/      tiger.txt, lion.txt
    │   └── domestic/  cat.txt
    └── felines -> testdirs/cats
    """
    return {
        ROOT: {
            "dogs": {
                "wild": {"coyote.txt": "", "wolf.txt": ""},
                "domestic": {"dog.txt": ""},
            },
            "cats": {
                "wild": {"tiger.txt": "", "lion.txt": ""},
                "domestic": {"cat.txt": ""},
            },
            "felines": Symlink("testdirs/cats"),
        }
    }


@pytest.fixture
def adapter():
    """In-memory adapter over the animal tree."""
    return MemoryFileSystemAdapter(animal_tree())


def paths_of(entries):
    return [entry.path for entry in entries]
