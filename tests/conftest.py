"""Shared fixtures for locking tests."""

import fcntl
from contextlib import contextmanager
from pathlib import Path

import pytest


@contextmanager
def _held_lock(path: Path):
    """Hold an exclusive flock on ``path`` from a separate descriptor."""
    with open(path, "r+b") as fh:
        fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        try:
            yield
        finally:
            fcntl.flock(fh.fileno(), fcntl.LOCK_UN)


def _is_unlocked(path: Path) -> bool:
    """True if a fresh descriptor can take the lock right now."""
    with open(path, "r+b") as fh:
        try:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError:
            return False
        fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
        return True


@pytest.fixture
def held_lock():
    """Context manager factory simulating another lock holder."""
    return _held_lock


@pytest.fixture
def is_unlocked():
    return _is_unlocked


@pytest.fixture
def target(tmp_path: Path) -> Path:
    """An existing, unlocked file."""
    path = tmp_path / "test.lock"
    path.write_bytes(b"payload")
    return path
