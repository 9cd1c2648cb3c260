#
# errors.py
# Directory Lock
#
# Exception hierarchy raised while opening, locking and releasing a locked directory.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""Errors raised by directory locks."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class DirLockError(Exception):
    """Base class for every directory-lock failure."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class OpenError(DirLockError):
    """The target could not be opened as a directory."""


class LockAcquireError(DirLockError):
    """flock() refused the exclusive lock."""


class LockConflictError(LockAcquireError):
    """Another holder already owns the exclusive lock."""


class AlreadyLockedError(LockConflictError):
    """This instance already holds the lock."""


class ReleaseError(DirLockError):
    """Releasing the lock failed. The descriptor is closed anyway."""


class NotLockedError(DirLockError):
    """unlock() was called without a held lock."""


__all__ = [
    "DirLockError",
    "OpenError",
    "LockAcquireError",
    "LockConflictError",
    "AlreadyLockedError",
    "ReleaseError",
    "NotLockedError",
]
