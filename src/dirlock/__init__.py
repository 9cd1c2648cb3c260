#
# __init__.py
# Directory Lock
#
# Package initializer exporting the directory lock, its errors and the single-instance runner.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""Exclusive advisory locks on directories."""
from .config import DEFAULT_CONFIG, LockConfig
from .errors import (
    AlreadyLockedError,
    DirLockError,
    LockAcquireError,
    LockConflictError,
    NotLockedError,
    OpenError,
    ReleaseError,
)
from .locks import DirectoryLock, LockState, release_lock, try_lock
from .runner import run_exclusive

__all__ = [
    "DEFAULT_CONFIG",
    "LockConfig",
    "DirectoryLock",
    "LockState",
    "try_lock",
    "release_lock",
    "run_exclusive",
    "DirLockError",
    "OpenError",
    "LockAcquireError",
    "LockConflictError",
    "AlreadyLockedError",
    "ReleaseError",
    "NotLockedError",
]
