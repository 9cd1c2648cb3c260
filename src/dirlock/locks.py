#
# locks.py
# Directory Lock
#
# Implements an exclusive, non-blocking advisory lock on a directory to keep a single instance running against it.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""Directory locks built on flock(2)."""
from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Optional, Union

from .backend import FlockBackend, LockBackend
from .errors import (
    AlreadyLockedError,
    DirLockError,
    LockAcquireError,
    LockConflictError,
    NotLockedError,
    OpenError,
    ReleaseError,
)

log = logging.getLogger("dirlock")


class LockState(enum.Enum):
    UNOPENED = "unopened"
    LOCKED = "locked"
    CLOSED = "closed"


class DirectoryLock:
    """
    Exclusive advisory lock over a directory.

    Construction only records the path. ``lock()`` opens the directory and
    applies ``LOCK_EX | LOCK_NB``; ``unlock()`` releases it and closes the
    descriptor. If ``lock()`` fails after the directory was opened, the
    descriptor is closed before the error propagates, so the instance can be
    retried. A released lock is closed for good; build a new instance to lock
    again.
    """

    def __init__(self, path: Union[str, Path], backend: Optional[LockBackend] = None):
        self.path = Path(path)
        self.backend = backend or FlockBackend()
        self.fd: Optional[int] = None
        self.state = LockState.UNOPENED

    @property
    def locked(self) -> bool:
        return self.state is LockState.LOCKED

    def lock(self) -> None:
        if self.state is LockState.LOCKED:
            raise AlreadyLockedError(f"directory {self.path} is already locked by this handle", self.path)
        if self.state is LockState.CLOSED:
            raise DirLockError(f"lock on {self.path} was released; create a new lock", self.path)

        try:
            fd = self.backend.open(self.path)
        except OSError as e:
            raise OpenError(f"cannot open directory {self.path} - {e}", self.path) from e

        try:
            self.backend.lock_exclusive(fd)
        except OSError as e:
            try:
                self.backend.close(fd)
            except OSError:
                log.warning("Failed to close %s after lock failure", self.path, exc_info=True)
            if isinstance(e, BlockingIOError):
                log.debug("Directory %s is locked by another holder", self.path)
                raise LockConflictError(f"cannot flock directory {self.path} - {e}", self.path) from e
            raise LockAcquireError(f"cannot flock directory {self.path} - {e}", self.path) from e

        self.fd = fd
        self.state = LockState.LOCKED
        log.debug("Locked %s (fd=%d)", self.path, fd)

    def unlock(self) -> None:
        if self.state is not LockState.LOCKED or self.fd is None:
            raise NotLockedError(f"directory {self.path} is not locked ({self.state.value})", self.path)

        fd = self.fd
        self.fd = None
        self.state = LockState.CLOSED
        try:
            try:
                self.backend.unlock(fd)
            finally:
                self.backend.close(fd)
        except OSError as e:
            raise ReleaseError(f"cannot unlock directory {self.path} - {e}", self.path) from e
        log.debug("Unlocked %s", self.path)

    def __enter__(self) -> "DirectoryLock":
        self.lock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.unlock()
            return
        # Let the body's exception propagate rather than the release failure.
        try:
            self.unlock()
        except ReleaseError:
            log.exception("Failed to release %s while handling %s", self.path, exc_type.__name__)

    def __repr__(self) -> str:
        return f"DirectoryLock({str(self.path)!r}, state={self.state.value})"


def try_lock(path: Union[str, Path], backend: Optional[LockBackend] = None) -> Optional[DirectoryLock]:
    # None means another instance is active; any other failure propagates.
    dl = DirectoryLock(path, backend=backend)
    try:
        dl.lock()
    except LockConflictError:
        return None
    return dl


def release_lock(dl: DirectoryLock) -> None:
    dl.unlock()


__all__ = ["LockState", "DirectoryLock", "try_lock", "release_lock"]
