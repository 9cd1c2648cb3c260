#
# backend.py
# Directory Lock
#
# Wraps the four operating system calls behind a directory lock (open, flock, unflock, close) so they can be swapped out in tests.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""OS capability used by DirectoryLock.

A backend opens a lockable resource and applies or releases an exclusive
advisory lock on it. Every method raises ``OSError`` on failure; translating
those into ``DirLockError`` subclasses is the caller's job.
"""
from __future__ import annotations

import abc
import errno
import fcntl
import os
import stat
from pathlib import Path


class LockBackend(abc.ABC):
    @abc.abstractmethod
    def open(self, path: Path) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def lock_exclusive(self, fd: int) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def unlock(self, fd: int) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def close(self, fd: int) -> None:
        raise NotImplementedError


class FlockBackend(LockBackend):
    """flock(2) on a read-only directory descriptor."""

    def open(self, path: Path) -> int:
        flags = os.O_RDONLY | getattr(os, "O_DIRECTORY", 0) | getattr(os, "O_CLOEXEC", 0)
        fd = os.open(str(path), flags)
        # Platforms without O_DIRECTORY happily open regular files.
        try:
            mode = os.fstat(fd).st_mode
        except OSError:
            os.close(fd)
            raise
        if not stat.S_ISDIR(mode):
            os.close(fd)
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
        return fd

    def lock_exclusive(self, fd: int) -> None:
        # LOCK_NB: contention raises BlockingIOError instead of waiting.
        fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)

    def unlock(self, fd: int) -> None:
        fcntl.flock(fd, fcntl.LOCK_UN)

    def close(self, fd: int) -> None:
        os.close(fd)


__all__ = ["LockBackend", "FlockBackend"]
