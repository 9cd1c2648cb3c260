#
# conftest.py
# Directory Lock
#
# Creates reusable pytest fixtures: a temporary directory to lock, a matching config, and a fake OS backend that records calls.
#
# Thales Matheus Mendonça Santos - October 2026
#
import errno
import logging

import pytest

from dirlock.backend import LockBackend
from dirlock.config import LockConfig, Paths, Settings


class FakeBackend(LockBackend):
    """In-memory backend; set ``*_error`` attributes to make a call fail."""

    def __init__(self):
        self.calls = []
        self.open_fds = set()
        self.next_fd = 100
        self.open_error = None
        self.lock_error = None
        self.unlock_error = None
        self.close_error = None

    def open(self, path):
        self.calls.append(("open", str(path)))
        if self.open_error is not None:
            raise self.open_error
        fd = self.next_fd
        self.next_fd += 1
        self.open_fds.add(fd)
        return fd

    def lock_exclusive(self, fd):
        self.calls.append(("lock", fd))
        if self.lock_error is not None:
            raise self.lock_error

    def unlock(self, fd):
        self.calls.append(("unlock", fd))
        if self.unlock_error is not None:
            raise self.unlock_error

    def close(self, fd):
        self.calls.append(("close", fd))
        self.open_fds.remove(fd)
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def busy_error():
    return BlockingIOError(errno.EWOULDBLOCK, "Resource temporarily unavailable")


@pytest.fixture
def lock_dir(tmp_path):
    d = tmp_path / "state"
    d.mkdir()
    return d


@pytest.fixture
def temp_config(lock_dir):
    return LockConfig(paths=Paths(lock_dir=lock_dir), settings=Settings())


@pytest.fixture(autouse=True)
def reset_dirlock_logger():
    # setup_logging binds handlers to the stream of the test that first ran it.
    yield
    logger = logging.getLogger("dirlock")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
