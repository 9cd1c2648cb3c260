#
# runner.py
# Directory Lock
#
# Runs a command while holding the directory lock, skipping the run when another instance already owns it.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""Single-instance execution of a command."""
from __future__ import annotations

import logging
import subprocess
from typing import Optional, Sequence

from .backend import LockBackend
from .config import DEFAULT_CONFIG, LockConfig
from .errors import ReleaseError
from .locks import release_lock, try_lock


def run_exclusive(
    command: Sequence[str],
    config: LockConfig = DEFAULT_CONFIG,
    logger: Optional[logging.Logger] = None,
    backend: Optional[LockBackend] = None,
) -> int:
    """
    Lock ``config.paths.lock_dir`` and run ``command`` while holding it.

    Returns the command's exit status, or ``settings.conflict_exit_code`` when
    the directory is already locked. An empty command only probes the lock.
    ``OpenError`` and other lock failures propagate.
    """
    log = logger or logging.getLogger("dirlock")
    lock_dir = config.paths.lock_dir

    # Prevent overlapping runs by acquiring the lock; skip if already running.
    held = try_lock(lock_dir, backend=backend)
    if held is None:
        log.info("Another instance holds %s; skipping this run.", lock_dir)
        return config.settings.conflict_exit_code

    log.debug("Acquired lock on %s", lock_dir)
    try:
        if not command:
            log.info("Lock on %s is free.", lock_dir)
            return 0
        cwd = str(lock_dir) if config.settings.chdir else None
        log.info("Running %s (cwd=%s)", " ".join(command), cwd or ".")
        proc = subprocess.run(list(command), cwd=cwd)
        if proc.returncode != 0:
            log.warning("Command exited with status %d", proc.returncode)
        return proc.returncode
    finally:
        try:
            release_lock(held)
        except ReleaseError:
            log.exception("Failed to release lock on %s", lock_dir)
            raise


__all__ = ["run_exclusive"]
