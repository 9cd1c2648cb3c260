#!/usr/bin/env python3
#
# dirlock_run.py
# Directory Lock
#
# Command-line entry point that sets up config/logging and runs a command while holding an exclusive lock on a directory.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""
Thin command-line wrapper around ``dirlock.runner.run_exclusive``.

    dirlock-run [--log-file PATH] [--conflict-exit-code N] [--chdir] [-v] DIR [--] COMMAND...

Options may appear before or after DIR. Everything after the first ``--``
belongs to the command; a command taking options of its own needs it.
Without a command the lock is only probed.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from dirlock.config import LockConfig, Paths, Settings
from dirlock.errors import DirLockError, OpenError
from dirlock.logging_setup import setup_logging
from dirlock.runner import run_exclusive


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlock-run",
        description="Run a command only if no other instance holds the lock on DIR.",
    )
    parser.add_argument("lock_dir", metavar="DIR", help="existing directory to lock")
    parser.add_argument("command", nargs="*", help="command to run while holding the lock")
    parser.add_argument("--log-file", default=None, help="also log to this rotating file")
    parser.add_argument(
        "--conflict-exit-code",
        type=int,
        default=Settings.conflict_exit_code,
        help="exit status when DIR is already locked (default: %(default)s)",
    )
    parser.add_argument("--chdir", action="store_true", help="run the command inside DIR")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    # Split off the command so its own options never reach our parser.
    tail: List[str] = []
    if "--" in argv:
        cut = argv.index("--")
        argv, tail = argv[:cut], argv[cut + 1 :]
    args = build_parser().parse_intermixed_args(argv)
    command = list(args.command) + tail

    config = LockConfig(
        paths=Paths(lock_dir=args.lock_dir, log_file=args.log_file),
        settings=Settings(
            conflict_exit_code=args.conflict_exit_code,
            chdir=args.chdir,
            log_level="DEBUG" if args.verbose else "INFO",
        ),
    )
    # Set up stdout (+ optional rotating file) logging before doing any work.
    logger = setup_logging(config)
    try:
        return run_exclusive(command, config=config, logger=logger)
    except OpenError as e:
        logger.error("[CONFIG] %s", e)
        return 2
    except DirLockError as e:
        logger.error("[FATAL] %s", e)
        return 1
    except OSError as e:
        # The command could not be started; the lock is already released.
        logger.error("[FATAL] %s", e)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
