#
# config.py
# Directory Lock
#
# Defines dataclasses for the locked directory, log destination and runtime settings shared by the runner and the command line.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""Configuration objects for single-instance runs.

A LockConfig bundles the directory to lock with logging and exit-code
settings, making it easy to point at temporary directories in tests.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class Paths:
    lock_dir: Path = Path(".")
    log_file: Optional[Path] = None

    def __post_init__(self):
        # Normalize inputs to Path objects even when callers pass strings.
        self.lock_dir = Path(self.lock_dir)
        if self.log_file is not None:
            self.log_file = Path(self.log_file)


@dataclass
class Settings:
    conflict_exit_code: int = 75  # EX_TEMPFAIL: another instance is running
    chdir: bool = False  # run the command inside lock_dir
    log_level: str = "INFO"
    log_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_backup_count: int = 5


@dataclass
class LockConfig:
    paths: Paths = field(default_factory=Paths)
    settings: Settings = field(default_factory=Settings)


DEFAULT_CONFIG = LockConfig()
