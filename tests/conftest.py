"""
Shared test fixtures for shquote tests.
"""

import json
from pathlib import Path

import pytest

from shquote.core.config import Config, configure_logging


@pytest.fixture
def configure_log(tmp_path):
    """Factory enabling logging to a temp file. Returns the log path."""

    def _configure(verbose: bool = False, log_full: bool = False) -> Path:
        log = tmp_path / "logs" / "shquote.log"
        configure_logging(Config(log=log, verbose=verbose, log_full=log_full))
        return log

    yield _configure

    configure_logging(Config())


def read_log(path: Path) -> list[dict]:
    """Read JSON log entries written to path."""
    if not path.exists():
        return []
    return [json.loads(line) for line in path.read_text().splitlines() if line]
