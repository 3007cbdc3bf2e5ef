"""shquote configuration and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TextIO

import structlog

USER_CONFIG = Path.home() / ".shquote" / "config"
ENV_CONFIG = "SHQUOTE_CONFIG"


@dataclass
class Config:
    """Parsed configuration."""

    log: Path | None = None  # None = no logging
    log_full: bool = False  # include the parsed input in log entries
    verbose: bool = False  # log successful parses too


# === Config Loading ===


def _merge_configs(base: Config, overlay: Config) -> Config:
    """Merge overlay config into base. Settings from overlay win if set."""
    return replace(
        base,
        log=overlay.log if overlay.log is not None else base.log,
        log_full=overlay.log_full if overlay.log_full else base.log_full,
        verbose=overlay.verbose if overlay.verbose else base.verbose,
    )


def load_config() -> Config:
    """Load config from ~/.shquote/config and $SHQUOTE_CONFIG. Last match wins."""
    config = Config()

    if USER_CONFIG.is_file():
        config = _merge_configs(config, parse_config(USER_CONFIG.read_text()))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        env_config_path = Path(env_path).expanduser()
        if env_config_path.is_file():
            config = _merge_configs(config, parse_config(env_config_path.read_text()))

    return config


def parse_config(text: str) -> Config:
    """Parse config text into Config object. Raises ValueError on syntax errors."""
    settings: dict[str, bool | Path] = {}

    for lineno, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split(None, 1)
        directive = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""

        try:
            if directive == "set":
                _apply_setting(settings, rest)
            else:
                raise ValueError(f"unknown directive '{directive}'")
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None

    return Config(
        log=settings.get("log"),
        log_full=settings.get("log_full", False),
        verbose=settings.get("verbose", False),
    )


def _apply_setting(settings: dict[str, bool | Path], rest: str) -> None:
    """Parse and apply a 'set' directive. Raises ValueError on invalid setting."""
    if not rest:
        raise ValueError("'set' requires a setting name")

    parts = rest.split(None, 1)
    key = parts[0].lower()
    value = parts[1] if len(parts) > 1 else None
    key_normalized = key.replace("-", "_")

    # Boolean settings (no value required)
    if key_normalized in ("log_full", "verbose"):
        if value is not None:
            raise ValueError(f"'{key}' takes no value")
        settings[key_normalized] = True

    # Path settings
    elif key_normalized == "log":
        if value is None:
            raise ValueError("'log' requires a path")
        settings[key_normalized] = Path(value).expanduser()

    else:
        raise ValueError(f"unknown setting '{key}'")


# === Logging ===

_logger: structlog.typing.FilteringBoundLogger | None = None
_log_full = False
_log_file: TextIO | None = None


def _close_log_file() -> None:
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None


def configure_logging(config: Config) -> None:
    """Configure logging based on config settings. Call once at startup.

    Reconfiguring closes the previous log file; a config without a log
    path turns logging off.
    """
    global _logger, _log_full, _log_file
    _close_log_file()
    if config.log is None:
        _logger = None
        _log_full = False
        structlog.reset_defaults()
        return

    # Ensure log directory exists
    config.log.parent.mkdir(parents=True, exist_ok=True)
    _log_file = config.log.open("a")

    # JSON lines appended to the log file
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if config.verbose else logging.INFO
        ),
        logger_factory=structlog.WriteLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )

    _logger = structlog.get_logger("shquote")
    _log_full = config.log_full


def log_event(
    event: str, level: str = "info", source: str | None = None, **fields: object
) -> None:
    """Log an event. No-op if logging not configured.

    The parsed input is only recorded when log_full is set.
    """
    if _logger is None:
        return
    if _log_full and source is not None:
        fields["source"] = source
    getattr(_logger, level)(event, **fields)
