"""Logging setup for the command line tool and embedding applications.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Applications call ``initialize_logging``
once at startup to install a console handler and, optionally, a log file
that is rotated on every start.

Platform-specific log locations:
    - macOS: ~/Library/Logs/AirportFinder/airport_finder.log
    - Linux: ~/.airport_finder/logs/airport_finder.log
    - Windows: %AppData%/AirportFinder/Logs/airport_finder.log

Typical usage example:
    from airport_finder.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    log = get_logger("airport_finder.main")
    log.info("Loaded %d airports", count)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False

DEFAULT_LOG_FILENAME = "airport_finder.log"


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory.
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "AirportFinder"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "AirportFinder" / "Logs"
    else:
        return Path.home() / ".airport_finder" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to ``<name>.1``, shifts older logs, and deletes
    logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        new_log = log_dir / f"{log_filename}.{i + 1}"
        if old_log.exists():
            old_log.rename(new_log)

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, log_dir: str | Path | None = None) -> None:
    """Initialize logging from YAML configuration.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        log_dir: Directory for the log file. Overrides the configured
            directory; the platform directory is used if neither is set.

    Raises:
        LoggingError: If the configuration cannot be loaded.

    Examples:
        >>> initialize_logging("config/logging.yaml")
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")
        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
        _logging_config = {**_get_default_config(), **loaded}
    else:
        _logging_config = _get_default_config()

    if log_dir is not None:
        _logging_config["log_dir"] = str(log_dir)
    elif not _logging_config.get("log_dir"):
        _logging_config["log_dir"] = str(get_platform_log_dir())

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", False):
        directory = Path(_logging_config["log_dir"])
        directory.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            directory,
            file_config.get("filename", DEFAULT_LOG_FILENAME),
            file_config.get("backup_count", 5),
        )

    _loggers_cache.clear()
    _configure_root_logger()
    for name in _logging_config.get("components") or {}:
        _configure_component(logging.getLogger(name))
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "",
        "file": {
            "enabled": False,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(_level(_logging_config.get("level", "INFO")))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", False):
        log_file = Path(_logging_config["log_dir"]) / file_config.get("filename", DEFAULT_LOG_FILENAME)
        # Rotation already happened in initialize_logging
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached. A component can override its level, or be
    disabled, under the ``components`` section of the logging config.

    Args:
        name: Logger name (typically the module name).

    Returns:
        Configured logger instance.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _configure_component(logger)

    _loggers_cache[name] = logger
    return logger


def _configure_component(logger: logging.Logger) -> None:
    """Apply the level and enabled flag configured for a logger name.

    Modules that log through ``logging.getLogger(__name__)`` pick up their
    overrides here at initialization without calling ``get_logger``.
    """
    component_config = (_logging_config.get("components") or {}).get(logger.name) or {}

    if component_config.get("enabled", True):
        if "level" in component_config:
            logger.setLevel(_level(component_config["level"]))
    else:
        logger.disabled = True


def shutdown_logging() -> None:
    """Flush and close all handlers."""
    global _initialized
    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
