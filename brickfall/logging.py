"""
Brickfall Logging

Leveled console output per module, and JSONL record files for the
structured streams (currently just 'events').

Usage:
    from brickfall.logging import get_logger

    log = get_logger('engine')
    log.info("Level %d started", level)

    from brickfall.logging import emit_record
    emit_record('events', {'kind': 'brick_destroyed', 'tick': 120})

Environment:
    BRICKFALL_LOG_LEVEL=DEBUG                default level for every module
    BRICKFALL_LOG_ENGINE=TRACE               level for one module
    BRICKFALL_LOG_DIR=/tmp/brickfall         where record files go
    BRICKFALL_LOGGING_EVENTS_ENABLED=true    write the 'events' stream to disk
"""

import json
import os
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    TRACE = 5      # per-collision detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_LEVEL_ALIASES = {'WARN': LogLevel.WARNING}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'records': set(),        # modules whose records go to a file
}


def _level_from_string(name: str) -> LogLevel:
    """Unknown names fall back to INFO."""
    name = name.strip().upper()
    if name in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[name]
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configure_logging(level: str = 'INFO') -> None:
    """Set the default console level (e.g. from --log-level)."""
    _config['default_level'] = _level_from_string(level)


def _load_env_config() -> None:
    prefix = 'BRICKFALL_LOG_'
    for key, value in os.environ.items():
        if key == 'BRICKFALL_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key == 'BRICKFALL_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith(prefix):
            _config['module_levels'][key[len(prefix):].lower()] = _level_from_string(value)
        elif key.startswith('BRICKFALL_LOGGING_') and key.endswith('_ENABLED'):
            module = key[len('BRICKFALL_LOGGING_'):-len('_ENABLED')].lower()
            if value.strip().lower() in ('1', 'true', 'yes', 'on'):
                _config['records'].add(module)
            else:
                _config['records'].discard(module)


_load_env_config()


def get_log_dir() -> Path:
    """BRICKFALL_LOG_DIR, else $XDG_DATA_HOME/brickfall/logs."""
    if _config['log_dir']:
        return Path(_config['log_dir']).expanduser()
    data_home = os.environ.get('XDG_DATA_HOME') or Path.home() / '.local' / 'share'
    return Path(data_home) / 'brickfall' / 'logs'


# =============================================================================
# Record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for structured records of one stream."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record."""

    @abstractmethod
    def close(self) -> None:
        """Finish the stream and release the destination."""


class FileSink(LogSink):
    """Appends records to a JSONL file.

    The file is opened on the first record and starts with a header line;
    close() writes a footer line. Records get a `wall_time` stamp unless
    they carry one.

    Args:
        path: File to append to (parent directories are created)
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._file: Optional[TextIO] = None

    def _write(self, line: Dict[str, Any]) -> None:
        self._file.write(json.dumps(line) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.path, 'a')
            self._write({'type': 'header', 'module': module, 'start_time': time.time()})
        self._write({'wall_time': time.time(), **record})

    def close(self) -> None:
        if self._file is None:
            return
        self._write({'type': 'footer', 'end_time': time.time()})
        self._file.close()
        self._file = None


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def create_sink(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink under get_log_dir() if records are enabled for module, else NullSink."""
    if module.lower() not in _config['records']:
        return NullSink()
    name = session_name or time.strftime("%Y%m%d_%H%M%S")
    return FileSink(get_log_dir() / f"{name}_{module}.jsonl")


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to the module's sink.

    Returns:
        False if no sink is registered for module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


# =============================================================================
# Console loggers
# =============================================================================

class BrickfallLogger:
    """Prints `[module] LEVEL: message` for one module.

    Arguments are %-formatted only when the level is enabled.
    """

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        label = 'WARN' if level == LogLevel.WARNING else level.name
        print(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BrickfallLogger:
    """Get the cached logger for module."""
    return BrickfallLogger(module)
