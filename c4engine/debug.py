"""
debug.py - Logging for the c4engine search core

A single DebugManager wraps the "c4engine" stdlib logger. It adds the TRACE
level the engine uses for per-move chatter, per-component filtering and
named performance markers. Components used by the engine are "board",
"rules", "tactics", "search" and "player".
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# stdlib level each DebugLevel is emitted at
LEVEL_MAP = {
    DebugLevel.NONE: logging.NOTSET,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,  # TRACE is told apart by DebugLevel, not by logging
}

LOGGER_NAME = "c4engine"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Level and component gate in front of the engine's logger."""

    def __init__(self, logger_name: str = LOGGER_NAME):
        self._level = DebugLevel.INFO
        self._enabled = True
        self._components: Set[str] = set()  # empty: every component
        self._file_handler: Optional[logging.FileHandler] = None
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger(logger_name)

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _setup_logger(self, logger_name: str) -> logging.Logger:
        logger = logging.getLogger(logger_name)
        logger.setLevel(LEVEL_MAP[self._level])

        # One console handler per logger, however many managers share it
        if not any(getattr(h, "_c4engine_console", False) for h in logger.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            handler._c4engine_console = True
            logger.addHandler(handler)

        return logger

    def _set_log_file(self, log_file: str):
        if self._file_handler is not None:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

        if log_file:
            self._file_handler = logging.FileHandler(log_file)
            self._file_handler.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            self._logger.addHandler(self._file_handler)

    def configure(self, level: DebugLevel = None,
                  enabled: bool = None,
                  log_file: str = None,
                  components: Iterable[str] = None):
        """
        Change any subset of the settings; arguments left as None are kept.

        Args:
            level: Most verbose level that is still emitted
            enabled: Master switch
            log_file: Also write to this file ("" stops file logging)
            components: Only emit messages tagged with these (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])
        if enabled is not None:
            self._enabled = enabled
        if log_file is not None:
            self._set_log_file(log_file)
        if components is not None:
            self._components = set(components)

    def is_enabled_for(self, level: DebugLevel, component: str = None) -> bool:
        if not self._enabled or self._level == DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        return not (component and self._components and component not in self._components)

    def log(self, level: DebugLevel, message: str, component: str = None):
        """Emit message if level and component pass the current filters."""
        if not self.is_enabled_for(level, component):
            return

        if component:
            message = f"[{component}] {message}"
        if level == DebugLevel.TRACE:
            message = f"TRACE: {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: str = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: str = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: str = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: str = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: str = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: str = None) -> Optional[float]:
        """
        Stop a timer and log its duration at DEBUG.

        Returns:
            Elapsed seconds, or None if the marker was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed


# Shared by every engine module
debug = DebugManager()
