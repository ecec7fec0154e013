"""Callback based logger and a debug object reference counter."""

from __future__ import annotations

import time
from typing import Callable

from .strutil import split_path

__all__ = [
    "Logger",
    "ReferenceCounter",
    "get_logger",
    "logger_time",
    "logger_stamp",
    "INFO_PREFIX",
    "WARNING_PREFIX",
    "ERROR_PREFIX",
]

INFO_PREFIX = "** INFO  **   "
WARNING_PREFIX = "** WARN  **   "
ERROR_PREFIX = "** ERROR **   "
DEBUG_PREFIX = "** DEBUG ** - "


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, ".6g")
    return str(value)


def logger_time() -> str:
    """Return the local time as ``dd/mm/yy HH:MM:SS``."""
    return time.strftime("%d/%m/%y %H:%M:%S", time.localtime())


def logger_stamp(file: str, line: int) -> str:
    """Return ``", <name> [<line>] - "`` with the directory removed from ``file``."""
    name = split_path(file)[1]
    return f", {name} [{line}] - "


class Logger:
    """Sends each finished message to every registered callback."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[str], object]] = []

    def add_callback(self, callback: Callable[[str], object]) -> None:
        """Register a callable that receives every message."""
        self._callbacks.append(callback)

    def out(self, message: str) -> None:
        """Deliver a finished message to all callbacks, in order."""
        for callback in self._callbacks:
            callback(message)

    def write(self, *args: object) -> str:
        """Join the arguments' text forms into one message and send it."""
        message = "".join(_stringify(arg) for arg in args)
        self.out(message)
        return message

    def info(self, *args: object) -> str:
        """Send a message marked as information."""
        return self.write(INFO_PREFIX, *args)

    def warning(self, *args: object) -> str:
        """Send a message marked as a warning."""
        return self.write(WARNING_PREFIX, *args)

    def error(self, *args: object) -> str:
        """Send a message marked as an error."""
        return self.write(ERROR_PREFIX, *args)


_LOGGER = Logger()


def get_logger() -> Logger:
    """Return the process wide logger."""
    return _LOGGER


_PADDING = 7
_RULE = "---------------------------          ----   ----   ----   ----"


def _pad_int(number: int) -> str:
    return str(number).ljust(_PADDING)


class ReferenceCounter:
    """Counts creations and deletions of named objects and reports on them."""

    def __init__(self, logger: Logger | None = None) -> None:
        self.logger = logger if logger is not None else get_logger()
        self.enabled = True
        self.enable_all = True
        self.incremental_log = False
        self.final_detail_log = False
        self._instances: dict[str, int] = {}
        self._max_instances: dict[str, int] = {}
        self._total_new: dict[str, int] = {}
        self._total_delete: dict[str, int] = {}
        self._history: list[str] = []
        self._enabled_names: set[str] = set()
        self._no_log_names: set[str] = set()

    def _tracked(self, name: str) -> bool:
        return self.enable_all or name in self._enabled_names

    def _can_log(self, name: str) -> bool:
        return name not in self._no_log_names

    def _record(self, action: str, name: str) -> None:
        if not self._can_log(name):
            return
        entry = action + name
        self._history.append(entry)
        if self.incremental_log:
            self.logger.write(DEBUG_PREFIX, entry)

    def add_instance(self, name: str) -> None:
        """Count the creation of an object called ``name``."""
        if not self._tracked(name):
            return
        current = self._instances.get(name, 0) + 1
        self._instances[name] = current
        self._max_instances[name] = max(self._max_instances.get(name, 0), current)
        self._total_new[name] = self._total_new.get(name, 0) + 1
        self._record("new:    ", name)

    def remove_instance(self, name: str) -> None:
        """Count the deletion of an object called ``name``."""
        if not self._tracked(name):
            return
        self._instances[name] = self._instances.get(name, 0) - 1
        self._total_delete[name] = self._total_delete.get(name, 0) + 1
        self._record("delete: ", name)

    def report(self) -> list[str]:
        """Log and return a status table of all counted objects."""
        lines = [
            DEBUG_PREFIX + "Object                               New    Del    Max    Now",
            DEBUG_PREFIX + _RULE,
        ]
        t_cur = t_max = t_new = t_del = 0
        for name in sorted(self._instances):
            current = self._instances[name]
            max_instances = self._max_instances.get(name, 0)
            tot_new = self._total_new.get(name, 0)
            tot_del = self._total_delete.get(name, 0)
            t_cur += current
            t_max += max_instances
            t_new += tot_new
            t_del += tot_del
            level = "DEBUG" if current == 0 else "ERROR"
            lines.append(
                f"** {level} ** - Object: "
                + (name + ":").ljust(29)
                + _pad_int(tot_new)
                + _pad_int(tot_del)
                + _pad_int(max_instances)
                + _pad_int(current)
            )
        lines.append(DEBUG_PREFIX + _RULE)
        lines.append(
            DEBUG_PREFIX
            + "Totals:                              "
            + _pad_int(t_new)
            + _pad_int(t_del)
            + _pad_int(t_max)
            + _pad_int(t_cur)
        )
        for line in lines:
            self.logger.out(line)
        return lines

    def history(self) -> list[str]:
        """Log and return the creation and deletion history."""
        lines = [DEBUG_PREFIX + entry for entry in self._history]
        for line in lines:
            self.logger.out(line)
        return lines

    def enable(self, name: str) -> None:
        """Track ``name`` even when not every object is tracked."""
        self._enabled_names.add(name)

    def disable_for_log(self, name: str) -> None:
        """Keep counting ``name`` but leave it out of the history."""
        self._no_log_names.add(name)

    def disable(self) -> None:
        """Suppress the final report written by :meth:`close`."""
        self.enabled = False

    def close(self) -> list[str]:
        """Write the final report and return the lines logged."""
        if not self.enabled:
            return []
        lines: list[str] = []
        if self.final_detail_log:
            header = DEBUG_PREFIX + "*************** Log Of Object Creation and Deletion **************"
            self.logger.out(header)
            lines.append(header)
            lines.extend(self.history())
        status = DEBUG_PREFIX + "********************** Current Object Status *********************"
        self.logger.out(status)
        lines.append(status)
        lines.extend(self.report())
        footer = DEBUG_PREFIX + "******************************************************************"
        self.logger.out(footer)
        lines.append(footer)
        return lines

    def __enter__(self) -> "ReferenceCounter":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()