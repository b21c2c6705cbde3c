"""Logging collaborator for the `debug` combinator.

A debug logger opens a labelled scope and hands back a handle; closing
the handle ends the scope. The default implementation writes to the
standard `logging` module and indents nested scopes, so traces of
nested parsers read like grouped console output. Any object with the
same `open`/`log` methods can be injected instead.
"""
import logging
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class DebugHandle(Protocol):
    def close(self) -> None: ...


class DebugLogger(Protocol):
    def open(self, label: str) -> DebugHandle: ...

    def log(self, message: str, *args: Any) -> None: ...


class _Group:
    """Handle for one open scope of a LoggingDebugLogger."""

    def __init__(self, owner: 'LoggingDebugLogger'):
        self._owner = owner
        self._closed = False

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._owner.depth -= 1

    def __enter__(self) -> '_Group':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class LoggingDebugLogger:
    """DebugLogger writing indented trace lines to a `logging.Logger`."""

    def __init__(self, target: logging.Logger = logger, level: int = logging.DEBUG, indent: str = "  "):
        self.target = target
        self.level = level
        self.indent = indent
        self.depth = 0

    def open(self, label: str) -> _Group:
        self.log(label)
        self.depth += 1
        return _Group(self)

    def log(self, message: str, *args: Any) -> None:
        if self.target.isEnabledFor(self.level):
            self.target.log(self.level, self.indent * self.depth + message, *args)


_default_logger: DebugLogger = LoggingDebugLogger()


def get_default_logger() -> DebugLogger:
    return _default_logger


def set_default_logger(debug_logger: Optional[DebugLogger]) -> DebugLogger:
    """Install the logger used by `debug` parsers built without one; None restores the default.

    Returns the previously installed logger.
    """
    global _default_logger
    previous = _default_logger
    _default_logger = debug_logger if debug_logger is not None else LoggingDebugLogger()
    return previous
