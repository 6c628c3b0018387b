"""Logger facade over a Handler."""

import os
import sys
import time
from types import FrameType
from typing import Any

from tierlog.core.errors import EmissionError
from tierlog.core.levels import CRITICAL, DEBUG, ERROR, INFO, WARN
from tierlog.core.models import Attr, Record, Source
from tierlog.core.ports import Handler

# Frames from these files are skipped when looking for the call site.
_INTERNAL_FILES: set[str] = {os.path.normcase(__file__)}


def register_internal_file(path: str) -> None:
    """Treat frames from ``path`` as logging internals, not call sites."""
    _INTERNAL_FILES.add(os.path.normcase(path))


def _caller_source() -> Source | None:
    frame: FrameType | None = sys._getframe(1)
    while frame is not None:
        filename = frame.f_code.co_filename
        if os.path.normcase(filename) not in _INTERNAL_FILES:
            return Source(filename, frame.f_lineno, frame.f_code.co_name)
        frame = frame.f_back
    return None


def _exception_from(exc_info: Any) -> BaseException | None:
    if isinstance(exc_info, BaseException):
        return exc_info
    if exc_info:
        return sys.exc_info()[1]
    return None


class Logger:
    """Emits records at named severities through a handler.

    Loggers are cheap, immutable wrappers: ``with_attrs`` and ``with_group``
    return new loggers over derived handlers.

    Example:
        ```python
        logger = tierlog.new_logger()
        request_log = logger.with_attrs(request_id="abc123")
        request_log.info("request served", status=200)
        ```
    """

    __slots__ = ("_handler",)

    def __init__(self, handler: Handler) -> None:
        self._handler = handler

    @property
    def handler(self) -> Handler:
        return self._handler

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(level)

    def with_attrs(self, **attrs: Any) -> "Logger":
        """Return a logger that adds ``attrs`` to every record."""
        if not attrs:
            return self
        return Logger(self._handler.with_attrs([Attr(k, v) for k, v in attrs.items()]))

    def with_group(self, name: str) -> "Logger":
        """Return a logger whose later attrs are nested under ``name``."""
        if not name:
            return self
        return Logger(self._handler.with_group(name))

    def log(self, level: int, message: str, /, *, exc_info: Any = None, **attrs: Any) -> None:
        """Emit a record at ``level``.

        The record is only built when the handler is enabled for ``level``.
        Emission failures are dropped; a logging call never raises because
        output could not be written.

        Args:
            level: Severity level.
            message: The log message.
            exc_info: An exception, or a true value to attach the exception
                currently being handled, as the ``err`` attr.
            **attrs: Additional structured fields, in call order.
        """
        if not self._handler.enabled(level):
            return
        record_attrs = [Attr(k, v) for k, v in attrs.items()]
        exc = _exception_from(exc_info)
        if exc is not None:
            record_attrs.append(Attr("err", exc))
        record = Record(
            timestamp=time.time(),
            level=level,
            message=message,
            attrs=tuple(record_attrs),
            source=_caller_source(),
        )
        try:
            self._handler.handle(record)
        except EmissionError:
            return

    def debug(self, message: str, /, **attrs: Any) -> None:
        self.log(DEBUG, message, **attrs)

    def info(self, message: str, /, **attrs: Any) -> None:
        self.log(INFO, message, **attrs)

    def warn(self, message: str, /, **attrs: Any) -> None:
        self.log(WARN, message, **attrs)

    warning = warn

    def error(self, message: str, /, **attrs: Any) -> None:
        self.log(ERROR, message, **attrs)

    def critical(self, message: str, /, **attrs: Any) -> None:
        self.log(CRITICAL, message, **attrs)

    def __repr__(self) -> str:
        return f"Logger({self._handler!r})"
