"""Python logging handler adapter for tierlog.

This adapter bridges Python's standard library logging module to a tierlog
Handler, so records logged through ``logging`` are routed and rendered the
same way as records logged through a tierlog Logger.
"""

import logging
from typing import Any

from tierlog.core.errors import EmissionError
from tierlog.core.models import Attr, Record, Source
from tierlog.core.ports import Handler

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default LogRecord attributes rendered as attrs; the call site goes to Source.
_DEFAULT_INCLUDE_ATTRS = ["name"]


class StdlibBridgeHandler(logging.Handler):
    """Logging handler that forwards log records to a tierlog Handler.

    Example:
        ```python
        from tierlog import StdlibBridgeHandler, new_logger

        bridge = StdlibBridgeHandler(new_logger().handler)
        logging.getLogger().addHandler(bridge)
        ```
    """

    def __init__(
        self,
        handler: Handler,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the bridge with a target handler.

        Args:
            handler: tierlog handler receiving the converted records.
            include_attrs: List of LogRecord attributes to include. Defaults
                to ["name"].
        """
        super().__init__()
        self._handler = handler
        self._include_attrs = _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs

    @property
    def target(self) -> Handler:
        return self._handler

    def to_record(self, record: logging.LogRecord) -> Record:
        """Convert a LogRecord into a tierlog Record."""
        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, Any] = {
            "name": record.name,
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
            "process": record.process,
            "threadName": record.threadName,
        }

        attrs = [Attr(key, attr_mapping[key]) for key in self._include_attrs if key in attr_mapping]

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS:
                attrs.append(Attr(key, value))

        if record.exc_info:
            exc_value = record.exc_info[1]
            if exc_value is not None:
                attrs.append(Attr("err", exc_value))

        source = None
        if record.pathname:
            source = Source(record.pathname, record.lineno, record.funcName or "")

        return Record(
            timestamp=record.created,
            level=record.levelno,
            message=record.getMessage(),
            attrs=tuple(attrs),
            source=source,
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Forward a log record to the tierlog handler.

        Args:
            record: The log record to emit.
        """
        if not self._handler.enabled(record.levelno):
            return
        try:
            self._handler.handle(self.to_record(record))
        except EmissionError:
            self.handleError(record)
