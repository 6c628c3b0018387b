"""Colorized console handler.

Renders records as single human-readable lines using structlog's
``ConsoleRenderer`` and writes them to a text stream.
"""

import copy
import sys
import threading
from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import datetime
from typing import Any, TextIO

from structlog.dev import Column, ConsoleRenderer, KeyValueColumnFormatter, LogLevelColumnFormatter

from tierlog.core.errors import EmissionError
from tierlog.core.levels import level_name
from tierlog.core.models import Attr, Record, Source, Tinted
from tierlog.core.options import HandlerOptions

_RESET = "\x1b[0m"

# Keys ConsoleRenderer lays out itself; attrs using them get a "_" suffix.
_RESERVED_KEYS = frozenset(
    {
        "event",
        "exc_info",
        "exception",
        "level",
        "logger",
        "logger_name",
        "stack",
        "timestamp",
    }
)


def ansi_color(color: int) -> str:
    """Return the escape sequence selecting an ANSI 256-palette color."""
    if color < 8:
        return f"\x1b[{30 + color}m"
    if color < 16:
        return f"\x1b[{90 + color - 8}m"
    return f"\x1b[38;5;{color}m"


def _columns(colors: bool) -> list[Column]:
    # Values reach the renderer already converted by _display, so every
    # column prints them verbatim instead of repr-quoting them.
    styles = ConsoleRenderer.get_default_column_styles(colors)
    level_styles = {
        name: style + styles.bright for name, style in ConsoleRenderer.get_default_level_styles(colors).items()
    }
    return [
        Column(
            "",
            KeyValueColumnFormatter(
                key_style=styles.kv_key,
                value_style=styles.kv_value,
                reset_style=styles.reset,
                value_repr=str,
            ),
        ),
        Column(
            "timestamp",
            KeyValueColumnFormatter(
                key_style=None,
                value_style=styles.timestamp,
                reset_style=styles.reset,
                value_repr=str,
            ),
        ),
        Column("level", LogLevelColumnFormatter(level_styles, reset_style=styles.reset)),
        Column(
            "event",
            KeyValueColumnFormatter(
                key_style=None,
                value_style=styles.bright,
                reset_style=styles.reset,
                value_repr=str,
                width=30,
            ),
        ),
    ]


class ConsoleHandler:
    """Handler writing colorized lines to a stream.

    Handlers derived through ``with_attrs``/``with_group`` share the stream
    and the write lock of the handler they came from, so lines from any of
    them never interleave.

    Example:
        ```python
        handler = ConsoleHandler(sys.stdout, HandlerOptions(no_color=True))
        Logger(handler).info("ready", port=8080)
        ```
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        options: HandlerOptions | None = None,
        *,
        lock: AbstractContextManager | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            stream: Destination; defaults to ``sys.stderr`` at call time.
            options: Formatting options. Copied, so later changes to the
                caller's instance have no effect.
            lock: Write lock to share with other handlers on the same stream.
        """
        self._stream = sys.stderr if stream is None else stream
        self._options = (options or HandlerOptions()).copy()
        self._lock = lock or threading.Lock()
        self._renderer = ConsoleRenderer(columns=_columns(not self._options.no_color), sort_keys=False)
        self._groups: tuple[str, ...] = ()
        self._preformatted: tuple[tuple[str, str], ...] = ()

    @property
    def options(self) -> HandlerOptions:
        return self._options.copy()

    def enabled(self, level: int) -> bool:
        return level >= self._options.level

    def with_attrs(self, attrs: Sequence[Attr]) -> "ConsoleHandler":
        if not attrs:
            return self
        derived = copy.copy(self)
        derived._preformatted = self._preformatted + tuple(self._resolve_all(attrs))
        return derived

    def with_group(self, name: str) -> "ConsoleHandler":
        if not name:
            return self
        derived = copy.copy(self)
        derived._groups = self._groups + (name,)
        return derived

    def handle(self, record: Record) -> None:
        """Render ``record`` and write it as one line.

        Raises:
            EmissionError: If the stream rejects the write.
        """
        event_dict: dict[str, Any] = {}

        timestamp = self._builtin("time", datetime.fromtimestamp(record.timestamp))
        if timestamp is not None:
            value = timestamp.value
            if isinstance(value, datetime):
                value = value.strftime(self._options.time_format)
            event_dict["timestamp"] = str(value)

        level = self._builtin("level", record.level)
        if level is not None:
            value = level.value
            event_dict["level"] = (level_name(value) if isinstance(value, int) else str(value)).lower()

        message = self._builtin("msg", record.message)
        event_dict["event"] = "" if message is None else self._display(message.value)

        if self._options.add_source and record.source is not None:
            source = self._builtin("source", record.source)
            if source is not None:
                event_dict["source"] = self._display(source.value)

        # An attr named "source" must not overwrite the call-site column.
        taken = "source" in event_dict
        for key, value in (*self._preformatted, *self._resolve_all(record.attrs)):
            if taken and key == "source":
                key = "source_"
            event_dict[key] = value

        line = self._renderer(None, "", event_dict)
        try:
            with self._lock:
                self._stream.write(line + "\n")
        except (OSError, ValueError) as exc:
            raise EmissionError(f"failed to write log record: {exc}") from exc

    def _builtin(self, key: str, value: Any) -> Attr | None:
        attr = Attr(key, value)
        replace_attr = self._options.replace_attr
        if replace_attr is None:
            return attr
        replaced = replace_attr([], attr)
        if replaced is None or not replaced.key:
            return None
        return replaced

    def _resolve_all(self, attrs: Sequence[Attr]) -> list[tuple[str, str]]:
        replace_attr = self._options.replace_attr
        resolved = []
        for attr in attrs:
            if replace_attr is not None:
                replaced = replace_attr(list(self._groups), attr)
                if replaced is None or not replaced.key:
                    continue
                attr = replaced
            key = ".".join(self._groups + (attr.key,))
            if key in _RESERVED_KEYS:
                key += "_"
            resolved.append((key, self._display(attr.value)))
        return resolved

    def _display(self, value: Any) -> str:
        if isinstance(value, Tinted):
            text = self._display(value.value)
            if self._options.no_color:
                return text
            return f"{ansi_color(value.color)}{text}{_RESET}"
        if isinstance(value, str):
            return value
        if isinstance(value, Source):
            return str(value)
        if isinstance(value, BaseException):
            return str(value) or type(value).__name__
        return repr(value)

    def __repr__(self) -> str:
        return f"ConsoleHandler(level={level_name(self._options.level)}, groups={list(self._groups)})"
