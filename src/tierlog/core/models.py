"""Core domain models for structured log records."""

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Attr:
    """A key/value pair attached to a record.

    Attributes:
        key: Attribute name. Not required to be unique within a record.
        value: Any value; handlers decide how to render it.
    """

    key: str
    value: Any


@dataclass(frozen=True)
class Tinted:
    """An attribute value that should render in a terminal color.

    Attributes:
        color: ANSI 256-palette index (0-7 standard, 8-15 bright).
        value: The wrapped value.
    """

    color: int
    value: Any

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Source:
    """Call site of a logging call."""

    file: str
    line: int
    function: str = ""

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class Record:
    """A structured log event.

    Records are immutable, so handlers that keep them (for buffering or
    tests) can hold a reference without copying.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Severity level (see ``tierlog.core.levels``).
        message: The log message.
        attrs: Attributes in the order they were supplied.
        source: Call site, when it was captured.
    """

    timestamp: float
    level: int
    message: str
    attrs: tuple[Attr, ...] = field(default_factory=tuple)
    source: Source | None = None

    def with_attrs(self, attrs: tuple[Attr, ...]) -> "Record":
        """Return a copy whose attrs are replaced by ``attrs``."""
        return replace(self, attrs=attrs)


def tint(color: int, attr: Attr) -> Attr:
    """Return a copy of ``attr`` whose value renders in ``color``.

    Handlers without color support render the plain value.
    """
    return Attr(attr.key, Tinted(color, attr.value))


def untinted(value: Any) -> Any:
    """Strip any color wrapping from an attribute value."""
    while isinstance(value, Tinted):
        value = value.value
    return value
