"""Port interface for log handlers.

Every sink implements this protocol: the level router, the console handler,
the in-memory recording handler, and any caller-supplied handler. The core
depends only on this interface, not on concrete implementations.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from tierlog.core.models import Attr, Record

# Rewrites an attribute before it is rendered; returning None drops it.
ReplaceAttr = Callable[[Sequence[str], Attr], Attr | None]


@runtime_checkable
class Handler(Protocol):
    """Port for record handling.

    ``with_attrs`` and ``with_group`` never modify the receiver; they return
    a derived handler so loggers holding the original keep their behavior.
    Examples: LevelRouter, ConsoleHandler, RecordingHandler.
    """

    def enabled(self, level: int) -> bool:
        """Report whether a record at ``level`` would be handled."""
        ...

    def handle(self, record: Record) -> None:
        """Emit a record.

        Raises:
            EmissionError: If the record could not be written.
        """
        ...

    def with_attrs(self, attrs: Sequence[Attr]) -> "Handler":
        """Return a handler that adds ``attrs`` to every record."""
        ...

    def with_group(self, name: str) -> "Handler":
        """Return a handler that nests subsequent attrs under ``name``."""
        ...
