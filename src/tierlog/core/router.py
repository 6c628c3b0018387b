"""Level-based routing between two handlers.

Records below ERROR go to the low-severity handler; ERROR and above go to
the high-severity handler. Attribute and group decorations apply to both.
"""

from collections.abc import Sequence

from tierlog.core.levels import ERROR
from tierlog.core.models import Attr, Record
from tierlog.core.ports import Handler

ERROR_THRESHOLD = ERROR


class LevelRouter:
    """Handler that dispatches each record to one of two handlers by level.

    The threshold is fixed at ERROR (inclusive). Per-tier behavior such as a
    minimum level belongs in how the two handlers are built.

    Example:
        ```python
        from tierlog import LevelRouter, Logger, RecordingHandler

        low, high = RecordingHandler(), RecordingHandler()
        logger = Logger(LevelRouter(low, high))
        logger.error("disk full")  # lands in high
        ```
    """

    __slots__ = ("_low", "_high")

    def __init__(self, low_handler: Handler, high_handler: Handler) -> None:
        """Initialize the router.

        Args:
            low_handler: Receives records below ERROR.
            high_handler: Receives records at ERROR and above.
        """
        self._low = low_handler
        self._high = high_handler

    @property
    def low_handler(self) -> Handler:
        return self._low

    @property
    def high_handler(self) -> Handler:
        return self._high

    def _select(self, level: int) -> Handler:
        if level >= ERROR_THRESHOLD:
            return self._high
        return self._low

    def enabled(self, level: int) -> bool:
        """Ask the handler that would receive a record at ``level``."""
        return self._select(level).enabled(level)

    def handle(self, record: Record) -> None:
        """Forward ``record`` to the handler selected by its level.

        Exceptions raised by that handler propagate unchanged.
        """
        self._select(record.level).handle(record)

    def with_attrs(self, attrs: Sequence[Attr]) -> "LevelRouter":
        """Return a router whose handlers both carry ``attrs``."""
        if not attrs:
            return self
        return LevelRouter(self._low.with_attrs(attrs), self._high.with_attrs(attrs))

    def with_group(self, name: str) -> "LevelRouter":
        """Return a router whose handlers both open group ``name``."""
        if not name:
            return self
        return LevelRouter(self._low.with_group(name), self._high.with_group(name))

    def __repr__(self) -> str:
        return f"LevelRouter(low={self._low!r}, high={self._high!r})"
