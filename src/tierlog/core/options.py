"""Handler configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from tierlog.core.levels import INFO, parse_level
from tierlog.core.ports import ReplaceAttr

DEFAULT_TIME_FORMAT = "%H:%M:%S"


@dataclass
class HandlerOptions:
    """Formatting options for a console handler.

    Handlers copy the options they are built with, so changing an instance
    afterwards does not affect handlers that already exist.

    Attributes:
        level: Minimum level; records below it are dropped by the handler.
        add_source: Render the call site (``file:line``) of each record.
        no_color: Disable ANSI colors.
        time_format: ``strftime`` format for the record timestamp.
        replace_attr: Optional function rewriting each attribute before it is
            rendered. Called with the open group names and the attribute;
            returning None or an attr with an empty key drops it.
    """

    level: int = INFO
    add_source: bool = False
    no_color: bool = False
    time_format: str = DEFAULT_TIME_FORMAT
    replace_attr: ReplaceAttr | None = None

    def copy(self, **changes: object) -> "HandlerOptions":
        """Return an independent copy with ``changes`` applied."""
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HandlerOptions":
        """Build options from environment variables.

        Recognized variables:
            TIERLOG_LEVEL: Minimum level name or number.
            TIERLOG_TIME_FORMAT: ``strftime`` format.
            NO_COLOR: Any non-empty value disables colors.

        Raises:
            ValueError: If TIERLOG_LEVEL is not a valid level.
        """
        env = os.environ if environ is None else environ
        options = cls()
        if env.get("TIERLOG_LEVEL"):
            options.level = parse_level(env["TIERLOG_LEVEL"])
        if env.get("TIERLOG_TIME_FORMAT"):
            options.time_format = env["TIERLOG_TIME_FORMAT"]
        if env.get("NO_COLOR"):
            options.no_color = True
        return options
