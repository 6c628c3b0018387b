"""Builders for the two-tier console logger.

``new_logger`` turns one set of base options into two console handlers
behind a LevelRouter:

- below ERROR: the base options without call-site capture
- ERROR and above: the base options with call-site capture, and with
  ``err``/``error`` attributes highlighted in red
"""

import sys
import threading
from collections.abc import Sequence
from typing import TextIO

from tierlog.adapters.console import ConsoleHandler
from tierlog.core.logger import Logger
from tierlog.core.models import Attr, tint
from tierlog.core.options import HandlerOptions
from tierlog.core.ports import ReplaceAttr
from tierlog.core.router import LevelRouter
from tierlog.default import set_default

# Bright red in the ANSI 256-color palette.
ERROR_COLOR = 9
ERROR_KEYS = frozenset({"err", "error"})


def highlight_errors(replace_attr: ReplaceAttr | None = None) -> ReplaceAttr:
    """Wrap ``replace_attr`` so error attributes render in ERROR_COLOR.

    The wrapped function runs first. Highlighting looks at the key it
    returns, so renaming ``err`` to something else turns highlighting off
    for that attr, and renaming another key to ``err`` turns it on. An
    attr dropped by the wrapped function stays dropped.
    """

    def replace(groups: Sequence[str], attr: Attr) -> Attr | None:
        if replace_attr is not None:
            attr = replace_attr(groups, attr)
            if attr is None:
                return None
        if attr.key in ERROR_KEYS:
            return tint(ERROR_COLOR, attr)
        return attr

    return replace


def new_logger(options: HandlerOptions | None = None, *, stream: TextIO | None = None) -> Logger:
    """Build a two-tier logger from one set of base options.

    The caller's options are copied; changing them afterwards does not
    affect the returned logger. Whatever ``add_source`` the caller set is
    overridden per tier.

    Args:
        options: Base options; defaults to ``HandlerOptions()``.
        stream: Destination for both tiers; defaults to ``sys.stderr``.

    Returns:
        Logger over a LevelRouter of two ConsoleHandlers.
    """
    base = HandlerOptions() if options is None else options.copy()
    out = sys.stderr if stream is None else stream
    lock = threading.Lock()

    low_options = base.copy(add_source=False)
    high_options = base.copy(add_source=True, replace_attr=highlight_errors(base.replace_attr))

    return Logger(
        LevelRouter(
            low_handler=ConsoleHandler(out, low_options, lock=lock),
            high_handler=ConsoleHandler(out, high_options, lock=lock),
        )
    )


def init_default(options: HandlerOptions | None = None, *, stream: TextIO | None = None) -> Logger:
    """Build a logger with ``new_logger`` and install it as the default."""
    logger = new_logger(options, stream=stream)
    set_default(logger)
    return logger
