"""Process-wide default logger.

``set_default`` installs a logger for code that logs without holding one
(the module-level ``debug``/``info``/``warn``/``error`` functions and the
standard library ``logging`` module). The last call wins; there is no
unset. Routing and handlers never read this state.
"""

import logging
import threading
from typing import Any

from tierlog.adapters.console import ConsoleHandler
from tierlog.adapters.logging import StdlibBridgeHandler
from tierlog.core.levels import DEBUG, ERROR, INFO, WARN
from tierlog.core.logger import Logger, register_internal_file

register_internal_file(__file__)

_lock = threading.Lock()
_default: Logger | None = None
_bridge: StdlibBridgeHandler | None = None


def get_default() -> Logger:
    """Return the installed default logger.

    Until ``set_default`` is called this is a plain console logger writing
    to stderr at INFO and above.
    """
    global _default
    with _lock:
        if _default is None:
            _default = Logger(ConsoleHandler())
        return _default


def set_default(logger: Logger, *, bridge_stdlib: bool = True) -> None:
    """Install ``logger`` as the process-wide default.

    With ``bridge_stdlib`` the root ``logging`` logger also forwards its
    records to ``logger.handler``. A bridge installed by an earlier call is
    replaced; other root handlers are left alone. The root logger's level
    still decides which stdlib records reach the bridge.
    """
    global _default, _bridge
    with _lock:
        _default = logger
        root = logging.getLogger()
        if _bridge is not None:
            root.removeHandler(_bridge)
            _bridge = None
        if bridge_stdlib:
            _bridge = StdlibBridgeHandler(logger.handler)
            root.addHandler(_bridge)


def log(level: int, message: str, /, **attrs: Any) -> None:
    get_default().log(level, message, **attrs)


def debug(message: str, /, **attrs: Any) -> None:
    get_default().log(DEBUG, message, **attrs)


def info(message: str, /, **attrs: Any) -> None:
    get_default().log(INFO, message, **attrs)


def warn(message: str, /, **attrs: Any) -> None:
    get_default().log(WARN, message, **attrs)


def error(message: str, /, **attrs: Any) -> None:
    get_default().log(ERROR, message, **attrs)
