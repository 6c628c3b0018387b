"""Two-tier structured logging.

Records below ERROR and records at ERROR or above go to separate handlers
built from one set of options.

Example:
    ```python
    import tierlog

    logger = tierlog.init_default(tierlog.HandlerOptions(level=tierlog.DEBUG))
    logger.info("server started", port=8080)
    logger.error("request failed", err=exc)
    ```
"""

from tierlog.adapters.console import ConsoleHandler
from tierlog.adapters.logging import StdlibBridgeHandler
from tierlog.adapters.memory import RecordingHandler
from tierlog.core.errors import EmissionError
from tierlog.core.levels import CRITICAL, DEBUG, ERROR, INFO, WARN, level_name, parse_level
from tierlog.core.logger import Logger
from tierlog.core.models import Attr, Record, Source, Tinted, tint
from tierlog.core.options import HandlerOptions
from tierlog.core.ports import Handler, ReplaceAttr
from tierlog.core.router import ERROR_THRESHOLD, LevelRouter
from tierlog.default import debug, error, get_default, info, log, set_default, warn
from tierlog.factory import ERROR_COLOR, highlight_errors, init_default, new_logger

__all__ = [
    "CRITICAL",
    "DEBUG",
    "ERROR",
    "ERROR_COLOR",
    "ERROR_THRESHOLD",
    "INFO",
    "WARN",
    "Attr",
    "ConsoleHandler",
    "EmissionError",
    "Handler",
    "HandlerOptions",
    "LevelRouter",
    "Logger",
    "Record",
    "RecordingHandler",
    "ReplaceAttr",
    "Source",
    "StdlibBridgeHandler",
    "Tinted",
    "debug",
    "error",
    "get_default",
    "highlight_errors",
    "info",
    "init_default",
    "level_name",
    "log",
    "new_logger",
    "parse_level",
    "set_default",
    "tint",
    "warn",
]
