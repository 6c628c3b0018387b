"""Handler implementations and the standard library logging bridge."""

from tierlog.adapters.console import ConsoleHandler
from tierlog.adapters.logging import StdlibBridgeHandler
from tierlog.adapters.memory import RecordingHandler

__all__ = [
    "ConsoleHandler",
    "RecordingHandler",
    "StdlibBridgeHandler",
]
