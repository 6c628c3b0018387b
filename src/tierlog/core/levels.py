"""Severity levels.

Levels are plain integers on the standard library ``logging`` scale, so
records bridged from ``logging`` keep their numeric level. Any integer is a
valid level; levels between the named ones render as offsets from the
nearest named level below them (``ERROR+4``).
"""

import logging
import re

DEBUG = logging.DEBUG
INFO = logging.INFO
WARN = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

# Ascending; the first entry is also the base for levels below it.
_NAMED_LEVELS: tuple[tuple[int, str], ...] = (
    (DEBUG, "DEBUG"),
    (INFO, "INFO"),
    (WARN, "WARN"),
    (ERROR, "ERROR"),
    (CRITICAL, "CRITICAL"),
)

_NAME_TO_LEVEL = {name: level for level, name in _NAMED_LEVELS}
_NAME_TO_LEVEL["WARNING"] = WARN

_LEVEL_TEXT = re.compile(r"^\s*([A-Za-z]+)\s*(?:([+-])\s*(\d+))?\s*$")


def level_name(level: int) -> str:
    """Return the display name of a level.

    Examples:
        >>> level_name(ERROR)
        'ERROR'
        >>> level_name(ERROR + 4)
        'ERROR+4'
        >>> level_name(INFO - 2)
        'DEBUG+8'
    """
    base, name = _NAMED_LEVELS[0]
    for named_level, named in _NAMED_LEVELS:
        if level >= named_level:
            base, name = named_level, named
    offset = level - base
    if offset == 0:
        return name
    return f"{name}{offset:+d}"


def parse_level(text: str) -> int:
    """Parse a level name or integer string.

    Accepts the names produced by :func:`level_name` (case insensitive,
    ``WARNING`` as an alias of ``WARN``) and decimal integers.

    Raises:
        ValueError: If the text is neither a known name nor an integer.
    """
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass

    match = _LEVEL_TEXT.match(stripped)
    if match is None or match.group(1).upper() not in _NAME_TO_LEVEL:
        raise ValueError(f"unknown log level: {text!r}")

    level = _NAME_TO_LEVEL[match.group(1).upper()]
    if match.group(2):
        offset = int(match.group(3))
        level += offset if match.group(2) == "+" else -offset
    return level
