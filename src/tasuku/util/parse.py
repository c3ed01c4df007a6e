import logging

from pyresults import Err, Ok, Result

TRUE_WORDS = ("1", "true", "yes", "on")
FALSE_WORDS = ("0", "false", "no", "off", "")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_int(
    s: str,
    *,
    name: str = "value",
    minimum: int | None = None,
) -> Result[int, str]:
    s = s.strip()
    try:
        value = int(s)
    except ValueError:
        return Err[int, str](f"Invalid {name}: {s!r} (integer expected)")
    if minimum is not None and value < minimum:
        return Err[int, str](f"Invalid {name}: {value} (must be >= {minimum})")
    return Ok[int, str](value)


def parse_bool(s: str, *, name: str = "value") -> Result[bool, str]:
    word = s.strip().lower()
    if word in TRUE_WORDS:
        return Ok[bool, str](True)  # noqa: FBT003
    if word in FALSE_WORDS:
        return Ok[bool, str](False)  # noqa: FBT003
    return Err[bool, str](f"Invalid {name}: {s!r} (on/off expected)")


def parse_log_level(s: str) -> Result[str, str]:
    level = s.strip().upper()
    if level in LOG_LEVELS and isinstance(logging.getLevelName(level), int):
        return Ok[str, str](level)
    return Err[str, str](f"Invalid log level: {s!r} (one of {', '.join(LOG_LEVELS)})")
