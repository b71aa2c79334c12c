"""Logging setup and text helpers."""

import logging
import re
import sys
from typing import Any

import structlog

PLACEHOLDERS = frozenset({"", "-"})

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog for console or JSON output."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def squish(text: str | None) -> str | None:
    """Trim and collapse internal whitespace."""
    if text is None:
        return None
    return " ".join(text.split())


def clean_cell(value: Any) -> Any:
    """Squish text and turn placeholder tokens into None."""
    if value is None:
        return None
    if isinstance(value, str):
        value = squish(value)
        return None if value in PLACEHOLDERS else value
    return value


def to_number(value: Any) -> Any:
    """Convert integer-looking text to int, leave anything else as is."""
    value = clean_cell(value)
    if isinstance(value, str) and _INTEGER_RE.match(value):
        return int(value)
    return value
