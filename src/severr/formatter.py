"""Token-substitution rendering for StampedError.

Replaces the recognized tokens of a message template with fields of an
error. Template, time format, and locale are read at render time, so a
configuration change also affects errors constructed before it.

Substitution is a single left-to-right pass, so a message that itself
contains "{line}" is emitted literally. Rendering never raises: unrecognized
tokens and stray braces pass through untouched, and a time pattern Babel
cannot apply falls back to ISO 8601.

Python 3.11+.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import TYPE_CHECKING

from babel import dates as babel_dates

from severr.config import ErrorConfig, get_config
from severr.constants import (
    NOTATION_FILE,
    NOTATION_FUNC,
    NOTATION_LINE,
    NOTATION_MESSAGE,
    NOTATION_SEVERITY,
    NOTATION_TIME,
    NOTATIONS,
    SEVERITY_WIDTH,
)
from severr.enums import Severity
from severr.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from severr.errors import StampedError

__all__ = [
    "format_error",
    "format_severity",
    "format_time",
]

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile("|".join(re.escape(token) for token in NOTATIONS))


def format_time(value: datetime, pattern: str, locale: str) -> str:
    """Format a timestamp with a CLDR datetime pattern.

    Args:
        value: Timestamp to format (aware datetimes keep their offset)
        pattern: CLDR/LDML pattern, e.g. ``"dd MMM yy HH:mm"``
        locale: Locale code for month and day names

    Returns:
        Formatted timestamp, or ``value.isoformat()`` if Babel rejects
        the pattern

    Example:
        >>> from datetime import UTC, datetime
        >>> format_time(datetime(2025, 10, 27, 14, 30, tzinfo=UTC), "yyyy-MM-dd", "en_US")
        '2025-10-27'
    """
    try:
        return str(
            babel_dates.format_datetime(
                value,
                format=pattern,
                locale=get_babel_locale(locale),
            )
        )
    except (ValueError, OverflowError, AttributeError, KeyError) as e:
        logger.warning("Time format %r failed for %s: %s", pattern, value.isoformat(), e)
        return value.isoformat()


def format_severity(severity: Severity) -> str:
    """Display name left-justified to a fixed width for columnar output."""
    return f"{severity.value:<{SEVERITY_WIDTH}}"


def format_error(error: StampedError, config: ErrorConfig | None = None) -> str:
    """Render an error through the message template.

    Args:
        error: Error to render
        config: Explicit configuration; the process-wide one when None

    Returns:
        Template with every recognized token replaced

    Example:
        >>> from severr import ErrorConfig, new_info
        >>> new_info("disk full").render(ErrorConfig(message_format="[{severity}] {message}"))
        '[Info ] disk full'
    """
    if config is None:
        config = get_config()

    template = config.message_format
    frame = error.frame
    values = {
        NOTATION_SEVERITY: format_severity(error.severity),
        NOTATION_MESSAGE: error.message,
        NOTATION_FILE: frame.file,
        NOTATION_FUNC: frame.function,
        NOTATION_LINE: str(frame.line),
    }
    # Only pay for Babel when the template asks for a timestamp
    if NOTATION_TIME in template:
        values[NOTATION_TIME] = format_time(error.created, config.time_format, config.locale)

    # Single pass: substituted values are never rescanned for tokens
    return _TOKEN_PATTERN.sub(lambda match: values[match.group(0)], template)
