"""Enumerations for severr type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

import logging
from enum import StrEnum

__all__ = ["Severity"]


class Severity(StrEnum):
    """Severity level attached to a StampedError.

    StrEnum provides automatic string conversion: str(Severity.WARN) == "Warn"

    Declaration order is significant: FATAL, WARN, INFO (ordinals 0, 1, 2).
    The level is a label for downstream triage only; FATAL never terminates
    the process.
    """

    FATAL = "Fatal"
    """Unrecoverable condition for the caller's operation."""

    WARN = "Warn"
    """Degraded but recoverable condition."""

    INFO = "Info"
    """Informational error, typically expected by the caller."""

    @property
    def ordinal(self) -> int:
        """Position in declaration order (FATAL=0, WARN=1, INFO=2)."""
        return list(Severity).index(self)

    @property
    def log_level(self) -> int:
        """Matching stdlib logging level."""
        return _LOG_LEVELS[self]

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        """Coerce a member or display name (case-insensitive) to a Severity.

        Args:
            value: Severity member or its display name ("fatal", "Warn", ...)

        Returns:
            Matching Severity member

        Raises:
            ValueError: If value names no severity
        """
        if isinstance(value, Severity):
            return value
        if isinstance(value, str):
            folded = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        msg = f"Unknown severity {value!r}; expected one of {', '.join(cls)}"
        raise ValueError(msg)


_LOG_LEVELS: dict[Severity, int] = {
    Severity.FATAL: logging.CRITICAL,
    Severity.WARN: logging.WARNING,
    Severity.INFO: logging.INFO,
}
