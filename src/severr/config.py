"""Process-wide rendering configuration.

Provides a single frozen dataclass bundling the default severity, time
format, message template, and display locale, plus paired getter/setter
functions over one module-level current instance.

Setters swap in a new ErrorConfig built with dataclasses.replace; the
change is visible immediately to every StampedError rendered afterwards,
including errors constructed before the change. The current-config
reference is not lock-guarded: mutate it from one thread, or synchronize
externally.

Callers that prefer to avoid global state can pass an explicit ErrorConfig
to StampedError.render() or format_error().

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from severr.constants import DEFAULT_LOCALE, DEFAULT_MESSAGE_FORMAT, DEFAULT_TIME_FORMAT
from severr.enums import Severity

__all__ = [
    "ErrorConfig",
    "get_config",
    "get_default_severity",
    "get_locale",
    "get_message_format",
    "get_time_format",
    "reset_config",
    "set_config",
    "set_default_severity",
    "set_locale",
    "set_message_format",
    "set_time_format",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ErrorConfig:
    """Immutable configuration for constructing and rendering errors.

    All fields have sensible defaults; constructing ``ErrorConfig()`` with
    no arguments reproduces the library defaults.

    Attributes:
        default_severity: Severity stamped by ``new()`` (default: Info).
        time_format: CLDR datetime pattern used for the {time} token
            (default: RFC 3339, ``yyyy-MM-dd'T'HH:mm:ssXXX``).
        message_format: Template containing any of the {time}, {severity},
            {message}, {func}, {line}, {file} tokens.
        locale: Locale used by Babel for month/day names in {time}
            (default: en_US).

    Example:
        >>> from severr import ErrorConfig, new_warn
        >>> config = ErrorConfig(message_format="{severity}|{message}")
        >>> new_warn("disk %d%% full", 91).render(config)
        'Warn |disk 91% full'
    """

    default_severity: Severity = Severity.INFO
    time_format: str = DEFAULT_TIME_FORMAT
    message_format: str = DEFAULT_MESSAGE_FORMAT
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Display names are accepted for default_severity and coerced to the
        matching Severity member.

        Raises:
            ValueError: If default_severity names no severity.
            TypeError: If time_format, message_format, or locale is not a str.
        """
        # object.__setattr__ required on frozen dataclass
        object.__setattr__(self, "default_severity", Severity.parse(self.default_severity))
        for name in ("time_format", "message_format", "locale"):
            value = getattr(self, name)
            if not isinstance(value, str):
                msg = f"ErrorConfig.{name} must be str, got {type(value).__name__}"
                raise TypeError(msg)


_current = ErrorConfig()


def get_config() -> ErrorConfig:
    """Return the current process-wide configuration."""
    return _current


def set_config(config: ErrorConfig) -> None:
    """Replace the process-wide configuration.

    Raises:
        TypeError: If config is not an ErrorConfig
    """
    global _current  # noqa: PLW0603
    if not isinstance(config, ErrorConfig):
        msg = f"set_config() requires ErrorConfig, got {type(config).__name__}"
        raise TypeError(msg)
    _current = config
    logger.debug("Error config replaced: %r", config)


def reset_config() -> None:
    """Restore the library defaults."""
    set_config(ErrorConfig())


def get_default_severity() -> Severity:
    return _current.default_severity


def set_default_severity(severity: Severity | str) -> None:
    set_config(replace(_current, default_severity=severity))


def get_time_format() -> str:
    return _current.time_format


def set_time_format(time_format: str) -> None:
    set_config(replace(_current, time_format=time_format))


def get_message_format() -> str:
    return _current.message_format


def set_message_format(message_format: str) -> None:
    set_config(replace(_current, message_format=message_format))


def get_locale() -> str:
    return _current.locale


def set_locale(locale: str) -> None:
    set_config(replace(_current, locale=locale))
