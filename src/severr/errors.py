"""StampedError and its constructors.

A StampedError is an ordinary Exception that additionally carries a
severity, an underlying cause, the caller's source location, and its
creation time. It exposes two textual views that must not be confused:

- ``str(err)``: the raw message, for code treating it as a generic error
- ``err.render()``: the templated string, for human display and logging

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from severr.config import ErrorConfig, get_default_severity
from severr.constants import INDIRECT_CALLER_INDEX
from severr.enums import Severity
from severr.formatter import format_error
from severr.frames import CallerFrame, capture_frame

__all__ = [
    "StampedError",
    "new",
    "new_fatal",
    "new_info",
    "new_warn",
    "wrap",
]

logger = logging.getLogger(__name__)


class StampedError(Exception):
    """Exception enriched with severity, cause, caller location, and timestamp.

    Prefer the module constructors (``new``, ``new_fatal``, ``new_warn``,
    ``new_info``, ``wrap``) which handle printf-style formatting. Direct
    instantiation captures the frame that called the class; subclasses that
    override ``__init__`` should pass ``frame`` explicitly.

    Attributes:
        severity: Severity label (settable; display names are accepted)
        message: Raw message text (settable; also drives ``str(err)``)
        cause: Underlying exception (settable); defaults to
            ``Exception(message)``
        frame: Caller location captured at construction (read-only)
        created: Aware construction timestamp (read-only)
    """

    def __init__(
        self,
        message: str,
        *,
        severity: Severity | str | None = None,
        cause: BaseException | None = None,
        frame: CallerFrame | None = None,
        created: datetime | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._severity = get_default_severity() if severity is None else Severity.parse(severity)
        self._cause = Exception(message) if cause is None else cause
        self._frame = capture_frame(1) if frame is None else frame
        self._created = datetime.now().astimezone() if created is None else created

    @property
    def severity(self) -> Severity:
        return self._severity

    @severity.setter
    def severity(self, value: Severity | str) -> None:
        self._severity = Severity.parse(value)

    @property
    def message(self) -> str:
        return self._message

    @message.setter
    def message(self, value: str) -> None:
        self._message = value
        self.args = (value,)

    @property
    def cause(self) -> BaseException:
        return self._cause

    @cause.setter
    def cause(self, value: BaseException) -> None:
        self._cause = value

    @property
    def frame(self) -> CallerFrame:
        return self._frame

    @property
    def created(self) -> datetime:
        return self._created

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(severity={self._severity.value!r}, message={self._message!r})"

    def render(self, config: ErrorConfig | None = None) -> str:
        """Render through the message template.

        Args:
            config: Explicit configuration; the process-wide one when None

        Returns:
            Decorated string, e.g.
            ``2025-10-27T14:30:00+02:00 Warn : disk full(app.main:12)``
        """
        return format_error(self, config)

    def log(self, target: logging.Logger | None = None, config: ErrorConfig | None = None) -> None:
        """Emit the rendered error at the level matching its severity.

        Fatal maps to CRITICAL; logging it does not terminate the process.

        Args:
            target: Logger to emit on (default: the ``severr`` logger)
            config: Explicit configuration for rendering
        """
        if target is None:
            target = logging.getLogger("severr")
        level = self._severity.log_level
        if target.isEnabledFor(level):
            target.log(level, "%s", self.render(config))


def _format_message(fmt: str, args: tuple[Any, ...]) -> str:
    """Build the message text: verbatim without args, printf-style with them.

    A single non-empty mapping argument is used for ``%(name)s`` lookups,
    as in stdlib logging. Substitution failures never raise; the format is
    kept and the arguments are appended as ``%!(EXTRA ...)``.
    """
    fmt = fmt if isinstance(fmt, str) else _safe_str(fmt)
    if not args:
        return fmt

    values: tuple[Any, ...] | Mapping[str, Any] = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return fmt % values
    # Arguments may run arbitrary __str__/__repr__/__format__ code
    except Exception as e:  # noqa: BLE001
        logger.warning(
            "Cannot format error message %r with %d argument(s): %s",
            fmt,
            len(args),
            type(e).__name__,
        )
        return f"{fmt}%!(EXTRA {', '.join(_safe_repr(arg) for arg in args)})"


def _safe_repr(value: object) -> str:
    """repr() that degrades to ``%!v(PANIC=<ExcType>)`` when __repr__ raises."""
    try:
        return repr(value)
    except Exception as e:  # noqa: BLE001
        return f"%!v(PANIC={type(e).__name__})"


def _safe_str(value: object) -> str:
    """str() that degrades to an empty string, with a warning, when __str__ raises."""
    try:
        return str(value)
    except Exception as e:  # noqa: BLE001
        logger.warning("Cannot convert %s to str: %s", type(value).__name__, type(e).__name__)
        return ""


def _new_error(
    severity: Severity,
    skip: int,
    fmt: str,
    args: tuple[Any, ...],
    cause: BaseException | None = None,
) -> StampedError:
    message = _format_message(fmt, args)
    return StampedError(
        message,
        severity=severity,
        cause=cause,
        frame=capture_frame(skip),
    )


def new(fmt: str, *args: Any) -> StampedError:
    """Create an error stamped with the process-wide default severity.

    Args:
        fmt: Message, or printf-style format when args are given
        *args: Substitution arguments; with none, fmt is used verbatim

    Example:
        >>> err = new("user %s not found", "ada")
        >>> str(err)
        'user ada not found'
        >>> new("100% literal").message
        '100% literal'
    """
    return _new_error(get_default_severity(), INDIRECT_CALLER_INDEX, fmt, args)


def new_fatal(fmt: str, *args: Any) -> StampedError:
    """Create an error stamped Fatal. See ``new``."""
    return _new_error(Severity.FATAL, INDIRECT_CALLER_INDEX, fmt, args)


def new_warn(fmt: str, *args: Any) -> StampedError:
    """Create an error stamped Warn. See ``new``."""
    return _new_error(Severity.WARN, INDIRECT_CALLER_INDEX, fmt, args)


def new_info(fmt: str, *args: Any) -> StampedError:
    """Create an error stamped Info. See ``new``."""
    return _new_error(Severity.INFO, INDIRECT_CALLER_INDEX, fmt, args)


def wrap(exc: BaseException, severity: Severity | str | None = None) -> StampedError:
    """Wrap an existing exception, keeping it as the cause.

    The message is ``str(exc)``, or the exception's class name when that
    is empty or when ``str(exc)`` itself raises. The caller's frame is
    captured as for ``new``.

    Args:
        exc: Exception to wrap
        severity: Severity to stamp (default: process-wide default)

    Example:
        >>> original = KeyError("session")
        >>> err = wrap(original, "Warn")
        >>> err.cause is original
        True
    """
    resolved = get_default_severity() if severity is None else Severity.parse(severity)
    message = _safe_str(exc) or type(exc).__name__
    return _new_error(resolved, INDIRECT_CALLER_INDEX, message, (), cause=exc)
