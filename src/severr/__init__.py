"""severr - exceptions stamped with severity, caller location, and time.

Enhances Python's native exception with a severity level, a creation
timestamp, the captured call site, and a configurable human-readable
rendering.

Public API:
    new, new_fatal, new_warn, new_info - printf-style constructors
    wrap - Stamp an existing exception, keeping it as the cause
    StampedError - Exception subclass carrying the metadata
    Severity - Fatal / Warn / Info
    ErrorConfig - Immutable rendering configuration

Process-wide configuration:
    get_/set_default_severity, get_/set_time_format,
    get_/set_message_format, get_/set_locale,
    get_config, set_config, reset_config

Example:
    >>> import severr
    >>> err = severr.new_warn("retrying %s in %ds", "upload", 5)
    >>> str(err)
    'retrying upload in 5s'
    >>> severr.set_message_format("{severity} {message}")
    >>> err.render()
    'Warn  retrying upload in 5s'
"""

from .config import (
    ErrorConfig,
    get_config,
    get_default_severity,
    get_locale,
    get_message_format,
    get_time_format,
    reset_config,
    set_config,
    set_default_severity,
    set_locale,
    set_message_format,
    set_time_format,
)
from .constants import (
    NOTATION_FILE,
    NOTATION_FUNC,
    NOTATION_LINE,
    NOTATION_MESSAGE,
    NOTATION_SEVERITY,
    NOTATION_TIME,
)
from .enums import Severity
from .errors import StampedError, new, new_fatal, new_info, new_warn, wrap
from .formatter import format_error
from .frames import CallerFrame, capture_frame

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("severr")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NOTATION_FILE",
    "NOTATION_FUNC",
    "NOTATION_LINE",
    "NOTATION_MESSAGE",
    "NOTATION_SEVERITY",
    "NOTATION_TIME",
    "CallerFrame",
    "ErrorConfig",
    "Severity",
    "StampedError",
    "__version__",
    "capture_frame",
    "format_error",
    "get_config",
    "get_default_severity",
    "get_locale",
    "get_message_format",
    "get_time_format",
    "new",
    "new_fatal",
    "new_info",
    "new_warn",
    "reset_config",
    "set_config",
    "set_default_severity",
    "set_locale",
    "set_message_format",
    "set_time_format",
    "wrap",
]
