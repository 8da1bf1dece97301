"""Shared constants for severr.

Centralizes the rendering tokens, default configuration values, and the
frame-skip arithmetic used by caller capture. Placing them here avoids
circular imports between the config, frames, and formatter modules.

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template tokens
    "NOTATION_TIME",
    "NOTATION_SEVERITY",
    "NOTATION_MESSAGE",
    "NOTATION_FUNC",
    "NOTATION_LINE",
    "NOTATION_FILE",
    "NOTATIONS",
    # Defaults
    "DEFAULT_MESSAGE_FORMAT",
    "DEFAULT_TIME_FORMAT",
    "DEFAULT_LOCALE",
    "SEVERITY_WIDTH",
    # Frame capture
    "INDIRECT_CALLER_INDEX",
    "CAPTURE_INTERNAL_FRAMES",
    "UNKNOWN_FUNCTION",
]

# ============================================================================
# TEMPLATE TOKENS
# ============================================================================
#
# Literal substrings replaced verbatim by the formatter. They never overlap,
# so substitution order does not matter.

NOTATION_TIME = "{time}"
NOTATION_SEVERITY = "{severity}"
NOTATION_MESSAGE = "{message}"
NOTATION_FUNC = "{func}"
NOTATION_LINE = "{line}"
NOTATION_FILE = "{file}"

NOTATIONS: tuple[str, ...] = (
    NOTATION_TIME,
    NOTATION_SEVERITY,
    NOTATION_MESSAGE,
    NOTATION_FUNC,
    NOTATION_LINE,
    NOTATION_FILE,
)

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_MESSAGE_FORMAT = (
    f"{NOTATION_TIME} {NOTATION_SEVERITY}: {NOTATION_MESSAGE}({NOTATION_FUNC}:{NOTATION_LINE})"
)

# RFC 3339 expressed as a CLDR pattern (XXX renders "Z" for UTC, "+02:00" otherwise)
DEFAULT_TIME_FORMAT = "yyyy-MM-dd'T'HH:mm:ssXXX"

DEFAULT_LOCALE = "en_US"

# Minimum width of the rendered severity name; "Fatal" is the longest
SEVERITY_WIDTH = 5

# ============================================================================
# FRAME CAPTURE
# ============================================================================
#
# Frame layout at capture time, innermost first:
#   0: _collect_frames   (stack-capture primitive)
#   1: capture_frame     (frame-extraction helper)
#   2: _new_error        (shared internal constructor)
#   3: new / new_fatal / new_warn / new_info / wrap
#   4: external caller   <- target
#
# INDIRECT_CALLER_INDEX covers frames 2 and 3; CAPTURE_INTERNAL_FRAMES covers 0 and 1.

INDIRECT_CALLER_INDEX = 2
CAPTURE_INTERNAL_FRAMES = 2

UNKNOWN_FUNCTION = "unknown"
