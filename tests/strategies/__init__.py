"""Hypothesis strategies for severr property-based testing.

Usage:
    from tests.strategies import messages, severities
    from tests.strategies.errors import VALID_TIME_PATTERNS
"""

from .errors import (
    VALID_TIME_PATTERNS,
    error_configs,
    messages,
    safe_text,
    severities,
    templates_without_severity,
)

__all__ = [
    "VALID_TIME_PATTERNS",
    "error_configs",
    "messages",
    "safe_text",
    "severities",
    "templates_without_severity",
]
