"""Locale utilities for rendering timestamps with Babel.

Centralizes locale normalization and Babel Locale resolution used by the
formatter when rendering the {time} token.

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from severr.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Unknown or malformed locale codes fall back to en_US with a warning,
    so timestamp rendering never fails on a bad locale setting.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object
    """
    from babel import Locale  # noqa: PLC0415
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    try:
        return Locale.parse(normalized)
    except UnknownLocaleError as e:
        logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE)
    except (ValueError, TypeError) as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    return Locale.parse(DEFAULT_LOCALE)
