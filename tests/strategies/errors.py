"""Hypothesis strategies for severr domain testing.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - err_severity: Severity drawn (Fatal|Warn|Info)
    - err_msg_kind: Message shape (plain|percent|braces)
    - err_template_tokens: Number of recognized tokens in a template
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st

from severr import ErrorConfig, Severity
from severr.constants import NOTATIONS

# Literal text that cannot form a token or a severity display name
_SAFE_ALPHABET = string.ascii_lowercase + string.digits + " -_:|[]()"

# CLDR patterns Babel accepts
VALID_TIME_PATTERNS: tuple[str, ...] = (
    "yyyy-MM-dd'T'HH:mm:ssXXX",
    "dd MMM yy HH:mm",
    "EEE, dd MMM yyyy HH:mm:ss",
    "HH:mm:ss.SSS",
    "yyyy-MM-dd",
)


@st.composite
def severities(draw: st.DrawFn) -> Severity:
    """Generate a Severity member."""
    severity = draw(st.sampled_from(list(Severity)))
    event(f"err_severity={severity.value}")
    return severity


@st.composite
def messages(draw: st.DrawFn) -> str:
    """Generate message text, biased towards format-like characters.

    Percent signs and braces must survive construction verbatim when no
    arguments are supplied.
    """
    kind = draw(st.sampled_from(["plain", "percent", "braces"]))
    event(f"err_msg_kind={kind}")
    base = draw(st.text(max_size=80))
    match kind:
        case "percent":
            spec = draw(st.sampled_from(["%s", "%d", "%c", "%*d", "%.*f", "%(name)s", "%%", "%"]))
            return base + spec
        case "braces":
            token = draw(st.sampled_from([*NOTATIONS, "{", "}", "{unknown}"]))
            return token + base
        case _:
            return base


safe_text = st.text(alphabet=_SAFE_ALPHABET, max_size=20)


@st.composite
def templates_without_severity(draw: st.DrawFn) -> str:
    """Generate templates from safe literals and every token except {severity}."""
    tokens = [token for token in NOTATIONS if token != "{severity}"]
    chosen = draw(st.lists(st.sampled_from(tokens), max_size=6))
    event(f"err_template_tokens={len(chosen)}")
    parts = [draw(safe_text)]
    for token in chosen:
        parts.append(token)
        parts.append(draw(safe_text))
    return "".join(parts)


@st.composite
def error_configs(draw: st.DrawFn) -> ErrorConfig:
    """Generate explicit configurations."""
    return ErrorConfig(
        default_severity=draw(severities()),
        time_format=draw(st.sampled_from(VALID_TIME_PATTERNS)),
        message_format=draw(st.text(max_size=60)),
        locale=draw(st.sampled_from(["en_US", "de_DE", "fr", "ja"])),
    )
