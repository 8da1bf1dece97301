"""Quickstart example for severr.

Demonstrates the constructors, the two textual views, process-wide
configuration, and logging by severity.
"""

import logging

import severr
from severr import ErrorConfig, Severity

logging.basicConfig(level=logging.DEBUG, format="%(levelname)-8s %(name)s: %(message)s")


def load_settings(path: str) -> severr.StampedError:
    return severr.new_warn("settings file %s missing, using defaults", path)


# Example 1: Constructors and views
print("=" * 50)
print("Example 1: Raw message vs. rendered string")
print("=" * 50)

err = load_settings("/etc/app.toml")
print(str(err))
# Output: settings file /etc/app.toml missing, using defaults
print(err.render())
# Output: 2025-10-27T14:30:00+02:00 Warn : settings file ... (__main__.load_settings:19)
print(err.frame)

# Example 2: Literal percent signs without arguments
print("\n" + "=" * 50)
print("Example 2: Verbatim messages")
print("=" * 50)

print(severr.new_info("upload 100% complete").message)
# Output: upload 100% complete

# Example 3: Process-wide configuration
print("\n" + "=" * 50)
print("Example 3: Changing template, time format, and locale")
print("=" * 50)

severr.set_message_format("[{severity}] {time} {message} ({file}:{line})")
severr.set_time_format("EEEE d MMMM HH:mm")
severr.set_locale("de_DE")
print(err.render())  # existing errors pick up the new configuration
severr.reset_config()

severr.set_default_severity(Severity.FATAL)
print(severr.new("default severity is now %s", severr.get_default_severity()).render())
severr.reset_config()

# Example 4: Explicit configuration, no globals
print("\n" + "=" * 50)
print("Example 4: Explicit ErrorConfig")
print("=" * 50)

compact = ErrorConfig(message_format="{severity}|{func}|{message}")
print(err.render(compact))

# Example 5: Wrapping and logging
print("\n" + "=" * 50)
print("Example 5: Wrap an exception and log it")
print("=" * 50)

try:
    int("forty-two")
except ValueError as e:
    wrapped = severr.wrap(e, Severity.FATAL)

print(repr(wrapped.cause))
wrapped.log()  # emitted at CRITICAL; the process keeps running
