"""Caller-frame capture.

Locates the source location of the code that requested an error, skipping
the library's own frames. Location data is diagnostic only: when the stack
is too shallow, capture degrades to a sentinel frame instead of raising.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import inspect
import itertools
import traceback
from dataclasses import dataclass
from types import FrameType

from severr.constants import CAPTURE_INTERNAL_FRAMES, UNKNOWN_FUNCTION

__all__ = [
    "UNKNOWN_FRAME",
    "CallerFrame",
    "capture_frame",
]


@dataclass(frozen=True, slots=True)
class CallerFrame:
    """Snapshot of a single stack frame.

    Attributes:
        function: Qualified function name, prefixed by its module
            (e.g. ``"app.service.Worker.run"``)
        file: Source file path as recorded by the code object
        line: Line number executing when the frame was captured
    """

    function: str = UNKNOWN_FUNCTION
    file: str = ""
    line: int = 0

    @classmethod
    def from_frame(cls, frame: FrameType, lineno: int | None) -> CallerFrame:
        code = frame.f_code
        module = frame.f_globals.get("__name__")
        qualname = code.co_qualname
        function = f"{module}.{qualname}" if module else qualname
        return cls(function=function, file=code.co_filename, line=lineno or 0)

    @property
    def is_unknown(self) -> bool:
        return self.function == UNKNOWN_FUNCTION


UNKNOWN_FRAME = CallerFrame()


def _collect_frames(limit: int) -> list[tuple[FrameType, int | None]]:
    """Collect up to ``limit`` frames, innermost (this function) first."""
    return list(itertools.islice(traceback.walk_stack(inspect.currentframe()), limit))


def capture_frame(skip: int) -> CallerFrame:
    """Return the frame ``skip`` levels above the caller of capture_frame.

    ``skip=0`` returns the frame that called capture_frame; each additional
    level steps one caller further out. The two capture frames themselves
    (_collect_frames and capture_frame) are always excluded.

    Never raises: if the stack holds fewer frames than requested, the
    sentinel UNKNOWN_FRAME (function ``"unknown"``) is returned.

    Args:
        skip: Number of frames between the caller and the frame of interest

    Returns:
        Snapshot of the target frame, or UNKNOWN_FRAME on stack underflow
    """
    target = max(skip, 0) + CAPTURE_INTERNAL_FRAMES
    # Room for one more caller than needed
    collected = _collect_frames(target + 2)

    frame = UNKNOWN_FRAME
    for index, (candidate, lineno) in enumerate(collected):
        if index == target:
            frame = CallerFrame.from_frame(candidate, lineno)
            break
    del collected
    return frame
