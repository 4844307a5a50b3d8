"""Data models for the crashframe backtrace core."""

from .error import ErrorRecord, ErrorRuntime
from .frame import ErrorReport, FormatPattern, Frame

__all__ = [
    # Error models
    "ErrorRecord",
    "ErrorRuntime",
    # Frame models
    "Frame",
    "FormatPattern",
    "ErrorReport",
]
