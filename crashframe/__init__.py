"""
crashframe: cross-runtime backtrace parsing for error reports.

Unwinds an error's cause chain and parses each backtrace into structured
frames, optionally enriched with code hunks.
"""

from crashframe.backtrace import CODE_FRAME_LIMIT, BacktraceParser, parse
from crashframe.bridge import detect_runtime, error_record_from_exception
from crashframe.code_hunk import CodeHunkProvider
from crashframe.config import Settings
from crashframe.models import ErrorRecord, ErrorReport, ErrorRuntime, FormatPattern, Frame
from crashframe.nested_error import MAX_NESTED_ERRORS, NestedError, unwind

__all__ = [
    "BacktraceParser",
    "CODE_FRAME_LIMIT",
    "CodeHunkProvider",
    "ErrorRecord",
    "ErrorReport",
    "ErrorRuntime",
    "FormatPattern",
    "Frame",
    "MAX_NESTED_ERRORS",
    "NestedError",
    "Settings",
    "detect_runtime",
    "error_record_from_exception",
    "parse",
    "unwind",
]
