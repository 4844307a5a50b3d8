"""
Bridge from Python exceptions to error records.

The runtime tag is decided here, at the integration boundary, from the
package that defined the exception class.
"""

import traceback
from typing import Dict, List, Optional

from crashframe.models.error import ErrorRecord, ErrorRuntime
from crashframe.nested_error import MAX_NESTED_ERRORS

# Top-level packages whose exceptions come from a foreign runtime.
RUNTIME_PACKAGES: Dict[str, ErrorRuntime] = {
    "jpype": ErrorRuntime.EMBEDDED_VM,
    "py4j": ErrorRuntime.EMBEDDED_VM,
    "oracledb": ErrorRuntime.DATABASE,
    "cx_Oracle": ErrorRuntime.DATABASE,
    "execjs": ErrorRuntime.TRANSPILED_SCRIPT,
    "py_mini_racer": ErrorRuntime.TRANSPILED_SCRIPT,
}


def detect_runtime(exc: BaseException) -> ErrorRuntime:
    """
    Tag an exception with the runtime that raised it.
    
    Args:
        exc: Exception to inspect
        
    Returns:
        ErrorRuntime matching the package of any class in the exception's MRO,
        ErrorRuntime.NATIVE otherwise
    """
    for klass in type(exc).__mro__:
        package = klass.__module__.split(".")[0]
        if package in RUNTIME_PACKAGES:
            return RUNTIME_PACKAGES[package]
    return ErrorRuntime.NATIVE


def format_backtrace(exc: BaseException) -> Optional[List[str]]:
    """
    Render an exception's traceback, most recent call first.
    
    Args:
        exc: Exception to render
        
    Returns:
        Backtrace lines in the `file:line:in `function'` convention, or None
        if the exception was never raised
    """
    if exc.__traceback__ is None:
        return None
    
    frames = traceback.extract_tb(exc.__traceback__)
    return [
        f"{frame.filename}:{frame.lineno}:in `{frame.name}'"
        for frame in reversed(list(frames))
    ]


def error_type_name(exc: BaseException) -> str:
    klass = type(exc)
    if klass.__module__ == "builtins":
        return klass.__qualname__
    return f"{klass.__module__}.{klass.__qualname__}"


def error_record_from_exception(
    exc: BaseException,
    max_depth: int = MAX_NESTED_ERRORS,
) -> ErrorRecord:
    """
    Convert an exception and its causes into an ErrorRecord chain.
    
    The cause is the explicit `__cause__`, or the implicit `__context__`
    unless it was suppressed with `raise ... from None`.
    
    Args:
        exc: Exception to convert
        max_depth: Number of chain links to convert; deeper causes are dropped
        
    Returns:
        ErrorRecord for `exc`
    """
    cause = _cause_of(exc)
    return ErrorRecord(
        type_name=error_type_name(exc),
        message=str(exc),
        backtrace=format_backtrace(exc),
        cause=(
            error_record_from_exception(cause, max_depth - 1)
            if cause is not None and max_depth > 1
            else None
        ),
        runtime=detect_runtime(exc),
    )


def _cause_of(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__
