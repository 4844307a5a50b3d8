"""
Utility modules for crashframe.
"""

from crashframe.utils.logging import (
    ContextLoggerAdapter,
    get_logger,
    log_unparsable_frame,
)

__all__ = [
    "ContextLoggerAdapter",
    "get_logger",
    "log_unparsable_frame",
]
