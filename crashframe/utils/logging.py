"""
Logging utilities with context injection.

This module provides:
- Context injection (pattern, stackframe) via LoggerAdapter
- The diagnostic emitted for backtrace lines no grammar understands

Handler and formatter setup is left to the host application.
"""

import logging
from typing import Any, Dict, Optional, MutableMapping


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that injects context fields into all log records.
    
    Fields passed through `extra` on a single call are merged with the
    adapter's own context; the adapter's context wins on conflicts.
    """
    
    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})
    
    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        """
        Process log message and inject context.
        
        Args:
            msg: Log message
            kwargs: Log kwargs
            
        Returns:
            Tuple of (message, kwargs) with context injected
        """
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    """
    Get a context-aware logger for a module.
    
    Args:
        name: Logger name (typically __name__)
        **context: Initial context fields
        
    Returns:
        Context logger adapter
    """
    base_logger = logging.getLogger(name)
    return ContextLoggerAdapter(base_logger, context)


def log_unparsable_frame(
    logger: logging.LoggerAdapter,
    stackframe: str,
    pattern: str
) -> None:
    """
    Report a backtrace line that matched no grammar.
    
    Args:
        logger: Logger to use as the diagnostic sink
        stackframe: Raw backtrace line
        pattern: Name of the grammar selected for the backtrace
    """
    logger.error(
        f"can't parse '{stackframe}' (please file an issue so we can fix it)",
        extra={
            "pattern": pattern,
            "stackframe": stackframe,
        }
    )
