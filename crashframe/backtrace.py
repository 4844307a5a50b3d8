"""
Backtrace parser for cross-runtime stack traces.

Turns an error's raw backtrace lines into Frame records. The grammar is
chosen once per error from its runtime tag and first line; every line that
grammar rejects is retried with the generic grammar before it is reported
as unparsable. Parsing never raises.

Example:
    parser = BacktraceParser(settings, code_hunk=provider)
    frames = parser.parse(error_record)
"""

import logging
from typing import List, Optional

from crashframe.code_hunk import CodeHunkProvider
from crashframe.config import Settings
from crashframe.config import settings as default_settings
from crashframe.grammars.base import FrameGrammar
from crashframe.grammars.registry import GrammarRegistry, create_default_registry
from crashframe.models.error import ErrorRecord, ErrorRuntime
from crashframe.models.frame import FormatPattern, Frame
from crashframe.utils.logging import get_logger, log_unparsable_frame


# How many leading frames get code hunks when no project root is set.
CODE_FRAME_LIMIT = 10

# Shared by every parser built without its own registry.
DEFAULT_REGISTRY = create_default_registry()


class BacktraceParser:
    """
    Parses error backtraces into frames and attaches code hunks.
    
    A parser holds no state between calls, so one instance can be shared
    across threads as long as its code hunk provider is reentrant.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        code_hunk: Optional[CodeHunkProvider] = None,
        logger: Optional[logging.LoggerAdapter] = None,
        registry: Optional[GrammarRegistry] = None,
    ):
        """
        Initialize the parser.
        
        Args:
            settings: Code hunk settings; the environment-loaded ones by default
            code_hunk: Provider of source excerpts; no enrichment without one
            logger: Diagnostic sink for unparsable lines
            registry: Grammars to select from; built-in ones by default
        """
        self.settings = settings if settings is not None else default_settings
        self.code_hunk = code_hunk
        self.logger = logger if logger is not None else get_logger(__name__)
        self.registry = registry or DEFAULT_REGISTRY
    
    def parse(self, error: ErrorRecord) -> List[Frame]:
        """
        Parse an error's backtrace.
        
        Args:
            error: Error whose backtrace should be parsed
            
        Returns:
            One Frame per backtrace line, in backtrace order; empty if the
            error carries no backtrace
        """
        if not error.backtrace:
            return []
        
        grammar = self.registry.get(self.best_pattern_for(error))
        root_directory = self.settings.project_root or ""
        
        frames = []
        for index, stackframe in enumerate(error.backtrace):
            frame = self._stack_frame(grammar, stackframe)
            frames.append(frame)
            
            if not self.settings.code_hunks_enabled or frame.file is None:
                continue
            
            if root_directory:
                if self._frame_in_root(frame, root_directory):
                    self._populate_code(frame)
            elif index < CODE_FRAME_LIMIT:
                self._populate_code(frame)
        
        return frames
    
    def best_pattern_for(self, error: ErrorRecord) -> FormatPattern:
        """
        Classify the stack trace convention of an error's backtrace.
        
        Args:
            error: Error to classify
            
        Returns:
            The FormatPattern whose grammar should parse the backtrace
        """
        if self._is_embedded_vm_error(error):
            return FormatPattern.EMBEDDED_VM
        if error.runtime == ErrorRuntime.DATABASE:
            return FormatPattern.DATABASE
        if self._is_transpiled_script_error(error):
            return FormatPattern.TRANSPILED_SCRIPT
        return FormatPattern.NATIVE
    
    def _is_embedded_vm_error(self, error: ErrorRecord) -> bool:
        if error.runtime == ErrorRuntime.EMBEDDED_VM:
            return True
        if not error.backtrace:
            return False
        
        grammar = self.registry.get(FormatPattern.EMBEDDED_VM)
        return grammar.match(error.backtrace[0]) is not None
    
    def _is_transpiled_script_error(self, error: ErrorRecord) -> bool:
        if error.runtime == ErrorRuntime.TRANSPILED_SCRIPT:
            return True
        cause = error.cause
        return cause is not None and cause.runtime == ErrorRuntime.TRANSPILED_SCRIPT
    
    def _stack_frame(self, grammar: FrameGrammar, stackframe: str) -> Frame:
        capture = grammar.match(stackframe)
        if capture is None:
            capture = self.registry.get(FormatPattern.GENERIC).match(stackframe)
        
        if capture is None:
            log_unparsable_frame(self.logger, stackframe, grammar.pattern.value)
            return Frame(file=None, line=None, function=stackframe)
        
        return Frame(
            file=capture["file"],
            line=_parse_line_number(capture["line"]),
            function=capture["function"],
        )
    
    def _frame_in_root(self, frame: Frame, root_directory: str) -> bool:
        if not frame.file.startswith(root_directory):
            return False
        return not any(vendor in frame.file for vendor in self.settings.vendor_paths)
    
    def _populate_code(self, frame: Frame) -> None:
        if self.code_hunk is None:
            return
        
        try:
            code = self.code_hunk.fetch(frame.file, frame.line)
        except Exception as e:
            self.logger.warning(f"Failed to fetch code hunk for {frame.file}:{frame.line}: {e}")
            return
        
        if code:
            frame.code = code


def _parse_line_number(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None


def parse(
    settings: Settings,
    error: ErrorRecord,
    code_hunk: Optional[CodeHunkProvider] = None,
    logger: Optional[logging.LoggerAdapter] = None,
) -> List[Frame]:
    """
    Parse an error's backtrace with a one-off parser.
    
    Args:
        settings: Code hunk settings
        error: Error whose backtrace should be parsed
        code_hunk: Provider of source excerpts
        logger: Diagnostic sink for unparsable lines
        
    Returns:
        List of parsed frames
    """
    return BacktraceParser(settings, code_hunk=code_hunk, logger=logger).parse(error)
