"""
Unwinding of nested errors into reports.

An error's cause chain is followed for at most MAX_NESTED_ERRORS links;
longer chains, cyclic ones included, are cut off silently.
"""

from typing import Any, Dict, List

from crashframe.backtrace import BacktraceParser
from crashframe.models.error import ErrorRecord
from crashframe.models.frame import ErrorReport

# The maximum number of nested errors a report can unwrap.
MAX_NESTED_ERRORS = 3


def unwind(root: ErrorRecord) -> List[ErrorRecord]:
    """
    Collect an error and its causes, most recent first.
    
    Args:
        root: Error that was reported
        
    Returns:
        At most MAX_NESTED_ERRORS errors
    """
    errors: List[ErrorRecord] = []
    error = root
    
    while error is not None and len(errors) < MAX_NESTED_ERRORS:
        errors.append(error)
        error = error.cause
    
    return errors


class NestedError:
    """Represents an error and its causes as report-ready data."""
    
    def __init__(self, error: ErrorRecord, parser: BacktraceParser):
        self.error = error
        self.parser = parser
    
    def unwind_errors(self) -> List[ErrorRecord]:
        return unwind(self.error)
    
    def to_reports(self) -> List[ErrorReport]:
        """
        Build one report per unwound error.
        
        Returns:
            Reports in cause-chain order; an error without backtrace lines
            gets a `None` backtrace
        """
        return [
            ErrorReport(
                type=error.type_name,
                message=error.message,
                backtrace=self._parse_backtrace(error),
            )
            for error in self.unwind_errors()
        ]
    
    def as_json(self) -> List[Dict[str, Any]]:
        return [report.as_json() for report in self.to_reports()]
    
    def _parse_backtrace(self, error: ErrorRecord):
        if not error.backtrace:
            return None
        return self.parser.parse(error)
