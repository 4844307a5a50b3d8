"""
Base interface for backtrace line grammars.

A grammar decomposes one raw backtrace line into its file, line number and
function parts. Every grammar is tagged with the FormatPattern it implements
so the parser can select it by tag.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from crashframe.models.frame import FormatPattern

FrameCapture = Dict[str, Optional[str]]


class FrameGrammar(ABC):
    """Base interface for a single stack trace convention."""
    
    @property
    @abstractmethod
    def pattern(self) -> FormatPattern:
        """Return the tag of the convention this grammar parses."""
        pass
    
    @abstractmethod
    def match(self, stackframe: str) -> Optional[FrameCapture]:
        """
        Decompose one backtrace line.
        
        Args:
            stackframe: Raw backtrace line
            
        Returns:
            Dict with `file`, `line` and `function` captures (each possibly
            None), or None if the line is not in this convention
        """
        pass


class RegexGrammar(FrameGrammar):
    """
    Grammar made of anchored regex alternatives tried in order.
    
    Alternatives capture the named groups `file`, `line` and `function`.
    Since a single regex cannot repeat a group name, a second function
    capture inside one alternative is named `function_alt`.
    """
    
    def __init__(self, pattern: FormatPattern, alternatives: List[re.Pattern[str]]):
        self._pattern = pattern
        self._alternatives = alternatives
    
    @property
    def pattern(self) -> FormatPattern:
        return self._pattern
    
    def match(self, stackframe: str) -> Optional[FrameCapture]:
        for regexp in self._alternatives:
            match = regexp.match(stackframe)
            if match is None:
                continue
            
            groups = match.groupdict()
            function = groups.get("function")
            if function is None:
                function = groups.get("function_alt")
            return {
                "file": groups.get("file"),
                "line": groups.get("line"),
                "function": function,
            }
        return None
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pattern.value!r})"


def compile_frame_regex(source: str) -> re.Pattern[str]:
    """Compile a verbose, whole-line frame regex."""
    return re.compile(source, re.VERBOSE)
