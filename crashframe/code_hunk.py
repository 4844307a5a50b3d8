"""
Port: CodeHunkProvider

Supplies the few source lines around a file:line for a backtrace frame.
Reading the files is left to the host.
"""

from typing import Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class CodeHunkProvider(Protocol):
    def fetch(self, file: str, line: Optional[int]) -> Optional[Dict[int, str]]:
        """
        Returns the lines around `line` in `file`, keyed by line number,
        or None when the file or line cannot be read.
        """
        ...
