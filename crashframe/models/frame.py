"""Backtrace frame and report data models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class FormatPattern(str, Enum):
    """Stack trace convention a grammar understands."""

    NATIVE = "native"
    EMBEDDED_VM = "embedded_vm"
    DATABASE = "database"
    TRANSPILED_SCRIPT = "transpiled_script"
    GENERIC = "generic"


class Frame(BaseModel):
    """
    One parsed stack entry.
    
    A frame without a file stands for a line no grammar could parse; its
    function then holds the raw line.
    """

    file: Optional[str] = None
    line: Optional[int] = None
    function: Optional[str] = None
    code: Optional[Dict[int, str]] = None

    def as_json(self) -> Dict[str, Any]:
        """Return the frame as a dict, with `code` only when present."""
        data: Dict[str, Any] = {
            "file": self.file,
            "line": self.line,
            "function": self.function,
        }
        if self.code is not None:
            data["code"] = dict(self.code)
        return data


class ErrorReport(BaseModel):
    """One unwound error ready for transmission."""

    type: str
    message: str
    backtrace: Optional[List[Frame]] = None

    def as_json(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "message": self.message,
            "backtrace": (
                [frame.as_json() for frame in self.backtrace]
                if self.backtrace is not None
                else None
            ),
        }
