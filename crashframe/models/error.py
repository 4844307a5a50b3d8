"""Error record data models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class ErrorRuntime(str, Enum):
    """Runtime an error was raised in, decided by the integration layer."""

    NATIVE = "native"
    EMBEDDED_VM = "embedded_vm"
    DATABASE = "database"
    TRANSPILED_SCRIPT = "transpiled_script"


class ErrorRecord(BaseModel):
    """Error to be reported, bridged from the host's exception type."""

    type_name: str
    message: str
    backtrace: Optional[List[str]] = None
    cause: Optional["ErrorRecord"] = None
    runtime: ErrorRuntime = ErrorRuntime.NATIVE


ErrorRecord.model_rebuild()
