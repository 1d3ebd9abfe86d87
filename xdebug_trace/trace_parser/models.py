"""
Trace models - Parsed call records and the trace that holds them.
"""

from datetime import datetime
from typing import List, Dict, Optional, Tuple
from pydantic import BaseModel, Field


class CallRecord(BaseModel):
    """A single function invocation reconstructed from trace records."""
    depth: int = 0  # 0 is the root level
    time_enter: float = 0.0
    memory_enter: int = 0
    name: str = ""  # Function name or pseudo-name such as "{main}"
    internal: str = ""  # "1" for internal functions, "0" for user code
    file: str = ""
    line: str = ""
    params: List[str] = Field(default_factory=list)
    time_exit: float = 0.0
    memory_exit: int = 0
    time_diff: float = 0.0  # Only set once an exit record is seen
    memory_diff: int = 0
    ret: Optional[str] = None  # Only set by a return record

    @property
    def is_internal(self) -> bool:
        return self.internal == "1"

    @property
    def params_text(self) -> str:
        """Parameters joined for display."""
        return ",".join(self.params)

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"


class XDebugTrace(BaseModel):
    """
    Parsed Xdebug trace.
    
    Calls are stored flat, keyed by record id. Ids are recycled by Xdebug, so
    each id holds the last call written to it. Nesting is not stored; it is
    derived from each record's depth when walking calls by ascending id.
    """
    version: str = ""
    format: int = 0
    start_time: Optional[datetime] = None
    calls: Dict[int, CallRecord] = Field(default_factory=dict)

    def ordered_calls(self) -> List[Tuple[int, CallRecord]]:
        """Return (id, record) pairs sorted by ascending id."""
        return sorted(self.calls.items())

