"""Trace parser module - reconstructs call records from Xdebug traces."""

from .models import CallRecord, XDebugTrace
from .header import TraceHeaderError, parse_version, parse_format, parse_start_time
from .records import RecordKind, RecordResult, parse_record, parse_line
from .parser import TraceAssembler, AssemblerStats, parse_content, parse_file

__all__ = [
    "CallRecord",
    "XDebugTrace",
    "TraceHeaderError",
    "parse_version",
    "parse_format",
    "parse_start_time",
    "RecordKind",
    "RecordResult",
    "parse_record",
    "parse_line",
    "TraceAssembler",
    "AssemblerStats",
    "parse_content",
    "parse_file",
]
