"""
Trace Parser - Assemble an Xdebug trace into id-keyed call records.

This module handles:
- Reading the trace header (version, file format, start time)
- Feeding body lines through the record parser in order
- Tracking the enter -> exit -> return lifecycle of every id
- Loading and parsing trace files in one call
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Iterable, Union

from .decoders import to_int
from .header import (
    TraceHeaderError,
    parse_version,
    parse_format,
    parse_start_time,
    is_start_line,
)
from .models import CallRecord, XDebugTrace
from .records import RecordKind, RecordResult, parse_line


logger = logging.getLogger(__name__)

# Version, file format, optional blank line, TRACE START
HEADER_LINES = 4

# Kinds that may precede each record kind for the same id
_EXPECTED_PREVIOUS = {
    RecordKind.ENTER: {None, RecordKind.EXIT, RecordKind.RETURN},
    RecordKind.EXIT: {RecordKind.ENTER},
    RecordKind.RETURN: {RecordKind.EXIT},
}


@dataclass
class AssemblerStats:
    """Counters collected while feeding lines."""
    lines: int = 0
    applied: int = 0
    malformed: int = 0
    out_of_order: int = 0


class TraceAssembler:
    """
    Feeds trace body lines into an id -> CallRecord table.
    
    Lines are applied strictly in the order they are fed, and later records
    for an id always overwrite earlier state. Malformed lines are skipped.
    Records that break the enter -> exit -> return order for their id are
    still applied but logged and counted as out of order.
    
    Attributes:
        calls: The id -> CallRecord table being built
        stats: Line counters
    """
    
    def __init__(self):
        self.calls: Dict[int, CallRecord] = {}
        self.stats = AssemblerStats()
        self._states: Dict[int, RecordKind] = {}
    
    def feed_line(self, line: str) -> RecordResult:
        """
        Apply a single body line.
        
        Args:
            line: Raw trace line without its line terminator
            
        Returns:
            RecordResult for the line
        """
        self.stats.lines += 1
        result = parse_line(line, self.calls)
        
        if not result.applied:
            self.stats.malformed += 1
            logger.debug(f"Skipping malformed trace line: {line!r}")
            return result
        
        self.stats.applied += 1
        previous = self._states.get(result.record_id)
        if previous not in _EXPECTED_PREVIOUS[result.kind]:
            self.stats.out_of_order += 1
            logger.warning(
                f"Out-of-order record: {result.kind.name.lower()} for id "
                f"{result.record_id} after {previous.name.lower() if previous else 'nothing'}"
            )
        self._states[result.record_id] = result.kind
        return result
    
    def feed(self, lines: Iterable[str]) -> Dict[int, CallRecord]:
        """Apply every line in order and return the table."""
        for line in lines:
            self.feed_line(line)
        return self.calls


def _find_start_line(lines: List[str]) -> int:
    """Index of the TRACE START line, which follows the two header lines."""
    for index in range(2, HEADER_LINES):
        if is_start_line(lines[index]):
            return index
    raise TraceHeaderError(
        f"Missing 'TRACE START [...]' line: {lines[HEADER_LINES - 1]!r}",
        lines[HEADER_LINES - 1],
    )


def parse_content(lines: List[str]) -> XDebugTrace:
    """
    Parse the lines of an Xdebug trace.
    
    Args:
        lines: All lines of the trace file, header included
        
    Returns:
        XDebugTrace with header fields and the id -> CallRecord table
        
    Raises:
        TraceHeaderError: If the header is missing or malformed
    """
    if len(lines) < HEADER_LINES:
        raise TraceHeaderError(
            f"Trace has {len(lines)} lines, a header needs {HEADER_LINES}"
        )
    
    version = parse_version(lines[0])
    file_format = to_int(parse_format(lines[1]))
    start_index = _find_start_line(lines)
    start_time = parse_start_time(lines[start_index])
    
    assembler = TraceAssembler()
    calls = assembler.feed(lines[start_index + 1:])
    
    stats = assembler.stats
    logger.info(
        f"Parsed trace v{version} (format {file_format}): {len(calls)} calls from "
        f"{stats.lines} lines, {stats.malformed} malformed, {stats.out_of_order} out of order"
    )
    
    return XDebugTrace(
        version=version,
        format=file_format,
        start_time=start_time,
        calls=calls,
    )


def parse_file(filepath: Union[str, Path]) -> XDebugTrace:
    """
    Load and parse an Xdebug trace file (.xt or .xt.gz).
    
    Raises:
        FileNotFoundError: If the file does not exist
        TraceHeaderError: If the header is missing or malformed
    """
    from ..data.loader import load_trace_lines
    
    return parse_content(load_trace_lines(filepath))
