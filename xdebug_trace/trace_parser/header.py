"""
Header Parsers - Extract trace metadata from the first lines of a trace.

An Xdebug trace file starts with:
    Version: 2.4.0
    File format: 4
    TRACE START [2017-03-14 14:34:51]

A header that does not match means the file is not a trace at all, so
these parsers raise TraceHeaderError instead of returning zero values.
"""

import re
from datetime import datetime


VERSION_PREFIX = "Version: "
FORMAT_PREFIX = "File format: "
START_PREFIX = "TRACE START ["
START_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
# Width of a "YYYY-MM-DD HH:MM:SS" timestamp
START_TIME_WIDTH = 19

_VERSION_RE = re.compile(re.escape(VERSION_PREFIX) + r"(\d+\.\d+\.\d+)")
_FORMAT_RE = re.compile(re.escape(FORMAT_PREFIX) + r"(\d+)")


class TraceHeaderError(ValueError):
    """Raised when a trace header line does not have the expected shape."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


def parse_version(line: str) -> str:
    """
    Extract the Xdebug version from a ``Version: X.Y.Z`` line.
    
    Args:
        line: First line of the trace
        
    Returns:
        The version string, e.g. "2.4.0"
        
    Raises:
        TraceHeaderError: If the line carries no version
    """
    match = _VERSION_RE.search(line)
    if not match:
        raise TraceHeaderError(f"Missing '{VERSION_PREFIX}X.Y.Z' header: {line!r}", line)
    return match.group(1)


def parse_format(line: str) -> str:
    """
    Extract the file format number from a ``File format: N`` line.
    
    The digits are returned as text; callers decode them with to_int.
    
    Raises:
        TraceHeaderError: If the line carries no file format
    """
    match = _FORMAT_RE.search(line)
    if not match:
        raise TraceHeaderError(f"Missing '{FORMAT_PREFIX}N' header: {line!r}", line)
    return match.group(1)


def parse_start_time(line: str) -> datetime:
    """
    Parse the timestamp of a ``TRACE START [YYYY-MM-DD HH:MM:SS]`` line.
    
    Only the fixed-width timestamp right after the prefix is read; anything
    after it (the closing bracket) is ignored.
    
    Raises:
        TraceHeaderError: If the prefix is missing or the timestamp is invalid
    """
    if not line.startswith(START_PREFIX):
        raise TraceHeaderError(f"Missing '{START_PREFIX}' header: {line!r}", line)
    stamp = line[len(START_PREFIX):len(START_PREFIX) + START_TIME_WIDTH]
    try:
        return datetime.strptime(stamp, START_TIME_FORMAT)
    except ValueError as e:
        raise TraceHeaderError(f"Invalid trace start time {stamp!r}: {e}", line) from e


def is_start_line(line: str) -> bool:
    return line.startswith(START_PREFIX)
