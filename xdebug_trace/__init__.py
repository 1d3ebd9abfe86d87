"""
Xdebug Trace - Rebuild PHP call trees from Xdebug trace files.

Main API:
    from xdebug_trace import parse_file, to_html, write_lines
    
    # Parse a computerized trace (xdebug.trace_format=1)
    trace = parse_file("/tmp/trace.xt")
    
    # Walk calls by id; depth gives the nesting level
    for record_id, call in trace.ordered_calls():
        print(call.depth, call.name, call.time_diff, call.memory_diff)
    
    # Render the call tree as HTML
    write_lines("/tmp/trace.html", to_html(trace))

The parse result consists of:
    - version / format / start_time: from the trace header
    - calls: id -> CallRecord with enter/exit times, memory, params and
      return value
"""

from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

from .trace_parser import (
    CallRecord,
    XDebugTrace,
    TraceHeaderError,
    TraceAssembler,
    parse_content,
    parse_file,
)
from .data import load_trace_lines
from .render import HtmlRenderer, to_html, write_lines, write_assets
from .config import Settings


__all__ = [
    # Parsing
    "CallRecord",
    "XDebugTrace",
    "TraceHeaderError",
    "TraceAssembler",
    "parse_content",
    "parse_file",
    "load_trace_lines",
    # Rendering
    "HtmlRenderer",
    "to_html",
    "write_lines",
    "write_assets",
    # Configuration
    "Settings",
]
