"""
Trace Loader - Read Xdebug trace files into lines.

This module handles:
- Plain .xt trace files
- gzip-compressed traces (.xt.gz), as written with xdebug.use_compression
- Stripping line terminators
"""

import gzip
from pathlib import Path
from typing import List, Iterator, Union, TextIO


ENCODING = "utf-8"


def _open_trace(path: Path) -> TextIO:
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding=ENCODING, errors="replace", newline="\n")
    return open(path, "r", encoding=ENCODING, errors="replace", newline="\n")


def iter_trace_lines(filepath: Union[str, Path]) -> Iterator[str]:
    """
    Yield the lines of a trace file without their terminators.
    
    Args:
        filepath: Path to a .xt or .xt.gz file
        
    Yields:
        Each line with "\\n" / "\\r\\n" stripped
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Trace file not found: {path}")
    
    with _open_trace(path) as f:
        for line in f:
            yield line.rstrip("\r\n")


def load_trace_lines(filepath: Union[str, Path]) -> List[str]:
    """Load every line of a trace file into a list."""
    return list(iter_trace_lines(filepath))
