"""Data loading modules."""

from .loader import load_trace_lines, iter_trace_lines

__all__ = ["load_trace_lines", "iter_trace_lines"]
