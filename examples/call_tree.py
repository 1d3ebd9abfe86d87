"""
Demo: Rebuild and render a PHP call tree from an Xdebug trace.

This example shows how to:
1. Parse a computerized trace with parse_file()
2. Walk the calls by id, using depth for indentation
3. Render the call tree to HTML with its stylesheet and script

Run with:
    python examples/call_tree.py [trace.xt]
"""

import os
import sys

# Add the project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from xdebug_trace import parse_file, to_html, write_lines, write_assets


SAMPLE_TRACE = os.path.join(os.path.dirname(__file__), "sample.xt")
OUTPUT_DIR = os.path.join(os.path.dirname(__file__), "output")


def main():
    trace_path = sys.argv[1] if len(sys.argv) > 1 else SAMPLE_TRACE
    
    print("=" * 60)
    print(f"Xdebug trace: {trace_path}")
    print("=" * 60)
    
    trace = parse_file(trace_path)
    print(f"Version: {trace.version}  File format: {trace.format}  Started: {trace.start_time}")
    print(f"Calls: {len(trace.calls)}")
    print()
    
    # Demo: Call tree as text
    print("-" * 60)
    print("Demo: Call Tree")
    print("-" * 60)
    
    for record_id, call in trace.ordered_calls():
        indent = "  " * call.depth
        ret = f" -> {call.ret}" if call.ret else ""
        print(
            f"{record_id:>4} {indent}{call.name}({call.params_text}){ret}"
            f"  [{call.location}, {call.time_diff:.6f}s, {call.memory_diff:+d} bytes]"
        )
    print()
    
    # Demo: HTML rendering
    print("-" * 60)
    print("Demo: HTML Output")
    print("-" * 60)
    
    output = write_lines(os.path.join(OUTPUT_DIR, "call_tree.html"), to_html(trace))
    write_assets(OUTPUT_DIR)
    print(f"Wrote {output}")
    
    print()
    print("=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
