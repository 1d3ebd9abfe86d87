"""
Command line entry point: render an Xdebug trace file as an HTML call tree.

Usage:
    xdebug-trace-html trace.xt
    xdebug-trace-html trace.xt.gz -o out/trace.html --no-assets
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import Settings
from .data import load_trace_lines
from .render import HtmlRenderer, write_lines, write_assets
from .trace_parser import TraceHeaderError, parse_content


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render an Xdebug computerized trace (.xt) as a nested HTML call tree"
    )
    parser.add_argument("trace", type=str, help="Trace file (.xt or .xt.gz)")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="",
        help="HTML file to write (default: <trace>.html)",
    )
    parser.add_argument(
        "--no-assets",
        action="store_true",
        help="Do not copy style.css and script.js next to the output",
    )
    parser.add_argument(
        "--time-precision",
        type=int,
        default=None,
        help="Decimals for rendered times (default: XDEBUG_TRACE_TIME_PRECISION or 6)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = Settings.from_env()
    
    # Configure logging
    level = logging.INFO if args.verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    
    trace_path = Path(args.trace)
    output_path = Path(args.output) if args.output else trace_path.with_name(trace_path.name + ".html")
    
    try:
        lines = load_trace_lines(trace_path)
        trace = parse_content(lines)
    except (FileNotFoundError, TraceHeaderError) as e:
        logger.error(f"Cannot parse {trace_path}: {e}")
        return 1
    
    precision = settings.time_precision if args.time_precision is None else args.time_precision
    renderer = HtmlRenderer(
        stylesheet=settings.stylesheet,
        script=settings.script,
        time_precision=precision,
    )
    write_lines(output_path, renderer.render(trace))
    logger.info(f"Wrote {len(trace.calls)} calls to {output_path}")
    
    if not args.no_assets:
        for asset in write_assets(output_path.parent):
            logger.info(f"Wrote asset {asset}")
    
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
