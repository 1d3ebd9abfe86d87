"""
Call Tree Renderer - Render a parsed trace as nested HTML.

Calls are walked by ascending id. Whenever the depth rises a "d" container
is opened for each level, and whenever it falls the extra levels are
closed, so the document nesting follows the depth column. Ids are not
guaranteed to be a pre-order walk of the real call tree, so the nesting is
a best-effort view.
"""

import html
from typing import List, Optional

from ..trace_parser import CallRecord, XDebugTrace


DEFAULT_STYLESHEET = "style.css"
DEFAULT_SCRIPT = "script.js"
DEFAULT_TIME_PRECISION = 6

HEADER_ROW = [
    '<div class="f header">',
    '<div class="func">Function Call</div>',
    '<div class="data">',
    '<span class="file">File:Line</span>',
    '<span class="timediff">ΔTime</span>',
    '<span class="memorydiff">ΔMemory</span>',
    '<span class="time">Time</span>',
    '</div>',
    '</div>',
]


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


class HtmlRenderer:
    """
    Renders an XDebugTrace as a list of HTML lines.
    
    Attributes:
        stylesheet: href of the linked stylesheet
        script: src of the linked script
        time_precision: Decimals used for times
    """
    
    def __init__(
        self,
        stylesheet: str = DEFAULT_STYLESHEET,
        script: str = DEFAULT_SCRIPT,
        time_precision: int = DEFAULT_TIME_PRECISION,
    ):
        self.stylesheet = stylesheet
        self.script = script
        self.time_precision = time_precision
        self._lines: List[str] = []
    
    def _add(self, line: str) -> None:
        self._lines.append(line)
    
    def format_time(self, seconds: float) -> str:
        return f"{seconds:.{self.time_precision}f}"
    
    def render(self, trace: XDebugTrace) -> List[str]:
        """
        Render the whole trace.
        
        Args:
            trace: Parsed trace
            
        Returns:
            HTML lines, without line terminators
        """
        self._lines = []
        
        self._add("<head>")
        self._add(f'<link rel="stylesheet" href="{_escape(self.stylesheet)}" type="text/css">')
        self._add("</head>")
        self._add(f'<script type="text/javascript" src="{_escape(self.script)}"></script>')
        for line in HEADER_ROW:
            self._add(line)
        
        level = 0
        for _, call in trace.ordered_calls():
            if call.depth > level:
                for _ in range(level, call.depth):
                    self._add('<div class="d">')
            elif call.depth < level:
                for _ in range(call.depth, level):
                    self._add("</div>")
            level = call.depth
            self._render_call(call)
        
        for _ in range(level):
            self._add("</div>")
        
        return self._lines
    
    def _render_call(self, call: CallRecord) -> None:
        css_class = "f i" if call.is_internal else "f"
        self._add(f'<div class="{css_class}">')
        
        self._add('<div class="func">')
        self._add(f'<span class="name">{_escape(call.name)}</span>')
        self._add(f'<span class="params short">{_escape(call.params_text)}</span>')
        if call.ret:
            self._add(f'→ <span class="return short">{_escape(call.ret)}</span>')
        self._add("</div>")
        
        location = _escape(call.location)
        self._add('<div class="data">')
        self._add(f'<span class="file" title="{location}">{location}</span>')
        self._add(f'<span class="timediff">{self.format_time(call.time_diff)}</span>')
        self._add(f'<span class="memorydiff">{call.memory_diff}</span>')
        self._add(f'<span class="time">{self.format_time(call.time_enter)}</span>')
        self._add("</div>")
        self._add("</div>")


def to_html(
    trace: XDebugTrace,
    stylesheet: str = DEFAULT_STYLESHEET,
    script: str = DEFAULT_SCRIPT,
    time_precision: Optional[int] = None,
) -> List[str]:
    """Render a trace with a one-off HtmlRenderer."""
    renderer = HtmlRenderer(
        stylesheet=stylesheet,
        script=script,
        time_precision=DEFAULT_TIME_PRECISION if time_precision is None else time_precision,
    )
    return renderer.render(trace)
