"""Rendering module - HTML call tree output."""

from .html_tree import HtmlRenderer, to_html
from .writer import write_lines, write_assets

__all__ = ["HtmlRenderer", "to_html", "write_lines", "write_assets"]
