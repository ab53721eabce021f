#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Event stream renderers."""

from events2md.renderers.base import BaseRenderer
from events2md.renderers.markdown import MarkdownEventRenderer, format_table

__all__ = ["BaseRenderer", "MarkdownEventRenderer", "format_table"]
