#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the events2md renderers.

Options are frozen dataclasses; use ``create_updated()`` to derive a modified
copy.
"""

from __future__ import annotations

from events2md.options.base import BaseRendererOptions, CloneFrozenMixin
from events2md.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
]
