#  Copyright (c) 2025 Tom Villani, Ph.D.
"""events2md - render document event streams as Markdown.

A parser describes a document as an ordered stream of events (begin/end of
paragraphs, headings, lists, tables, quotations, links and formatting spans;
words, spaces, images, macros and raw text in between). events2md turns such
a stream into Markdown 1.0 source text.

Examples
--------
    >>> from events2md import render_events
    >>> from events2md.events import BeginDocument, BeginList, BeginListItem, EndDocument
    >>> from events2md.events import EndList, EndListItem, OnWord
    >>> print(render_events([
    ...     BeginDocument(),
    ...     BeginList(), BeginListItem(), OnWord("a"), EndListItem(),
    ...     BeginListItem(), OnWord("b"), EndListItem(), EndList(),
    ...     EndDocument(),
    ... ]))
    * a
    * b

"""

from __future__ import annotations

from events2md.api import render_events, render_json
from events2md.events import Event, Format, ListType, ResourceReference, ResourceType
from events2md.exceptions import (
    Events2MdError,
    MarkupParseError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from events2md.options import MarkdownRendererOptions
from events2md.references import MarkdownReferenceSerializer, ResourceReferenceSerializer
from events2md.renderers.markdown import MarkdownEventRenderer
from events2md.state import BlockState, BlockStateTracker

__version__ = "0.1.0"

__all__ = [
    "BlockState",
    "BlockStateTracker",
    "Event",
    "Events2MdError",
    "Format",
    "ListType",
    "MarkdownEventRenderer",
    "MarkdownReferenceSerializer",
    "MarkdownRendererOptions",
    "MarkupParseError",
    "ParsingError",
    "RenderingError",
    "ResourceReference",
    "ResourceReferenceSerializer",
    "ResourceType",
    "ValidationError",
    "__version__",
    "render_events",
    "render_json",
]
