#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/api.py
"""High-level rendering API.

``render_events()`` renders an in-memory event stream; ``render_json()``
renders a stream stored as JSON (see ``events2md.serialization``). Both build
a fresh renderer per call, so they are safe to call repeatedly.

Examples
--------
    >>> from events2md.events import BeginDocument, BeginParagraph, EndDocument, OnWord
    >>> render_events([BeginDocument(), BeginParagraph(), OnWord("Hi"), EndDocument()])
    'Hi'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from events2md.events import Event
from events2md.exceptions import FileError, FileNotFoundError
from events2md.options.markdown import MarkdownRendererOptions
from events2md.references import ResourceReferenceSerializer
from events2md.renderers.markdown import MarkdownEventRenderer
from events2md.serialization import json_to_events
from events2md.utils.io_utils import write_text

logger = logging.getLogger(__name__)

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def render_events(
    events: Iterable[Event],
    options: Optional[MarkdownRendererOptions] = None,
    *,
    link_serializer: Optional[ResourceReferenceSerializer] = None,
    image_serializer: Optional[ResourceReferenceSerializer] = None,
    output: Optional[OutputTarget] = None,
) -> Optional[str]:
    """Render an event stream to Markdown.

    Parameters
    ----------
    events : iterable of Event
        The events of one document, in order
    options : MarkdownRendererOptions, optional
        Rendering options
    link_serializer : ResourceReferenceSerializer, optional
        Serializer for link targets
    image_serializer : ResourceReferenceSerializer, optional
        Serializer for image sources
    output : str, Path, IO[bytes], IO[str], optional
        Where to write the Markdown. When omitted the text is returned.

    Returns
    -------
    str or None
        The Markdown text, or None when it was written to ``output``

    Raises
    ------
    RenderingError
        If the event stream is not properly nested
    OutputWriteError
        If the output file cannot be written

    """
    renderer = MarkdownEventRenderer(options, link_serializer=link_serializer, image_serializer=image_serializer)
    markdown = renderer.render_to_string(events)
    if output is None:
        return markdown
    write_text(markdown, output)
    logger.debug("Wrote %d characters of Markdown", len(markdown))
    return None


def _read_source(source: Union[str, Path, IO[str], IO[bytes]]) -> str:
    if isinstance(source, Path) or (isinstance(source, str) and not source.lstrip().startswith("[")):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(str(path))
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileError(f"Cannot read event stream: {path}", file_path=str(path), original_error=e) from e
    if isinstance(source, str):
        return source
    data = source.read()
    return data.decode("utf-8") if isinstance(data, bytes) else data


def render_json(
    source: Union[str, Path, IO[str], IO[bytes]],
    options: Optional[MarkdownRendererOptions] = None,
    *,
    link_serializer: Optional[ResourceReferenceSerializer] = None,
    image_serializer: Optional[ResourceReferenceSerializer] = None,
    output: Optional[OutputTarget] = None,
) -> Optional[str]:
    """Render a JSON-serialized event stream to Markdown.

    Parameters
    ----------
    source : str, Path, or file-like
        JSON text (a string starting with ``[``), a path to a JSON file, or a
        readable stream
    options, link_serializer, image_serializer, output
        As for ``render_events()``

    Returns
    -------
    str or None
        The Markdown text, or None when it was written to ``output``

    Raises
    ------
    FileNotFoundError
        If ``source`` names a file that does not exist
    ParsingError
        If the JSON is not a valid event stream

    """
    events = json_to_events(_read_source(source))
    return render_events(
        events,
        options,
        link_serializer=link_serializer,
        image_serializer=image_serializer,
        output=output,
    )
