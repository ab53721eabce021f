#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/base.py
"""Base classes for event stream renderers.

This module defines the abstract base class that event renderers inherit from.
A renderer consumes events one at a time through ``handle()`` and exposes the
whole-stream conveniences ``render()`` and ``render_to_string()`` on top of it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, Union

from events2md.events import Event
from events2md.exceptions import InvalidOptionsError
from events2md.options.base import BaseRendererOptions
from events2md.utils.io_utils import write_text


class BaseRenderer(ABC):
    """Abstract base class for event stream renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from events2md.events import OnWord
        >>> class WordCounter(BaseRenderer):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def handle(self, event):
        ...         if isinstance(event, OnWord):
        ...             self.count += 1
        ...
        ...     def render_to_string(self, events):
        ...         for event in events:
        ...             self.handle(event)
        ...         return str(self.count)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def handle(self, event: Event) -> None:
        """Process a single event.

        Parameters
        ----------
        event : Event
            The next event of the stream, in document order

        Raises
        ------
        RenderingError
            If the event cannot be rendered in the current state

        """
        pass

    @abstractmethod
    def render_to_string(self, events: Iterable[Event]) -> str:
        """Render a complete event stream to a string.

        Parameters
        ----------
        events : iterable of Event
            The events of one document, in order

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, events: Iterable[Event], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a complete event stream and write it to a path or stream.

        Parameters
        ----------
        events : iterable of Event
            The events of one document, in order
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If the output file cannot be written

        """
        write_text(self.render_to_string(events), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
