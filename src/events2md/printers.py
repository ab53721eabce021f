#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/printers.py
"""Text sinks used by the Markdown renderer.

A printer is any object with a ``print(text)`` method. The renderer never
writes to a plain printer directly: it wraps each one in a
``MarkdownEscapePrinter`` which separates two kinds of output:

- *markup* (``print()``): Markdown syntax produced by the renderer itself,
  written verbatim;
- *document text* (``print_delayed()``): words and symbols coming from the
  document, buffered and escaped when the next markup is printed or when the
  printer is flushed.

Deferring the escaping until the surrounding context is known lets the
printer apply rules that depend on the preceding character (line start) and
on the following one (intra-word underscores).

"""

from __future__ import annotations

import re
from typing import IO, Protocol

from events2md.constants import ALWAYS_ESCAPED_CHARS, LINE_START_ESCAPED_CHARS

# "1. " at the start of a line would start an ordered list
_ORDERED_LIST_MARKER = re.compile(r"\A(\d+)\.(?=\s|\Z)")


class WikiPrinter(Protocol):
    """Minimal sink interface: append text."""

    def print(self, text: str) -> None: ...


class StringPrinter:
    """In-memory printer accumulating text."""

    def __init__(self) -> None:
        """Initialize an empty buffer."""
        self._parts: list[str] = []

    def print(self, text: str) -> None:
        """Append text to the buffer."""
        self._parts.append(text)

    def to_string(self) -> str:
        """Return everything printed so far."""
        return "".join(self._parts)


class StreamPrinter:
    """Printer writing straight through to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        """Wrap a text stream."""
        self.stream = stream

    def print(self, text: str) -> None:
        """Write text to the stream."""
        self.stream.write(text)


def escape_markdown(text: str, at_line_start: bool = False, escape_pipes: bool = False) -> str:
    """Escape characters that Markdown would interpret as syntax.

    Parameters
    ----------
    text : str
        Document text to escape
    at_line_start : bool, default False
        Whether ``text`` starts at the beginning of a line, where heading,
        quotation, list and setext markers are recognised
    escape_pipes : bool, default False
        Whether to escape ``|`` (needed inside table cells)

    Returns
    -------
    str
        Escaped text

    Notes
    -----
    - Backslash, backticks, asterisks and brackets are always escaped.
    - Underscores are escaped unless they sit between two alphanumeric
      characters (``snake_case`` stays readable).
    - ``#``, ``>``, ``+``, ``-`` and ``=`` are escaped only as the first
      character of a line, and ``1.`` only as the first token of a line.

    Examples
    --------
        >>> escape_markdown("2*3 and snake_case")
        '2\\\\*3 and snake_case'
        >>> escape_markdown("# not a heading", at_line_start=True)
        '\\\\# not a heading'

    """
    escaped_chars = []
    for i, char in enumerate(text):
        if char in ALWAYS_ESCAPED_CHARS or (escape_pipes and char == "|"):
            escaped_chars.append("\\")
            escaped_chars.append(char)
        elif char == "_":
            prev_alnum = i > 0 and text[i - 1].isalnum()
            next_alnum = i < len(text) - 1 and text[i + 1].isalnum()
            if not (prev_alnum and next_alnum):
                escaped_chars.append("\\")
            escaped_chars.append(char)
        elif i == 0 and at_line_start and char in LINE_START_ESCAPED_CHARS:
            escaped_chars.append("\\")
            escaped_chars.append(char)
        else:
            escaped_chars.append(char)

    escaped = "".join(escaped_chars)
    if at_line_start:
        escaped = _ORDERED_LIST_MARKER.sub(r"\1\\.", escaped, count=1)
    return escaped


class MarkdownEscapePrinter:
    """Printer wrapper that escapes document text and tracks line starts.

    Parameters
    ----------
    printer : WikiPrinter
        The printer receiving the final text
    escape_special : bool, default True
        Whether delayed document text is escaped at all
    escape_pipes : bool, default False
        Whether ``|`` is escaped in document text (table cells)

    Examples
    --------
        >>> target = StringPrinter()
        >>> printer = MarkdownEscapePrinter(target)
        >>> printer.print("**")
        >>> printer.print_delayed("a*b")
        >>> printer.print("**")
        >>> target.to_string()
        '**a\\\\*b**'

    """

    def __init__(self, printer: WikiPrinter, escape_special: bool = True, escape_pipes: bool = False) -> None:
        """Wrap a printer."""
        self.printer = printer
        self.escape_special = escape_special
        self.escape_pipes = escape_pipes
        self._pending: list[str] = []
        self._on_new_line = True

    def print(self, text: str) -> None:
        """Flush pending document text, then print markup verbatim."""
        self.flush()
        self._write(text)

    def print_delayed(self, text: str) -> None:
        """Buffer document text; it is escaped when flushed."""
        self._pending.append(text)

    def flush(self) -> None:
        """Escape and print any pending document text."""
        if not self._pending:
            return
        text = "".join(self._pending)
        self._pending.clear()
        if self.escape_special:
            text = escape_markdown(text, at_line_start=self._on_new_line, escape_pipes=self.escape_pipes)
        self._write(text)

    def is_on_new_line(self) -> bool:
        """Return True if the next printed character starts a line."""
        return not self._pending and self._on_new_line

    def set_on_new_line(self, on_new_line: bool) -> None:
        """Override the line-start state, e.g. after a block marker or for a fresh label buffer."""
        self._on_new_line = on_new_line

    def to_string(self) -> str:
        """Flush, then return the text of the wrapped printer.

        Raises
        ------
        TypeError
            If the wrapped printer does not keep its text
        """
        self.flush()
        to_string = getattr(self.printer, "to_string", None)
        if to_string is None:
            raise TypeError(f"{type(self.printer).__name__} does not keep printed text")
        return to_string()

    def _write(self, text: str) -> None:
        if text:
            self.printer.print(text)
            self._on_new_line = text.endswith("\n")
