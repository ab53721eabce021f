#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/markdown.py
"""Markdown 1.0 rendering from a document event stream.

This module provides the MarkdownEventRenderer class which converts document
events to Markdown text as they arrive.

Most events can be written out immediately. A few constructs need to see
their whole content first:

- setext headings underline the text with as many ``=``/``-`` as it has
  characters;
- tables pad every cell to the width of the widest cell of its column;
- links need to know whether their label is empty.

For those, the renderer pushes a fresh printer on its printer stack when the
construct begins and pops it, with the captured text, when it ends. The
document printer at the bottom of the stack is never popped.

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional

from events2md.abbreviations import parse_abbreviation
from events2md.constants import (
    ABBREVIATION_TAG_PREFIX,
    BACKTICK,
    BULLETED_LIST_MARKER,
    CODE_MACRO_ID,
    CODE_MACRO_LANGUAGE_PARAMETER,
    DEFINITION_DESCRIPTION_PREFIX,
    HARD_LINE_BREAK,
    HORIZONTAL_RULE,
    IMAGE_ALT_PARAMETER,
    MARKDOWN_INDENT,
    NUMBERED_LIST_MARKER,
    SPECIAL_SYMBOL_MARKUP,
    TRIPLE_BACKTICK,
)
from events2md.events import (
    BeginDefinitionDescription,
    BeginDefinitionList,
    BeginDefinitionTerm,
    BeginDocument,
    BeginFormat,
    BeginHeader,
    BeginLink,
    BeginList,
    BeginListItem,
    BeginParagraph,
    BeginQuotation,
    BeginQuotationLine,
    BeginTable,
    BeginTableCell,
    BeginTableRow,
    EndDefinitionDescription,
    EndDefinitionList,
    EndDefinitionTerm,
    EndDocument,
    EndFormat,
    EndHeader,
    EndLink,
    EndList,
    EndListItem,
    EndParagraph,
    EndQuotation,
    EndQuotationLine,
    EndTable,
    EndTableCell,
    EndTableRow,
    Event,
    Format,
    ListType,
    OnHorizontalLine,
    OnImage,
    OnMacro,
    OnNewLine,
    OnRawText,
    OnSpace,
    OnSpecialSymbol,
    OnWord,
)
from events2md.exceptions import MarkupParseError, RenderingError
from events2md.macros import render_macro_call
from events2md.options.markdown import MarkdownRendererOptions
from events2md.printers import MarkdownEscapePrinter, StringPrinter, WikiPrinter
from events2md.references import MarkdownReferenceSerializer, MarkdownResourceRenderer, ResourceReferenceSerializer
from events2md.renderers.base import BaseRenderer
from events2md.state import BlockState, BlockStateTracker

logger = logging.getLogger(__name__)

_FORMAT_MARKERS: dict[Format, tuple[str, str]] = {
    Format.BOLD: ("**", "**"),
    Format.ITALIC: ("_", "_"),
    Format.STRIKEOUT: ("~~", "~~"),
    Format.UNDERLINE: ("__", "__"),
    Format.SUPERSCRIPT: ("<sup>", "</sup>"),
    Format.SUBSCRIPT: ("<sub>", "</sub>"),
    Format.MONOSPACE: (BACKTICK, BACKTICK),
    Format.NONE: ("", ""),
}

_LINE_SEPARATOR = re.compile(r"\r?\n")


def _split_code_lines(content: str) -> list[str]:
    """Split macro content into lines, dropping trailing empty lines."""
    lines = _LINE_SEPARATOR.split(content)
    while len(lines) > 1 and not lines[-1]:
        lines.pop()
    return lines


def _format_table_row(cells: list[str], column_widths: list[int], fill: str, show_text: bool) -> str:
    parts = ["|"]
    for cell, width in zip(cells, column_widths):
        before = (width - len(cell)) // 2
        after = width - len(cell) - before
        body = cell if show_text else fill * len(cell)
        parts.append(f" {fill * before}{body}{fill * after} |")
    return "".join(parts)


def format_table(rows: list[list[str]]) -> str:
    """Lay out rendered cell texts as a Markdown table.

    Every cell is centered in the width of the widest cell of its column, and
    a separator row of dashes follows the first (header) row. Rows shorter
    than the widest row are rendered with their own cells only.

    Parameters
    ----------
    rows : list of list of str
        Rendered (already escaped) cell texts, row by row

    Returns
    -------
    str
        Table lines joined by newlines, without a trailing newline

    Examples
    --------
        >>> print(format_table([["Name", "Age"], ["Al", "9"]]))
        | Name | Age |
        | ---- | --- |
        |  Al  |  9  |

    """
    column_count = max((len(row) for row in rows), default=0)
    column_widths = [0] * column_count
    for row in rows:
        for index, cell in enumerate(row):
            column_widths[index] = max(column_widths[index], len(cell))

    lines = []
    for index, row in enumerate(rows):
        lines.append(_format_table_row(row, column_widths, " ", show_text=True))
        if index == 0:
            lines.append(_format_table_row(row, column_widths, "-", show_text=False))
    return "\n".join(lines)


class MarkdownEventRenderer(BaseRenderer):
    """Render document events to Markdown 1.0 text.

    Events are delivered one at a time with ``handle()``; the block nesting
    state the rendering depends on is tracked from the same events unless an
    externally maintained ``block_state`` is supplied.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options
    link_serializer : ResourceReferenceSerializer or None, default = None
        Serializer for link targets (defaults to MarkdownReferenceSerializer)
    image_serializer : ResourceReferenceSerializer or None, default = None
        Serializer for image sources (defaults to MarkdownReferenceSerializer)
    block_state : BlockState or None, default = None
        Externally maintained block state. When given, the caller is responsible
        for updating it around every event; when omitted the renderer tracks
        the state itself.
    printer : WikiPrinter or None, default = None
        Final destination of the rendered text (defaults to an in-memory
        StringPrinter)

    Examples
    --------
        >>> from events2md.events import BeginDocument, BeginHeader, EndDocument, EndHeader, OnWord
        >>> renderer = MarkdownEventRenderer()
        >>> print(renderer.render_to_string([
        ...     BeginDocument(), BeginHeader(1), OnWord("Title"), EndHeader(1), EndDocument(),
        ... ]))
        Title
        =====

    """

    def __init__(
        self,
        options: MarkdownRendererOptions | None = None,
        link_serializer: ResourceReferenceSerializer | None = None,
        image_serializer: ResourceReferenceSerializer | None = None,
        block_state: BlockState | None = None,
        printer: WikiPrinter | None = None,
    ):
        """Initialize the renderer with options and collaborators."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options

        self._link_renderer = MarkdownResourceRenderer(link_serializer or MarkdownReferenceSerializer())
        self._image_renderer = MarkdownResourceRenderer(image_serializer or MarkdownReferenceSerializer())

        self._tracker: Optional[BlockStateTracker] = None
        if block_state is None:
            self._tracker = BlockStateTracker()
            block_state = self._tracker
        self._block_state: BlockState = block_state

        self._printers: list[MarkdownEscapePrinter] = [self._create_printer(printer or StringPrinter())]
        self._has_rendered_first_element = False
        self._list_styles: list[str] = []
        self._previous_quote_depth = 0
        self._table_cells: list[list[list[str]]] = []
        self._abbreviations: list[dict[str, str]] = []

        self._handlers: dict[type[Event], Callable] = {
            BeginDocument: self.begin_document,
            EndDocument: self.end_document,
            BeginParagraph: self.begin_paragraph,
            EndParagraph: self._ignore,
            BeginHeader: self.begin_header,
            EndHeader: self.end_header,
            BeginList: self.begin_list,
            EndList: self.end_list,
            BeginListItem: self.begin_list_item,
            EndListItem: self._ignore,
            BeginDefinitionList: self._ignore,
            EndDefinitionList: self._ignore,
            BeginDefinitionTerm: self.begin_definition_term,
            EndDefinitionTerm: self.end_definition_item,
            BeginDefinitionDescription: self.begin_definition_description,
            EndDefinitionDescription: self.end_definition_item,
            BeginQuotation: self.begin_quotation,
            EndQuotation: self._ignore,
            BeginQuotationLine: self.begin_quotation_line,
            EndQuotationLine: self.end_quotation_line,
            BeginTable: self.begin_table,
            EndTable: self.end_table,
            BeginTableRow: self.begin_table_row,
            EndTableRow: self._ignore,
            BeginTableCell: self.begin_table_cell,
            EndTableCell: self.end_table_cell,
            BeginFormat: self.begin_format,
            EndFormat: self.end_format,
            BeginLink: self.begin_link,
            EndLink: self.end_link,
            OnImage: self.on_image,
            OnWord: self.on_word,
            OnSpace: self.on_space,
            OnNewLine: self.on_new_line,
            OnSpecialSymbol: self.on_special_symbol,
            OnRawText: self.on_raw_text,
            OnMacro: self.on_macro,
            OnHorizontalLine: self.on_horizontal_line,
        }

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def handle(self, event: Event) -> None:
        """Render one event.

        Parameters
        ----------
        event : Event
            The next event, in document order

        Raises
        ------
        RenderingError
            If the event type is unknown or the stream is not properly nested

        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise RenderingError(f"Unsupported event type: {type(event).__name__}", rendering_stage="dispatch")

        if self._tracker is not None:
            self._tracker.before_event(event)
        handler(event)
        if self._tracker is not None:
            self._tracker.after_event(event)

    def render_to_string(self, events: Iterable[Event]) -> str:
        """Render all events and return the Markdown text.

        Parameters
        ----------
        events : iterable of Event
            The events of one document, in order

        Returns
        -------
        str
            Markdown text

        """
        for event in events:
            self.handle(event)
        return self.to_string()

    def to_string(self) -> str:
        """Return the Markdown rendered so far by the document printer."""
        if len(self._printers) > 1:
            logger.warning("Returning output while %d nested scope(s) are still open", len(self._printers) - 1)
        return self._printers[0].to_string()

    # ------------------------------------------------------------------
    # Printer stack
    # ------------------------------------------------------------------

    @property
    def printer(self) -> MarkdownEscapePrinter:
        """The printer currently receiving output."""
        return self._printers[-1]

    def _create_printer(self, target: WikiPrinter, table_cell: bool = False) -> MarkdownEscapePrinter:
        return MarkdownEscapePrinter(
            target,
            escape_special=self.options.escape_special,
            escape_pipes=table_cell and self.options.table_pipe_escape,
        )

    def _push_printer(self, table_cell: bool = False) -> MarkdownEscapePrinter:
        """Push a capturing printer; nested printers inside a table cell must keep escaping pipes."""
        printer = self._create_printer(StringPrinter(), table_cell=table_cell)
        self._printers.append(printer)
        return printer

    def _pop_printer(self) -> str:
        """Pop the current printer and return the text it captured."""
        if len(self._printers) == 1:
            raise RenderingError("Cannot close a scope that was never opened", rendering_stage="printer_stack")
        return self._printers.pop().to_string()

    def _print(self, text: str) -> None:
        self.printer.print(text)

    def _print_text(self, text: str) -> None:
        self.printer.print_delayed(text)

    def _print_empty_line(self) -> None:
        """Separate a block from the previous one, unless nothing was rendered yet."""
        if self._has_rendered_first_element:
            self._print("\n\n")
        else:
            self._has_rendered_first_element = True

    def _start_line_content(self) -> None:
        """Mark that text following a block marker starts the logical line."""
        self.printer.set_on_new_line(True)

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def _ignore(self, event: Event) -> None:
        pass

    def begin_document(self, event: BeginDocument) -> None:
        """Open an abbreviation scope for the document."""
        self._abbreviations.append({})

    def end_document(self, event: EndDocument) -> None:
        """Print the abbreviation definitions collected in the document."""
        if not self._abbreviations:
            raise RenderingError("EndDocument without BeginDocument", rendering_stage="document")
        abbreviations = self._abbreviations.pop()
        if abbreviations:
            self._print_empty_line()
            self._print("\n".join(f"*[{key}]: {value}" for key, value in abbreviations.items()))
        self.printer.flush()

    def begin_paragraph(self, event: BeginParagraph) -> None:
        self._print_empty_line()

    def on_horizontal_line(self, event: OnHorizontalLine) -> None:
        self._print_empty_line()
        self._print(HORIZONTAL_RULE)

    def begin_header(self, event: BeginHeader) -> None:
        """Print the ATX-style prefix for levels above 2 and start capturing the text."""
        self._print_empty_line()
        if event.level > 2:
            self._print("=" * event.level + " ")
        self._push_printer(table_cell=self.printer.escape_pipes)

    def end_header(self, event: EndHeader) -> None:
        """Print the captured heading text and its underline or closing sequence.

        Levels 1 and 2 use setext underlines as long as the rendered text;
        deeper levels close with as many ``=`` as the level.
        """
        heading = self._pop_printer()
        self._print(heading)
        if event.level == 1:
            self._print("\n" + "=" * len(heading))
        elif event.level == 2:
            self._print("\n" + "-" * len(heading))
        else:
            self._print(" " + "=" * event.level)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def begin_list(self, event: BeginList) -> None:
        if self._block_state.list_depth() == 1:
            self._print_empty_line()
        else:
            self._print("\n")

        if event.kind is ListType.BULLETED:
            self._list_styles.append(BULLETED_LIST_MARKER)
        else:
            self._list_styles.append(NUMBERED_LIST_MARKER)

    def end_list(self, event: EndList) -> None:
        if not self._list_styles:
            raise RenderingError("EndList without BeginList", rendering_stage="list")
        self._list_styles.pop()
        self.printer.flush()

    def begin_list_item(self, event: BeginListItem) -> None:
        """Print the item marker, indented for the list depth."""
        if not self._list_styles:
            raise RenderingError("List item outside of a list", rendering_stage="list")

        if self._block_state.list_item_index() > 0:
            self._print("\n")

        style = self._list_styles[-1]
        marker = style + "." if style == NUMBERED_LIST_MARKER else style
        self._print(MARKDOWN_INDENT * (self._block_state.list_depth() - 1) + marker + " ")
        self._start_line_content()

    def begin_definition_term(self, event: BeginDefinitionTerm) -> None:
        self._print_empty_line()
        self._print(MARKDOWN_INDENT * (self._block_state.definition_list_depth() - 1))
        self._start_line_content()

    def begin_definition_description(self, event: BeginDefinitionDescription) -> None:
        if self._block_state.definition_list_item_index() > 0:
            self._print("\n")
        self._print(
            MARKDOWN_INDENT * (self._block_state.definition_list_depth() - 1) + DEFINITION_DESCRIPTION_PREFIX
        )
        self._start_line_content()

    def end_definition_item(self, event: Event) -> None:
        self.printer.flush()

    # ------------------------------------------------------------------
    # Quotations
    # ------------------------------------------------------------------

    def begin_quotation(self, event: BeginQuotation) -> None:
        if not self._block_state.is_in_quotation_line():
            self._print_empty_line()
        self._previous_quote_depth = self._block_state.quotation_depth()

    def begin_quotation_line(self, event: BeginQuotationLine) -> None:
        """Print the quote markers for a new line.

        Lines after the first are separated by an empty quoted line, which
        carries the markers of the deepest quotation opened so far so that a
        shallower line after a nested quotation is re-anchored correctly.
        """
        if self._block_state.quotation_line_index() > 0:
            separator = ">"
            if self._previous_quote_depth > 2:
                separator += " >" * (self._previous_quote_depth - 2)
            self._print("\n" + separator + "\n")

        self._print("> " * self._block_state.quotation_depth())
        self._start_line_content()

    def end_quotation_line(self, event: EndQuotationLine) -> None:
        self.printer.flush()

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def begin_table(self, event: BeginTable) -> None:
        self._print_empty_line()
        self._table_cells.append([])

    def begin_table_row(self, event: BeginTableRow) -> None:
        self._current_table("BeginTableRow").append([])

    def begin_table_cell(self, event: BeginTableCell) -> None:
        self._push_printer(table_cell=True)

    def end_table_cell(self, event: EndTableCell) -> None:
        cell_text = self._pop_printer()
        rows = self._current_table("EndTableCell")
        if not rows:
            raise RenderingError("Table cell outside of a table row", rendering_stage="table")
        rows[-1].append(cell_text)

    def end_table(self, event: EndTable) -> None:
        rows = self._current_table("EndTable")
        self._table_cells.pop()
        self._print(format_table(rows))

    def _current_table(self, event_name: str) -> list[list[str]]:
        if not self._table_cells:
            raise RenderingError(f"{event_name} outside of a table", rendering_stage="table")
        return self._table_cells[-1]

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def begin_format(self, event: BeginFormat) -> None:
        self._print(_FORMAT_MARKERS[event.format][0])

    def end_format(self, event: EndFormat) -> None:
        self._print(_FORMAT_MARKERS[event.format][1])

    def begin_link(self, event: BeginLink) -> None:
        """Start capturing the link label."""
        on_new_line = self.printer.is_on_new_line()
        label_printer = self._push_printer(table_cell=self.printer.escape_pipes)
        label_printer.set_on_new_line(on_new_line)

    def end_link(self, event: EndLink) -> None:
        label = self._pop_printer()
        self._print(self._link_renderer.render_link(event.reference, label))

    def on_image(self, event: OnImage) -> None:
        alt = event.alt_text
        if not alt or not alt.strip():
            alt = event.parameters.get(IMAGE_ALT_PARAMETER)
        self._print(self._image_renderer.render_image(event.reference, alt))

    def on_word(self, event: OnWord) -> None:
        self._print_text(event.text)

    def on_space(self, event: OnSpace) -> None:
        self._print_text(" ")

    def on_new_line(self, event: OnNewLine) -> None:
        self._print(HARD_LINE_BREAK)

    def on_special_symbol(self, event: OnSpecialSymbol) -> None:
        markup = SPECIAL_SYMBOL_MARKUP.get(event.symbol)
        if markup is not None:
            self._print(markup)
        else:
            self._print_text(event.symbol)

    # ------------------------------------------------------------------
    # Raw text and abbreviations
    # ------------------------------------------------------------------

    def on_raw_text(self, event: OnRawText) -> None:
        """Print raw markup verbatim, turning ``<abbr>`` tags into abbreviation references."""
        if self._handle_abbreviation(event.text):
            return
        if not self._block_state.is_in_line():
            self._print_empty_line()
        self._print(event.text)

    def _handle_abbreviation(self, text: str) -> bool:
        if not text.startswith(ABBREVIATION_TAG_PREFIX):
            return False
        try:
            abbreviation = parse_abbreviation(text)
        except MarkupParseError as e:
            logger.debug(f"Keeping abbreviation markup verbatim: {e.message}")
            return False

        if not self._abbreviations:
            raise RenderingError("Abbreviation outside of a document", rendering_stage="abbreviation")
        # First definition of a key wins
        self._abbreviations[-1].setdefault(abbreviation.key, abbreviation.title)
        self._print(abbreviation.key)
        return True

    # ------------------------------------------------------------------
    # Macros
    # ------------------------------------------------------------------

    def on_macro(self, event: OnMacro) -> None:
        if not self.handle_code_macro(event):
            self._render_unhandled_macro(event)

    def handle_code_macro(self, event: OnMacro) -> bool:
        """Render the ``code`` macro as a code span or code block.

        Parameters
        ----------
        event : OnMacro
            The macro event

        Returns
        -------
        bool
            False if the macro is not a code macro and was left untouched

        """
        if event.id != CODE_MACRO_ID:
            return False

        content = event.content or ""
        if event.is_inline:
            self._print(BACKTICK + content + BACKTICK)
            return True

        self._separate_block_macro()
        language = event.parameters.get(CODE_MACRO_LANGUAGE_PARAMETER)
        if language is not None:
            self._print(TRIPLE_BACKTICK + language + "\n" + content + "\n" + TRIPLE_BACKTICK)
        else:
            self._print("\n".join(MARKDOWN_INDENT + line for line in _split_code_lines(content)))
        return True

    def _render_unhandled_macro(self, event: OnMacro) -> None:
        mode = self.options.unhandled_macro_mode
        if mode == "raise":
            raise RenderingError(f"No Markdown rendering for macro '{event.id}'", rendering_stage="macro")
        if mode == "drop":
            logger.warning(f"Dropping macro '{event.id}' which has no Markdown rendering")
            return

        if not event.is_inline:
            self._separate_block_macro()
        self._print(render_macro_call(event.id, event.parameters, event.content))

    def _separate_block_macro(self) -> None:
        if not self._block_state.is_in_line():
            self._print_empty_line()
