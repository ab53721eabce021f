#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_markdown_event_renderer.py
"""Unit tests for MarkdownEventRenderer.

Tests cover:
- Block separation and document boundaries
- Headings, lists, definition lists, quotations and tables
- Inline formatting, links, images and special symbols
- Code macros, unhandled macros, raw text and abbreviations
- Structural errors in malformed event streams

"""

import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

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
    ResourceReference,
    ResourceType,
)
from events2md.exceptions import InvalidOptionsError, RenderingError
from events2md.options import BaseRendererOptions, MarkdownRendererOptions
from events2md.printers import StreamPrinter
from events2md.renderers.markdown import MarkdownEventRenderer, format_table
from events2md.state import BlockStateTracker


def paragraph(*events: Event) -> list[Event]:
    return [BeginParagraph(), *events, EndParagraph()]


def words(text: str) -> list[Event]:
    """Split text on spaces into OnWord/OnSpace events."""
    events: list[Event] = []
    for index, word in enumerate(text.split(" ")):
        if index:
            events.append(OnSpace())
        events.append(OnWord(word))
    return events


def bullet_list(*items: str, kind: ListType = ListType.BULLETED) -> list[Event]:
    events: list[Event] = [BeginList(kind)]
    for item in items:
        events.extend([BeginListItem(), *words(item), EndListItem()])
    events.append(EndList(kind))
    return events


def table(*rows: list[str], header: bool = True) -> list[Event]:
    events: list[Event] = [BeginTable()]
    for row_index, row in enumerate(rows):
        events.append(BeginTableRow())
        is_header = header and row_index == 0
        for cell in row:
            events.extend([BeginTableCell(is_header), *words(cell), EndTableCell(is_header)])
        events.append(EndTableRow())
    events.append(EndTable())
    return events


@pytest.mark.unit
class TestDocumentStructure:
    """Tests for document boundaries and block separation."""

    def test_empty_document(self, render):
        assert render([]) == ""

    def test_single_paragraph_without_end_event(self):
        renderer = MarkdownEventRenderer()
        result = renderer.render_to_string([BeginDocument(), BeginParagraph(), OnWord("Hi"), EndDocument()])
        assert result == "Hi"

    def test_paragraphs_separated_by_one_blank_line(self, render):
        result = render([*paragraph(OnWord("a")), *paragraph(OnWord("b")), *paragraph(OnWord("c"))])
        assert result == "a\n\nb\n\nc"

    def test_no_leading_blank_line(self, render):
        result = render([*bullet_list("a"), *paragraph(OnWord("b"))])
        assert not result.startswith("\n")
        assert result == "* a\n\nb"

    def test_horizontal_line(self, render):
        result = render([*paragraph(OnWord("a")), OnHorizontalLine(), *paragraph(OnWord("b"))])
        assert result == "a\n\n---\n\nb"

    def test_words_and_spaces(self, render):
        assert render(paragraph(*words("one two three"))) == "one two three"

    def test_hard_line_break(self, render):
        result = render(paragraph(OnWord("a"), OnNewLine(), OnWord("b")))
        assert result == "a  \nb"

    def test_text_after_line_break_is_at_line_start(self, render):
        result = render(paragraph(OnWord("a"), OnNewLine(), OnWord("-b")))
        assert result == "a  \n\\-b"


@pytest.mark.unit
class TestHeadings:
    """Tests for setext and fenced heading rendering."""

    def test_level_one_underline(self, render):
        assert render([BeginHeader(1), OnWord("Title"), EndHeader(1)]) == "Title\n====="

    def test_level_two_underline(self, render):
        assert render([BeginHeader(2), *words("Sub title"), EndHeader(2)]) == "Sub title\n---------"

    @pytest.mark.parametrize(
        "level,expected",
        [
            (3, "=== Deep ==="),
            (4, "==== Deep ===="),
            (6, "====== Deep ======"),
        ],
    )
    def test_deep_levels_fenced(self, render, level, expected):
        assert render([BeginHeader(level), OnWord("Deep"), EndHeader(level)]) == expected

    def test_underline_matches_escaped_length(self, render):
        result = render([BeginHeader(1), OnWord("a*b"), EndHeader(1)])
        assert result == "a\\*b\n===="

    def test_heading_text_escaped_at_line_start(self, render):
        result = render([BeginHeader(2), OnWord("#1"), EndHeader(2)])
        assert result == "\\#1\n---"

    def test_heading_with_formatting(self, render):
        events = [BeginHeader(1), BeginFormat(Format.BOLD), OnWord("Hi"), EndFormat(Format.BOLD), EndHeader(1)]
        assert render(events) == "**Hi**\n======"

    def test_heading_between_paragraphs(self, render):
        events = [*paragraph(OnWord("a")), BeginHeader(1), OnWord("T"), EndHeader(1), *paragraph(OnWord("b"))]
        assert render(events) == "a\n\nT\n=\n\nb"

    @given(st.text(alphabet="abcXYZ019 ", min_size=1, max_size=30).filter(lambda s: s.strip() == s and "  " not in s))
    def test_underline_length_property(self, text):
        renderer = MarkdownEventRenderer()
        result = renderer.render_to_string(
            [BeginDocument(), BeginHeader(1), *words(text), EndHeader(1), EndDocument()]
        )
        heading, underline = result.split("\n")
        assert heading == text
        assert underline == "=" * len(heading)


@pytest.mark.unit
class TestLists:
    """Tests for bulleted and numbered lists."""

    def test_bulleted_list(self, render):
        assert render(bullet_list("a", "b")) == "* a\n* b"

    def test_numbered_list(self, render):
        assert render(bullet_list("a", "b", kind=ListType.NUMBERED)) == "1. a\n1. b"

    def test_nested_list_indented(self, render):
        events = [
            BeginList(),
            BeginListItem(),
            OnWord("a"),
            *bullet_list("b", "c", kind=ListType.NUMBERED),
            EndListItem(),
            BeginListItem(),
            OnWord("d"),
            EndListItem(),
            EndList(),
        ]
        assert render(events) == "* a\n    1. b\n    1. c\n* d"

    def test_sibling_lists_restart_item_index(self, render):
        result = render([*bullet_list("a", "b"), *bullet_list("c")])
        assert result == "* a\n* b\n\n* c"

    def test_sibling_numbered_lists(self, render):
        result = render([*bullet_list("a", kind=ListType.NUMBERED), *bullet_list("b", kind=ListType.NUMBERED)])
        assert result == "1. a\n\n1. b"

    def test_list_after_paragraph(self, render):
        assert render([*paragraph(OnWord("p")), *bullet_list("a")]) == "p\n\n* a"

    def test_three_level_nesting_indented(self, render):
        events = [
            BeginList(),
            BeginListItem(),
            OnWord("a"),
            BeginList(),
            BeginListItem(),
            OnWord("b"),
            *bullet_list("c"),
            EndListItem(),
            EndList(),
            EndListItem(),
            EndList(),
        ]
        assert render(events) == "* a\n    * b\n        * c"

    def test_item_text_escaped_as_line_start(self, render):
        assert render(bullet_list("-x")) == "* \\-x"

    def test_item_text_looking_like_ordered_marker(self, render):
        assert render(bullet_list("1. x")) == "* 1\\. x"


@pytest.mark.unit
class TestDefinitionLists:
    """Tests for definition list rendering."""

    def test_term_and_description(self, render):
        events = [
            BeginDefinitionList(),
            BeginDefinitionTerm(),
            OnWord("term"),
            EndDefinitionTerm(),
            BeginDefinitionDescription(),
            *words("the meaning"),
            EndDefinitionDescription(),
            EndDefinitionList(),
        ]
        assert render(events) == "term\n:   the meaning"

    def test_two_terms_separated(self, render):
        events = [
            BeginDefinitionList(),
            BeginDefinitionTerm(),
            OnWord("a"),
            EndDefinitionTerm(),
            BeginDefinitionDescription(),
            OnWord("1"),
            EndDefinitionDescription(),
            BeginDefinitionTerm(),
            OnWord("b"),
            EndDefinitionTerm(),
            BeginDefinitionDescription(),
            OnWord("2"),
            EndDefinitionDescription(),
            EndDefinitionList(),
        ]
        assert render(events) == "a\n:   1\n\nb\n:   2"


    def test_nested_definition_list_indented(self, render):
        events = [
            BeginDefinitionList(),
            BeginDefinitionTerm(),
            OnWord("t"),
            EndDefinitionTerm(),
            BeginDefinitionDescription(),
            OnWord("d"),
            BeginDefinitionList(),
            BeginDefinitionTerm(),
            OnWord("u"),
            EndDefinitionTerm(),
            BeginDefinitionDescription(),
            OnWord("e"),
            EndDefinitionDescription(),
            EndDefinitionList(),
            EndDefinitionDescription(),
            EndDefinitionList(),
        ]
        assert render(events) == "t\n:   d\n\n    u\n    :   e"


@pytest.mark.unit
class TestQuotations:
    """Tests for block quotation rendering."""

    def test_two_lines(self, render):
        events = [
            BeginQuotation(),
            BeginQuotationLine(),
            OnWord("a"),
            EndQuotationLine(),
            BeginQuotationLine(),
            OnWord("b"),
            EndQuotationLine(),
            EndQuotation(),
        ]
        assert render(events) == "> a\n>\n> b"

    def test_nested_quotation(self, render):
        events = [
            BeginQuotation(),
            BeginQuotationLine(),
            OnWord("a"),
            BeginQuotation(),
            BeginQuotationLine(),
            OnWord("b"),
            EndQuotationLine(),
            EndQuotation(),
            EndQuotationLine(),
            EndQuotation(),
        ]
        assert render(events) == "> a\n>\n> > b"

    def test_quotation_after_paragraph(self, render):
        events = [*paragraph(OnWord("p")), BeginQuotation(), BeginQuotationLine(), OnWord("q"), EndQuotationLine(), EndQuotation()]
        assert render(events) == "p\n\n> q"

    def test_shallower_line_after_deep_nesting_reanchored(self, render):
        events = [
            BeginQuotation(),
            BeginQuotationLine(),
            OnWord("a"),
            BeginQuotation(),
            BeginQuotationLine(),
            OnWord("b"),
            BeginQuotation(),
            BeginQuotationLine(),
            OnWord("c"),
            EndQuotationLine(),
            EndQuotation(),
            EndQuotationLine(),
            EndQuotation(),
            EndQuotationLine(),
            BeginQuotationLine(),
            OnWord("d"),
            EndQuotationLine(),
            EndQuotation(),
        ]
        assert render(events) == "> a\n>\n> > b\n> >\n> > > c\n> >\n> d"

    def test_quoted_text_escaped_at_line_start(self, render):
        events = [BeginQuotation(), BeginQuotationLine(), OnWord("#x"), EndQuotationLine(), EndQuotation()]
        assert render(events) == "> \\#x"


@pytest.mark.unit
class TestTables:
    """Tests for table layout."""

    def test_header_and_row(self, render):
        result = render(table(["Name", "Age"], ["Al", "9"]))
        assert result == "| Name | Age |\n| ---- | --- |\n|  Al  |  9  |"

    def test_ragged_table_short_rows_render_own_cells(self, render):
        result = render(table(["a", "b"], ["c"]))
        assert result == "| a | b |\n| - | - |\n| c |"

    def test_pipe_in_cell_escaped(self, render):
        result = render(table(["a|b"]))
        assert result == "| a\\|b |\n| ---- |"

    def test_pipe_escape_disabled(self, render):
        result = render(table(["a|b"]), table_pipe_escape=False)
        assert result == "| a|b |\n| --- |"

    def test_pipe_in_link_label_inside_cell_escaped(self, render):
        ref = ResourceReference("http://x")
        events = [
            BeginTable(),
            BeginTableRow(),
            BeginTableCell(True),
            BeginLink(ref),
            OnWord("a|b"),
            EndLink(ref),
            EndTableCell(True),
            BeginTableCell(True),
            OnWord("c"),
            EndTableCell(True),
            EndTableRow(),
            EndTable(),
        ]
        result = render(events)
        assert result == "| [a\\|b](http://x) | c |\n| ---------------- | - |"
        header = result.split("\n")[0]
        assert header.count("|") - header.count("\\|") == 3

    def test_pipe_in_link_label_outside_table_kept(self, render):
        ref = ResourceReference("http://x")
        assert render(paragraph(BeginLink(ref), OnWord("a|b"), EndLink(ref))) == "[a|b](http://x)"

    def test_table_after_paragraph(self, render):
        result = render([*paragraph(OnWord("p")), *table(["x"])])
        assert result == "p\n\n| x |\n| - |"

    def test_format_table_separator_after_header_only(self):
        result = format_table([["h"], ["a"], ["bbb"]])
        assert result.split("\n") == ["|  h  |", "| --- |", "|  a  |", "| bbb |"]

    def test_format_table_empty(self):
        assert format_table([]) == ""

    @given(
        st.integers(min_value=1, max_value=5).flatmap(
            lambda width: st.lists(
                st.lists(st.text(alphabet="abcdef", max_size=8), min_size=width, max_size=width),
                min_size=1,
                max_size=6,
            )
        )
    )
    def test_column_width_property(self, rows):
        lines = format_table(rows).split("\n")
        assert len(lines) == len(rows) + 1

        column_count = len(rows[0])
        widths = [max(len(row[index]) for row in rows) for index in range(column_count)]
        for line in lines:
            segments = line[1:-1].split("|")
            assert len(segments) == column_count
            assert [len(segment) for segment in segments] == [width + 2 for width in widths]


@pytest.mark.unit
class TestInlineFormatting:
    """Tests for format markers and escaping of document text."""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (Format.BOLD, "**a**"),
            (Format.ITALIC, "_a_"),
            (Format.STRIKEOUT, "~~a~~"),
            (Format.UNDERLINE, "__a__"),
            (Format.SUPERSCRIPT, "<sup>a</sup>"),
            (Format.SUBSCRIPT, "<sub>a</sub>"),
            (Format.MONOSPACE, "`a`"),
            (Format.NONE, "a"),
        ],
    )
    def test_format_markers(self, render, kind, expected):
        assert render(paragraph(BeginFormat(kind), OnWord("a"), EndFormat(kind))) == expected

    def test_metacharacters_escaped(self, render):
        assert render(paragraph(OnWord("2*3"), OnSpace(), OnWord("[x]"))) == "2\\*3 \\[x\\]"

    def test_intra_word_underscore_kept(self, render):
        assert render(paragraph(OnWord("snake_case"), OnSpace(), OnWord("_x_"))) == "snake_case \\_x\\_"

    def test_escaping_disabled(self, render):
        assert render(paragraph(OnWord("#a*b_")), escape_special=False) == "#a*b_"

    @pytest.mark.parametrize(
        "symbol,expected",
        [
            ("\u201c", "<<"),
            ("\u201d", ">>"),
            ("\u2014", "---"),
            ("\u2026", "..."),
            ("\u2013", "--"),
            ("!", "!"),
            ("*", "\\*"),
        ],
    )
    def test_special_symbols(self, render, symbol, expected):
        assert render(paragraph(OnWord("a"), OnSpecialSymbol(symbol), OnWord("b"))) == f"a{expected}b"


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for link and image rendering."""

    def test_link_with_label(self, render):
        events = paragraph(BeginLink(ResourceReference("http://x.org")), OnWord("X"), EndLink(ResourceReference("http://x.org")))
        assert render(events) == "[X](http://x.org)"

    def test_link_without_label(self, render):
        ref = ResourceReference("http://x.org")
        assert render(paragraph(BeginLink(ref, is_free_standing=True), EndLink(ref, is_free_standing=True))) == "[[http://x.org]]"

    def test_link_inside_text(self, render):
        ref = ResourceReference("u")
        events = paragraph(*words("see the"), OnSpace(), BeginLink(ref), *words("docs"), EndLink(ref), OnWord("."))
        assert render(events) == "see the [docs](u)."

    def test_link_label_escaped(self, render):
        ref = ResourceReference("u")
        assert render(paragraph(BeginLink(ref), OnWord("a*b"), EndLink(ref))) == "[a\\*b](u)"

    def test_link_label_inherits_line_start(self, render):
        ref = ResourceReference("u")
        assert render(paragraph(BeginLink(ref), OnWord("#tag"), EndLink(ref))) == "[\\#tag](u)"

    def test_mailto_link(self, render):
        ref = ResourceReference("a@b.c", type=ResourceType.MAILTO)
        assert render(paragraph(BeginLink(ref), OnWord("mail"), EndLink(ref))) == "[mail](mailto:a@b.c)"

    def test_custom_link_serializer(self):
        class PageSerializer:
            def serialize(self, reference):
                return f"/wiki/{reference.reference}"

        ref = ResourceReference("Main", type=ResourceType.DOCUMENT)
        renderer = MarkdownEventRenderer(link_serializer=PageSerializer())
        result = renderer.render_to_string(
            [BeginDocument(), BeginLink(ref), OnWord("Home"), EndLink(ref), OnImage(ref), EndDocument()]
        )
        assert result == "[Home](/wiki/Main)![Main](Main)"

    def test_image_with_alt_text(self, render):
        assert render(paragraph(OnImage(ResourceReference("logo.png"), alt_text="Logo"))) == "![Logo](logo.png)"

    def test_image_alt_from_parameters(self, render):
        image = OnImage(ResourceReference("logo.png"), parameters={"alt": "From params"})
        assert render(paragraph(image)) == "![From params](logo.png)"

    @pytest.mark.parametrize("alt_text", ["", "   "])
    def test_blank_alt_text_uses_alt_parameter(self, render, alt_text):
        image = OnImage(ResourceReference("img.png"), alt_text=alt_text, parameters={"alt": "pic"})
        assert render(paragraph(image)) == "![pic](img.png)"

    def test_image_blank_alt_falls_back_to_reference(self, render):
        assert render(paragraph(OnImage(ResourceReference("logo.png"), alt_text="  "))) == "![logo.png](logo.png)"


@pytest.mark.unit
class TestMacros:
    """Tests for the code macro and the fallback for other macros."""

    def test_inline_code(self, render):
        events = paragraph(OnWord("run"), OnSpace(), OnMacro("code", content="a*b", is_inline=True))
        assert render(events) == "run `a*b`"

    def test_fenced_code_with_language(self, render):
        macro = OnMacro("code", content="print(1)", parameters={"language": "python"})
        assert render([*paragraph(OnWord("p")), macro]) == "p\n\n```python\nprint(1)\n```"

    def test_indented_code_without_language(self, render):
        macro = OnMacro("code", content="a\r\nb\n\n")
        assert render([macro]) == "    a\n    b"

    def test_empty_code_block(self, render):
        assert render([OnMacro("code")]) == "    "

    def test_unhandled_macro_xwiki_syntax(self, render):
        macro = OnMacro("toc", parameters={"depth": "2"})
        assert render([*paragraph(OnWord("p")), macro]) == 'p\n\n{{toc depth="2"/}}'

    def test_unhandled_inline_macro(self, render):
        events = paragraph(OnWord("a"), OnSpace(), OnMacro("info", content="x", is_inline=True))
        assert render(events) == "a {{info}}x{{/info}}"

    def test_unhandled_macro_dropped(self, render):
        assert render([*paragraph(OnWord("p")), OnMacro("toc")], unhandled_macro_mode="drop") == "p"

    def test_unhandled_macro_raises(self, render):
        with pytest.raises(RenderingError, match="toc"):
            render([OnMacro("toc")], unhandled_macro_mode="raise")

    def test_handle_code_macro_reports_unhandled(self):
        renderer = MarkdownEventRenderer()
        renderer.handle(BeginDocument())
        assert renderer.handle_code_macro(OnMacro("toc")) is False
        assert renderer.handle_code_macro(OnMacro("code", content="x", is_inline=True)) is True


@pytest.mark.unit
class TestRawTextAndAbbreviations:
    """Tests for raw text and abbreviation collection."""

    def test_raw_block_separated(self, render):
        assert render([*paragraph(OnWord("p")), OnRawText("<div>x</div>")]) == "p\n\n<div>x</div>"

    def test_raw_inline_not_separated(self, render):
        assert render(paragraph(OnWord("a"), OnRawText("<br/>"))) == "a<br/>"

    def test_abbreviation_collected(self, render):
        events = paragraph(
            *words("The"),
            OnSpace(),
            OnRawText('<abbr title="Hyper Text Markup Language">HTML</abbr>'),
            OnSpace(),
            OnWord("spec"),
        )
        assert render(events) == "The HTML spec\n\n*[HTML]: Hyper Text Markup Language"

    def test_first_abbreviation_wins_and_order_kept(self, render):
        events = paragraph(
            OnRawText('<abbr title="first">B</abbr>'),
            OnSpace(),
            OnRawText('<abbr title="alpha">A</abbr>'),
            OnSpace(),
            OnRawText('<abbr title="second">B</abbr>'),
        )
        assert render(events) == "B A B\n\n*[B]: first\n*[A]: alpha"

    def test_abbreviation_from_nested_block_emitted_once_at_end(self, render):
        events = [
            BeginList(),
            BeginListItem(),
            OnRawText('<abbr title="Markdown">MD</abbr>'),
            EndListItem(),
            EndList(),
            *paragraph(OnRawText('<abbr title="Markdown">MD</abbr>')),
        ]
        assert render(events) == "* MD\n\nMD\n\n*[MD]: Markdown"

    def test_malformed_abbreviation_verbatim(self, render):
        events = paragraph(OnWord("a"), OnRawText('<abbr class="x">HTML</abbr>'))
        assert render(events) == 'a<abbr class="x">HTML</abbr>'

    def test_nested_document_has_own_abbreviation_scope(self, render):
        events = [
            *paragraph(OnWord("a")),
            BeginDocument(),
            *paragraph(OnRawText('<abbr title="t">X</abbr>')),
            EndDocument(),
        ]
        assert render(events) == "a\n\nX\n\n*[X]: t"


@pytest.mark.unit
class TestRendererConfiguration:
    """Tests for printers, external block state and options validation."""

    def test_external_block_state(self):
        tracker = BlockStateTracker()
        renderer = MarkdownEventRenderer(block_state=tracker)
        for event in [BeginDocument(), *bullet_list("a", "b"), EndDocument()]:
            tracker.before_event(event)
            renderer.handle(event)
            tracker.after_event(event)
        assert renderer.to_string() == "* a\n* b"

    def test_stream_printer(self):
        stream = io.StringIO()
        renderer = MarkdownEventRenderer(printer=StreamPrinter(stream))
        for event in [BeginDocument(), *paragraph(OnWord("a*")), EndDocument()]:
            renderer.handle(event)
        assert stream.getvalue() == "a\\*"

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownEventRenderer(BaseRendererOptions())  # type: ignore[arg-type]

    def test_render_to_path(self, tmp_path):
        output = tmp_path / "out.md"
        MarkdownEventRenderer().render([BeginDocument(), *paragraph(OnWord("Hi")), EndDocument()], output)
        assert output.read_text(encoding="utf-8") == "Hi"

    def test_options_used(self):
        options = MarkdownRendererOptions(escape_special=False)
        renderer = MarkdownEventRenderer(options)
        assert renderer.render_to_string([BeginDocument(), *paragraph(OnWord("*")), EndDocument()]) == "*"


@pytest.mark.unit
class TestStructuralErrors:
    """Tests that malformed event streams abort rendering."""

    def test_end_document_without_begin(self):
        with pytest.raises(RenderingError):
            MarkdownEventRenderer().handle(EndDocument())

    def test_end_header_without_begin(self):
        renderer = MarkdownEventRenderer()
        renderer.handle(BeginDocument())
        with pytest.raises(RenderingError, match="never opened"):
            renderer.handle(EndHeader(1))

    def test_list_item_outside_list(self):
        renderer = MarkdownEventRenderer()
        renderer.handle(BeginDocument())
        with pytest.raises(RenderingError):
            renderer.handle(BeginListItem())

    def test_end_list_without_begin(self):
        renderer = MarkdownEventRenderer()
        with pytest.raises(RenderingError):
            renderer.handle(EndList())

    def test_table_cell_outside_table(self):
        renderer = MarkdownEventRenderer()
        renderer.handle(BeginDocument())
        renderer.handle(BeginTableCell())
        with pytest.raises(RenderingError):
            renderer.handle(EndTableCell())

    def test_unknown_event_type(self):
        class OnFootnote(Event):
            pass

        with pytest.raises(RenderingError, match="OnFootnote"):
            MarkdownEventRenderer().handle(OnFootnote())
