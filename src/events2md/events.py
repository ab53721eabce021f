#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/events.py
"""Document event classes for streaming rendering.

This module defines the event model consumed by the renderers. A document is
described as an ordered stream of events rather than a tree: structural
constructs are announced by a ``Begin*`` event, closed by the matching
``End*`` event, and leaf content arrives as ``On*`` events.

The event model is designed to:
- Be produced incrementally by a parser without building a tree first
- Carry the same payload on begin and end events so consumers need no lookup
- Stay immutable once created (events may be replayed or serialized)

Event Families
--------------
Block events (paired):
    - BeginDocument/EndDocument, BeginParagraph/EndParagraph
    - BeginHeader/EndHeader, BeginList/EndList, BeginListItem/EndListItem
    - BeginDefinitionList/EndDefinitionList, BeginDefinitionTerm/EndDefinitionTerm,
      BeginDefinitionDescription/EndDefinitionDescription
    - BeginQuotation/EndQuotation, BeginQuotationLine/EndQuotationLine
    - BeginTable/EndTable, BeginTableRow/EndTableRow, BeginTableCell/EndTableCell

Inline events (paired):
    - BeginFormat/EndFormat, BeginLink/EndLink

Leaf events:
    - OnWord, OnSpace, OnNewLine, OnSpecialSymbol, OnRawText
    - OnImage, OnMacro, OnHorizontalLine

Begin and end events are expected to be properly nested. Consumers are not
required to validate the nesting.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


def _empty_parameters() -> Mapping[str, str]:
    return MappingProxyType({})


class Format(str, Enum):
    """Inline formatting kinds carried by BeginFormat/EndFormat."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKEOUT = "strikeout"
    UNDERLINE = "underline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    MONOSPACE = "monospace"
    NONE = "none"


class ListType(str, Enum):
    """Marker style of a list."""

    BULLETED = "bulleted"
    NUMBERED = "numbered"


class ResourceType(str, Enum):
    """Kind of resource a link or image points to."""

    URL = "url"
    MAILTO = "mailto"
    DOCUMENT = "doc"
    PAGE = "page"
    ATTACHMENT = "attach"
    IMAGE = "image"
    PATH = "path"
    UNC = "unc"
    DATA = "data"
    SPACE = "space"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ResourceReference:
    """Reference to the target of a link or image.

    Parameters
    ----------
    reference : str
        The raw reference string (URL, document name, attachment name, ...)
    type : ResourceType, default = ResourceType.URL
        The kind of resource
    typed : bool, default = True
        Whether the type was explicit in the source syntax
    base_references : tuple of str, default = ()
        References the target is relative to
    parameters : mapping, default = empty mapping
        Extra reference parameters (anchor, query string, ...)

    """

    reference: str
    type: ResourceType = ResourceType.URL
    typed: bool = True
    base_references: tuple[str, ...] = ()
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)

    def __post_init__(self) -> None:
        """Normalize enum and container fields."""
        object.__setattr__(self, "type", ResourceType(self.type))
        object.__setattr__(self, "base_references", tuple(self.base_references))
        if not isinstance(self.parameters, MappingProxyType):
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))


class Event:
    """Base class for all document events.

    Concrete events are frozen dataclasses. Events that carry a ``parameters``
    mapping have it wrapped in a read-only proxy on creation.
    """

    def __post_init__(self) -> None:
        """Freeze the parameters mapping, if the event has one."""
        parameters = getattr(self, "parameters", None)
        if parameters is not None and not isinstance(parameters, MappingProxyType):
            object.__setattr__(self, "parameters", MappingProxyType(dict(parameters)))

    @classmethod
    def event_name(cls) -> str:
        """Return the name identifying this event type in serialized streams."""
        return cls.__name__


# =============================================================================
# Document and paragraph
# =============================================================================


@dataclass(frozen=True)
class BeginDocument(Event):
    """Start of a document (documents may nest, e.g. inside macros)."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndDocument(Event):
    """End of a document."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class BeginParagraph(Event):
    """Start of a paragraph."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndParagraph(Event):
    """End of a paragraph."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


# =============================================================================
# Headings
# =============================================================================


@dataclass(frozen=True)
class BeginHeader(Event):
    """Start of a heading.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    id : str or None, default = None
        Identifier of the heading, used for anchors
    parameters : mapping, default = empty mapping
        Free-form heading parameters

    """

    level: int
    id: Optional[str] = None
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)

    def __post_init__(self) -> None:
        """Validate heading level."""
        super().__post_init__()
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass(frozen=True)
class EndHeader(BeginHeader):
    """End of a heading; carries the same level and id as its BeginHeader."""


# =============================================================================
# Lists
# =============================================================================


@dataclass(frozen=True)
class BeginList(Event):
    """Start of a bulleted or numbered list."""

    kind: ListType = ListType.BULLETED
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)

    def __post_init__(self) -> None:
        """Coerce the list kind."""
        super().__post_init__()
        object.__setattr__(self, "kind", ListType(self.kind))


@dataclass(frozen=True)
class EndList(BeginList):
    """End of a list."""


@dataclass(frozen=True)
class BeginListItem(Event):
    """Start of a list item."""


@dataclass(frozen=True)
class EndListItem(Event):
    """End of a list item."""


@dataclass(frozen=True)
class BeginDefinitionList(Event):
    """Start of a definition list."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndDefinitionList(Event):
    """End of a definition list."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class BeginDefinitionTerm(Event):
    """Start of a definition list term."""


@dataclass(frozen=True)
class EndDefinitionTerm(Event):
    """End of a definition list term."""


@dataclass(frozen=True)
class BeginDefinitionDescription(Event):
    """Start of a definition list description."""


@dataclass(frozen=True)
class EndDefinitionDescription(Event):
    """End of a definition list description."""


# =============================================================================
# Quotations
# =============================================================================


@dataclass(frozen=True)
class BeginQuotation(Event):
    """Start of a (possibly nested) block quotation."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndQuotation(Event):
    """End of a block quotation."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class BeginQuotationLine(Event):
    """Start of one line of a block quotation."""


@dataclass(frozen=True)
class EndQuotationLine(Event):
    """End of one line of a block quotation."""


# =============================================================================
# Tables
# =============================================================================


@dataclass(frozen=True)
class BeginTable(Event):
    """Start of a table."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndTable(Event):
    """End of a table."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class BeginTableRow(Event):
    """Start of a table row."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndTableRow(Event):
    """End of a table row."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class BeginTableCell(Event):
    """Start of a table cell; ``is_header`` marks head cells."""

    is_header: bool = False
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndTableCell(BeginTableCell):
    """End of a table cell."""


# =============================================================================
# Inline events
# =============================================================================


@dataclass(frozen=True)
class BeginFormat(Event):
    """Start of an inline formatting span."""

    format: Format = Format.NONE
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)

    def __post_init__(self) -> None:
        """Coerce the format kind."""
        super().__post_init__()
        object.__setattr__(self, "format", Format(self.format))


@dataclass(frozen=True)
class EndFormat(BeginFormat):
    """End of an inline formatting span."""


@dataclass(frozen=True)
class BeginLink(Event):
    """Start of a link; the events up to EndLink form its label.

    Parameters
    ----------
    reference : ResourceReference
        Link target
    is_free_standing : bool, default = False
        True when the link is a bare URI in the source text

    """

    reference: ResourceReference
    is_free_standing: bool = False
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class EndLink(BeginLink):
    """End of a link."""


@dataclass(frozen=True)
class OnImage(Event):
    """An image.

    Parameters
    ----------
    reference : ResourceReference
        Image source
    alt_text : str or None, default = None
        Alternative text; the ``alt`` parameter is used when this is not set
    is_free_standing : bool, default = False
        True when the image is a bare URI in the source text

    """

    reference: ResourceReference
    alt_text: Optional[str] = None
    is_free_standing: bool = False
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class OnWord(Event):
    """A word of document text."""

    text: str


@dataclass(frozen=True)
class OnSpace(Event):
    """A single space between words."""


@dataclass(frozen=True)
class OnNewLine(Event):
    """A hard line break inside a block."""


@dataclass(frozen=True)
class OnSpecialSymbol(Event):
    """A single non-alphanumeric character (punctuation, typographic symbols)."""

    symbol: str

    def __post_init__(self) -> None:
        """Validate that exactly one character is carried."""
        super().__post_init__()
        if len(self.symbol) != 1:
            raise ValueError(f"Special symbol must be a single character, got {self.symbol!r}")


@dataclass(frozen=True)
class OnRawText(Event):
    """Text in another syntax (usually HTML) to pass through unchanged."""

    text: str
    syntax: str = "html/4.01"


@dataclass(frozen=True)
class OnMacro(Event):
    """A macro call.

    Parameters
    ----------
    id : str
        Macro identifier (e.g. "code")
    content : str or None, default = None
        Macro content
    is_inline : bool, default = False
        Whether the macro appears inside inline content
    parameters : mapping, default = empty mapping
        Macro parameters

    """

    id: str
    content: Optional[str] = None
    is_inline: bool = False
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


@dataclass(frozen=True)
class OnHorizontalLine(Event):
    """A thematic break."""

    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)


EVENT_TYPES: dict[str, type[Event]] = {
    cls.event_name(): cls
    for cls in (
        BeginDocument,
        EndDocument,
        BeginParagraph,
        EndParagraph,
        BeginHeader,
        EndHeader,
        BeginList,
        EndList,
        BeginListItem,
        EndListItem,
        BeginDefinitionList,
        EndDefinitionList,
        BeginDefinitionTerm,
        EndDefinitionTerm,
        BeginDefinitionDescription,
        EndDefinitionDescription,
        BeginQuotation,
        EndQuotation,
        BeginQuotationLine,
        EndQuotationLine,
        BeginTable,
        EndTable,
        BeginTableRow,
        EndTableRow,
        BeginTableCell,
        EndTableCell,
        BeginFormat,
        EndFormat,
        BeginLink,
        EndLink,
        OnImage,
        OnWord,
        OnSpace,
        OnNewLine,
        OnSpecialSymbol,
        OnRawText,
        OnMacro,
        OnHorizontalLine,
    )
}
