#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/abbreviations.py
"""Parsing of inline ``<abbr>`` markup.

Parsers pass HTML abbreviations through as raw text. Markdown extensions
(PHP Markdown Extra, MultiMarkdown) express them as trailing definitions
instead::

    The HTML specification is maintained by the W3C.

    *[HTML]: Hyper Text Markup Language

This module recognises the single shape that can be turned into such a
definition: one ``abbr`` element with a single ``title`` attribute and plain
text content.
"""

from __future__ import annotations

import html
import re
from typing import NamedTuple

from events2md.constants import ABBREVIATION_TITLE_ATTRIBUTE
from events2md.exceptions import MarkupParseError

_NAME = r"[A-Za-z_:][\w:.-]*"
_QUOTED = r"\"[^\"<]*\"|'[^'<]*'"

_ABBR_ELEMENT = re.compile(
    rf"\A<abbr(?P<attributes>(?:\s+{_NAME}\s*=\s*(?:{_QUOTED}))*)\s*>(?P<content>[^<]*)</abbr\s*>\Z",
)
_ATTRIBUTE = re.compile(rf"(?P<name>{_NAME})\s*=\s*(?:\"(?P<double>[^\"<]*)\"|'(?P<single>[^'<]*)')")


class Abbreviation(NamedTuple):
    """An abbreviation and its expansion."""

    key: str
    title: str


def parse_abbreviation(markup: str) -> Abbreviation:
    """Parse ``<abbr title="...">KEY</abbr>`` markup.

    Parameters
    ----------
    markup : str
        Raw markup, expected to hold exactly one abbr element

    Returns
    -------
    Abbreviation
        The element text as key and its title as expansion, with character
        references decoded

    Raises
    ------
    MarkupParseError
        If the markup is not a single abbr element, has anything other than
        exactly one ``title`` attribute, has nested elements or empty text

    Examples
    --------
        >>> parse_abbreviation('<abbr title="Hyper Text Markup Language">HTML</abbr>')
        Abbreviation(key='HTML', title='Hyper Text Markup Language')

    """
    match = _ABBR_ELEMENT.match(markup.strip())
    if match is None:
        raise MarkupParseError("Not a single text-only <abbr> element", markup=markup)

    attributes = []
    for attribute in _ATTRIBUTE.finditer(match.group("attributes")):
        value = attribute.group("double")
        if value is None:
            value = attribute.group("single")
        attributes.append((attribute.group("name"), value))

    if len(attributes) != 1:
        raise MarkupParseError(f"Expected exactly one attribute on <abbr>, found {len(attributes)}", markup=markup)

    name, value = attributes[0]
    if name != ABBREVIATION_TITLE_ATTRIBUTE:
        raise MarkupParseError(f"Expected a '{ABBREVIATION_TITLE_ATTRIBUTE}' attribute, found '{name}'", markup=markup)

    key = html.unescape(match.group("content"))
    if not key.strip():
        raise MarkupParseError("Abbreviation has no text", markup=markup)

    return Abbreviation(key=key, title=html.unescape(value))
