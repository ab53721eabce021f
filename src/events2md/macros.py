#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/macros.py
"""Fallback rendering for macros Markdown has no syntax for.

Only the ``code`` macro maps onto Markdown. Other macros are written back in
XWiki 2.x macro syntax so that a wiki importing the Markdown can still
execute them::

    {{toc depth="2"/}}
    {{info}}Read this first{{/info}}

"""

from __future__ import annotations

from typing import Mapping, Optional

# XWiki syntax escape character inside quoted parameter values
_ESCAPE_CHAR = "~"


def _quote_parameter(value: str) -> str:
    escaped = value.replace(_ESCAPE_CHAR, _ESCAPE_CHAR * 2).replace('"', _ESCAPE_CHAR + '"')
    return f'"{escaped}"'


def render_macro_call(macro_id: str, parameters: Mapping[str, str], content: Optional[str]) -> str:
    """Render a macro call in XWiki 2.x syntax.

    Parameters
    ----------
    macro_id : str
        Macro identifier
    parameters : mapping
        Macro parameters, rendered in mapping order
    content : str or None
        Macro content; ``None`` renders the self-closing form

    Returns
    -------
    str
        The macro call

    Examples
    --------
        >>> render_macro_call("toc", {"depth": "2"}, None)
        '{{toc depth="2"/}}'
        >>> render_macro_call("info", {}, "Read this first")
        '{{info}}Read this first{{/info}}'

    """
    opening = macro_id + "".join(f" {name}={_quote_parameter(value)}" for name, value in parameters.items())
    if content is None:
        return "{{" + opening + "/}}"
    return "{{" + opening + "}}" + content + "{{/" + macro_id + "}}"
