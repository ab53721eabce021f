#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines the options accepted by the event-to-Markdown renderer.
"""
# src/events2md/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from events2md.constants import (
    DEFAULT_TABLE_PIPE_ESCAPE,
    DEFAULT_UNHANDLED_MACRO_MODE,
    UNHANDLED_MACRO_MODES,
    UnhandledMacroMode,
)
from events2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for rendering event streams to Markdown 1.0.

    Parameters
    ----------
    escape_special : bool, default True
        Escape Markdown metacharacters appearing in document text.
    table_pipe_escape : bool, default True
        Escape ``|`` characters inside table cells so they do not split the cell.
    unhandled_macro_mode : {"xwiki", "drop", "raise"}, default "xwiki"
        What to do with macros other than ``code``:

        - "xwiki": Emit the macro call in XWiki 2.x macro syntax
        - "drop": Skip the macro and log a warning
        - "raise": Raise a RenderingError

    Examples
    --------
    Keep document text unescaped and fail on unknown macros:

        >>> options = MarkdownRendererOptions(escape_special=False, unhandled_macro_mode="raise")

    """

    table_pipe_escape: bool = field(
        default=DEFAULT_TABLE_PIPE_ESCAPE,
        metadata={
            "help": "Escape pipe characters inside table cells",
            "cli_name": "no-table-pipe-escape",
            "importance": "advanced",
        },
    )
    unhandled_macro_mode: UnhandledMacroMode = field(
        default=DEFAULT_UNHANDLED_MACRO_MODE,
        metadata={
            "help": "How to render macros other than 'code': xwiki (macro syntax), drop, or raise",
            "choices": list(UNHANDLED_MACRO_MODES),
            "cli_name": "unhandled-macros",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``unhandled_macro_mode`` is not one of the supported modes.

        """
        if self.unhandled_macro_mode not in UNHANDLED_MACRO_MODES:
            raise ValueError(
                f"unhandled_macro_mode must be one of {', '.join(UNHANDLED_MACRO_MODES)}, "
                f"got {self.unhandled_macro_mode!r}"
            )

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> MarkdownRendererOptions:
        """Build options from a mapping, accepting dashed or underscored keys.

        Unknown keys are ignored so that configuration files may carry settings
        for other tools.

        Parameters
        ----------
        values : dict
            Option values keyed by field name

        Returns
        -------
        MarkdownRendererOptions
            Options with the given values applied over the defaults

        """
        known = {f.name for f in fields(cls)}
        normalized = {key.replace("-", "_"): value for key, value in values.items()}
        return cls(**{key: value for key, value in normalized.items() if key in known})
