#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the events2md library.

This module centralizes the hardcoded values and default configuration
constants used across the renderer, the escaping printers and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Markdown Syntax - Markers emitted by the renderer
3. Rendering Defaults - Default option values
4. CLI - Exit codes and configuration file names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

UnhandledMacroMode = Literal["xwiki", "drop", "raise"]
UNHANDLED_MACRO_MODES: tuple[str, ...] = ("xwiki", "drop", "raise")

# =============================================================================
# Markdown Syntax
# =============================================================================

BACKTICK = "`"
TRIPLE_BACKTICK = BACKTICK * 3

BULLETED_LIST_MARKER = "*"
NUMBERED_LIST_MARKER = "1"

# Indentation unit for nested lists, definition lists and indented code blocks
MARKDOWN_INDENT = "    "
DEFINITION_DESCRIPTION_PREFIX = ":   "

HORIZONTAL_RULE = "---"
HARD_LINE_BREAK = "  \n"

CODE_MACRO_ID = "code"
CODE_MACRO_LANGUAGE_PARAMETER = "language"
IMAGE_ALT_PARAMETER = "alt"

ABBREVIATION_TAG_PREFIX = "<abbr "
ABBREVIATION_TITLE_ATTRIBUTE = "title"

# Typographic symbols produced by smart-quote / smart-dash parsers, mapped back to
# the plain-text sequences those parsers recognise.
SPECIAL_SYMBOL_MARKUP: dict[str, str] = {
    "“": "<<",
    "”": ">>",
    "—": "---",
    "…": "...",
    "–": "--",
}

# Characters escaped wherever they appear in document text
ALWAYS_ESCAPED_CHARS = "\\`*[]"

# Characters escaped only when they start a line
LINE_START_ESCAPED_CHARS = "#>+-="

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_ESCAPE_SPECIAL = True
DEFAULT_TABLE_PIPE_ESCAPE = True
DEFAULT_UNHANDLED_MACRO_MODE: UnhandledMacroMode = "xwiki"

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_RENDERING_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3

CONFIG_FILENAMES = [".events2md.toml", ".events2md.yaml", ".events2md.yml", ".events2md.json"]
PYPROJECT_TOOL_SECTION = "events2md"
