#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/state.py
"""Block nesting state derived from the event stream.

The renderer needs to know, for the event it is handling, how deeply lists,
definition lists and quotations are nested, which item of the enclosing list
it is in, and whether it is inside inline content. ``BlockStateTracker``
computes that from the events themselves.

The tracker must observe every event around the renderer: ``Begin*`` events
are applied *before* the renderer sees them and ``End*`` events *after*, so
that during a ``BeginList`` the depth already counts the new list and during
an ``EndList`` it still does. ``before_event()`` and ``after_event()`` split
the work accordingly.

"""

from __future__ import annotations

from typing import Callable, Protocol

from events2md.events import (
    BeginDefinitionDescription,
    BeginDefinitionList,
    BeginDefinitionTerm,
    BeginHeader,
    BeginList,
    BeginListItem,
    BeginParagraph,
    BeginQuotation,
    BeginQuotationLine,
    BeginTableCell,
    EndDefinitionDescription,
    EndDefinitionList,
    EndDefinitionTerm,
    EndHeader,
    EndList,
    EndListItem,
    EndParagraph,
    EndQuotation,
    EndQuotationLine,
    EndTableCell,
    Event,
)
from events2md.exceptions import RenderingError


class BlockState(Protocol):
    """Read-only view of the block nesting state used by the renderer."""

    def list_depth(self) -> int: ...

    def list_item_index(self) -> int: ...

    def definition_list_depth(self) -> int: ...

    def definition_list_item_index(self) -> int: ...

    def quotation_depth(self) -> int: ...

    def quotation_line_index(self) -> int: ...

    def is_in_quotation_line(self) -> bool: ...

    def is_in_line(self) -> bool: ...


class BlockStateTracker:
    """Track list, definition list and quotation nesting for an event stream.

    Examples
    --------
        >>> tracker = BlockStateTracker()
        >>> tracker.before_event(BeginList())
        >>> tracker.before_event(BeginListItem())
        >>> tracker.list_depth(), tracker.list_item_index()
        (1, 0)

    """

    def __init__(self) -> None:
        """Initialize an empty state (outside of any block)."""
        self._list_item_indices: list[int] = []
        self._definition_item_indices: list[int] = []
        self._quotation_depth = 0
        self._quotation_line_depth = 0
        self._quotation_line_index = -1
        self._inline_depth = 0

        self._before: dict[type[Event], Callable[[], None]] = {
            BeginList: self._begin_list,
            BeginListItem: self._begin_list_item,
            BeginDefinitionList: self._begin_definition_list,
            BeginDefinitionTerm: self._begin_definition_item,
            BeginDefinitionDescription: self._begin_definition_item,
            BeginQuotation: self._begin_quotation,
            BeginQuotationLine: self._begin_quotation_line,
            BeginParagraph: self._enter_inline,
            BeginHeader: self._enter_inline,
            BeginTableCell: self._enter_inline,
        }
        self._after: dict[type[Event], Callable[[], None]] = {
            EndList: self._end_list,
            EndDefinitionList: self._end_definition_list,
            EndQuotation: self._end_quotation,
            EndQuotationLine: self._end_quotation_line,
            EndParagraph: self._leave_inline,
            EndHeader: self._leave_inline,
            EndTableCell: self._leave_inline,
            EndDefinitionTerm: self._leave_inline,
            EndDefinitionDescription: self._leave_inline,
            EndListItem: self._leave_inline,
        }

    # Event hooks

    def before_event(self, event: Event) -> None:
        """Apply the effect of a begin event before it is rendered."""
        self._apply(self._before, event)

    def after_event(self, event: Event) -> None:
        """Apply the effect of an end event after it is rendered."""
        self._apply(self._after, event)

    @staticmethod
    def _apply(actions: dict[type[Event], Callable[[], None]], event: Event) -> None:
        action = actions.get(type(event))
        if action is None:
            return
        try:
            action()
        except IndexError as e:
            raise RenderingError(
                f"{event.event_name()} has no enclosing block to apply to", rendering_stage="block_state"
            ) from e

    # Queries

    def list_depth(self) -> int:
        """Return the number of currently open lists."""
        return len(self._list_item_indices)

    def list_item_index(self) -> int:
        """Return the index of the current item in the innermost list (-1 before the first item)."""
        return self._list_item_indices[-1] if self._list_item_indices else -1

    def definition_list_depth(self) -> int:
        """Return the number of currently open definition lists."""
        return len(self._definition_item_indices)

    def definition_list_item_index(self) -> int:
        """Return the index of the current term or description in the innermost definition list."""
        return self._definition_item_indices[-1] if self._definition_item_indices else -1

    def quotation_depth(self) -> int:
        """Return the number of currently open quotations."""
        return self._quotation_depth

    def quotation_line_index(self) -> int:
        """Return the index of the current quotation line within the outermost quotation."""
        return self._quotation_line_index

    def is_in_quotation_line(self) -> bool:
        """Return True while inside a quotation line."""
        return self._quotation_line_depth > 0

    def is_in_line(self) -> bool:
        """Return True while inside inline content."""
        return self._inline_depth > 0

    # Transitions

    def _begin_list(self) -> None:
        self._list_item_indices.append(-1)

    def _end_list(self) -> None:
        self._list_item_indices.pop()

    def _begin_list_item(self) -> None:
        self._list_item_indices[-1] += 1
        self._enter_inline()

    def _begin_definition_list(self) -> None:
        self._definition_item_indices.append(-1)

    def _end_definition_list(self) -> None:
        self._definition_item_indices.pop()

    def _begin_definition_item(self) -> None:
        self._definition_item_indices[-1] += 1
        self._enter_inline()

    def _begin_quotation(self) -> None:
        self._quotation_depth += 1

    def _end_quotation(self) -> None:
        self._quotation_depth -= 1
        if self._quotation_depth == 0:
            self._quotation_line_index = -1

    def _begin_quotation_line(self) -> None:
        self._quotation_line_depth += 1
        self._quotation_line_index += 1
        self._enter_inline()

    def _end_quotation_line(self) -> None:
        self._quotation_line_depth -= 1
        self._leave_inline()

    def _enter_inline(self) -> None:
        self._inline_depth += 1

    def _leave_inline(self) -> None:
        self._inline_depth -= 1
