"""Base classes for renderer options.

This module defines the foundation classes for the option dataclasses used
throughout the events2md rendering pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

from events2md.constants import DEFAULT_ESCAPE_SPECIAL

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    escape_special : bool, default=True
        Whether document text is escaped so that Markdown metacharacters in it
        are not reinterpreted as syntax.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape Markdown metacharacters appearing in document text",
            "cli_name": "no-escape",
            "importance": "core",
        },
    )
