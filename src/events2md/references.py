#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/references.py
"""Serialization of link and image targets.

Turning a ``ResourceReference`` into the string that goes between the
parentheses of a Markdown link is left to a ``ResourceReferenceSerializer``,
so that hosts with their own reference syntax (wiki page names, attachment
names) can plug theirs in. ``MarkdownReferenceSerializer`` is the default.
"""

from __future__ import annotations

from typing import Optional, Protocol

from events2md.events import ResourceReference, ResourceType

MAILTO_PREFIX = "mailto:"


class ResourceReferenceSerializer(Protocol):
    """Convert a resource reference to its string form."""

    def serialize(self, reference: ResourceReference) -> str: ...


class MarkdownReferenceSerializer:
    """Default serializer: the raw reference, with ``mailto:`` restored for e-mail targets.

    Reference parameters are dropped since Markdown 1.0 has nowhere to put them.
    """

    def serialize(self, reference: ResourceReference) -> str:
        """Return the reference string for a link or image target."""
        if reference.type is ResourceType.MAILTO and not reference.reference.startswith(MAILTO_PREFIX):
            return MAILTO_PREFIX + reference.reference
        return reference.reference


class MarkdownResourceRenderer:
    """Render link and image fragments around a serialized reference.

    Parameters
    ----------
    serializer : ResourceReferenceSerializer
        Serializer used for the reference part

    """

    def __init__(self, serializer: ResourceReferenceSerializer) -> None:
        """Initialize with the serializer to delegate to."""
        self.serializer = serializer

    def serialize(self, reference: ResourceReference) -> str:
        """Serialize a reference."""
        return self.serializer.serialize(reference)

    def render_link(self, reference: ResourceReference, label: str) -> str:
        """Render ``[label](reference)``, or ``[[reference]]`` when the label is empty."""
        serialized = self.serialize(reference)
        if not label:
            return f"[[{serialized}]]"
        return f"[{label}]({serialized})"

    def render_image(self, reference: ResourceReference, alt: Optional[str]) -> str:
        """Render ``![alt](reference)``; a blank alt falls back to the reference itself."""
        serialized = self.serialize(reference)
        if alt is None or not alt.strip():
            alt = serialized
        return f"![{alt}]({serialized})"
