#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/serialization.py
"""JSON serialization and deserialization for event streams.

An event stream is stored as a JSON array with one object per event. The
``event`` key names the event type; the remaining keys are the event's
fields. Enumerations are stored as their values and resource references as
nested objects::

    [
      {"event": "BeginDocument", "parameters": {}},
      {"event": "BeginHeader", "level": 1, "id": null, "parameters": {}},
      {"event": "OnWord", "text": "Title"},
      {"event": "EndHeader", "level": 1, "id": null, "parameters": {}},
      {"event": "EndDocument", "parameters": {}}
    ]

Examples
--------
Round-trip a stream:

    >>> from events2md.events import BeginParagraph, OnWord
    >>> text = events_to_json([BeginParagraph(), OnWord("Hi")])
    >>> json_to_events(text)[1]
    OnWord(text='Hi')

"""

from __future__ import annotations

import json
from dataclasses import fields
from enum import Enum
from typing import Any, Iterable, Mapping

from events2md.events import EVENT_TYPES, Event, ResourceReference
from events2md.exceptions import ParsingError

EVENT_KEY = "event"
_REFERENCE_FIELDS = {"reference"}


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, ResourceReference):
        return {
            "reference": value.reference,
            "type": value.type.value,
            "typed": value.typed,
            "base_references": list(value.base_references),
            "parameters": dict(value.parameters),
        }
    if isinstance(value, Mapping):
        return dict(value)
    return value


def event_to_dict(event: Event) -> dict[str, Any]:
    """Convert an event to a JSON-compatible dictionary.

    Parameters
    ----------
    event : Event
        Event to convert

    Returns
    -------
    dict
        Dictionary with the event name under ``"event"`` and one key per field

    """
    result: dict[str, Any] = {EVENT_KEY: event.event_name()}
    for event_field in fields(event):  # type: ignore[arg-type]
        result[event_field.name] = _serialize_value(getattr(event, event_field.name))
    return result


def _deserialize_reference(data: Any) -> ResourceReference:
    if isinstance(data, str):
        return ResourceReference(reference=data)
    if not isinstance(data, dict) or "reference" not in data:
        raise ParsingError(f"Invalid resource reference: {data!r}", parsing_stage="reference")
    return ResourceReference(
        reference=data["reference"],
        type=data.get("type", "url"),
        typed=data.get("typed", True),
        base_references=tuple(data.get("base_references", ())),
        parameters=data.get("parameters", {}),
    )


def dict_to_event(data: dict[str, Any]) -> Event:
    """Convert a dictionary produced by ``event_to_dict`` back into an event.

    Parameters
    ----------
    data : dict
        Serialized event

    Returns
    -------
    Event
        The reconstructed event

    Raises
    ------
    ParsingError
        If the event name is unknown or the fields do not fit the event type

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Event must be a JSON object, got {type(data).__name__}", parsing_stage="event")

    name = data.get(EVENT_KEY)
    event_class = EVENT_TYPES.get(name) if isinstance(name, str) else None
    if event_class is None:
        raise ParsingError(f"Unknown event type: {name!r}", parsing_stage="event")

    kwargs = {key: value for key, value in data.items() if key != EVENT_KEY}
    for key in _REFERENCE_FIELDS & kwargs.keys():
        kwargs[key] = _deserialize_reference(kwargs[key])

    try:
        return event_class(**kwargs)
    except (TypeError, ValueError) as e:
        raise ParsingError(f"Invalid fields for {name}: {e}", parsing_stage="event", original_error=e) from e


def events_to_json(events: Iterable[Event], indent: int | None = None) -> str:
    """Serialize an event stream to a JSON string.

    Parameters
    ----------
    events : iterable of Event
        Events to serialize
    indent : int or None, default = None
        JSON indentation level (None for compact output)

    Returns
    -------
    str
        JSON array of serialized events

    """
    return json.dumps([event_to_dict(event) for event in events], indent=indent, ensure_ascii=False)


def json_to_events(json_str: str) -> list[Event]:
    """Deserialize a JSON string into an event stream.

    Parameters
    ----------
    json_str : str
        JSON array produced by ``events_to_json``

    Returns
    -------
    list of Event
        The events, in order

    Raises
    ------
    ParsingError
        If the text is not valid JSON, not an array, or holds invalid events

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON event stream: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, list):
        raise ParsingError(
            f"Event stream must be a JSON array, got {type(data).__name__}", parsing_stage="json"
        )
    return [dict_to_event(item) for item in data]
