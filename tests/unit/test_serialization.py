"""Unit tests for JSON serialization of event streams."""

import json

import pytest

from events2md.events import (
    BeginDocument,
    BeginHeader,
    BeginLink,
    BeginList,
    EndDocument,
    EndHeader,
    EndLink,
    ListType,
    OnMacro,
    OnWord,
    ResourceReference,
    ResourceType,
)
from events2md.exceptions import ParsingError
from events2md.serialization import dict_to_event, event_to_dict, events_to_json, json_to_events


@pytest.mark.unit
class TestEventToDict:
    def test_simple_event(self):
        assert event_to_dict(OnWord("Hi")) == {"event": "OnWord", "text": "Hi"}

    def test_enums_and_parameters(self):
        data = event_to_dict(BeginList(ListType.NUMBERED, parameters={"start": "3"}))
        assert data == {"event": "BeginList", "kind": "numbered", "parameters": {"start": "3"}}

    def test_reference(self):
        data = event_to_dict(BeginLink(ResourceReference("a@b.c", type=ResourceType.MAILTO)))
        assert data["reference"] == {
            "reference": "a@b.c",
            "type": "mailto",
            "typed": True,
            "base_references": [],
            "parameters": {},
        }

    def test_json_compatible(self):
        json.dumps(event_to_dict(OnMacro("code", content="x", parameters={"language": "py"})))


@pytest.mark.unit
class TestDictToEvent:
    def test_reference_as_string(self):
        event = dict_to_event({"event": "BeginLink", "reference": "http://x"})
        assert event == BeginLink(ResourceReference("http://x"))

    def test_defaults_applied(self):
        assert dict_to_event({"event": "BeginList"}) == BeginList()

    @pytest.mark.parametrize(
        "data",
        [
            {"event": "OnFootnote"},
            {"text": "no name"},
            {"event": "OnWord"},
            {"event": "OnWord", "text": "a", "extra": 1},
            {"event": "BeginHeader", "level": 9},
            {"event": "BeginLink", "reference": {"type": "url"}},
            ["not", "an", "object"],
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(ParsingError):
            dict_to_event(data)


@pytest.mark.unit
class TestJson:
    def test_round_trip(self):
        ref = ResourceReference("Main", type=ResourceType.DOCUMENT, base_references=("Space",))
        events = [
            BeginDocument(),
            BeginHeader(1, id="H1"),
            OnWord("Title"),
            EndHeader(1, id="H1"),
            BeginLink(ref),
            OnWord("home"),
            EndLink(ref),
            OnMacro("code", content="x = 1\n", parameters={"language": "python"}),
            EndDocument(),
        ]
        assert json_to_events(events_to_json(events, indent=2)) == events

    def test_non_ascii_kept(self):
        assert "—" in events_to_json([OnWord("—")])

    @pytest.mark.parametrize("text", ["{not json", '{"event": "OnWord"}', "[1]"])
    def test_invalid_stream(self, text):
        with pytest.raises(ParsingError):
            json_to_events(text)
