import pytest

from boxingpython.base.text.structured import (
    StructuredFields,
    coerce_int,
    find_structured_candidate,
    parse_structured,
    strip_structured_candidate,
)

from ..responses import FENCED_NA_RESPONSE, JSON_RESPONSE, PROSE_RESPONSE


def test_json_fence_preferred():
    text = 'Intro\n```python\nprint("hi")\n```\n```json\n{"Speed": 30}\n```'
    assert find_structured_candidate(text) == '{"Speed": 30}'


def test_generic_fence_used_when_no_json_fence():
    text = 'Result:\n```\n{"Speed": 30}\n```\nThanks'
    assert find_structured_candidate(text) == '{"Speed": 30}'


def test_whole_text_used_without_fence():
    assert find_structured_candidate('  {"Speed": 30}  ') == '{"Speed": 30}'


def test_text_around_fence_kept():
    text = 'Result:\n```json\n{"Speed": 30}\n```\nThanks'
    assert strip_structured_candidate(text) == "Result:\nThanks"


def test_nothing_left_around_bare_payload():
    assert strip_structured_candidate(JSON_RESPONSE) == ""


def test_parse_fenced_payload():
    payload = parse_structured(FENCED_NA_RESPONSE)

    assert payload == {"Total_Strikes": 50, "Average_Power": 80, "Overall_Rating": "N/A"}


def test_parse_bare_payload():
    payload = parse_structured(JSON_RESPONSE)

    assert payload is not None
    assert payload["Training_Mode"] == "Pad Work"


def test_prose_is_not_structured():
    assert parse_structured(PROSE_RESPONSE) is None


def test_non_object_json_is_not_structured():
    assert parse_structured("[1, 2, 3]") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, 42),
        ("N/A", 0),
        (" n/a ", 0),
        (None, 0),
        (True, 0),
        (12.7, 12),
        (float("nan"), 0),
        ("72%", 72),
        ("  -5 ", -5),
        ("about 40", 0),
        (["40"], 0),
    ],
)
def test_coerce_int(value, expected):
    assert coerce_int(value) == expected


class TestStructuredFields:
    def test_first_alias_wins(self):
        fields = StructuredFields({"totalStrikes": 5, "strikes": 9})
        assert fields.number("strike_count") == 5

    def test_not_available_alias_skipped(self):
        fields = StructuredFields({"Total_Strikes": "N/A", "strikes": 9})
        assert fields.number("strike_count") == 9

    def test_missing_field(self):
        fields = StructuredFields({"Speed": 30})
        assert fields.number("accuracy") is None
        assert fields.text("footwork") is None
        assert fields.items("technique") is None

    def test_string_number_coerced(self):
        fields = StructuredFields({"Average_Power": "85%", "rating": "7/10"})
        assert fields.number("average_power") == 85
        assert fields.number("overall_rating") == 7

    def test_items_cleaned(self):
        fields = StructuredFields({"Technique": ["Jab", "", None, " Hook "]})
        assert fields.items("technique") == ["Jab", "Hook"]

    def test_items_require_array(self):
        fields = StructuredFields({"Technique": "Jab, Cross"})
        assert fields.items("technique") is None

    def test_text_values(self):
        fields = StructuredFields({"Footwork": "N/A", "Summary": "  Great session  ", "Training Mode": "Sparring"})
        assert fields.text("footwork") is None
        assert fields.text("summary") == "Great session"
        assert fields.text("mode") == "Sparring"
