import pytest

from skillnest.services.json_repair import extract_json_object, parse_or_fallback

FALLBACK = {"score": 0, "items": []}


def test_plain_json():
    assert extract_json_object('{"score": 80}') == {"score": 80}


def test_markdown_fenced_json():
    text = 'Here you go:\n```json\n{\n  "score": 72,\n  "items": ["a"]\n}\n```\nGood luck!'
    assert extract_json_object(text) == {"score": 72, "items": ["a"]}


def test_nested_objects_are_kept_whole():
    text = 'prefix {"phases": [{"id": "phase-1", "tasks": [{"id": "task-1"}]}]} suffix'
    assert extract_json_object(text)["phases"][0]["tasks"][0]["id"] == "task-1"


@pytest.mark.parametrize("text", ["", "no braces here", '{"score": 80,}', "{} trailing } brace {"])
def test_unparseable_text_raises(text):
    with pytest.raises(ValueError):
        extract_json_object(text)


def test_fallback_substituted_on_failure():
    result = parse_or_fallback("I'm sorry, I can't do that.", FALLBACK)
    assert result == FALLBACK


def test_fallback_is_a_copy():
    result = parse_or_fallback("nope", FALLBACK)
    result["items"].append("mutated")
    assert FALLBACK["items"] == []
