"""Tests for calclex.serialization — LexResult JSON round-trip."""

import json

import pytest

from calclex import tokenize
from calclex.errors import SerializationError
from calclex.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    """Shape of serialized results."""

    def test_success_shape(self) -> None:
        assert to_dict(tokenize("1+ab")) == {
            "tokens": [
                {"kind": "NUMBER", "text": "1"},
                {"kind": "PLUS", "text": "+"},
                {"kind": "NUMBER", "text": "ab"},
            ],
            "error": None,
        }

    def test_error_shape(self) -> None:
        assert to_dict(tokenize("1+@")) == {
            "tokens": [],
            "error": {"position": 3, "character": "@"},
        }


class TestJson:
    """JSON encoding."""

    def test_sorted_keys(self) -> None:
        data = to_json(tokenize("(2)"))
        assert data.index('"error"') < data.index('"tokens"')

    def test_round_trip(self) -> None:
        for source in ("(1 - 2) * 3", "12@3", ""):
            result = tokenize(source)
            assert from_json(to_json(result)) == result

    def test_indent(self) -> None:
        assert "\n" in to_json(tokenize("1"), indent=2)


class TestMalformedInput:
    """Bad payloads raise SerializationError."""

    def test_unknown_kind(self) -> None:
        with pytest.raises(SerializationError, match="Unknown token kind"):
            from_dict({"tokens": [{"kind": "POWER", "text": "^"}], "error": None})

    def test_missing_tokens_key(self) -> None:
        with pytest.raises(SerializationError):
            from_dict({"error": None})

    def test_error_with_tokens(self) -> None:
        payload = {
            "tokens": [{"kind": "NUMBER", "text": "1"}],
            "error": {"position": 2, "character": "@"},
        }
        with pytest.raises(SerializationError):
            from_dict(payload)

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json("{not json")

    def test_non_object_json(self) -> None:
        with pytest.raises(SerializationError):
            from_json(json.dumps([1, 2]))
