"""Result serialization — JSON round-trip for LexResult.

Converts LexResult values to/from JSON-compatible dicts. Useful for:
- Machine-readable CLI output (``calclex --json``)
- Handing token streams to tools written in other languages
- Debugging and inspection

All output is deterministic (sorted keys).

Shape:
    {"error": null, "tokens": [{"kind": "NUMBER", "text": "1"}]}
    {"error": {"character": "@", "position": 3}, "tokens": []}

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from typing import Any

from calclex.errors import SerializationError
from calclex.result import LexError, LexResult
from calclex.tokens import Token, TokenKind


def to_dict(result: LexResult) -> dict[str, Any]:
    """Convert a LexResult to a JSON-compatible dict.

    Args:
        result: Any LexResult.

    Returns:
        Dict with ``tokens`` and ``error`` keys.

    """
    error: dict[str, Any] | None = None
    if result.error is not None:
        error = {
            "position": result.error.position,
            "character": result.error.character,
        }
    return {
        "tokens": [{"kind": t.kind.value, "text": t.text} for t in result.tokens],
        "error": error,
    }


def from_dict(data: dict[str, Any]) -> LexResult:
    """Reconstruct a LexResult from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        LexResult.

    Raises:
        SerializationError: If keys are missing, a kind is unknown, or the
            dict carries both an error and tokens.

    """
    try:
        raw_tokens = data["tokens"]
        raw_error = data.get("error")
        tokens = tuple(_deserialize_token(item) for item in raw_tokens)
        error = None
        if raw_error is not None:
            error = LexError(
                position=raw_error["position"],
                character=raw_error["character"],
            )
    except (KeyError, TypeError) as e:
        msg = f"Malformed LexResult data: {e}"
        raise SerializationError(msg) from e

    try:
        return LexResult(tokens=tokens, error=error)
    except ValueError as e:
        raise SerializationError(str(e)) from e


def _deserialize_token(item: dict[str, Any]) -> Token:
    """Deserialize a single token dict."""
    kind_name = item["kind"]
    try:
        kind = TokenKind(kind_name)
    except ValueError:
        msg = f"Unknown token kind: {kind_name!r}"
        raise SerializationError(msg) from None
    return Token(kind=kind, text=item["text"])


def to_json(result: LexResult, *, indent: int | None = None) -> str:
    """Serialize a LexResult to a JSON string.

    Args:
        result: LexResult to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(result), sort_keys=True, indent=indent)


def from_json(data: str) -> LexResult:
    """Deserialize a LexResult from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        LexResult.

    Raises:
        SerializationError: If the JSON is invalid or doesn't describe a
            LexResult.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)
    return from_dict(raw)
