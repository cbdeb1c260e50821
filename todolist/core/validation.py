from typing import Any, Dict, Optional
from collections.abc import Mapping
import re

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


class ValidationResult:
    """Outcome of checking a request body. Either holds the cleaned value or an error message.

    Attributes:
        is_valid (bool): Whether the input was accepted.
        value (Any): The cleaned input when valid.
        error (Optional[str]): Human readable message when invalid.
    """

    is_valid: "bool"
    value: "Any"
    error: "Optional[str]"

    def __init__(self, is_valid: "bool", value: "Any" = None, error: "Optional[str]" = None):
        self.is_valid = is_valid
        self.value = value
        self.error = error

    def __repr__(self):  # pragma: no cover
        if self.is_valid:
            return f"ValidationResult.ok({self.value!r})"
        return f"ValidationResult.fail('{self.error}')"

    @classmethod
    def ok(cls, value: "Any") -> "ValidationResult":
        return cls(is_valid=True, value=value)

    @classmethod
    def fail(cls, error: "str") -> "ValidationResult":
        return cls(is_valid=False, error=error)


def validate_new_todo(body: "Any") -> "ValidationResult":
    """Checks the body of a creation request.

    Args:
        body (Any): The parsed JSON body, or None if it couldn't be parsed.

    Returns:
        ValidationResult: The untrimmed text when valid.
    """
    if not isinstance(body, Mapping):
        return ValidationResult.fail("Text is required")

    text = body.get("text")
    if not isinstance(text, str) or text.strip() == "":
        return ValidationResult.fail("Text is required")

    return ValidationResult.ok(text)


def validate_todo_updates(body: "Any") -> "ValidationResult":
    """Picks the fields an update can change. Values of the wrong type are dropped, so the
    result is always valid.

    Args:
        body (Any): The parsed JSON body, or None if it couldn't be parsed.

    Returns:
        ValidationResult: A dictionary with "text" and/or "done".
    """
    updates: "Dict[str, Any]" = {}
    if not isinstance(body, Mapping):
        return ValidationResult.ok(updates)

    if isinstance(body.get("text"), str):
        updates["text"] = body["text"]

    if isinstance(body.get("done"), bool):
        updates["done"] = body["done"]

    return ValidationResult.ok(updates)


def parse_todo_id(raw: "str") -> "Optional[int]":
    """Reads the integer at the start of a path segment ("12", " 12", "12abc" all give 12).

    Returns:
        Optional[int]: None if the segment doesn't start with a number or the number is too
            long to convert.
    """
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return None

    try:
        return int(match.group(1))
    except ValueError:
        # Too many digits to convert, no todo can have that id
        return None
