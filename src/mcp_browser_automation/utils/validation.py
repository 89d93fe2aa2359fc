"""Argument validation against a tool's JSON-Schema input description."""

from typing import Dict, Optional

from jsonschema import Draft7Validator

from ..errors import InvalidArgumentsError


def _describe(error) -> str:
    if error.path:
        return f"argument '{error.path[0]}': {error.message}"
    return error.message


def validate_arguments(schema: Dict, arguments: Optional[Dict]) -> Dict:
    """
    Check `arguments` against `schema` and return a new dict with defaults filled in.

    Raises:
        InvalidArgumentsError: with a message naming every offending argument.
    """
    if arguments is None:
        arguments = {}

    errors = sorted(Draft7Validator(schema).iter_errors(arguments), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise InvalidArgumentsError("Invalid arguments: " + "; ".join(_describe(e) for e in errors))

    result = dict(arguments)
    for name, prop in (schema.get("properties") or {}).items():
        if name not in result and "default" in prop:
            result[name] = prop["default"]
    return result


__all__ = ["validate_arguments"]
