"""Validation - runs a resource schema over a raw payload, all-or-nothing.

Invariants:
    - validate() returns a fully normalized model or raises ValidationError
    - Every failing field is reported (no abort-early), named by its input (camelCase) key
    - Nothing is partially applied: callers only ever see a complete model
"""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from club_api.core.errors import FieldError, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate(schema: type[SchemaT], payload: Any) -> SchemaT:
    """Validate payload against schema, translating Pydantic errors to ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError(
            [FieldError("body", "Request body must be a JSON object")],
        )
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors(exc.errors())) from exc


def field_errors(errors: list[dict[str, Any]]) -> list[FieldError]:
    """Flatten Pydantic/FastAPI error dicts into {field, message} pairs."""
    details = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ()) if part not in ("body", "query", "path")]
        name = ".".join(loc) or "body"
        details.append(FieldError(name, _message(name, e)))
    return details


def _message(name: str, error: dict[str, Any]) -> str:
    if error.get("type") == "missing":
        return f'"{name}" is required'
    msg = str(error.get("msg", "Invalid value"))
    # Pydantic prefixes messages from custom validators with "Value error, "
    return msg.removeprefix("Value error, ")
