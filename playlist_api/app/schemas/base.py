"""
Shared helpers for request payload schemas.

Request bodies arrive as arbitrary JSON.  Each operation parses the
body with ``Payload.parse`` which runs the pydantic validators of the
operation's input model and converts any failure into the service
level ``ValidationError`` carrying a readable message.

The field helpers below are used from ``field_validator(mode="before")``
hooks so every rule (required string, optional string, list of
strings, duration) is written once.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from playlist_api.app.core.errors import ValidationError

BODY_NOT_OBJECT = "Request body must be a JSON object"


class Payload(BaseModel):
    """Base class for request payload models.

    Unknown fields are ignored.  Aliased fields are read only under
    their camelCase alias; ``duration_sec`` in a body is an unknown key.
    """

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def parse(cls, payload: Any):
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(describe_errors(exc)) from exc


def describe_errors(exc: PydanticValidationError) -> str:
    """Return a one-line message for the first error in ``exc``."""
    error = exc.errors()[0]
    ctx = error.get("ctx") or {}
    if ctx.get("custom"):
        return error["msg"]
    loc = error.get("loc") or ()
    if not loc:
        # model-level failure: the body was a list, a string, null...
        return BODY_NOT_OBJECT
    return f"{'.'.join(str(part) for part in loc)}: {error['msg']}"


def _fail(error_type: str, template: str, field: str):
    return PydanticCustomError(error_type, template, {"field": field, "custom": True})


def required_string(value: Any, field: str, *, allow_blank: bool = True) -> str:
    """Accept a non-empty string, otherwise fail with ``"<field> is required"``.

    ``allow_blank=False`` also rejects strings made of whitespace only.
    """
    if not isinstance(value, str) or not value or (not allow_blank and not value.strip()):
        raise _fail("string_required", "{field} is required (non-empty string)", field)
    return value


def optional_string(value: Any, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _fail("string_type", "{field} must be a string", field)
    return value


def string_list(value: Any, field: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise _fail("string_list_type", "{field} must be a list of strings", field)
    return list(value)


def as_string(value: Any) -> str:
    """Lenient variant used when normalizing tracks: anything else is ``""``."""
    return value if isinstance(value, str) else ""


def as_integer(value: Any) -> Optional[int]:
    """Return ``value`` as an int if it is an integral JSON number.

    Booleans are rejected even though ``bool`` subclasses ``int``;
    floats such as ``200.0`` are accepted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def is_valid_duration(value: Any) -> bool:
    number = as_integer(value)
    return number is not None and number >= 0


def normalize_duration(value: Any, fallback: Optional[int] = 0) -> Optional[int]:
    """Return a valid duration in seconds or ``fallback``."""
    if is_valid_duration(value):
        return as_integer(value)
    return fallback
