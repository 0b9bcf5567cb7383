# app/core/validation.py
import re
from typing import Annotated, Any, Callable

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import AfterValidator

OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")

# Request sections FastAPI prefixes to error locations
_LOC_SECTIONS = {"body", "path", "query", "header", "cookie"}


def is_object_id(value: Any) -> bool:
    """True for a 24 hex-char identifier."""
    return isinstance(value, str) and bool(OBJECT_ID_RE.fullmatch(value))


def object_id(message: str) -> Callable[[str], str]:
    """Build a validator that rejects anything but a 24 hex-char id."""

    def check(value: str) -> str:
        if not is_object_id(value):
            raise ValueError(message)
        return value

    return check


def check_length(value: str, min_len: int, max_len: int | None, message: str) -> str:
    """Trim `value` and enforce its length bounds."""
    value = value.strip()
    if len(value) < min_len or (max_len is not None and len(value) > max_len):
        raise ValueError(message)
    return value


UserId = Annotated[str, AfterValidator(object_id("Invalid user ID format"))]
RestaurantId = Annotated[
    str, AfterValidator(object_id("Invalid restaurant ID format"))
]
ReservationId = Annotated[
    str, AfterValidator(object_id("Invalid reservation ID format"))
]


def _error_field(err: dict[str, Any]) -> str | None:
    loc = tuple(err.get("loc") or ())
    if err.get("type") == "json_invalid":
        return None
    if loc and loc[0] in _LOC_SECTIONS:
        loc = loc[1:]
    return ".".join(str(p) for p in loc) or None


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Flatten pydantic errors into `{field, message, value}` entries.

    - field: dotted field path, or "unknown" when the error is not tied
      to a field (e.g. a body that is not a JSON object)
    - message: the rule's own message ("Value error, " prefix dropped)
    - value: the offending input; the key is left out for missing fields
      and for errors not tied to a field
    """
    formatted: list[dict[str, Any]] = []
    for err in errors:
        field = _error_field(err)

        ctx = err.get("ctx") or {}
        if err.get("type") == "value_error" and "error" in ctx:
            message = str(ctx["error"])
        else:
            message = err.get("msg")

        entry: dict[str, Any] = {"field": field or "unknown", "message": message}
        if field is not None and err.get("type") != "missing":
            entry["value"] = err.get("input")
        formatted.append(entry)
    return formatted


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer any request validation failure with a single aggregated 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            {
                "message": "Validation errors",
                "errors": format_validation_errors(list(exc.errors())),
            }
        ),
    )
