"""
Validation pipeline

Validates a raw payload with a pydantic request model and turns the first
pydantic error, in field order, into the application error taxonomy.
Create payloads become a ``CreateRecord`` with every field; update payloads
become a ``PatchRecord`` with only the fields the client sent.
"""
from typing import Any, Mapping, Sequence, Type, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import InvalidDate, InvalidFormat, InvalidValue, MissingField, ValidationError
from .fields import RequestModel

ModelT = TypeVar("ModelT", bound=RequestModel)

EXPECTED = {
    "float": "a number",
    "finite": "a number",
    "int": "an integer",
    "bool": "a boolean",
    "string": "a string",
}


class CreateRecord(dict):
    """Normalized record for a create: every model field is present."""


class PatchRecord(dict):
    """Normalized record for an update: only the fields sent by the client."""


def _error_field(loc: Sequence[Any]) -> str:
    # FastAPI 请求体错误的 loc 以 "body" 开头
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    if not parts or not isinstance(parts[0], str):
        return "body"
    return parts[0]


def to_app_error(error: Mapping[str, Any]) -> ValidationError:
    """
    Convert one pydantic error entry into an application validation error

    Args:
        error: An entry of ``ValidationError.errors()``

    Returns:
        MissingField, InvalidValue, InvalidDate or InvalidFormat
    """
    kind = error.get("type", "")
    field = _error_field(error.get("loc", ()))
    value = error.get("input")
    ctx = error.get("ctx") or {}

    if kind == "json_invalid":
        return InvalidFormat("body", ctx.get("error", "malformed JSON"), "a JSON object")
    if kind == "missing":
        return MissingField(field)
    if kind == "invalid_value":
        allowed = ctx.get("allowed")
        return InvalidValue(
            field,
            error.get("msg", f"Invalid {field} value"),
            allowed.split(", ") if allowed else None,
        )
    if kind == "greater_than_equal":
        if ctx.get("ge") == 0:
            return InvalidValue(field, f"{field} must be a non-negative number")
        return InvalidValue(field, f"{field} must be at least {ctx.get('ge')}")
    if kind == "less_than_equal":
        return InvalidValue(field, f"{field} must be at most {ctx.get('le')}")
    if kind.startswith(("datetime", "date")):
        return InvalidDate(field, value)
    if field == "body":
        return InvalidFormat("body", value, "a JSON object")

    expected = EXPECTED.get(kind.split("_")[0], "a valid value")
    return InvalidFormat(field, value, expected)


def first_error(errors: Sequence[Mapping[str, Any]]) -> ValidationError:
    return to_app_error(errors[0])


def parse(model: Type[ModelT], raw: Mapping[str, Any]) -> ModelT:
    """Validate a raw mapping, raising the first failure as an application error"""
    try:
        return model.model_validate(dict(raw))
    except PydanticValidationError as e:
        raise first_error(e.errors()) from e


def to_record(payload: RequestModel, partial: bool = False) -> Union[CreateRecord, PatchRecord]:
    if partial:
        return PatchRecord(payload.model_dump(exclude_unset=True))
    return CreateRecord(payload.model_dump())


def validate(
        raw: Mapping[str, Any],
        model: Type[RequestModel],
        partial: bool = False,
) -> Union[CreateRecord, PatchRecord]:
    return to_record(parse(model, raw), partial=partial)
