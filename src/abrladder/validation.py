"""Validation gate: parse inputs/outputs into models, collecting readable errors."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from abrladder.models.errors import LadderValidationError, ViolationKind

ModelT = TypeVar("ModelT", bound=BaseModel)

_RANGE_ERROR_TYPES = {
    "range_violation",
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
    "finite_number",
}
_ERROR_KINDS = {
    "order_violation": ViolationKind.ORDER,
    "key_format_violation": ViolationKind.KEY_FORMAT,
}


def classify(error_type: str) -> ViolationKind:
    """Map a pydantic error type to a violation kind."""
    if error_type in _RANGE_ERROR_TYPES:
        return ViolationKind.RANGE
    return _ERROR_KINDS.get(error_type, ViolationKind.SCHEMA)


def format_errors(model_name: str, exc: PydanticValidationError) -> list[str]:
    """One message per violation: ``<Kind>: <Model>.<path>: <message> (got: <value>)``."""
    messages = []
    for err in exc.errors(include_url=False):
        kind = classify(err["type"])
        loc = ".".join(str(part) for part in err["loc"])
        where = f"{model_name}.{loc}" if loc else model_name
        value = err.get("input")
        got = "" if isinstance(value, dict | list | BaseModel) else f" (got: {value!r})"
        # composite validators report several problems as one newline-joined message
        for line in err["msg"].split("\n"):
            messages.append(f"{kind}: {where}: {line}{got}")
    return list(dict.fromkeys(messages))


def parse(model_cls: type[ModelT], data: Any, name: str | None = None) -> ModelT:
    """Validate ``data`` as ``model_cls``; raise LadderValidationError with all problems."""
    if isinstance(data, model_cls):
        return data
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as e:
        raise LadderValidationError(format_errors(name or model_cls.__name__, e)) from e
