"""Reusable annotated field types for ladder models."""

import re
from fractions import Fraction
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field
from pydantic_core import PydanticCustomError

RATIONAL_PATTERN = re.compile(r"[0-9]+(/[1-9][0-9]*)?")


def _coerce_rational(value: object) -> object:
    # ints and Fractions are accepted and normalized to their string form
    if isinstance(value, bool):
        return value
    if isinstance(value, int | Fraction):
        return str(value)
    return value


def _check_positive_rational(value: str) -> str:
    if RATIONAL_PATTERN.fullmatch(value) is None:
        raise PydanticCustomError(
            "rational_format",
            "must be a rational number string such as '30' or '30000/1001'",
        )
    if Fraction(value) <= 0:
        raise PydanticCustomError("range_violation", "must be > 0")
    return value


PositiveInt = Annotated[int, Field(strict=True, gt=0)]
PositiveNumber = Annotated[float, Field(gt=0)]
PositiveRationalString = Annotated[
    str,
    BeforeValidator(_coerce_rational),
    Field(strict=True),
    AfterValidator(_check_positive_rational),
]


def to_fraction(value: str) -> Fraction:
    """Parse a validated rational string ('16/9', '30') into a Fraction."""
    return Fraction(value)
