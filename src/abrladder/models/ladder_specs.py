"""ABR profile ``ladder_specs`` models (video only, x264 encoder)."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator
from pydantic_core import PydanticCustomError

from abrladder.models.rationals import PositiveInt

LADDER_SPEC_KEY_PATTERN = re.compile(
    r'\{"media_type":"video","aspect_ratio_height":[1-9][0-9]*,"aspect_ratio_width":[1-9][0-9]*\}'
)


class VideoRungSpec(BaseModel):
    """A single rung in a video ladder spec."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bit_rate: PositiveInt
    height: PositiveInt
    media_type: Literal["video"] = "video"
    pregenerate: bool = Field(..., strict=True)
    width: PositiveInt


class LadderSpecEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    rung_specs: list[VideoRungSpec]

    @field_validator("rung_specs")
    @classmethod
    def validate_not_empty(cls, v: list[VideoRungSpec]) -> list[VideoRungSpec]:
        if not v:
            raise PydanticCustomError("order_violation", "rung_specs must not be empty")
        return v


class LadderSpecs(RootModel[dict[str, LadderSpecEntry]]):
    """Mapping of ladder spec key to its rung specs."""

    # NOTE: if audio ladder specs are ever validated here, a check is also needed that
    # audio keys do not point at video rung specs (and vice versa)

    @field_validator("root")
    @classmethod
    def validate_keys(cls, v: dict[str, LadderSpecEntry]) -> dict[str, LadderSpecEntry]:
        if not v:
            raise PydanticCustomError("order_violation", "ladder specs must not be empty")
        bad_keys = [k for k in v if LADDER_SPEC_KEY_PATTERN.fullmatch(k) is None]
        if bad_keys:
            raise PydanticCustomError(
                "key_format_violation",
                "\n".join(f"ladder spec key not in proper format: {k!r}" for k in bad_keys),
            )
        return v
