"""Standard aspect ratio catalog models."""

from fractions import Fraction

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator
from pydantic_core import PydanticCustomError

from abrladder.models.rationals import PositiveInt


class StandardAspectRatio(BaseModel):
    """A landscape or square aspect ratio that videos may be snapped to."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    w: PositiveInt
    h: PositiveInt
    desc: str = Field(..., min_length=1)

    @field_validator("desc")
    @classmethod
    def validate_desc_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @model_validator(mode="after")
    def validate_landscape(self) -> "StandardAspectRatio":
        if self.w < self.h:
            raise PydanticCustomError(
                "range_violation",
                "must not define a portrait aspect ratio (w={w}, h={h})",
                {"w": self.w, "h": self.h},
            )
        return self

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.w, self.h)

    @property
    def ratio(self) -> float:
        return self.w / self.h


class StandardAspectRatioList(RootModel[list[StandardAspectRatio]]):
    """Non-empty catalog of standard aspect ratios."""

    @field_validator("root")
    @classmethod
    def validate_not_empty(cls, v: list[StandardAspectRatio]) -> list[StandardAspectRatio]:
        if not v:
            raise PydanticCustomError("order_violation", "aspect ratio list must not be empty")
        return v


STANDARD_ASPECT_RATIOS: list[StandardAspectRatio] = [
    StandardAspectRatio(w=69, h=25, desc="Ultra Panavision 70 (2.76:1)"),
    StandardAspectRatio(w=47, h=20, desc="Widescreen cinema (2.35:1)"),
    StandardAspectRatio(w=11, h=5, desc="Standard 70mm film (2.2:1)"),
    StandardAspectRatio(w=2, h=1, desc="Univisium (2:1)"),
    StandardAspectRatio(w=37, h=20, desc="US widescreen cinema (1.85:1)"),
    StandardAspectRatio(w=16, h=9, desc="HD TV (1.78:1)"),
    StandardAspectRatio(w=5, h=3, desc="European widescreen, 16mm film (1.67:1)"),
    StandardAspectRatio(w=3, h=2, desc="35mm photograph (1.5:1)"),
    StandardAspectRatio(w=143, h=100, desc="IMAX (1.43:1)"),
    StandardAspectRatio(w=4, h=3, desc="SD TV (1.33:1)"),
    StandardAspectRatio(w=6, h=5, desc="Fox Movietone (1.2:1)"),
    StandardAspectRatio(w=1, h=1, desc="Square (1:1)"),
]
