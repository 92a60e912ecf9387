"""Parametric ladder data models.

A parametric ladder is a reusable template: a list of rung specs (dim, bitrate)
tuned for a base aspect ratio and frame rate, plus options that control how the
template is adapted to a particular ingest video, and optional limits the video
must satisfy. ``rung_specs`` must be ordered by descending dim and bitrate.
"""

from fractions import Fraction

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from abrladder.models.rationals import PositiveInt, PositiveRationalString, to_fraction

_CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="forbid",
)


class RungSpec(BaseModel):
    """Template rung: target smaller dimension and bitrate at the ladder's base AR/frame rate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dim: PositiveInt
    bitrate: PositiveInt


class ComputedRungSpec(BaseModel):
    """A rung while (and after) it is being adapted to a specific video."""

    model_config = ConfigDict(frozen=True)

    dim: int
    bitrate: float
    height: int | None = None
    width: int | None = None


class ParametricLadderOptions(BaseModel):
    model_config = _CAMEL_CONFIG

    upscale: bool = Field(..., strict=True, description="Keep rungs larger than the source")
    snap_ar: bool = Field(..., alias="snapAR", strict=True)
    max_ar_snap: float = Field(..., alias="maxARSnap", ge=0, lt=1)
    min_dim_stepdown: float = Field(..., ge=0, lt=1)
    frame_rate_scale_factor: float = Field(..., ge=0, le=1)


# (max field, min field, compare as rationals)
_LIMIT_PAIRS = [
    ("aspect_ratio_max", "aspect_ratio_min", True),
    ("avg_bitrate_max", "avg_bitrate_min", False),
    ("file_size_max", "file_size_min", False),
    ("duration_max", "duration_min", False),
    ("frame_rate_max", "frame_rate_min", True),
    ("height_max", "height_min", False),
    ("sample_aspect_ratio_max", "sample_aspect_ratio_min", True),
    ("width_max", "width_min", False),
]


class ParametricLadderLimits(BaseModel):
    """Bounds a source video must satisfy, plus a cap on the final top rung bitrate."""

    model_config = _CAMEL_CONFIG

    aspect_ratio_max: PositiveRationalString | None = None
    aspect_ratio_min: PositiveRationalString | None = None
    avg_bitrate_max: PositiveInt | None = None
    avg_bitrate_min: PositiveInt | None = None
    file_size_max: PositiveInt | None = None
    file_size_min: PositiveInt | None = None
    duration_max: PositiveInt | None = None
    duration_min: PositiveInt | None = None
    final_bitrate_max: PositiveInt | None = None
    frame_rate_max: PositiveRationalString | None = None
    frame_rate_min: PositiveRationalString | None = None
    height_max: PositiveInt | None = None
    height_min: PositiveInt | None = None
    sample_aspect_ratio_max: PositiveRationalString | None = None
    sample_aspect_ratio_min: PositiveRationalString | None = None
    width_max: PositiveInt | None = None
    width_min: PositiveInt | None = None

    @model_validator(mode="after")
    def validate_max_gte_min(self) -> "ParametricLadderLimits":
        problems = []
        for max_field, min_field, rational in _LIMIT_PAIRS:
            max_value = getattr(self, max_field)
            min_value = getattr(self, min_field)
            if max_value is None or min_value is None:
                continue
            if rational:
                ok = to_fraction(max_value) >= to_fraction(min_value)
            else:
                ok = max_value >= min_value
            if not ok:
                problems.append(
                    f"{to_camel(max_field)} ({max_value}) must be >= "
                    f"{to_camel(min_field)} ({min_value})"
                )
        if problems:
            raise PydanticCustomError("range_violation", "\n".join(problems))
        return self


class ParametricLadder(BaseModel):
    """Reusable template for generating a video ABR ladder."""

    model_config = _CAMEL_CONFIG

    base_aspect_ratio: PositiveRationalString
    base_frame_rate: PositiveRationalString
    rung_specs: list[RungSpec]
    options: ParametricLadderOptions
    limits: ParametricLadderLimits | None = None

    @field_validator("base_aspect_ratio")
    @classmethod
    def validate_base_aspect_ratio(cls, v: str) -> str:
        # no portrait mode
        if to_fraction(v) < 1:
            raise PydanticCustomError("range_violation", "must be >= 1")
        return v

    @field_validator("rung_specs")
    @classmethod
    def validate_rung_specs_sorted(cls, v: list[RungSpec]) -> list[RungSpec]:
        if not v:
            raise PydanticCustomError("order_violation", "rung spec list must not be empty")
        problems = []
        if any(a.dim < b.dim for a, b in zip(v, v[1:])):
            problems.append("RungSpecs must be sorted (descending) by dim")
        if any(a.bitrate < b.bitrate for a, b in zip(v, v[1:])):
            problems.append("RungSpecs must be sorted (descending) by bitrate")
        if problems:
            raise PydanticCustomError("order_violation", "\n".join(problems))
        return v

    @property
    def base_aspect_ratio_fraction(self) -> Fraction:
        return to_fraction(self.base_aspect_ratio)

    @property
    def base_frame_rate_fraction(self) -> Fraction:
        return to_fraction(self.base_frame_rate)


DEFAULT_PARAMETRIC_LADDER = ParametricLadder.model_validate(
    {
        "baseAspectRatio": "16/9",  # aspect ratio that rungSpec bitrates are intended for
        "baseFrameRate": "30",  # frame rate that rungSpec bitrates are intended for
        "rungSpecs": [
            {"dim": 2160, "bitrate": 14000000},
            {"dim": 1440, "bitrate": 11500000},
            {"dim": 1080, "bitrate": 9500000},
            {"dim": 720, "bitrate": 4500000},
            {"dim": 480, "bitrate": 1750000},
            {"dim": 360, "bitrate": 810000},
            {"dim": 240, "bitrate": 500000},
        ],
        "options": {
            "upscale": False,
            "snapAR": False,
            "maxARSnap": 0.06,  # correct up to 6% deviation from a standard aspect ratio
            "minDimStepdown": 0.12,  # next rung below a no-upscale top rung must be 12% smaller
            "frameRateScaleFactor": 0.5,  # 2x fps -> 1.5x bitrate, 0.5x fps -> 0.75x bitrate
        },
        "limits": {
            "aspectRatioMax": "3",  # landscape 3:1
            "aspectRatioMin": "1/3",  # portrait 1:3
            "avgBitrateMax": 100000000,
            "avgBitrateMin": 100000,
            "fileSizeMax": 100000000,
            "fileSizeMin": 10000,
            "durationMax": 3600 * 4,
            "durationMin": 1,
            "finalBitrateMax": 30000000,
            "frameRateMax": "60",
            "frameRateMin": "15",
            "heightMax": 5000,
            "heightMin": 100,
            "sampleAspectRatioMax": "3/2",
            "sampleAspectRatioMin": "2/3",
            "widthMax": 5000,
            "widthMin": 100,
        },
    }
)
