"""Ingest video data models."""

from fractions import Fraction

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from abrladder.models.rationals import (
    PositiveInt,
    PositiveNumber,
    PositiveRationalString,
    to_fraction,
)


class VideoProperties(BaseModel):
    """Technical properties of a single ingest video.

    Only shape/type is validated here. Checking the video against a
    parametric ladder's limits happens in ``abrladder.ladder.limits``.
    An ingest file may also carry audio, so ``file_size`` can be much larger
    than ``duration * avg_bitrate / 8``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    width: PositiveInt
    height: PositiveInt
    sample_aspect_ratio: PositiveRationalString
    frame_rate: PositiveRationalString
    avg_bitrate: PositiveNumber | None = Field(default=None, description="Bits per second")
    duration: PositiveNumber | None = Field(default=None, description="Seconds")
    file_size: PositiveInt | None = Field(default=None, description="Bytes")

    @property
    def sample_aspect_ratio_fraction(self) -> Fraction:
        return to_fraction(self.sample_aspect_ratio)

    @property
    def frame_rate_fraction(self) -> Fraction:
        return to_fraction(self.frame_rate)


# 4k resolution, 16:9 aspect ratio (square pixels), 30 fps
DEFAULT_VIDEO_PROPERTIES = VideoProperties(
    width=3840,
    height=2160,
    sample_aspect_ratio="1",
    frame_rate="30",
)
