"""Video geometry: effective aspect ratio and portrait/landscape normalization."""

from collections.abc import Sequence
from fractions import Fraction

from abrladder.models.ladder import ComputedRungSpec
from abrladder.models.video import VideoProperties


def aspect_ratio(video: VideoProperties) -> Fraction:
    """Display aspect ratio, corrected for non-square pixels (reduced fraction)."""
    return video.sample_aspect_ratio_fraction * video.width / video.height


def is_landscape(video: VideoProperties) -> bool:
    """Square videos count as landscape."""
    return aspect_ratio(video) >= 1


def transpose(video: VideoProperties) -> VideoProperties:
    """Copy of the video with orientation flipped.

    Width and height swap and the sample aspect ratio is inverted, so the
    transposed display aspect ratio is the reciprocal of the original.
    """
    sar = video.sample_aspect_ratio_fraction
    return video.model_copy(
        update={
            "width": video.height,
            "height": video.width,
            "sample_aspect_ratio": str(1 / sar),
        }
    )


def transpose_rungs(rungs: Sequence[ComputedRungSpec]) -> list[ComputedRungSpec]:
    """Swap height and width on every rung."""
    return [r.model_copy(update={"height": r.width, "width": r.height}) for r in rungs]
