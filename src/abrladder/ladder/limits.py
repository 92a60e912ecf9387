"""Check an ingest video against a parametric ladder's limits."""

from fractions import Fraction

from abrladder.ladder import geometry
from abrladder.models.errors import ViolationKind
from abrladder.models.ladder import ParametricLadderLimits
from abrladder.models.rationals import to_fraction
from abrladder.models.video import VideoProperties


def _bound_violations(
    name: str, value: Fraction | float | None, minimum, maximum
) -> list[str]:
    if value is None:
        return []
    problems = []
    if minimum is not None and value < minimum:
        problems.append(f"{name} must be >= {minimum} (got: {value})")
    if maximum is not None and value > maximum:
        problems.append(f"{name} must be <= {maximum} (got: {value})")
    return problems


def _fraction_or_none(value: str | None) -> Fraction | None:
    return None if value is None else to_fraction(value)


def limit_violations(video: VideoProperties, limits: ParametricLadderLimits) -> list[str]:
    """Messages for every limit the video violates (empty if it satisfies all of them).

    Optional video properties (avgBitrate, duration, fileSize) are only checked when present.
    """
    checks = [
        (
            "aspectRatio",
            geometry.aspect_ratio(video),
            _fraction_or_none(limits.aspect_ratio_min),
            _fraction_or_none(limits.aspect_ratio_max),
        ),
        ("avgBitrate", video.avg_bitrate, limits.avg_bitrate_min, limits.avg_bitrate_max),
        ("duration", video.duration, limits.duration_min, limits.duration_max),
        ("fileSize", video.file_size, limits.file_size_min, limits.file_size_max),
        (
            "frameRate",
            video.frame_rate_fraction,
            _fraction_or_none(limits.frame_rate_min),
            _fraction_or_none(limits.frame_rate_max),
        ),
        ("height", video.height, limits.height_min, limits.height_max),
        (
            "sampleAspectRatio",
            video.sample_aspect_ratio_fraction,
            _fraction_or_none(limits.sample_aspect_ratio_min),
            _fraction_or_none(limits.sample_aspect_ratio_max),
        ),
        ("width", video.width, limits.width_min, limits.width_max),
    ]
    messages = []
    for name, value, minimum, maximum in checks:
        for problem in _bound_violations(name, value, minimum, maximum):
            messages.append(f"{ViolationKind.RANGE}: VideoProperties.{problem}")
    return messages
