"""Adaptive-bitrate ladder generation from parametric ladders."""

from abrladder.models import (
    DEFAULT_PARAMETRIC_LADDER,
    DEFAULT_VIDEO_PROPERTIES,
    STANDARD_ASPECT_RATIOS,
    LadderResult,
)
from abrladder.pipeline import LadderPipeline, video_ladder_specs
from abrladder.profile import (
    DEFAULT_PARAMETRIC_ABR_PROFILE,
    abr_profile_for_variant,
    profile_exclude_audio,
    profile_exclude_clear,
    profile_exclude_drm,
    profile_exclude_video,
)

__all__ = [
    "DEFAULT_PARAMETRIC_ABR_PROFILE",
    "DEFAULT_PARAMETRIC_LADDER",
    "DEFAULT_VIDEO_PROPERTIES",
    "LadderPipeline",
    "LadderResult",
    "STANDARD_ASPECT_RATIOS",
    "abr_profile_for_variant",
    "profile_exclude_audio",
    "profile_exclude_clear",
    "profile_exclude_drm",
    "profile_exclude_video",
    "video_ladder_specs",
]
