"""Data models for ABR ladder generation."""

from abrladder.models.abr_profile import (
    AbrProfile,
    PlayoutFormat,
    ProductionMasterSources,
    ProductionMasterVariant,
)
from abrladder.models.aspect_ratio import (
    STANDARD_ASPECT_RATIOS,
    StandardAspectRatio,
    StandardAspectRatioList,
)
from abrladder.models.errors import (
    AbrLadderError,
    ErrorResponse,
    LadderValidationError,
    ProfileError,
    ViolationKind,
)
from abrladder.models.ladder import (
    DEFAULT_PARAMETRIC_LADDER,
    ComputedRungSpec,
    ParametricLadder,
    ParametricLadderLimits,
    ParametricLadderOptions,
    RungSpec,
)
from abrladder.models.ladder_specs import LadderSpecEntry, LadderSpecs, VideoRungSpec
from abrladder.models.result import LadderResult
from abrladder.models.video import DEFAULT_VIDEO_PROPERTIES, VideoProperties

__all__ = [
    "AbrLadderError",
    "AbrProfile",
    "ComputedRungSpec",
    "DEFAULT_PARAMETRIC_LADDER",
    "DEFAULT_VIDEO_PROPERTIES",
    "ErrorResponse",
    "LadderResult",
    "LadderSpecEntry",
    "LadderSpecs",
    "LadderValidationError",
    "ParametricLadder",
    "ParametricLadderLimits",
    "ParametricLadderOptions",
    "PlayoutFormat",
    "ProductionMasterSources",
    "ProductionMasterVariant",
    "ProfileError",
    "RungSpec",
    "STANDARD_ASPECT_RATIOS",
    "StandardAspectRatio",
    "StandardAspectRatioList",
    "VideoProperties",
    "VideoRungSpec",
    "ViolationKind",
]
