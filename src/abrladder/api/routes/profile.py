"""ABR profile endpoints."""

from typing import Any, Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from abrladder import profile as abr_profile
from abrladder.api.dependencies import get_ladder_pipeline
from abrladder.models.result import LadderResult
from abrladder.pipeline.manager import LadderPipeline

router = APIRouter(prefix="/api/v1/abr-profile", tags=["profile"])


class VariantProfileRequest(BaseModel):
    production_master_sources: dict[str, Any]
    production_master_variant: dict[str, Any]
    abr_profile: dict[str, Any] | None = None
    standard_aspect_ratios: list[Any] | None = None


class ExcludeRequest(BaseModel):
    abr_profile: dict[str, Any]
    exclude: list[Literal["audio", "video", "clear", "drm"]] = Field(..., min_length=1)


@router.get("/default")
async def get_default_profile():
    """Parametric ABR profile used when a request does not supply one."""
    return abr_profile.DEFAULT_PARAMETRIC_ABR_PROFILE


@router.post("")
async def create_profile_for_variant(
    request: VariantProfileRequest,
    pipeline: LadderPipeline = Depends(get_ladder_pipeline),
) -> LadderResult:
    """Build a concrete ABR profile for a production master variant."""
    profile = abr_profile.build_profile_for_variant(
        request.production_master_sources,
        request.production_master_variant,
        request.abr_profile,
        request.standard_aspect_ratios,
        pipeline=pipeline,
    )
    return LadderResult.success(profile)


@router.post("/exclude")
async def exclude_from_profile(request: ExcludeRequest) -> LadderResult:
    """Remove audio, video, clear or DRM entries from a profile."""
    profile = request.abr_profile
    for kind in request.exclude:
        profile = abr_profile.EXCLUSIONS[kind](profile)
    return LadderResult.success(profile)
