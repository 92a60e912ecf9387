"""Video ladder spec endpoints."""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from abrladder.api.dependencies import get_ladder_pipeline
from abrladder.models.aspect_ratio import STANDARD_ASPECT_RATIOS
from abrladder.models.ladder import DEFAULT_PARAMETRIC_LADDER
from abrladder.models.result import LadderResult
from abrladder.models.video import DEFAULT_VIDEO_PROPERTIES
from abrladder.pipeline.manager import LadderPipeline

router = APIRouter(prefix="/api/v1", tags=["ladder"])


class LadderSpecsRequest(BaseModel):
    # validated by the pipeline so every problem is reported, not just the first
    video_properties: dict[str, Any] | None = None
    parametric_ladder: dict[str, Any] | None = None
    standard_aspect_ratios: list[Any] | None = None


@router.get("/defaults")
async def get_defaults():
    """Default parametric ladder, standard aspect ratios and example video."""
    return {
        "parametric_ladder": DEFAULT_PARAMETRIC_LADDER.model_dump(by_alias=True, exclude_none=True),
        "standard_aspect_ratios": [ar.model_dump() for ar in STANDARD_ASPECT_RATIOS],
        "video_properties": DEFAULT_VIDEO_PROPERTIES.model_dump(by_alias=True, exclude_none=True),
    }


@router.post("/ladder-specs")
async def create_ladder_specs(
    request: LadderSpecsRequest,
    pipeline: LadderPipeline = Depends(get_ladder_pipeline),
) -> LadderResult:
    """Compute the video ladder specs for one ingest video."""
    ladder_specs = pipeline.compute_ladder_specs(
        request.video_properties,
        request.parametric_ladder,
        request.standard_aspect_ratios,
    )
    return LadderResult.success(ladder_specs.model_dump())
