"""Compute the final rung set for one video from a parametric ladder.

All of the rung arithmetic works in landscape orientation: ``height`` is always
the rung's ``dim``. Portrait videos are transposed before computation and the
resulting rungs transposed back.
"""

from collections.abc import Sequence
from fractions import Fraction
from typing import NamedTuple

from abrladder.ladder import aspect_ratio as ar
from abrladder.ladder import geometry
from abrladder.ladder.arithmetic import change, multiplier, round_even, round_to_precision
from abrladder.ladder.rung_spec import bitrate_for_no_upscale_rung_spec, insert_rung_spec
from abrladder.models.aspect_ratio import StandardAspectRatio
from abrladder.models.ladder import ComputedRungSpec, ParametricLadder
from abrladder.models.video import VideoProperties


class ComputedLadder(NamedTuple):
    """Rungs computed for a video, with the aspect ratio they were dimensioned for.

    ``aspect_ratio`` is in the video's own orientation (< 1 for portrait).
    """

    aspect_ratio: Fraction
    rung_specs: list[ComputedRungSpec]


def bitrate_frame_rate_multiplier(
    scale_factor: float, base_frame_rate: float, ingest_frame_rate: float
) -> float:
    """Bitrate multiplier for a frame rate change, damped by ``scale_factor`` (typically 0.5)."""
    return multiplier(scale_factor * change(base_frame_rate, ingest_frame_rate))


def bitrate_aspect_ratio_multiplier(base_ar: float, final_ladder_ar: float) -> float:
    return multiplier(change(base_ar, final_ladder_ar))


def bitrate_adjustment_factor(
    ladder: ParametricLadder, final_ladder_ar: float, ingest_frame_rate: float
) -> float:
    return bitrate_frame_rate_multiplier(
        ladder.options.frame_rate_scale_factor,
        float(ladder.base_frame_rate_fraction),
        ingest_frame_rate,
    ) * bitrate_aspect_ratio_multiplier(float(ladder.base_aspect_ratio_fraction), final_ladder_ar)


def adjust_bitrates(
    ladder: ParametricLadder, final_ladder_ar: float, ingest_frame_rate: float
) -> list[ComputedRungSpec]:
    factor = bitrate_adjustment_factor(ladder, final_ladder_ar, ingest_frame_rate)
    return [ComputedRungSpec(dim=r.dim, bitrate=r.bitrate * factor) for r in ladder.rung_specs]


def removal_needed(ladder: ParametricLadder, rungs: Sequence[ComputedRungSpec], height: int) -> bool:
    """True when upscaling is off and the top rung is larger than the video."""
    return not ladder.options.upscale and rungs[0].dim > height


def addition_needed(ladder: ParametricLadder, rungs: Sequence[ComputedRungSpec], height: int) -> bool:
    return removal_needed(ladder, rungs, height) and all(r.dim != height for r in rungs)


def add_top_rung(rungs: Sequence[ComputedRungSpec], height: int) -> list[ComputedRungSpec]:
    new_rung = ComputedRungSpec(dim=height, bitrate=bitrate_for_no_upscale_rung_spec(rungs, height))
    return insert_rung_spec(new_rung, rungs)


def remove_rungs(
    rungs: Sequence[ComputedRungSpec], height: int, min_dim_stepdown: float
) -> list[ComputedRungSpec]:
    """Drop rungs that would upscale, and rungs too close below the new top rung."""
    return [
        r
        for r in rungs
        if r.dim == height or (r.dim < height and -change(height, r.dim) >= min_dim_stepdown)
    ]


def add_heights_and_widths(
    rungs: Sequence[ComputedRungSpec], final_ladder_ar: float
) -> list[ComputedRungSpec]:
    return [
        r.model_copy(update={"height": r.dim, "width": round_even(r.dim * final_ladder_ar)})
        for r in rungs
    ]


def cap_max_bitrate(
    rungs: Sequence[ComputedRungSpec], final_bitrate_max: int
) -> list[ComputedRungSpec]:
    """Scale all bitrates down proportionally if the top rung exceeds ``final_bitrate_max``."""
    top_bitrate = rungs[0].bitrate
    if top_bitrate <= final_bitrate_max:
        return list(rungs)
    scale = final_bitrate_max / top_bitrate
    return [r.model_copy(update={"bitrate": r.bitrate * scale}) for r in rungs]


def round_bitrates(rungs: Sequence[ComputedRungSpec], sig_figs: int) -> list[ComputedRungSpec]:
    return [
        r.model_copy(update={"bitrate": round_to_precision(sig_figs, r.bitrate)}) for r in rungs
    ]


def compute_rungs_for_aspect_ratio(
    final_ladder_ar: Fraction,
    ladder: ParametricLadder,
    landscape_video: VideoProperties,
    sig_figs: int = 3,
) -> list[ComputedRungSpec]:
    """Rungs for a landscape (or square) video dimensioned for ``final_ladder_ar``."""
    ar_value = float(final_ladder_ar)
    # an inserted top rung must be even and must not exceed the source
    height = landscape_video.height - landscape_video.height % 2
    rungs = adjust_bitrates(ladder, ar_value, float(landscape_video.frame_rate_fraction))

    # neighbors for the new top rung come from the full template, so add before removing
    if removal_needed(ladder, rungs, height):
        if addition_needed(ladder, rungs, height):
            rungs = add_top_rung(rungs, height)
        rungs = remove_rungs(rungs, height, ladder.options.min_dim_stepdown)

    rungs = add_heights_and_widths(rungs, ar_value)
    if ladder.limits is not None and ladder.limits.final_bitrate_max is not None:
        rungs = cap_max_bitrate(rungs, ladder.limits.final_bitrate_max)
    return round_bitrates(rungs, sig_figs)


def compute_rungs(
    standards: Sequence[StandardAspectRatio],
    ladder: ParametricLadder,
    landscape_video: VideoProperties,
    sig_figs: int = 3,
) -> ComputedLadder:
    final_ladder_ar = ar.target(
        standards,
        ladder.options.snap_ar,
        ladder.options.max_ar_snap,
        geometry.aspect_ratio(landscape_video),
    )
    rungs = compute_rungs_for_aspect_ratio(final_ladder_ar, ladder, landscape_video, sig_figs)
    return ComputedLadder(final_ladder_ar, rungs)


def compute_values(
    standards: Sequence[StandardAspectRatio],
    ladder: ParametricLadder,
    video: VideoProperties,
    sig_figs: int = 3,
) -> ComputedLadder:
    """Final rungs (with height, width and bitrate) for any video orientation."""
    if geometry.is_landscape(video):
        return compute_rungs(standards, ladder, video, sig_figs)
    landscape = compute_rungs(standards, ladder, geometry.transpose(video), sig_figs)
    return ComputedLadder(1 / landscape.aspect_ratio, geometry.transpose_rungs(landscape.rung_specs))
