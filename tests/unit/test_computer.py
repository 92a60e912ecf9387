"""Tests for rung set computation."""

from fractions import Fraction

import pytest

from abrladder.ladder.computer import (
    bitrate_adjustment_factor,
    cap_max_bitrate,
    compute_rungs_for_aspect_ratio,
    compute_values,
    remove_rungs,
)
from abrladder.models.aspect_ratio import STANDARD_ASPECT_RATIOS
from abrladder.models.ladder import DEFAULT_PARAMETRIC_LADDER, ComputedRungSpec, ParametricLadder
from tests.conftest import ladder_with, video


def _ladder(**overrides) -> ParametricLadder:
    return ParametricLadder.model_validate(ladder_with(**overrides))


def _dims(computed):
    return [(r.height, r.width) for r in computed.rung_specs]


def _bitrates(computed):
    return [r.bitrate for r in computed.rung_specs]


class TestBitrateAdjustment:
    def test_base_values_leave_bitrate_unchanged(self):
        assert bitrate_adjustment_factor(DEFAULT_PARAMETRIC_LADDER, 16 / 9, 30.0) == pytest.approx(1.0)

    def test_frame_rate_is_damped(self):
        assert bitrate_adjustment_factor(DEFAULT_PARAMETRIC_LADDER, 16 / 9, 60.0) == pytest.approx(1.5)
        assert bitrate_adjustment_factor(DEFAULT_PARAMETRIC_LADDER, 16 / 9, 24.0) == pytest.approx(0.9)

    def test_aspect_ratio_is_proportional(self):
        assert bitrate_adjustment_factor(DEFAULT_PARAMETRIC_LADDER, 1.6, 30.0) == pytest.approx(0.9)


class TestComputeValues:
    def test_default_4k_video_matches_template(self):
        computed = compute_values(STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(3840, 2160))
        assert computed.aspect_ratio == Fraction(16, 9)
        assert _dims(computed) == [
            (2160, 3840),
            (1440, 2560),
            (1080, 1920),
            (720, 1280),
            (480, 854),
            (360, 640),
            (240, 426),
        ]
        assert _bitrates(computed) == [14000000, 11500000, 9500000, 4500000, 1750000, 810000, 500000]

    def test_1080p_24fps_drops_larger_rungs(self, hd_video):
        computed = compute_values(STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, hd_video)
        assert [r.height for r in computed.rung_specs] == [1080, 720, 480, 360, 240]
        assert computed.rung_specs[0].bitrate == 8550000
        assert computed.rung_specs[1].bitrate == 4050000

    def test_inserts_top_rung_and_removes_close_rung(self):
        computed = compute_values(STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(2560, 1600))
        # 1440 is only 10% below 1600, closer than minDimStepdown
        assert _dims(computed) == [
            (1600, 2560),
            (1080, 1728),
            (720, 1152),
            (480, 768),
            (360, 576),
            (240, 384),
        ]
        # extrapolated 11969136 scaled by 0.9 for the narrower aspect ratio
        assert computed.rung_specs[0].bitrate == 10800000
        assert computed.rung_specs[1].bitrate == 8550000

    def test_portrait_video_is_transposed_back(self):
        computed = compute_values(STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(1600, 2560))
        assert computed.aspect_ratio == Fraction(5, 8)
        assert computed.rung_specs[0].height == 2560
        assert computed.rung_specs[0].width == 1600
        assert computed.rung_specs[1].height == 1728
        assert computed.rung_specs[1].width == 1080

    def test_upscale_keeps_all_rungs(self):
        ladder = _ladder(options={"upscale": True})
        computed = compute_values(STANDARD_ASPECT_RATIOS, ladder, video(1920, 1080))
        assert [r.height for r in computed.rung_specs] == [2160, 1440, 1080, 720, 480, 360, 240]
        assert computed.rung_specs[0].bitrate == 14000000

    def test_small_video_single_rung(self):
        computed = compute_values(STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(320, 180))
        assert [r.height for r in computed.rung_specs] == [180]
        assert computed.rung_specs[0].width == 320
        # (0, 0) lower neighbor: 500000 * (180/240)²
        assert computed.rung_specs[0].bitrate == 281000

    def test_odd_height_rounds_top_rung_down(self):
        computed = compute_values(STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(1920, 1081))
        assert computed.rung_specs[0].height == 1080

    def test_snap_to_standard(self):
        ladder = _ladder(options={"snapAR": True})
        computed = compute_values(STANDARD_ASPECT_RATIOS, ladder, video(1920, 800))
        assert computed.aspect_ratio == Fraction(47, 20)
        # 720 is only 10% below 800
        assert _dims(computed) == [(800, 1880), (480, 1128), (360, 846), (240, 564)]

    def test_no_snap_keeps_exact_ratio(self):
        computed = compute_values(STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(1920, 800))
        assert computed.aspect_ratio == Fraction(12, 5)
        assert computed.rung_specs[0].width == 1920

    def test_anamorphic_video_uses_display_aspect_ratio(self):
        # 720x480 with 32:27 pixels displays as 16:9
        computed = compute_values(
            STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(720, 480, sar="32/27")
        )
        assert computed.aspect_ratio == Fraction(16, 9)
        assert _dims(computed) == [(480, 854), (360, 640), (240, 426)]
        assert _bitrates(computed) == [1750000, 810000, 500000]

    def test_anamorphic_portrait_video(self):
        computed = compute_values(
            STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(480, 720, sar="27/32")
        )
        assert computed.aspect_ratio == Fraction(9, 16)
        assert [(r.height, r.width) for r in computed.rung_specs] == [(854, 480), (640, 360), (426, 240)]
        assert _bitrates(computed) == [1750000, 810000, 500000]

    def test_high_frame_rate(self):
        computed = compute_values(
            STANDARD_ASPECT_RATIOS, DEFAULT_PARAMETRIC_LADDER, video(1920, 1080, frame_rate="60")
        )
        assert computed.rung_specs[0].bitrate == 14300000

    def test_bitrate_cap_scales_all_rungs(self):
        ladder = _ladder(limits={"finalBitrateMax": 10000000})
        computed = compute_values(STANDARD_ASPECT_RATIOS, ladder, video(3840, 2160))
        assert computed.rung_specs[0].bitrate == 10000000
        assert computed.rung_specs[4].bitrate == 1250000
        bitrates = _bitrates(computed)
        assert bitrates == sorted(bitrates, reverse=True)

    def test_no_limits_means_no_cap(self):
        doc = ladder_with()
        del doc["limits"]
        ladder = ParametricLadder.model_validate(doc)
        computed = compute_values(
            STANDARD_ASPECT_RATIOS, ladder, video(3840, 2160, frame_rate="120")
        )
        assert computed.rung_specs[0].bitrate == 35000000


class TestSteps:
    def test_remove_rungs_keeps_equal_dim(self):
        rungs = [ComputedRungSpec(dim=d, bitrate=d) for d in (2160, 1440, 1080, 960, 720)]
        kept = remove_rungs(rungs, 1080, 0.12)
        assert [r.dim for r in kept] == [1080, 720]

    def test_remove_rungs_stepdown_boundary(self):
        rungs = [ComputedRungSpec(dim=d, bitrate=d) for d in (1000, 880, 879)]
        kept = remove_rungs(rungs, 1000, 0.12)
        assert [r.dim for r in kept] == [1000, 880, 879]
        kept = remove_rungs(rungs, 1000, 0.125)
        assert [r.dim for r in kept] == [1000]

    def test_cap_not_applied_below_limit(self):
        rungs = [ComputedRungSpec(dim=1080, bitrate=9500000.0)]
        assert cap_max_bitrate(rungs, 30000000) == rungs

    def test_custom_precision(self):
        rungs = compute_rungs_for_aspect_ratio(
            Fraction(16, 9), DEFAULT_PARAMETRIC_LADDER, video(2560, 1600), sig_figs=2
        )
        # 1600 rung at 16:9, 30fps: 11969136 -> 2 significant figures
        assert rungs[0].bitrate == 12000000
        assert rungs[0].width == 2844
