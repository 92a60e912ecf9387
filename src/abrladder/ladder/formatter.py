"""Format computed rungs as an ABR profile ``ladder_specs`` fragment."""

import json
from fractions import Fraction

from abrladder.ladder.arithmetic import round_half_up
from abrladder.ladder.computer import ComputedLadder


def ladder_spec_key(aspect_ratio: Fraction) -> str:
    """Key for a video ladder spec, e.g. ``{"media_type":"video","aspect_ratio_height":9,"aspect_ratio_width":16}``."""
    return json.dumps(
        {
            "media_type": "video",
            "aspect_ratio_height": aspect_ratio.denominator,
            "aspect_ratio_width": aspect_ratio.numerator,
        },
        separators=(",", ":"),
    )


def from_computed_ladder(computed: ComputedLadder) -> dict[str, dict]:
    """Single-entry ladder specs; only the top rung is marked for pregeneration."""
    return {
        ladder_spec_key(computed.aspect_ratio): {
            "rung_specs": [
                {
                    "bit_rate": round_half_up(r.bitrate),
                    "height": r.height,
                    "media_type": "video",
                    "pregenerate": i == 0,
                    "width": r.width,
                }
                for i, r in enumerate(computed.rung_specs)
            ]
        }
    }
