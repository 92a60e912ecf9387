"""Ladder pipeline: validate inputs, compute rungs, format, validate output.

Every call is independent and free of shared mutable state, so one pipeline
can be used from several threads or processes at once.
"""

import logging
from typing import Any

from abrladder.config import Settings, get_settings
from abrladder.ladder.computer import compute_values
from abrladder.ladder.formatter import from_computed_ladder
from abrladder.ladder.limits import limit_violations
from abrladder.models.aspect_ratio import STANDARD_ASPECT_RATIOS, StandardAspectRatioList
from abrladder.models.errors import LadderValidationError
from abrladder.models.ladder import DEFAULT_PARAMETRIC_LADDER, ParametricLadder
from abrladder.models.ladder_specs import LadderSpecs
from abrladder.models.result import LadderResult
from abrladder.models.video import DEFAULT_VIDEO_PROPERTIES, VideoProperties
from abrladder.validation import parse

logger = logging.getLogger(__name__)


class LadderPipeline:
    """Generates the video ``ladder_specs`` fragment for one ingest video at a time."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def video_ladder_specs(
        self,
        video_props: Any = None,
        parametric_ladder: Any = None,
        standard_aspect_ratios: Any = None,
    ) -> LadderResult:
        """Return ``{ok: true, result: ladder_specs}`` or ``{ok: false, errors: [...]}``.

        Inputs may be model instances or plain (camelCase) dicts/lists; missing
        inputs fall back to the defaults.
        """
        try:
            ladder_specs = self.compute_ladder_specs(
                video_props, parametric_ladder, standard_aspect_ratios
            )
        except LadderValidationError as e:
            logger.warning("Ladder generation rejected: %s", "; ".join(e.errors))
            return LadderResult.failure(e.errors)
        return LadderResult.success(ladder_specs.model_dump())

    def compute_ladder_specs(
        self,
        video_props: Any = None,
        parametric_ladder: Any = None,
        standard_aspect_ratios: Any = None,
    ) -> LadderSpecs:
        """Like ``video_ladder_specs`` but raises LadderValidationError on failure."""
        video, ladder, standards = self.validate_inputs(
            DEFAULT_VIDEO_PROPERTIES if video_props is None else video_props,
            DEFAULT_PARAMETRIC_LADDER if parametric_ladder is None else parametric_ladder,
            STANDARD_ASPECT_RATIOS if standard_aspect_ratios is None else standard_aspect_ratios,
        )

        if self.settings.enforce_video_limits and ladder.limits is not None:
            violations = limit_violations(video, ladder.limits)
            if violations:
                raise LadderValidationError(violations)

        computed = compute_values(
            standards.root, ladder, video, self.settings.bitrate_significant_figures
        )
        logger.debug(
            "Computed %d rungs for %dx%d video at aspect ratio %s",
            len(computed.rung_specs),
            video.width,
            video.height,
            computed.aspect_ratio,
        )

        ladder_specs = parse(LadderSpecs, from_computed_ladder(computed))
        top = computed.rung_specs[0]
        logger.info(
            "Generated %d-rung ladder, top rung %sx%s @ %s bps",
            len(computed.rung_specs),
            top.width,
            top.height,
            int(top.bitrate),
        )
        return ladder_specs

    def validate_inputs(
        self, video_props: Any, parametric_ladder: Any, standard_aspect_ratios: Any
    ) -> tuple[VideoProperties, ParametricLadder, StandardAspectRatioList]:
        """Validate all three inputs independently, reporting every problem found."""
        errors: list[str] = []
        parsed = []
        for model_cls, data in (
            (VideoProperties, video_props),
            (ParametricLadder, parametric_ladder),
            (StandardAspectRatioList, standard_aspect_ratios),
        ):
            try:
                parsed.append(parse(model_cls, data))
            except LadderValidationError as e:
                errors.extend(e.errors)
        if errors:
            raise LadderValidationError(errors)
        video, ladder, standards = parsed
        return video, ladder, standards


def video_ladder_specs(
    video_props: Any = None,
    parametric_ladder: Any = None,
    standard_aspect_ratios: Any = None,
) -> LadderResult:
    """Module-level shortcut for ``LadderPipeline().video_ladder_specs(...)``."""
    return LadderPipeline().video_ladder_specs(video_props, parametric_ladder, standard_aspect_ratios)
